"""Unit tests for XDG path management.

Tests for the paths module that provides XDG-compliant directory paths.
"""

import os
from datetime import date
from pathlib import Path
from unittest.mock import patch

import pytest
from tempsweep.core.paths import (
    APP_NAME,
    ensure_log_dir,
    get_config_dir,
    get_data_dir,
    get_log_dir,
    get_log_path,
    get_temp_root,
    get_theme_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            os.environ.pop("XDG_CONFIG_HOME", None)

            result = get_config_dir()
            expected = Path.home() / ".config" / APP_NAME

        assert result == expected

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_theme_path(self, tmp_path: Path) -> None:
        """Theme overrides live in the config directory."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            assert get_theme_path() == tmp_path / APP_NAME / "theme.toml"


class TestGetDataDir:
    """Tests for get_data_dir and log paths."""

    def test_default_data_dir(self) -> None:
        """get_data_dir returns default path when XDG_DATA_HOME not set."""
        with patch.dict(os.environ, {}, clear=True):
            result = get_data_dir()
            expected = Path.home() / ".local" / "share" / APP_NAME

        assert result == expected

    def test_respects_xdg_data_home(self, tmp_path: Path) -> None:
        """get_data_dir respects XDG_DATA_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_DATA_HOME": str(tmp_path)}):
            assert get_data_dir() == tmp_path / APP_NAME
            assert get_log_dir() == tmp_path / APP_NAME / "logs"

    def test_log_path_name(self, tmp_path: Path) -> None:
        """Log files are named after the day they cover."""
        result = get_log_path(date(2024, 1, 5), tmp_path)

        assert result == tmp_path / "2024-01-05 - Log.txt"


class TestEnsureLogDir:
    """Tests for ensure_log_dir."""

    def test_creates_directory(self, tmp_path: Path) -> None:
        """Missing parents are created."""
        target = tmp_path / "a" / "b"

        assert ensure_log_dir(target) == target
        assert target.is_dir()

    def test_existing_directory(self, tmp_path: Path) -> None:
        """An existing directory is accepted."""
        assert ensure_log_dir(tmp_path) == tmp_path

    def test_failure_raises_runtime_error(self, tmp_path: Path) -> None:
        """A path that cannot be created raises RuntimeError."""
        blocker = tmp_path / "file"
        blocker.write_text("x")

        with pytest.raises(RuntimeError, match="Cannot create log directory"):
            ensure_log_dir(blocker / "logs")


class TestGetTempRoot:
    """Tests for get_temp_root."""

    def test_uses_system_temp_dir(self, tmp_path: Path) -> None:
        """The temp root comes from the standard temp directory lookup."""
        with patch("tempsweep.core.paths.tempfile.gettempdir", return_value=str(tmp_path)):
            assert get_temp_root() == tmp_path.resolve()
