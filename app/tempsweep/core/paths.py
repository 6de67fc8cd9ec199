"""XDG-compliant path management for tempsweep.

This module provides standardized paths following the XDG Base Directory
Specification for configuration and application data, plus the temp
root that the cleaner sweeps.

XDG defaults:
- Config: ~/.config/tempsweep/
- Data: ~/.local/share/tempsweep/
"""

import os
import tempfile
from datetime import date
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "tempsweep"

LOG_FILENAME_SUFFIX = " - Log.txt"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    return Path.home() / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/tempsweep/ (or XDG_CONFIG_HOME/tempsweep/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_data_dir() -> Path:
    """Get the application data directory path.

    Returns:
        Path to ~/.local/share/tempsweep/ (or XDG_DATA_HOME/tempsweep/).
    """
    return _get_xdg_dir("XDG_DATA_HOME", ".local/share")


def get_log_dir() -> Path:
    """Get the run log directory path.

    Returns:
        Path to ~/.local/share/tempsweep/logs/.
    """
    return get_data_dir() / "logs"


def get_log_path(day: date, log_dir: Path | None = None) -> Path:
    """Get the run log file for a given day.

    One file per calendar day; every run on that day appends to it.

    Args:
        day: Local calendar day the log covers.
        log_dir: Optional override for the log directory.

    Returns:
        Path like ~/.local/share/tempsweep/logs/2024-01-15 - Log.txt.
    """
    directory = log_dir if log_dir is not None else get_log_dir()
    return directory / f"{day:%Y-%m-%d}{LOG_FILENAME_SUFFIX}"


def get_theme_path() -> Path:
    """Get the user theme override file path.

    Returns:
        Path to ~/.config/tempsweep/theme.toml.
    """
    return get_config_dir() / "theme.toml"


def get_temp_root() -> Path:
    """Get the temp directory the cleaner sweeps.

    Honors TMPDIR/TEMP/TMP the same way the standard library does.

    Returns:
        Absolute path to the current user's temp directory.
    """
    return Path(tempfile.gettempdir()).resolve()


def _ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path


def ensure_log_dir(log_dir: Path | None = None) -> Path:
    """Create the run log directory if it doesn't exist.

    Args:
        log_dir: Optional override for the log directory.

    Returns:
        Path to the log directory.

    Raises:
        RuntimeError: If the directory cannot be created.
    """
    return _ensure_dir(log_dir if log_dir is not None else get_log_dir(), "log")
