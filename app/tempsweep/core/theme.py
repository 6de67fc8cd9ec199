"""Console colors for tempsweep.

The bundled data/theme.toml supplies every color; a theme.toml in the
user config directory may override any subset of them.
"""

import logging
import re
import tomllib
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from tempsweep.core.paths import get_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3}){1,2}$")


class ThemeColors(BaseModel):
    """Colors for the run summary and console messages.

    Every value must be a #RGB or #RRGGBB hex code.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    info: str = "#0ec1c8"
    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"

    deleted: str = "#03b971"
    skipped: str = "#b2bec3"

    @field_validator("*", mode="before")
    @classmethod
    def _check_hex(cls, value: object) -> str:
        if not isinstance(value, str) or not _HEX_COLOR.match(value.strip()):
            msg = f"invalid hex color {value!r}"
            raise ValueError(msg)
        return value.strip()

    def to_styles(self) -> dict[str, str]:
        """Map colors to the Rich style names used by the CLI."""
        return {
            "muted": self.muted,
            "border": self.border,
            "bold_header": f"bold {self.header}",
            "info": self.info,
            "success": self.success,
            "warning": self.warning,
            "error": f"bold {self.error}",
            "deleted": self.deleted,
            "skipped": self.skipped,
        }


def _read_colors(path: Path) -> dict[str, str]:
    """Read the [colors] table of a TOML file.

    A missing or unreadable file yields an empty mapping; non-string
    values are ignored.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    table = data.get("colors", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return {k: v for k, v in table.items() if isinstance(v, str)}


def load_colors(user_path: Path | None = None) -> ThemeColors:
    """Merge the bundled colors with user overrides.

    Args:
        user_path: Override file. Defaults to theme.toml in the config dir.

    Returns:
        Validated colors. Falls back to the defaults if the merged
        values do not validate.
    """
    bundled = resources.files("tempsweep.data").joinpath("theme.toml")
    colors = _read_colors(Path(str(bundled)))
    overrides = _read_colors(user_path or get_theme_path())
    if overrides:
        logger.debug("Applying %d theme overrides", len(overrides))

    try:
        return ThemeColors(**{**colors, **overrides})
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


_theme: Theme | None = None


def get_theme() -> Theme:
    """Return the Rich theme, loading it on first use."""
    global _theme
    if _theme is None:
        _theme = Theme(load_colors().to_styles())
    return _theme
