"""Console colour theme for cull.

The bundled ``data/theme.toml`` supplies the defaults; a ``[colors]``
table in ``~/.config/cull/theme.toml`` may override any of them.
"""

import logging
import re
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.style import Style
from rich.theme import Theme

from cull.core.paths import get_user_theme_path
from cull.engine.models import LogLevel

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


class ThemeColors(BaseModel):
    """Colours used by the worklist table, run log and error messages."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"
    info: str = "#0ec1c8"
    warning: str = "#f5b332"
    error: str = "#f53263"
    path: str = "#c1ff62"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object) -> str:
        """Validate that a colour is a #RGB or #RRGGBB hex code."""
        if not isinstance(v, str) or not _HEX_COLOR.fullmatch(v.strip()):
            msg = f"invalid hex color {v!r}"
            raise ValueError(msg)
        return v.strip()


def _read_colors(path: Path) -> dict[str, object]:
    """Read the [colors] table of a theme file; unreadable files give {}."""
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return {}

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: [colors] is not a table", path)
        return {}
    return colors


def load_theme() -> ThemeColors:
    """Merge bundled and user colours; fall back to defaults if invalid."""
    bundled = resources.files("cull.data").joinpath("theme.toml")
    colors = {**_read_colors(Path(str(bundled))), **_read_colors(get_user_theme_path())}
    try:
        return ThemeColors(**colors)
    except ValidationError as e:
        logger.warning("Theme validation failed, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors) -> Theme:
    """Build the Rich theme with the named styles cull prints with."""
    return Theme(
        {
            "muted": colors.muted,
            "bold_header": f"bold {colors.header}",
            "border": colors.border,
            "path": colors.path,
            "warning": colors.warning,
            "error": f"bold {colors.error}",
            "log.info": colors.info,
            "log.warning": colors.warning,
            "log.error": f"bold {colors.error}",
        }
    )


@cache
def get_theme() -> Theme:
    """Get the Rich theme, loading it on first use."""
    return get_rich_theme(load_theme())


def level_style(level: LogLevel) -> Style:
    """Resolve the run log style for a level without a themed console."""
    return get_theme().styles[f"log.{level.value.lower()}"]
