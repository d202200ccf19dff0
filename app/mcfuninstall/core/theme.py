"""Terminal colors for scan summaries, match tables and messages.

Colors come from the bundled ``data/theme.toml``; a ``[colors]`` table in
the user's ``theme.toml`` overrides individual entries. Each Rich style
used by the CLI is derived from one color.
"""

import logging
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, ConfigDict, StringConstraints, ValidationError
from rich.theme import Theme

from mcfuninstall.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

HexColor = Annotated[
    str, StringConstraints(strip_whitespace=True, pattern=r"^#(?:[0-9a-fA-F]{3}){1,2}$")
]


class ThemeColors(BaseModel):
    """Colors of the CLI output, as ``#RGB`` or ``#RRGGBB`` hex codes.

    Attributes:
        heading: Table headers.
        border: Table borders.
        muted: Secondary text (dry-run file markers, config sources, totals).
        success: Written files and kept counts.
        warning: Warning prefix.
        error: Error prefix.
        info: Informational messages.
        identifier: Extracted identifiers.
        location: File locations of matches.
    """

    model_config = ConfigDict(extra="forbid")

    heading: HexColor = "#69b9a1"
    border: HexColor = "#29526d"
    muted: HexColor = "#b2bec3"
    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"
    identifier: HexColor = "#c1ff62"
    location: HexColor = "#b2bec3"


# Rich style name -> (color, extra attributes)
STYLES: dict[str, tuple[str, str]] = {
    "heading": ("heading", "bold"),
    "border": ("border", ""),
    "muted": ("muted", ""),
    "success": ("success", ""),
    "warning": ("warning", ""),
    "error": ("error", "bold"),
    "info": ("info", ""),
    "identifier": ("identifier", "bold"),
    "location": ("location", ""),
}


class ThemeFileError(Exception):
    """Raised when a theme file cannot be read or parsed."""


def bundled_theme_path() -> Path:
    return Path(str(resources.files("mcfuninstall.data").joinpath("theme.toml")))


def read_colors(path: Path) -> dict[str, object]:
    """Read the ``[colors]`` table of a theme file.

    Returns:
        The table's entries; empty when the file does not exist.

    Raises:
        ThemeFileError: If the file is unreadable or the table is malformed.
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return {}
    except (OSError, tomllib.TOMLDecodeError) as e:
        msg = f"Cannot read theme file {path}: {e}"
        raise ThemeFileError(msg) from e

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        msg = f"Theme file {path}: 'colors' must be a table"
        raise ThemeFileError(msg)
    return colors


def load_colors(user_path: Path | None = None) -> ThemeColors:
    """Merge user overrides into the bundled colors.

    An unreadable or invalid user theme is logged and ignored.

    Args:
        user_path: User theme file (defaults to the XDG location).
    """
    colors = read_colors(bundled_theme_path())
    path = user_path or get_user_theme_path()
    try:
        overrides = read_colors(path)
        if overrides:
            logger.debug("Applying theme overrides from %s", path)
        return ThemeColors.model_validate({**colors, **overrides})
    except (ThemeFileError, ValidationError) as e:
        logger.warning("Ignoring user theme %s: %s", path, e)
        return ThemeColors.model_validate(colors)


def build_theme(colors: ThemeColors) -> Theme:
    """Create the Rich theme holding every CLI style."""
    styles: dict[str, str] = {}
    for name, (color_field, attributes) in STYLES.items():
        color = getattr(colors, color_field)
        styles[name] = f"{attributes} {color}".strip()
    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Rich theme of the shared consoles, loaded on first use."""
    return build_theme(load_colors())
