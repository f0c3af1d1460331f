"""Console colours for rootkeeper.

The bundled data/theme.toml provides the defaults; a theme.toml in the
config directory may override any subset of its [colors] table. An
unreadable or invalid override is logged and ignored.
"""

import logging
import re
import tomllib
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationError
from rich.theme import Theme

from rootkeeper.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}){1,2}")


def _check_hex(value: str) -> str:
    value = value.strip()
    if not _HEX_COLOR.fullmatch(value):
        raise ValueError(f"expected #RGB or #RRGGBB, got {value!r}")
    return value


HexColor = Annotated[str, AfterValidator(_check_hex)]


class ThemeColors(BaseModel):
    """Named colours used by the CLI output."""

    model_config = ConfigDict(extra="forbid")

    text: HexColor = "#ffffff"
    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"

    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"

    folder_path: HexColor = "#69B9A1"
    unmapped: HexColor = "#c1ff62"
    inaccessible: HexColor = "#d44ebc"


# Rich style name -> (colour field, extra attributes)
_STYLES: dict[str, tuple[str, str]] = {
    "text": ("text", ""),
    "muted": ("muted", ""),
    "dim": ("muted", ""),
    "header": ("header", ""),
    "bold_header": ("header", "bold"),
    "border": ("border", ""),
    "success": ("success", ""),
    "warning": ("warning", ""),
    "error": ("error", "bold"),
    "info": ("info", ""),
    "folder_path": ("folder_path", "bold"),
    "unmapped": ("unmapped", ""),
    "inaccessible": ("inaccessible", ""),
}


def get_bundled_theme_path() -> Path:
    return Path(str(resources.files("rootkeeper.data").joinpath("theme.toml")))


def _read_colors(path: Path) -> dict[str, object]:
    """Read the [colors] table of a theme file.

    Raises:
        OSError: If the file cannot be read.
        tomllib.TOMLDecodeError: If the file is not valid TOML.
        ValueError: If [colors] is not a table.
    """
    with path.open("rb") as f:
        colors = tomllib.load(f).get("colors", {})
    if not isinstance(colors, dict):
        raise ValueError("[colors] must be a table")
    return colors


def load_theme() -> ThemeColors:
    """Load the bundled colours merged with the user's overrides."""
    try:
        colors = _read_colors(get_bundled_theme_path())
    except (OSError, ValueError) as e:
        logger.error("Bundled theme unusable, using built-in colours: %s", e)
        colors = {}

    user_path = get_user_theme_path()
    if user_path.exists():
        try:
            colors = {**colors, **_read_colors(user_path)}
            logger.debug("Applied theme overrides from %s", user_path)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring theme overrides in %s: %s", user_path, e)

    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Invalid theme colours, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme holding every style the CLI prints with."""
    colors = colors or load_theme()
    styles = {}
    for name, (field, attributes) in _STYLES.items():
        color = getattr(colors, field)
        styles[name] = f"{attributes} {color}" if attributes else color
    return Theme(styles)


@lru_cache(maxsize=1)
def get_theme() -> Theme:
    """Rich theme for the shared consoles, loaded once per process."""
    return get_rich_theme()
