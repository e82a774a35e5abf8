"""Console color theme.

Colors come from the bundled ``data/theme.toml``; any key can be
overridden in ``~/.config/debloatctl/theme.toml``. Theme files are only
read, never written.
"""

import logging
import sys
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from debloatctl.core.paths import get_theme_path

logger = logging.getLogger(__name__)

HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


class ThemeColors(BaseModel):
    """Hex colors used by the console.

    Attributes:
        text: Default text.
        muted: Secondary text such as indexes and hints.
        header: Table headers and titles.
        border: Table and panel borders.
        success: Completed operations.
        warning: Warnings and cancelled operations.
        error: Errors and failed operations.
        info: Progress messages.
        critical: Packages whose removal can break the device.
        selected: Packages selected in the interactive mode.
        usb: USB connection status.
        wireless: Wireless connection status.
        menu: Menu numbers.
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#0ec1c8"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    critical: str = "#f53263"
    selected: str = "#c1ff62"
    usb: str = "#0e8ac8"
    wireless: str = "#03b971"
    menu: str = "#d44ebc"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Accept only #RGB or #RRGGBB values."""
        name = info.field_name
        if not isinstance(v, str):
            msg = f"{name}: color must be a string"
            raise ValueError(msg)

        color = v.strip()
        if not color.startswith("#"):
            msg = f"{name}: color must start with '#'"
            raise ValueError(msg)
        if len(color) not in (4, 7):
            msg = f"{name}: color must be #RGB or #RRGGBB format"
            raise ValueError(msg)
        if not set(color[1:]) <= HEX_DIGITS:
            msg = f"{name}: invalid hex color '{color}'"
            raise ValueError(msg)
        return color


def get_bundled_theme_path() -> Path:
    """Path of the theme shipped with the package."""
    return Path(str(resources.files("debloatctl.data").joinpath("theme.toml")))


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Non-string values are dropped.

    Args:
        path: Theme file.

    Returns:
        Color overrides, or None if the file is missing or unreadable.
    """
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        logger.warning("Ignoring malformed theme file %s: %s", path, e)
        print(f"Warning: Failed to parse {path}: {e}", file=sys.stderr)
        return None
    except OSError as e:
        logger.warning("Cannot read theme file %s: %s", path, e)
        return None

    section = data.get("colors", {})
    if not isinstance(section, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return None
    return {key: value for key, value in section.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Load the bundled colors with the user's overrides applied.

    An invalid override falls back to the built-in defaults.

    Returns:
        Validated ThemeColors.
    """
    colors: dict[str, str] = {}

    bundled = _load_toml_colors(get_bundled_theme_path())
    if bundled is None:
        logger.error("Bundled theme is missing, the installation may be broken")
    else:
        colors.update(bundled)

    user_path = get_theme_path()
    overrides = _load_toml_colors(user_path)
    if overrides:
        logger.debug("Applying %d color override(s) from %s", len(overrides), user_path)
        colors.update(overrides)

    try:
        return ThemeColors(**colors)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        print(f"Warning: Invalid theme configuration: {e}", file=sys.stderr)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme.

    Args:
        colors: Colors to use. Loaded from the theme files when omitted.

    Returns:
        Rich Theme with one style per color plus table helpers.
    """
    colors = colors or load_theme()

    plain = ("text", "muted", "header", "border", "success", "warning", "info", "menu")
    bold = ("error", "critical", "selected", "usb", "wireless")

    styles = {name: getattr(colors, name) for name in plain}
    styles.update({name: f"bold {getattr(colors, name)}" for name in bold})
    styles["bold_header"] = f"bold {colors.header}"
    styles["package.name"] = colors.text
    styles["package.index"] = colors.muted

    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Rich theme shared by the consoles, loaded once."""
    return get_rich_theme()
