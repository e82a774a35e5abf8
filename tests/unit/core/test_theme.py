"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import pytest
from debloatctl.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_bundled_theme_path,
    get_rich_theme,
    get_theme,
    load_theme,
)
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.text == "#ffffff"
        assert colors.critical == "#f53263"
        assert colors.usb == "#0e8ac8"

    def test_short_hex_accepted(self) -> None:
        """Three-digit hex codes are valid."""
        assert ThemeColors(selected="#abc").selected == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(critical="ff0000")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(text="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(wireless="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(package_manual="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from valid TOML file."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ncritical = "#ff0000"\n')

        assert _load_toml_colors(theme_file) == {"critical": "#ff0000"}

    def test_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Returns None when file doesn't exist."""
        assert _load_toml_colors(tmp_path / "nonexistent.toml") is None

    def test_returns_none_for_invalid_toml(self, tmp_path: Path) -> None:
        """Returns None for malformed TOML."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")

        assert _load_toml_colors(theme_file) is None

    def test_ignores_non_string_values(self, tmp_path: Path) -> None:
        """Non-string values are dropped."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ntext = 5\nmuted = "#111111"\n')

        assert _load_toml_colors(theme_file) == {"muted": "#111111"}


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_bundled_theme_exists(self) -> None:
        """The bundled theme ships with the package."""
        assert Path(get_bundled_theme_path()).name == "theme.toml"

    def test_loads_bundled_theme(self, tmp_path: Path) -> None:
        """Without a user theme the bundled values apply."""
        with patch("debloatctl.core.theme.get_theme_path", return_value=tmp_path / "none.toml"):
            colors = load_theme()

        assert colors == ThemeColors()

    def test_user_theme_overrides_bundled(self, tmp_path: Path) -> None:
        """User theme overrides bundled theme values."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ncritical = "#ff0000"\n')

        with patch("debloatctl.core.theme.get_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors.critical == "#ff0000"
        assert colors.text == "#ffffff"

    def test_invalid_user_colors_fall_back_to_defaults(self, tmp_path: Path) -> None:
        """An invalid user color falls back to the defaults."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ncritical = "red"\n')

        with patch("debloatctl.core.theme.get_theme_path", return_value=user_theme):
            colors = load_theme()

        assert colors.critical == "#f53263"


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_includes_styles(self) -> None:
        """Theme includes the state and convenience styles."""
        theme = get_rich_theme(ThemeColors())

        for style in ("critical", "selected", "usb", "wireless", "bold_header", "package.name"):
            assert style in theme.styles

    def test_critical_is_bold(self) -> None:
        """Critical packages are rendered bold."""
        theme = get_rich_theme(ThemeColors())
        assert theme.styles["critical"].bold is True


class TestGetTheme:
    """Tests for get_theme caching function."""

    def test_caches_theme(self) -> None:
        """get_theme returns cached instance on subsequent calls."""
        get_theme.cache_clear()

        theme1 = get_theme()
        theme2 = get_theme()

        assert isinstance(theme1, Theme)
        assert theme1 is theme2
