"""Unit tests for theme module.

Tests for ThemeColors validation and Rich theme generation.
"""

import pytest
from pydantic import ValidationError
from rich.theme import Theme
from snapsweep.core.theme import ThemeColors, get_rich_theme, get_theme


class TestThemeColors:
    """Tests for ThemeColors model."""

    def test_defaults_are_valid(self) -> None:
        """Default colors pass validation."""
        colors = ThemeColors()
        assert colors.success.startswith("#")
        assert colors.trashed.startswith("#")
        assert colors.restored.startswith("#")

    def test_accepts_short_hex(self) -> None:
        """#RGB colors are accepted."""
        colors = ThemeColors(info="#0cf")
        assert colors.info == "#0cf"

    def test_strips_whitespace(self) -> None:
        """Surrounding whitespace is removed."""
        colors = ThemeColors(info="  #00ccff ")
        assert colors.info == "#00ccff"

    @pytest.mark.parametrize("value", ["00ccff", "#00cc", "#gggggg", 123])
    def test_rejects_invalid_colors(self, value: object) -> None:
        """Invalid colors raise ValidationError."""
        with pytest.raises(ValidationError):
            ThemeColors(info=value)  # type: ignore[arg-type]

    def test_rejects_unknown_fields(self) -> None:
        """Unknown color names are rejected."""
        with pytest.raises(ValidationError):
            ThemeColors(unknown="#ffffff")  # type: ignore[call-arg]


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_contains_expected_styles(self) -> None:
        """Generated theme exposes the styles used by the CLI."""
        theme = get_rich_theme()
        for name in ("info", "warning", "error", "success", "trashed", "restored", "bold_header"):
            assert name in theme.styles

    def test_uses_custom_colors(self) -> None:
        """Custom colors flow into the generated styles."""
        theme = get_rich_theme(ThemeColors(restored="#123456"))
        assert theme.styles["restored"].color is not None
        assert theme.styles["restored"].color.triplet.hex == "#123456"

    def test_get_theme_is_cached(self) -> None:
        """get_theme returns the same instance on repeated calls."""
        first = get_theme()
        assert isinstance(first, Theme)
        assert get_theme() is first
