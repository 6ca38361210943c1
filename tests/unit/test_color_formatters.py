"""Unit tests for badge color helpers.

Covers count thresholds, normalization of user-supplied colors and resolution
to the hex values drawn into SVG badges.
"""

import pytest

from badgehub.badge.color_formatters import (
    download_count_color,
    floor_count_color,
    normalize_color,
    to_svg_color,
)

# ---------------------------------------------------------------------------
# Count colors
# ---------------------------------------------------------------------------


class TestDownloadCountColor:
    """Tests for download_count_color() thresholds."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [
            (0, "red"),
            (-3, "red"),
            (1, "yellow"),
            (9, "yellow"),
            (10, "yellowgreen"),
            (99, "yellowgreen"),
            (100, "green"),
            (999, "green"),
            (1000, "brightgreen"),
            (45230, "brightgreen"),
        ],
    )
    def test_thresholds(self, count: int, expected: str) -> None:
        """download_count_color steps through red, yellow, greens."""
        assert download_count_color(count) == expected

    def test_floor_count_color_uses_given_thresholds(self) -> None:
        """floor_count_color honours caller supplied thresholds."""
        assert floor_count_color(5, 2, 4, 6) == "green"


# ---------------------------------------------------------------------------
# normalize_color
# ---------------------------------------------------------------------------


class TestNormalizeColor:
    """Tests for normalize_color()."""

    def test_named_color_passes_through(self) -> None:
        assert normalize_color("brightgreen") == "brightgreen"

    def test_aliases_resolve_to_canonical_names(self) -> None:
        """normalize_color maps aliases such as 'gray' and 'success'."""
        assert normalize_color("Gray") == "grey"
        assert normalize_color(" success ") == "brightgreen"
        assert normalize_color("critical") == "red"

    def test_hex_is_prefixed_and_lowercased(self) -> None:
        """normalize_color accepts hex with or without '#'."""
        assert normalize_color("ABC") == "#abc"
        assert normalize_color("#FF0000") == "#ff0000"

    @pytest.mark.parametrize("color", [None, "", "notacolor", "abcd", "#12345g"])
    def test_unusable_colors_return_none(self, color) -> None:
        """normalize_color rejects unknown names and malformed hex."""
        assert normalize_color(color) is None


# ---------------------------------------------------------------------------
# to_svg_color
# ---------------------------------------------------------------------------


class TestToSvgColor:
    """Tests for to_svg_color()."""

    def test_named_color_resolves_to_hex(self) -> None:
        assert to_svg_color("red", "grey") == "#e05d44"

    def test_hex_color_is_kept(self) -> None:
        assert to_svg_color("#abc", "grey") == "#abc"

    def test_missing_color_uses_fallback(self) -> None:
        """to_svg_color falls back when the color is unset or unusable."""
        assert to_svg_color(None, "grey") == "#555"
        assert to_svg_color("bogus", "lightgrey") == "#9f9f9f"

    def test_unusable_fallback_raises(self) -> None:
        """to_svg_color raises ValueError when the fallback is unusable too."""
        with pytest.raises(ValueError):
            to_svg_color(None, "bogus")
