"""
Tests for the catalog enumerations: Color, Trim

Checks:
1. Level membership tables
2. Display names and hex codes
3. Lenient parsing of raw codes (from_code)
"""

import pytest

from configurator.core.domain import Color, Trim


# =============================================================================
# COLOR TESTS
# =============================================================================


class TestColor:
    """Tests for Color"""

    @pytest.mark.parametrize(
        "color,levels",
        [
            (Color.WHITE, {1, 2}),
            (Color.BLACK, {1, 2, 4}),
            (Color.SILVER, {1, 2}),
            (Color.BLUE, {1, 2}),
            (Color.PURPLE, {3}),
            (Color.BURGUNDY, {3}),
            (Color.GREEN, {3}),
        ],
    )
    def test_levels(self, color, levels):
        assert color.levels == frozenset(levels)
        for level in range(0, 6):
            assert color.is_valid_for(level) == (level in levels)

    def test_level4_is_black_only(self):
        assert [color for color in Color if color.is_valid_for(4)] == [Color.BLACK]

    def test_display_and_hex(self):
        assert Color.SILVER.display_name == "Liquid Silver"
        assert Color.SILVER.hex_code == "#C0C0C0"
        assert Color.GREEN.display_name == "Racing Green"
        assert str(Color.BLACK) == "Obsidian Black (#000000)"

    def test_performance_colors(self):
        performance = {color for color in Color if color.is_performance_color}
        assert performance == {Color.PURPLE, Color.BURGUNDY, Color.GREEN}

    @pytest.mark.parametrize("raw", ["white", "WHITE", "  White  "])
    def test_from_code(self, raw):
        assert Color.from_code(raw) == Color.WHITE

    @pytest.mark.parametrize("raw", ["", None, "pink", "Pearl White"])
    def test_from_code_unknown(self, raw):
        assert Color.from_code(raw) is None

    def test_unknown_level_is_not_member(self):
        assert not Color.BLACK.is_valid_for(99)


# =============================================================================
# TRIM TESTS
# =============================================================================


class TestTrim:
    """Tests for Trim"""

    @pytest.mark.parametrize(
        "trim,levels",
        [
            (Trim.STANDARD, {1, 2}),
            (Trim.PREMIUM, {1, 2}),
            (Trim.PERFORMANCE, {1}),
            (Trim.OFFROAD, {2}),
            (Trim.PRO, {3}),
            (Trim.MAX, {3}),
            (Trim.ULTRA, {3}),
            (Trim.FLAGSHIP, {4}),
        ],
    )
    def test_levels(self, trim, levels):
        assert trim.levels == frozenset(levels)
        for level in range(0, 6):
            assert trim.is_valid_for(level) == (level in levels)

    def test_offroad_display_name(self):
        assert Trim.OFFROAD.display_name == "Off-Road"

    @pytest.mark.parametrize("raw", ["OFFROAD", "offroad", "Off-Road", "off road", "off_road"])
    def test_from_code_offroad_spellings(self, raw):
        assert Trim.from_code(raw) == Trim.OFFROAD

    def test_from_code_unknown(self):
        assert Trim.from_code("sport") is None
        assert Trim.from_code("") is None
        assert Trim.from_code(None) is None

    def test_every_trim_has_description(self):
        for trim in Trim:
            assert trim.description
