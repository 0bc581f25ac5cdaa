"""
Tests for length conversions.
"""

import pytest

from docx_table_writer.utils.units import (
    cm_to_twip,
    emu_to_twip,
    inch_to_twip,
    parse_length,
    pt_to_twip,
    twip_to_pt,
)


class TestConversions:
    """Test cases for twip conversions."""

    def test_points(self):
        assert pt_to_twip(12) == 240
        assert twip_to_pt(240) == 12
        assert pt_to_twip(None) == 0.0

    def test_inches(self):
        assert inch_to_twip(1) == 1440
        assert inch_to_twip(0.5) == 720

    def test_centimeters(self):
        assert cm_to_twip(2.54) == pytest.approx(1440)

    def test_emu(self):
        assert emu_to_twip(914400) == 1440


class TestParseLength:
    """Test cases for parse_length."""

    def test_numbers_are_twips(self):
        assert parse_length(1440) == 1440
        assert parse_length(12.5) == 12.5
        assert parse_length(None) is None

    def test_numeric_strings(self):
        assert parse_length("1440") == 1440
        assert isinstance(parse_length("1440"), int)
        assert parse_length("12.5") == 12.5

    @pytest.mark.parametrize("value, expected", [
        ("12pt", 240.0),
        ("1in", 1440.0),
        ("2.54cm", 1440.0),
        ("25.4mm", 1440.0),
        ("914400emu", 1440.0),
        ("300dxa", 300),
        (" 6 PT ", 120.0),
    ])
    def test_units(self, value, expected):
        assert parse_length(value) == pytest.approx(expected)

    @pytest.mark.parametrize("value", ["wide", "12px", "", True, [100]])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_length(value)
