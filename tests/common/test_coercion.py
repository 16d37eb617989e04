"""Tests for yml_export/common/coercion.py"""

from datetime import datetime

import pytest

from yml_export.common.coercion import (
    cell_to_str,
    parse_availability,
    parse_optional,
    parse_price,
    split_pictures,
)

TRUTHY = {"да", "yes", "true"}


class TestCellToStr:
    def test_none_is_empty(self):
        assert cell_to_str(None) == ""

    def test_whole_float_drops_decimals(self):
        assert cell_to_str(5225.0) == "5225"

    def test_fractional_float(self):
        assert cell_to_str(19.5) == "19.5"

    def test_int(self):
        assert cell_to_str(101) == "101"

    def test_bool(self):
        assert cell_to_str(True) == "TRUE"
        assert cell_to_str(False) == "FALSE"

    def test_datetime(self):
        assert cell_to_str(datetime(2024, 1, 2, 3, 4)) == "2024-01-02T03:04:00"

    def test_string_unchanged(self):
        assert cell_to_str("  текст ") == "  текст "


class TestParseOptional:
    def test_parsed_value(self):
        assert parse_optional("7", int, -1) == (7, False)

    def test_failure_uses_default(self):
        assert parse_optional("x", int, -1) == (-1, True)

    def test_absent_uses_default(self):
        assert parse_optional(None, int, -1) == (-1, True)


class TestParsePrice:
    def test_decimal(self):
        assert parse_price("19.5") == (19.5, False)

    def test_zero(self):
        assert parse_price("0") == (0.0, False)

    @pytest.mark.parametrize("text", ["abc", "", "19,5", "nan", "inf", " 19.5 ", "1_000", None])
    def test_unparseable_defaults_to_zero(self, text):
        assert parse_price(text) == (0.0, True)


class TestParseAvailability:
    @pytest.mark.parametrize("text", ["Да", "да", "true", "TRUE", "yes"])
    def test_truthy_words(self, text):
        assert parse_availability(text, TRUTHY) == (True, False)

    @pytest.mark.parametrize("text", ["нет", "false", "0", "maybe"])
    def test_other_text_is_unavailable(self, text):
        assert parse_availability(text, TRUTHY) == (False, False)

    def test_absent_defaults_to_available(self):
        assert parse_availability(None, TRUTHY) == (True, True)

    @pytest.mark.parametrize("text", ["", "  "])
    def test_blank_cell_is_unavailable(self, text):
        assert parse_availability(text, TRUTHY) == (False, False)


class TestSplitPictures:
    def test_trims_and_drops_empty_segments(self):
        assert split_pictures("a.jpg, b.jpg ,  , c.jpg") == ("a.jpg", "b.jpg", "c.jpg")

    def test_single(self):
        assert split_pictures("https://example.com/a.jpg") == ("https://example.com/a.jpg",)

    def test_empty(self):
        assert split_pictures("") == ()
        assert split_pictures(None) == ()
