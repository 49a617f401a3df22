"""Tests for display formatting"""
import math
import re

import pytest

from formatting import ERROR, format_number, is_plain, parse_display

EXPONENTIAL = re.compile(r"^-?\d\.\d{5}e[+-]\d+$")


class TestFormatNumber:
    @pytest.mark.parametrize("value, expected", [
        (3, "3"),
        (3.0, "3"),
        (-12.5, "-12.5"),
        (0.1 + 0.2, "0.3"),
        (-0.0, "0"),
        (1e-7, "0.0000001"),
        (1234567890, "1234567890"),
        (-123456789, "-123456789"),
        (123456.789, "123456.789"),
    ])
    def test_plain(self, value, expected):
        assert format_number(value) == expected

    @pytest.mark.parametrize("value, expected", [
        (12345678901, "1.23457e+10"),
        (-12345678901, "-1.23457e+10"),
        (1e-10, "1.00000e-10"),
        (2 / 3, "6.66667e-1"),
        (1e21, "1.00000e+21"),
    ])
    def test_exponential(self, value, expected):
        assert format_number(value) == expected
        assert EXPONENTIAL.match(expected)

    def test_error(self):
        assert format_number(ERROR) == "Error"
        assert format_number(math.inf) == "Error"
        assert format_number(math.nan) == "Error"

    @pytest.mark.parametrize("value", [0.5, -12.25, 42, 123456.789, 0.0001])
    def test_round_trip(self, value):
        assert parse_display(format_number(value)) == pytest.approx(value, rel=1e-12)

    def test_exponential_parses(self):
        assert parse_display(format_number(98765432101234)) == pytest.approx(9.87654e13)

    def test_display_width_bounded(self):
        for value in [1 / 7, 10 ** 15 / 7, 7e-9, 2 ** 60]:
            assert len(format_number(value)) <= 11


class TestParseDisplay:
    def test_error_sentinel(self):
        assert parse_display("Error") is ERROR

    def test_trailing_point(self):
        assert parse_display("0.") == 0.0

    def test_number(self):
        assert parse_display("-1.5") == -1.5

    def test_is_plain(self):
        assert is_plain("12.5")
        assert not is_plain("1.00000e-10")
        assert not is_plain("Error")
