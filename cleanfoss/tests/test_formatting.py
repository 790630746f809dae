"""Tests for Danish number formatting."""

import pytest

from cleanfoss.formatting import format_decimal, format_dkk, format_number, parse_dkk_amount


class TestFormatDkk:
    @pytest.mark.parametrize(
        "amount,expected",
        [
            (0, "0 kr."),
            (849, "849 kr."),
            (1377, "1.377 kr."),
            (275.4, "275,4 kr."),
            (849.0, "849 kr."),
            (1234567, "1.234.567 kr."),
            (-1377, "-1.377 kr."),
            (0.05, "0,1 kr."),
            (99.94, "99,9 kr."),
        ],
    )
    def test_format(self, amount, expected):
        assert format_dkk(amount) == expected


class TestFormatNumber:
    def test_max_decimals(self):
        assert format_number(1234.5678, max_decimals=2) == "1.234,57"

    def test_trailing_zeros_dropped(self):
        assert format_number(1234.50, max_decimals=2) == "1.234,5"

    def test_min_decimals(self):
        assert format_number(12, max_decimals=2, min_decimals=2) == "12,00"

    def test_no_decimals(self):
        assert format_number(2616.5, max_decimals=0) == "2.617"

    def test_format_decimal(self):
        assert format_decimal(275) == "275,0"
        assert format_decimal(1234.56, 2) == "1.234,56"


class TestParseDkkAmount:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("1.377 kr.", 1377.0),
            ("1.377,5 kr.", 1377.5),
            ("275,4 kr.", 275.4),
            ("849", 849.0),
            ("99 KR", 99.0),
        ],
    )
    def test_parse(self, text, expected):
        assert parse_dkk_amount(text) == pytest.approx(expected)

    @pytest.mark.parametrize("text", ["", "kr.", "gratis"])
    def test_unparseable_is_zero(self, text):
        assert parse_dkk_amount(text) == 0.0

    def test_round_trip(self):
        assert parse_dkk_amount(format_dkk(1234567.8)) == pytest.approx(1234567.8)
