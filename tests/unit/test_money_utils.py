"""Test minor unit helpers"""

from decimal import Decimal

import pytest

from tripsplit.utils.money_utils import format_minor_units, sum_minor_units, to_minor_units


class TestToMinorUnits:
    """Test conversion of user input to minor units"""

    @pytest.mark.parametrize(
        "value, expected",
        [
            (Decimal("12.34"), 1234),
            ("7", 700),
            (3, 300),
            (0.1, 10),
            ("10.005", 1001),
            ("10.004", 1000),
            (" 5.50 ", 550),
        ],
    )
    def test_converts(self, value, expected):
        assert to_minor_units(value) == expected

    @pytest.mark.parametrize(
        "value", [None, True, "abc", "", float("nan"), float("inf"), Decimal("NaN")]
    )
    def test_rejects_non_numbers(self, value):
        assert to_minor_units(value) is None

    @pytest.mark.parametrize(
        "value", ["1e30", "12345678901234567890123456789", "1e999999", "-1e999999"]
    )
    def test_too_large_values_are_rejected(self, value):
        """Values beyond the decimal context come back as None instead of raising"""
        assert to_minor_units(value) is None

    def test_custom_scale(self):
        assert to_minor_units("1.5", minor_units_per_major=1000) == 1500

    def test_scale_from_settings(self, monkeypatch):
        monkeypatch.setenv("TRIPSPLIT_MINOR_UNITS_PER_MAJOR", "1")

        assert to_minor_units("42.4") == 42


class TestSumMinorUnits:
    def test_sum(self):
        assert sum_minor_units([1, 2, 3]) == 6

    def test_empty(self):
        assert sum_minor_units([]) == 0


class TestFormatMinorUnits:
    """Test display formatting"""

    def test_default_symbol(self):
        assert format_minor_units(123456) == "₹1,234.56"

    def test_custom_symbol(self):
        assert format_minor_units(5, symbol="$") == "$0.05"

    def test_negative(self):
        assert format_minor_units(-3300, symbol="€") == "-€33.00"

    def test_decimals_follow_scale(self):
        assert format_minor_units(1234, symbol="$", minor_units_per_major=1000) == "$1.234"

    def test_no_decimals_for_unit_scale(self):
        assert format_minor_units(1234, symbol="$", minor_units_per_major=1) == "$1,234"

    def test_symbol_from_settings(self, monkeypatch):
        monkeypatch.setenv("TRIPSPLIT_CURRENCY_SYMBOL", "£")

        assert format_minor_units(100) == "£1.00"
