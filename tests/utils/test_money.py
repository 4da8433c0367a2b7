"""Tests for utils/money.py - paise conversion and display formatting."""

from decimal import Decimal
from fractions import Fraction

import pytest

from utils.money import (
    format_indian_currency,
    from_paise,
    round_paise,
    to_decimal,
    to_fraction,
    to_paise,
)


class TestToDecimal:

    def test_float_goes_through_str(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_decimal_passes_through(self):
        value = Decimal("1.23")
        assert to_decimal(value) is value

    def test_int_and_str(self):
        assert to_decimal(5) == Decimal("5")
        assert to_decimal("7.5") == Decimal("7.5")


class TestPaise:

    def test_to_paise(self):
        assert to_paise(Decimal("12.34")) == 1234

    def test_half_paisa_rounds_away_from_zero(self):
        assert to_paise(Decimal("0.005")) == 1
        assert to_paise(Decimal("-0.005")) == -1

    def test_below_half_rounds_down(self):
        assert to_paise(Decimal("0.0049")) == 0

    def test_round_paise(self):
        assert round_paise(Decimal("4.5")) == 5
        assert round_paise(Decimal("4.49")) == 4

    def test_from_paise_two_places(self):
        result = from_paise(5)
        assert result == Decimal("0.05")
        assert result.as_tuple().exponent == -2

    def test_round_trip_is_stable(self):
        assert to_paise(from_paise(123456789)) == 123456789

    def test_beyond_decimal_context_precision(self):
        """Conversions stay exact past the default 28 significant digits."""
        assert to_paise(Decimal("1E+30")) == 10**32
        assert to_paise(Decimal("12345678901234567890123456789.125")) == 1234567890123456789012345678913
        assert from_paise(10**40 + 5) == Decimal(f"{10**38}.05")

    def test_round_paise_accepts_fractions(self):
        assert round_paise(Fraction(5, 2)) == 3
        assert round_paise(Fraction(-5, 2)) == -3
        assert to_fraction(0.1) == Fraction(1, 10)


class TestFormatIndianCurrency:

    @pytest.mark.parametrize("amount,expected", [
        (Decimal("0"), "₹ 0.00"),
        (Decimal("999.5"), "₹ 999.50"),
        (Decimal("1000"), "₹ 1,000.00"),
        (Decimal("85550"), "₹ 85,550.00"),
        (Decimal("1234567.89"), "₹ 12,34,567.89"),
        (Decimal("123456789"), "₹ 12,34,56,789.00"),
    ])
    def test_indian_grouping(self, amount, expected):
        assert format_indian_currency(amount) == expected

    def test_negative(self):
        assert format_indian_currency(Decimal("-1500")) == "₹ -1,500.00"
