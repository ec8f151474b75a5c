"""Unit tests for currency rounding and formatting helpers."""

import pytest

from financepro.sdk import InvalidInput, calculate_percentage, format_currency, round_currency
from financepro.sdk.money import coerce, require_amount
from financepro.sdk.schemas import LoanInput


class TestRoundCurrency:
    """Half away from zero at the cent."""

    @pytest.mark.parametrize("value,expected", [
        (2.345, 2.35),
        (-2.345, -2.35),
        (1.005, 1.01),
        (2.344, 2.34),
        (0, 0),
        (1628.894627, 1628.89),
    ])
    def test_rounds(self, value, expected):
        assert round_currency(value) == expected

    def test_places(self):
        assert round_currency(33.33333, 1) == 33.3

    @pytest.mark.parametrize("value", [1e27, 123456789012345678901234567890.5, 1.7e308])
    def test_large_amounts_beyond_default_decimal_precision(self, value):
        assert round_currency(value) == pytest.approx(value)

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(InvalidInput, match="out of range"):
            round_currency(value)


class TestCalculatePercentage:
    def test_basic(self):
        assert calculate_percentage(1, 3) == 33.33

    def test_zero_total(self):
        assert calculate_percentage(50, 0) == 0

    def test_decimals(self):
        assert calculate_percentage(1, 3, decimals=0) == 33.0


class TestFormatCurrency:
    def test_thousands_separator(self):
        assert format_currency(1234.5) == "$1,234.50"

    def test_negative(self):
        assert format_currency(-5) == "-$5.00"

    def test_rounds_half_up(self):
        assert format_currency(0.125) == "$0.13"


class TestCoercion:
    """pydantic errors surface as InvalidInput."""

    def test_require_amount(self):
        assert require_amount("12.5", "x") == 12.5
        with pytest.raises(InvalidInput, match="x:"):
            require_amount(-1, "x")

    def test_coerce_passes_instances_through(self):
        loan = LoanInput(principal=100, annual_rate=0, term_months=1)
        assert coerce(LoanInput, loan) is loan

    def test_coerce_wraps_validation_error(self):
        with pytest.raises(InvalidInput, match="term_months"):
            coerce(LoanInput, {"principal": 100, "annual_rate": 0, "term_months": 0})

    def test_invalid_input_is_value_error(self):
        with pytest.raises(ValueError):
            require_amount("abc", "x")
