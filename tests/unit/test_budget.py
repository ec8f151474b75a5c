"""Unit tests for monthly budget analysis."""

import pytest

from financepro.sdk import (
    EmergencyFundLimits,
    InvalidInput,
    analyze,
    emergency_fund_target,
)


class TestAnalyze:
    """Totals, savings rate and category shares."""

    def test_housing_and_food(self):
        analysis = analyze(5000, {"Housing": 1500, "Food": 500})

        assert analysis.total_expenses == 2000
        assert analysis.remaining_income == 3000
        assert analysis.savings_rate == 60.0
        assert analysis.category("Housing").percentage == 75.0
        assert analysis.category("Food").percentage == 25.0

    def test_empty_budget(self):
        analysis = analyze(0, {})
        assert analysis.total_expenses == 0
        assert analysis.remaining_income == 0
        assert analysis.savings_rate == 0
        assert analysis.categories == []

    def test_no_expenses_argument(self):
        analysis = analyze(4000)
        assert analysis.savings_rate == 100.0
        assert analysis.categories == []

    def test_zero_income_is_valid(self):
        analysis = analyze(0, {"Rent": 800, "Food": 200})
        assert analysis.savings_rate == 0
        assert analysis.remaining_income == -1000
        assert analysis.category("Rent").percentage == 80.0

    def test_zero_total_expenses(self):
        analysis = analyze(3000, {"Rent": 0, "Food": 0})
        assert [c.percentage for c in analysis.categories] == [0, 0]
        assert analysis.savings_rate == 100.0

    def test_overspending_gives_negative_savings_rate(self):
        analysis = analyze(2000, {"Rent": 2500})
        assert analysis.remaining_income == -500
        assert analysis.savings_rate == -25.0

    def test_caller_order_preserved(self):
        analysis = analyze(5000, {"Zeta": 10, "Alpha": 900, "Mid": 90})
        assert [c.category for c in analysis.categories] == ["Zeta", "Alpha", "Mid"]

    def test_percentages_within_rounding_of_100(self):
        analysis = analyze(1000, {"A": 1, "B": 1, "C": 1})
        assert [c.percentage for c in analysis.categories] == [33.33, 33.33, 33.33]
        assert sum(c.percentage for c in analysis.categories) == pytest.approx(100, abs=0.05)

    def test_amounts_as_numeric_strings(self):
        analysis = analyze("1000", {"Rent": "250.50"})
        assert analysis.total_expenses == 250.5

    def test_unknown_category_lookup(self):
        assert analyze(100, {"Rent": 50}).category("Food") is None

    def test_idempotent(self):
        expenses = {"Housing": 1234.56, "Food": 432.1, "Fun": 99.99}
        assert analyze(4321.09, expenses) == analyze(4321.09, expenses)

    @pytest.mark.parametrize("income,expenses", [
        (-1, {}),
        ("lots", {}),
        (1000, {"Rent": -5}),
        (1000, {"Rent": "five"}),
        (1000, {"Rent": float("inf")}),
    ])
    def test_rejects_invalid(self, income, expenses):
        with pytest.raises(InvalidInput):
            analyze(income, expenses)

    def test_very_large_income(self):
        analysis = analyze(1e27, {"A": 1})
        assert analysis.total_expenses == 1
        assert analysis.remaining_income == pytest.approx(1e27)
        assert analysis.savings_rate == 100.0

    def test_total_overflow_rejected(self):
        with pytest.raises(InvalidInput, match="out of range"):
            analyze(1000, {"A": 1e308, "B": 1e308})

    def test_error_names_category(self):
        with pytest.raises(InvalidInput, match="Rent"):
            analyze(1000, {"Rent": -5})


class TestEmergencyFund:
    """Emergency fund target sizing."""

    def test_defaults_to_minimum_months(self):
        assert emergency_fund_target(2000) == 6000

    def test_explicit_months(self):
        assert emergency_fund_target(2000, 6) == 12000

    @pytest.mark.parametrize("months", [2, 13, 0])
    def test_months_out_of_range(self, months):
        with pytest.raises(InvalidInput, match="between 3 and 12"):
            emergency_fund_target(2000, months)

    def test_fractional_months_rejected(self):
        with pytest.raises(InvalidInput):
            emergency_fund_target(2000, 4.5)

    def test_custom_limits(self):
        limits = EmergencyFundLimits(min_months=1, max_months=24)
        assert emergency_fund_target(1000, 1, limits) == 1000
        assert emergency_fund_target(1000, 24, limits) == 24000

    def test_negative_expenses(self):
        with pytest.raises(InvalidInput):
            emergency_fund_target(-100)
