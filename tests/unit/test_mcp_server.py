"""Unit tests for the MCP tool functions.

The tools are called directly; every argument is passed explicitly since
their defaults are pydantic Field declarations.
"""

import asyncio

import pytest

pytest.importorskip("mcp")

from financepro.mcp import server  # noqa: E402
from financepro.sdk import set_setting  # noqa: E402


def run(coro):
    return asyncio.run(coro)


class TestCalculateIncome:
    def test_california(self):
        result = run(server.calculate_income(
            amount=60000, frequency="annual", location_code="CA",
            hours_per_day=None, days_per_week=None, weeks_per_year=None, year=2024,
        ))
        assert result["taxes"]["state_tax"] == 4200.0
        assert result["taxes"]["total_tax"] == 17297.5

    def test_rejected_input_returns_error(self):
        result = run(server.calculate_income(
            amount=-5, frequency="annual", location_code=None,
            hours_per_day=None, days_per_week=None, weeks_per_year=None, year=2024,
        ))
        assert "amount" in result["error"]

    def test_missing_year_returns_error(self):
        result = run(server.calculate_income(
            amount=100, frequency="annual", location_code=None,
            hours_per_day=None, days_per_week=None, weeks_per_year=None, year=1990,
        ))
        assert "error" in result


class TestAnalyzeBudget:
    def test_savings_rate(self):
        result = run(server.analyze_budget(monthly_income=5000, expenses={"Housing": 1500, "Food": 500}))
        assert result["savings_rate"] == 60.0

    def test_negative_expense(self):
        result = run(server.analyze_budget(monthly_income=5000, expenses={"Rent": -1}))
        assert "Rent" in result["error"]

    def test_ignores_tax_year_setting(self):
        set_setting("tax_year", 1990)
        result = run(server.analyze_budget(monthly_income=4000, expenses={"Rent": 1000}))
        assert result["savings_rate"] == 75.0


class TestGrowthTools:
    def test_project_growth(self):
        result = run(server.project_growth(principal=1000, annual_rate=0.05, years=10, compounding_frequency=1))
        assert result["final_balance"] == pytest.approx(1628.89)
        assert len(result["schedule"]) == 10

    def test_loan_payment(self):
        result = run(server.loan_payment(principal=1000, annual_rate=0, term_months=10))
        assert result == {"monthly_payment": 100.0, "total_interest": 0.0, "months": 10}

    def test_loan_total_interest_rounded_to_cents(self):
        result = run(server.loan_payment(principal=10000, annual_rate=0.05, term_months=36))
        assert result["monthly_payment"] == pytest.approx(299.71)
        assert result["total_interest"] == round(result["total_interest"], 2)
        assert result["months"] == 36

    def test_loan_payment_rejected(self):
        result = run(server.loan_payment(principal=1000, annual_rate=0.05, term_months=0))
        assert "term_months" in result["error"]
