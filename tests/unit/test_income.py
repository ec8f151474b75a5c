"""Unit tests for pay annualization."""

import pytest

from financepro.sdk import (
    FullTimeAssumptions,
    InvalidInput,
    PayInput,
    annualize,
    per_period,
)


class TestAnnualize:
    """Each frequency's multiplier."""

    def test_hourly_uses_full_time_defaults(self):
        assert annualize({"amount": 25, "frequency": "hourly"}) == pytest.approx(25 * 8 * 5 * 52)

    def test_hourly_with_schedule(self):
        pay = PayInput(amount=25, frequency="hourly", hours_per_day=10, days_per_week=4, weeks_per_year=50)
        assert annualize(pay) == pytest.approx(50000)

    def test_daily(self):
        assert annualize({"amount": 200, "frequency": "daily"}) == pytest.approx(52000)
        assert annualize({"amount": 200, "frequency": "daily", "days_per_week": 3}) == pytest.approx(31200)

    def test_weekly_uses_weeks_per_year(self):
        assert annualize({"amount": 1000, "frequency": "weekly"}) == pytest.approx(52000)
        assert annualize({"amount": 1000, "frequency": "weekly", "weeks_per_year": 48}) == pytest.approx(48000)

    @pytest.mark.parametrize("frequency,amount,expected", [
        ("biweekly", 2000, 52000),
        ("semimonthly", 2500, 60000),
        ("monthly", 5000, 60000),
        ("annual", 75000, 75000),
    ])
    def test_fixed_period_multipliers(self, frequency, amount, expected):
        assert annualize({"amount": amount, "frequency": frequency}) == pytest.approx(expected)

    def test_fixed_periods_ignore_schedule(self):
        pay = {"amount": 2000, "frequency": "biweekly", "weeks_per_year": 40}
        assert annualize(pay) == pytest.approx(52000)

    def test_zero_components_replaced_before_multiplying(self):
        pay = {"amount": 20, "frequency": "hourly", "hours_per_day": 0, "days_per_week": 0, "weeks_per_year": 0}
        assert annualize(pay) == pytest.approx(20 * 8 * 5 * 52)

    def test_custom_assumptions(self):
        part_time = FullTimeAssumptions(hours_per_day=4, days_per_week=5, weeks_per_year=50)
        assert annualize({"amount": 20, "frequency": "hourly"}, part_time) == pytest.approx(20000)

    def test_zero_amount(self):
        assert annualize({"amount": 0, "frequency": "hourly"}) == 0

    def test_default_frequency_is_annual(self):
        assert annualize({"amount": 65000}) == 65000


class TestAnnualizeRejects:
    """Invalid input never reaches the tax calculator."""

    @pytest.mark.parametrize("pay", [
        {"amount": -1, "frequency": "annual"},
        {"amount": "abc", "frequency": "annual"},
        {"amount": float("nan"), "frequency": "annual"},
        {"amount": 10, "frequency": "yearly"},
        {"amount": 10, "frequency": "hourly", "hours_per_day": -2},
        {"amount": 10, "frequency": "daily", "days_per_week": 8},
        {"amount": 10, "frequency": "weekly", "weeks_per_year": 53},
        {"amount": 10, "frequency": "weekly", "bonus": 5},
        {"frequency": "weekly"},
    ])
    def test_invalid(self, pay):
        with pytest.raises(InvalidInput):
            annualize(pay)

    def test_message_names_field(self):
        with pytest.raises(InvalidInput, match="amount"):
            annualize({"amount": -5})


class TestPerPeriod:
    """Splitting an annual figure back into pay periods."""

    def test_weekly(self):
        assert per_period(52000, "weekly") == pytest.approx(1000)

    def test_monthly(self):
        assert per_period(60000, "monthly") == pytest.approx(5000)

    def test_hourly(self):
        assert per_period(41600, "hourly") == pytest.approx(20)

    def test_unknown_frequency(self):
        with pytest.raises(InvalidInput):
            per_period(1000, "fortnightly")
