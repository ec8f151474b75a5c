"""FinanceEngine - composes the calculators behind one set of entry points.

The engine holds only immutable configuration (tax rules, region table,
schedule assumptions) fixed at construction. Each call takes its full input
and returns a complete result; nothing is retained between calls.

Usage:
    engine = FinanceEngine.for_year(2024)
    income = engine.calculate_income({"amount": 25, "frequency": "hourly",
                                      "location_code": "94105"})
    budget = engine.analyze(income.taxes.monthly_net_income, {"Housing": 1500})
"""

import logging
from typing import Any, Mapping, Optional, Union

from . import budget, growth, income
from .money import coerce, round_currency
from .schemas import (
    AmortizationRow,
    BudgetAnalysis,
    EmergencyFundLimits,
    FullTimeAssumptions,
    GrowthInput,
    GrowthPoint,
    IncomeResult,
    LoanInput,
    PayInput,
    TaxResult,
)
from .taxes import RegionResolver, TaxCalculator, TaxRules, load_region_rules, load_tax_rules

logger = logging.getLogger(__name__)


class FinanceEngine:
    """Entry points for income, tax, budget and growth calculations."""

    def __init__(
        self,
        rules: TaxRules,
        resolver: Optional[RegionResolver] = None,
        assumptions: FullTimeAssumptions = income.DEFAULT_ASSUMPTIONS,
        emergency_fund_limits: EmergencyFundLimits = budget.DEFAULT_EMERGENCY_FUND_LIMITS,
    ):
        self.rules = rules
        self.assumptions = assumptions
        self.emergency_fund_limits = emergency_fund_limits
        self.tax_calculator = TaxCalculator(rules, resolver)

    @classmethod
    def for_year(cls, year: Union[int, str], rules_dir=None, **kwargs) -> "FinanceEngine":
        """Build an engine from tax_rules/<year>.yaml and regions.yaml."""
        rules = load_tax_rules(year, rules_dir)
        resolver = RegionResolver(load_region_rules(rules_dir))
        logger.debug("Engine configured for tax year %s", rules.year)
        return cls(rules, resolver, **kwargs)

    def annualize(self, pay: Union[PayInput, Mapping[str, Any]]) -> float:
        return income.annualize(pay, self.assumptions)

    def compute_taxes(self, gross_annual: Any, location_code: Optional[str] = None) -> TaxResult:
        return self.tax_calculator.compute_taxes(gross_annual, location_code)

    def calculate_income(self, pay: Union[PayInput, Mapping[str, Any]]) -> IncomeResult:
        """Annualize pay, then compute taxes for its location.

        net_per_period splits annual net pay back over the submitted
        frequency and schedule, e.g. take-home per hour for hourly pay.
        """
        pay = coerce(PayInput, pay)
        annual_gross = self.annualize(pay)
        taxes = self.compute_taxes(annual_gross, pay.location_code)
        net_per_period = income.per_period(
            taxes.net_income, pay.frequency, income.schedule_for(pay, self.assumptions)
        )
        return IncomeResult(
            pay=pay,
            annual_gross=annual_gross,
            taxes=taxes,
            net_per_period=round_currency(net_per_period),
        )

    def analyze(self, monthly_income: Any, expenses: Optional[Mapping[str, Any]] = None) -> BudgetAnalysis:
        return budget.analyze(monthly_income, expenses)

    def emergency_fund_target(self, monthly_expenses: Any, months: Optional[int] = None) -> float:
        return budget.emergency_fund_target(monthly_expenses, months, self.emergency_fund_limits)

    def compound_growth(self, data: Union[GrowthInput, Mapping[str, Any]]) -> float:
        return growth.compound_growth(data)

    def growth_schedule(self, data: Union[GrowthInput, Mapping[str, Any]]) -> list[GrowthPoint]:
        return growth.growth_schedule(data)

    def amortized_payment(self, loan: Union[LoanInput, Mapping[str, Any]]) -> float:
        return growth.amortized_payment(loan)

    def amortization_schedule(self, loan: Union[LoanInput, Mapping[str, Any]]) -> list[AmortizationRow]:
        return growth.amortization_schedule(loan)


def compute_taxes(
    gross_annual: Any,
    location_code: Optional[str] = None,
    rules: Optional[TaxRules] = None,
    year: Optional[int] = None,
) -> TaxResult:
    """Compute taxes with explicit rules, or the bundled rules for year.

    Explicit rules take precedence over year; with neither, the configured
    default tax year is used.
    """
    from .config import get_tax_year

    if rules is None:
        rules = load_tax_rules(get_tax_year(year))
    calculator = TaxCalculator(rules, RegionResolver(load_region_rules()))
    return calculator.compute_taxes(gross_annual, location_code)
