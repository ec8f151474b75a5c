"""Annual tax liability calculations.

Federal income tax uses true marginal brackets. State tax is a flat rate per
region (zero for no-income-tax states). Payroll taxes follow FICA: Social
Security up to the wage base, Medicare uncapped plus the Additional Medicare
Tax on wages over the threshold.

All bracket and rate data comes from an injected TaxRules instance, so a
calculator for another year is just TaxCalculator(load_tax_rules(year)).
"""

import logging
from typing import Iterable, Optional

from ..errors import UnresolvedRegion
from ..money import require_amount, round_currency
from ..schemas import TaxResult
from .regions import RegionResolver
from .schemas import MedicareRules, SocialSecurityRules, StateRules, TaxBracket, TaxRules

logger = logging.getLogger(__name__)


def calculate_federal_income_tax(taxable_income: float, tax_brackets: Iterable[TaxBracket]) -> float:
    """Calculate federal income tax slice by slice across marginal brackets."""
    tax_owed = 0.0

    for bracket in sorted(tax_brackets, key=lambda b: b.over):
        if taxable_income <= bracket.over:
            break
        income_in_this_bracket = min(taxable_income, bracket.upper_bound) - bracket.over
        tax_owed += income_in_this_bracket * bracket.rate

    return tax_owed


def calculate_state_tax(gross: float, region: Optional[str], rules: StateRules) -> Optional[float]:
    """Calculate flat-rate state tax for a region.

    Returns:
        The tax, 0.0 for no-income-tax regions, or None if the region has no
        configured rate (caller decides how to degrade)
    """
    if region is None:
        return None
    if region in rules.no_tax:
        return 0.0
    rate = rules.flat_rates.get(region)
    if rate is None:
        return None
    return gross * rate


def calculate_social_security_tax(gross: float, rules: SocialSecurityRules) -> float:
    """Social Security tax; wages above the wage base are not taxed."""
    taxable = min(gross, rules.wage_base)
    return taxable * rules.rate


def calculate_medicare_tax(gross: float, rules: MedicareRules) -> float:
    """Medicare tax on all wages plus the surtax on wages over the threshold."""
    base = gross * rules.rate
    excess_medicare_wages = max(0, gross - rules.additional_threshold)
    return base + excess_medicare_wages * rules.additional_rate


class TaxCalculator:
    """Computes a full TaxResult from an annual gross figure."""

    def __init__(self, rules: TaxRules, resolver: Optional[RegionResolver] = None):
        self.rules = rules
        self.resolver = resolver or RegionResolver()

    def _state_tax(self, gross: float, location_code: Optional[str], warnings: list) -> tuple:
        try:
            region = self.resolver.resolve(location_code, strict=True)
        except UnresolvedRegion as e:
            logger.warning("%s; assuming no state income tax", e)
            warnings.append(f"{e}; state tax assumed to be 0")
            return None, 0.0

        state_tax = calculate_state_tax(gross, region, self.rules.state)
        if state_tax is None:
            logger.warning("No state tax rate configured for %s; assuming no state income tax", region)
            warnings.append(f"No state tax rate for '{region}'; state tax assumed to be 0")
            return region, 0.0
        return region, state_tax

    def compute_taxes(self, gross_annual: float, location_code: Optional[str] = None) -> TaxResult:
        """Compute federal, state and payroll taxes for an annual gross income.

        Args:
            gross_annual: Annual gross income (>= 0)
            location_code: ZIP code or two-letter region key

        Returns:
            TaxResult with components rounded to the cent

        Raises:
            InvalidInput: If gross_annual is negative or not a finite number
        """
        gross = require_amount(gross_annual, "gross_annual")
        warnings: list = []

        region, state_tax = self._state_tax(gross, location_code, warnings)
        federal_tax = round_currency(calculate_federal_income_tax(gross, self.rules.federal.brackets))
        state_tax = round_currency(state_tax)
        ss_tax = round_currency(calculate_social_security_tax(gross, self.rules.social_security))
        medicare_tax = round_currency(calculate_medicare_tax(gross, self.rules.medicare))

        total_tax = round_currency(federal_tax + state_tax + ss_tax + medicare_tax)
        net_income = round_currency(gross - total_tax)
        effective_rate = total_tax / gross * 100 if gross > 0 else 0.0

        return TaxResult(
            gross_income=gross,
            federal_tax=federal_tax,
            state_tax=state_tax,
            social_security_tax=ss_tax,
            medicare_tax=medicare_tax,
            total_tax=total_tax,
            net_income=net_income,
            effective_rate=effective_rate,
            region=region,
            warnings=warnings,
        )
