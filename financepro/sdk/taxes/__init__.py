"""taxes - Annual tax liability calculation.

Scope:
- Federal income tax via marginal brackets
- Flat-rate state tax with a zero-tax region set
- FICA payroll taxes (Social Security wage base, Medicare surtax)

Constraints:
- Pure calculation - rules are injected, never read from globals
- Year-specific rules loaded from tax_rules/{year}.yaml

Usage:
    from financepro.sdk.taxes import TaxCalculator, load_tax_rules

    calc = TaxCalculator(load_tax_rules(2024))
    result = calc.compute_taxes(60000, "CA")
"""

from .calculator import (
    TaxCalculator,
    calculate_federal_income_tax,
    calculate_state_tax,
    calculate_social_security_tax,
    calculate_medicare_tax,
)
from .regions import RegionResolver
from .rules import get_available_years, load_region_rules, load_tax_rules
from .schemas import TaxBracket, TaxRules

__all__ = [
    "TaxCalculator",
    "calculate_federal_income_tax",
    "calculate_state_tax",
    "calculate_social_security_tax",
    "calculate_medicare_tax",
    "RegionResolver",
    "get_available_years",
    "load_region_rules",
    "load_tax_rules",
    "TaxBracket",
    "TaxRules",
]
