"""FinancePro SDK - Core calculation engine for pay, tax, budget and growth."""

from .config import (
    get_config_dir,
    get_settings_path,
    load_settings,
    save_settings,
    get_setting,
    set_setting,
    unset_setting,
    get_tax_year,
    get_tax_rules_dir,
    KNOWN_SETTINGS,
)

from .errors import (
    FinanceProError,
    InvalidInput,
    UnresolvedRegion,
    TaxRulesError,
)

from .schemas import (
    PayInput,
    FullTimeAssumptions,
    TaxResult,
    IncomeResult,
    CategoryBreakdown,
    BudgetAnalysis,
    EmergencyFundLimits,
    GrowthInput,
    LoanInput,
    GrowthPoint,
    AmortizationRow,
)

from .money import (
    round_currency,
    calculate_percentage,
    format_currency,
)

from .income import annualize, per_period, PAY_PERIODS
from .budget import analyze, emergency_fund_target
from .growth import (
    compound_growth,
    growth_schedule,
    inflation_adjusted,
    amortized_payment,
    amortization_schedule,
)
from .engine import FinanceEngine, compute_taxes

from .taxes import (
    TaxCalculator,
    TaxRules,
    RegionResolver,
    load_tax_rules,
    load_region_rules,
    get_available_years,
)

__all__ = [
    # Config
    "get_config_dir",
    "get_settings_path",
    "load_settings",
    "save_settings",
    "get_setting",
    "set_setting",
    "unset_setting",
    "get_tax_year",
    "get_tax_rules_dir",
    "KNOWN_SETTINGS",
    # Errors
    "FinanceProError",
    "InvalidInput",
    "UnresolvedRegion",
    "TaxRulesError",
    # Schemas
    "PayInput",
    "FullTimeAssumptions",
    "TaxResult",
    "IncomeResult",
    "CategoryBreakdown",
    "BudgetAnalysis",
    "EmergencyFundLimits",
    "GrowthInput",
    "LoanInput",
    "GrowthPoint",
    "AmortizationRow",
    # Money helpers
    "round_currency",
    "calculate_percentage",
    "format_currency",
    # Income
    "annualize",
    "per_period",
    "PAY_PERIODS",
    # Budget
    "analyze",
    "emergency_fund_target",
    # Growth
    "compound_growth",
    "growth_schedule",
    "inflation_adjusted",
    "amortized_payment",
    "amortization_schedule",
    # Engine
    "FinanceEngine",
    "compute_taxes",
    # Tax rules
    "TaxCalculator",
    "TaxRules",
    "RegionResolver",
    "load_tax_rules",
    "load_region_rules",
    "get_available_years",
]
