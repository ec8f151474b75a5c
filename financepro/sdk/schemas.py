"""Pydantic schemas for engine inputs and results.

All schemas are frozen value objects with extra='forbid', so a typo in a
caller's field name is rejected instead of silently ignored.
"""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field


PayFrequency = Literal[
    "hourly", "daily", "weekly", "biweekly", "semimonthly", "monthly", "annual"
]

_VALUE_OBJECT = ConfigDict(extra="forbid", frozen=True)


# =============================================================================
# Income
# =============================================================================


class FullTimeAssumptions(BaseModel):
    """Standard full-time schedule substituted for absent rate components."""

    model_config = _VALUE_OBJECT

    hours_per_day: float = Field(default=8, gt=0, le=24)
    days_per_week: float = Field(default=5, gt=0, le=7)
    weeks_per_year: float = Field(default=52, gt=0, le=52)


class PayInput(BaseModel):
    """A single pay submission. None or 0 rate components mean 'not given'."""

    model_config = _VALUE_OBJECT

    amount: float = Field(..., ge=0, allow_inf_nan=False, description="Pay amount per frequency unit")
    frequency: PayFrequency = Field(default="annual")
    hours_per_day: Optional[float] = Field(default=None, ge=0, le=24, allow_inf_nan=False)
    days_per_week: Optional[float] = Field(default=None, ge=0, le=7, allow_inf_nan=False)
    weeks_per_year: Optional[float] = Field(default=None, ge=0, le=52, allow_inf_nan=False)
    location_code: Optional[str] = Field(default=None, description="ZIP code or two-letter state key")


# =============================================================================
# Taxes
# =============================================================================


class TaxResult(BaseModel):
    """Annual tax breakdown for one gross income figure."""

    model_config = _VALUE_OBJECT

    gross_income: float
    federal_tax: float
    state_tax: float
    social_security_tax: float
    medicare_tax: float
    total_tax: float
    net_income: float
    effective_rate: float = Field(..., description="Total tax as a percentage of gross")
    region: Optional[str] = Field(default=None, description="Resolved state key, if any")
    warnings: List[str] = Field(default_factory=list)

    @computed_field
    @property
    def monthly_net_income(self) -> float:
        return self.net_income / 12

    @computed_field
    @property
    def weekly_net_income(self) -> float:
        return self.net_income / 52


class IncomeResult(BaseModel):
    """Annualized gross pay, the taxes on it, and net pay per submitted period."""

    model_config = _VALUE_OBJECT

    pay: PayInput
    annual_gross: float
    taxes: TaxResult
    net_per_period: float


# =============================================================================
# Budget
# =============================================================================


class CategoryBreakdown(BaseModel):
    """One expense category and its share of total expenses."""

    model_config = _VALUE_OBJECT

    category: str
    amount: float
    percentage: float


class BudgetAnalysis(BaseModel):
    """Monthly budget totals. Categories keep the caller's order."""

    model_config = _VALUE_OBJECT

    monthly_income: float = 0
    total_expenses: float
    remaining_income: float
    savings_rate: float
    categories: List[CategoryBreakdown] = Field(default_factory=list)

    def category(self, name: str) -> Optional[CategoryBreakdown]:
        """Look up a category by name."""
        for entry in self.categories:
            if entry.category == name:
                return entry
        return None


class EmergencyFundLimits(BaseModel):
    """Bounds on the number of months an emergency fund should cover."""

    model_config = _VALUE_OBJECT

    min_months: int = Field(default=3, ge=1)
    max_months: int = Field(default=12, ge=1)


# =============================================================================
# Growth and loans
# =============================================================================


class GrowthInput(BaseModel):
    """Compound interest input. annual_rate is a decimal (0.07 for 7%)."""

    model_config = _VALUE_OBJECT

    principal: float = Field(..., ge=0, allow_inf_nan=False)
    annual_rate: float = Field(..., gt=-1, allow_inf_nan=False)
    years: float = Field(..., ge=0, le=100, allow_inf_nan=False)
    compounding_frequency: int = Field(default=12, ge=1)


class LoanInput(BaseModel):
    """Fully amortizing loan with monthly payments."""

    model_config = _VALUE_OBJECT

    principal: float = Field(..., gt=0, allow_inf_nan=False)
    annual_rate: float = Field(..., ge=0, allow_inf_nan=False)
    term_months: int = Field(..., gt=0)


class GrowthPoint(BaseModel):
    """Balance at the end of a projection year."""

    model_config = _VALUE_OBJECT

    year: int
    balance: float
    growth: float = Field(..., description="Balance minus starting principal")


class AmortizationRow(BaseModel):
    """One monthly payment split into interest and principal."""

    model_config = _VALUE_OBJECT

    month: int
    payment: float
    principal: float
    interest: float
    balance: float
