"""Pydantic schemas for tax rules validation.

These schemas validate the tax_rules/*.yaml files and provide typed access
to tax parameters like the SS wage base, Medicare surtax threshold and
federal brackets. Rules are frozen once loaded.
"""

from typing import Dict, FrozenSet, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator


class TaxBracket(BaseModel):
    """Single marginal bracket: income in (over, up_to] is taxed at rate."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    over: float = Field(..., ge=0, description="Lower bound")
    up_to: Optional[float] = Field(default=None, description="Upper bound (None for the top bracket)")
    rate: float = Field(..., ge=0, le=1, description="Marginal rate as decimal")

    @model_validator(mode="after")
    def check_bounds(self) -> "TaxBracket":
        if self.up_to is not None and self.up_to <= self.over:
            raise ValueError(f"up_to ({self.up_to}) must be greater than over ({self.over})")
        return self

    @property
    def upper_bound(self) -> float:
        return float("inf") if self.up_to is None else self.up_to


class FederalRules(BaseModel):
    """Federal income tax brackets."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    brackets: Tuple[TaxBracket, ...]

    @field_validator("brackets")
    @classmethod
    def check_contiguous(cls, brackets):
        """Brackets must be ascending, contiguous and cover [0, inf)."""
        if not brackets:
            raise ValueError("at least one bracket is required")
        if brackets[0].over != 0:
            raise ValueError("first bracket must start at 0")
        for prev, cur in zip(brackets, brackets[1:]):
            if prev.up_to is None:
                raise ValueError("only the last bracket may be unbounded")
            if cur.over != prev.up_to:
                raise ValueError(f"gap or overlap between {prev.up_to} and {cur.over}")
        if brackets[-1].up_to is not None:
            raise ValueError("last bracket must be unbounded (omit up_to)")
        return brackets


class StateRules(BaseModel):
    """Flat state income tax rates keyed by two-letter region."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    flat_rates: Dict[str, float] = Field(default_factory=dict)
    no_tax: FrozenSet[str] = Field(default_factory=frozenset)

    @field_validator("flat_rates")
    @classmethod
    def check_rates(cls, rates):
        for region, rate in rates.items():
            if not 0 <= rate <= 1:
                raise ValueError(f"rate for {region} must be between 0 and 1")
        return {region.upper(): rate for region, rate in rates.items()}

    @field_validator("no_tax")
    @classmethod
    def upper_no_tax(cls, regions):
        return frozenset(region.upper() for region in regions)

    @model_validator(mode="after")
    def check_disjoint(self) -> "StateRules":
        overlap = self.no_tax & set(self.flat_rates)
        if overlap:
            raise ValueError(f"regions listed as both taxed and untaxed: {sorted(overlap)}")
        return self


class SocialSecurityRules(BaseModel):
    """Social Security tax rules."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    wage_base: float = Field(..., gt=0, description="SS wage base (max taxable)")
    rate: float = Field(..., ge=0, le=1, description="SS tax rate (employee portion)")


class MedicareRules(BaseModel):
    """Medicare tax rules, including the Additional Medicare Tax surtax."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    rate: float = Field(..., ge=0, le=1)
    additional_rate: float = Field(default=0.009, ge=0, le=1)
    additional_threshold: float = Field(..., ge=0)


class ZipPrefixRange(BaseModel):
    """Three-digit ZIP prefixes first..last (inclusive) belong to region."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    first: int = Field(..., ge=0, le=999)
    last: int = Field(..., ge=0, le=999)
    region: str = Field(..., min_length=2, max_length=2)


class RegionRules(BaseModel):
    """Location code resolution data (tax_rules/regions.yaml)."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    zip_prefixes: Tuple[ZipPrefixRange, ...] = ()


class TaxRules(BaseModel):
    """Complete tax rules for a year."""
    model_config = ConfigDict(extra="ignore", frozen=True)  # Allow unknown fields for forward compat

    year: int
    federal: FederalRules
    state: StateRules
    social_security: SocialSecurityRules
    medicare: MedicareRules
