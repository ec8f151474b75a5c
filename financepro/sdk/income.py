"""Pay annualization.

Converts an amount paid per hour, day, week or pay period into an annual
gross figure. Schedule-driven frequencies (hourly, daily, weekly) use the
submitted schedule, falling back to a standard full-time schedule for any
component that is missing or zero.
"""

from typing import Any, Mapping, Optional, Union

from .errors import InvalidInput
from .money import coerce, require_amount
from .schemas import FullTimeAssumptions, PayInput

# Fixed pay periods per year
PAY_PERIODS = {
    "biweekly": 26,
    "semimonthly": 24,
    "monthly": 12,
    "annual": 1,
}

DEFAULT_ASSUMPTIONS = FullTimeAssumptions()


def _or_default(value: Optional[float], default: float) -> float:
    return value if value else default


def schedule_for(pay: PayInput, assumptions: FullTimeAssumptions = DEFAULT_ASSUMPTIONS) -> FullTimeAssumptions:
    """The submitted schedule, with absent or zero components from assumptions."""
    return FullTimeAssumptions(
        hours_per_day=_or_default(pay.hours_per_day, assumptions.hours_per_day),
        days_per_week=_or_default(pay.days_per_week, assumptions.days_per_week),
        weeks_per_year=_or_default(pay.weeks_per_year, assumptions.weeks_per_year),
    )


def annualize(
    pay: Union[PayInput, Mapping[str, Any]],
    assumptions: FullTimeAssumptions = DEFAULT_ASSUMPTIONS,
) -> float:
    """Annualize a pay amount.

    Args:
        pay: PayInput or a mapping with the same fields
        assumptions: Schedule used for absent hours/days/weeks

    Returns:
        Annual gross pay

    Raises:
        InvalidInput: For negative or non-numeric amounts, an unknown
            frequency, or schedule values out of range
    """
    pay = coerce(PayInput, pay)
    return pay.amount * periods_per_year(pay.frequency, schedule_for(pay, assumptions))


def periods_per_year(frequency: str, assumptions: FullTimeAssumptions = DEFAULT_ASSUMPTIONS) -> float:
    """Number of periods of the given frequency in a year."""
    if frequency == "hourly":
        return assumptions.hours_per_day * assumptions.days_per_week * assumptions.weeks_per_year
    if frequency == "daily":
        return assumptions.days_per_week * assumptions.weeks_per_year
    if frequency == "weekly":
        return assumptions.weeks_per_year
    if frequency not in PAY_PERIODS:
        raise InvalidInput(f"Unknown pay frequency '{frequency}'")
    return PAY_PERIODS[frequency]


def per_period(
    annual: float,
    frequency: str,
    assumptions: FullTimeAssumptions = DEFAULT_ASSUMPTIONS,
) -> float:
    """Split an annual amount back into a per-period amount.

    Example: per_period(52000, "weekly") -> 1000.0
    """
    annual = require_amount(annual, "annual")
    return annual / periods_per_year(frequency, assumptions)
