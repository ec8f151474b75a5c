"""Compound growth and loan amortization.

Shared by the investment and debt planning views. Rates are decimals
(0.07 for 7%). Results are rounded to the cent, half away from zero.
"""

from typing import Any, Mapping, Union

from .errors import InvalidInput
from .money import coerce, require_amount, round_currency
from .schemas import AmortizationRow, GrowthInput, GrowthPoint, LoanInput


def _compound_factor(rate: float, periods: float) -> float:
    """(1 + rate) ** periods, with float overflow reported as InvalidInput."""
    try:
        return (1 + rate) ** periods
    except OverflowError as e:
        raise InvalidInput(f"Projection out of range: rate {rate} over {periods:g} periods") from e


def _future_value(principal: float, rate: float, frequency: int, years: float) -> float:
    if rate == 0 or years == 0:
        return principal
    return principal * _compound_factor(rate / frequency, frequency * years)


def compound_growth(growth: Union[GrowthInput, Mapping[str, Any]]) -> float:
    """Future value of a principal compounded frequency times per year.

    Raises:
        InvalidInput: If any field is out of range
    """
    growth = coerce(GrowthInput, growth)
    value = _future_value(
        growth.principal, growth.annual_rate, growth.compounding_frequency, growth.years
    )
    return round_currency(value)


def growth_schedule(growth: Union[GrowthInput, Mapping[str, Any]]) -> list[GrowthPoint]:
    """Balance at the end of each whole year of the projection.

    A fractional final year is included as the last point, labelled with the
    next whole year.
    """
    growth = coerce(GrowthInput, growth)
    points = []
    year = 0
    while year < growth.years:
        year_end = min(year + 1, growth.years)
        balance = round_currency(_future_value(
            growth.principal, growth.annual_rate, growth.compounding_frequency, year_end
        ))
        year += 1
        points.append(GrowthPoint(
            year=year,
            balance=balance,
            growth=round_currency(balance - growth.principal),
        ))
    return points


def inflation_adjusted(amount: Any, years: Any, inflation_rate: float) -> float:
    """Express a future amount in today's money.

    Example: inflation_adjusted(1000, 1, 0.03) -> 970.87
    """
    amount = require_amount(amount, "amount")
    years = require_amount(years, "years")
    if inflation_rate <= -1:
        raise InvalidInput(f"inflation_rate must be greater than -1, got {inflation_rate}")
    factor = _compound_factor(inflation_rate, years)
    if factor == 0:
        raise InvalidInput(f"Deflation of {inflation_rate} over {years:g} years is out of range")
    return round_currency(amount / factor)


def _raw_payment(loan: LoanInput) -> float:
    if loan.annual_rate == 0:
        return loan.principal / loan.term_months
    r = loan.annual_rate / 12
    # A rate too small to register against 1.0 amortizes interest-free
    discount = 1 - _compound_factor(r, -loan.term_months)
    if discount == 0:
        return loan.principal / loan.term_months
    return loan.principal * r / discount


def amortized_payment(loan: Union[LoanInput, Mapping[str, Any]]) -> float:
    """Fixed monthly payment that repays the loan over its term.

    Raises:
        InvalidInput: If principal <= 0, term_months <= 0 or the rate is negative
    """
    loan = coerce(LoanInput, loan)
    return round_currency(_raw_payment(loan))


def amortization_schedule(loan: Union[LoanInput, Mapping[str, Any]]) -> list[AmortizationRow]:
    """Month-by-month split of each payment into interest and principal.

    Interest is rounded to the cent each month. The final payment is
    adjusted so the balance ends at exactly zero.
    """
    loan = coerce(LoanInput, loan)
    payment = round_currency(_raw_payment(loan))
    monthly_rate = loan.annual_rate / 12
    balance = round_currency(loan.principal)

    rows = []
    for month in range(1, loan.term_months + 1):
        interest = round_currency(balance * monthly_rate)
        if month == loan.term_months:
            principal_paid = balance
        else:
            principal_paid = min(balance, round_currency(payment - interest))
        balance = round_currency(balance - principal_paid)
        rows.append(AmortizationRow(
            month=month,
            payment=round_currency(principal_paid + interest),
            principal=principal_paid,
            interest=interest,
            balance=balance,
        ))
    return rows
