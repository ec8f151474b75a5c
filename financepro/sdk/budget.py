"""Monthly budget analysis."""

from typing import Any, Mapping, Optional

from .errors import InvalidInput
from .money import calculate_percentage, require_amount, round_currency
from .schemas import BudgetAnalysis, CategoryBreakdown, EmergencyFundLimits

DEFAULT_EMERGENCY_FUND_LIMITS = EmergencyFundLimits()


def analyze(monthly_income: Any, expenses: Optional[Mapping[str, Any]] = None) -> BudgetAnalysis:
    """Analyze a monthly budget.

    Args:
        monthly_income: Monthly income (0 is allowed)
        expenses: Category name -> monthly amount, in display order

    Returns:
        BudgetAnalysis with categories in the order given

    Raises:
        InvalidInput: If income or any amount is negative or non-numeric
    """
    income = require_amount(monthly_income, "monthly_income")
    amounts = [
        (str(name), require_amount(amount, f"expenses[{name}]"))
        for name, amount in (expenses or {}).items()
    ]

    total_expenses = round_currency(sum(amount for _, amount in amounts))
    remaining = round_currency(income - total_expenses)

    categories = [
        CategoryBreakdown(
            category=name,
            amount=amount,
            percentage=calculate_percentage(amount, total_expenses),
        )
        for name, amount in amounts
    ]

    return BudgetAnalysis(
        monthly_income=income,
        total_expenses=total_expenses,
        remaining_income=remaining,
        savings_rate=calculate_percentage(remaining, income),
        categories=categories,
    )


def emergency_fund_target(
    monthly_expenses: Any,
    months: Optional[int] = None,
    limits: EmergencyFundLimits = DEFAULT_EMERGENCY_FUND_LIMITS,
) -> float:
    """Amount to hold in reserve: monthly expenses times months of cover.

    months defaults to limits.min_months and must lie within the limits.
    """
    expenses = require_amount(monthly_expenses, "monthly_expenses")
    if months is None:
        months = limits.min_months
    if isinstance(months, bool) or not isinstance(months, int):
        raise InvalidInput(f"months must be a whole number, got {months!r}")
    if not limits.min_months <= months <= limits.max_months:
        raise InvalidInput(
            f"months must be between {limits.min_months} and {limits.max_months}, got {months}"
        )
    return round_currency(expenses * months)
