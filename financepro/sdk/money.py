"""Currency rounding, percentages and input coercion shared by the engine.

Rounding follows standard currency practice: half away from zero at the
cent (2.345 -> 2.35, -2.345 -> -2.35). Binary floats are converted through
their shortest repr so 1.005 rounds to 1.01 rather than 1.00.
"""

import math
from decimal import Context, Decimal, ROUND_HALF_UP
from typing import Annotated, Any, Type, TypeVar

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from .errors import InvalidInput, describe_validation_error

M = TypeVar("M", bound=BaseModel)

NonNegativeAmount = Annotated[float, Field(ge=0, allow_inf_nan=False)]
_non_negative = TypeAdapter(NonNegativeAmount)

# Enough digits for any finite float plus the fractional places
_ROUNDING_CONTEXT = Context(prec=400)


def round_currency(amount: float, places: int = 2) -> float:
    """Round half away from zero to the given number of decimal places.

    Raises:
        InvalidInput: If amount is infinite or NaN, e.g. after an overflow
    """
    amount = float(amount)
    if not math.isfinite(amount):
        raise InvalidInput(f"Amount out of range: {amount}")
    quantum = Decimal(1).scaleb(-places)
    rounded = Decimal(repr(amount)).quantize(quantum, rounding=ROUND_HALF_UP, context=_ROUNDING_CONTEXT)
    return float(rounded)


def calculate_percentage(value: float, total: float, decimals: int = 2) -> float:
    """Return value as a percentage of total, 0 when total is 0."""
    if total == 0:
        return 0.0
    return round_currency(value / total * 100, decimals)


def format_currency(amount: float) -> str:
    """Format as US dollars, e.g. 1234.5 -> '$1,234.50'; negatives as '-$5.00'."""
    rounded = round_currency(amount)
    sign = "-" if rounded < 0 else ""
    return f"{sign}${abs(rounded):,.2f}"


def require_amount(value: Any, name: str) -> float:
    """Coerce a scalar to a finite, non-negative float or raise InvalidInput."""
    try:
        return _non_negative.validate_python(value)
    except ValidationError as e:
        raise InvalidInput(f"{name}: {describe_validation_error(e)}") from e


def coerce(model: Type[M], data: Any) -> M:
    """Return data as an instance of model, validating mappings.

    Instances pass through untouched. Validation failures are re-raised as
    InvalidInput so pydantic errors never cross the engine boundary.
    """
    if isinstance(data, model):
        return data
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise InvalidInput(describe_validation_error(e)) from e
