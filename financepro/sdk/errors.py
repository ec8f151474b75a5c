"""Error taxonomy for the calculation engine.

Callers receive either a complete result or one of these exceptions.
"""

from pydantic import ValidationError


class FinanceProError(Exception):
    """Base class for all engine errors."""
    pass


class InvalidInput(FinanceProError, ValueError):
    """Raised for negative, non-numeric or out-of-domain arguments.

    The caller must correct the input and resubmit.
    """
    pass


class UnresolvedRegion(FinanceProError, LookupError):
    """Raised when a location code cannot be mapped to a region key.

    Non-fatal for tax computation: the calculator degrades to zero state tax.
    """

    def __init__(self, location_code):
        self.location_code = location_code
        if location_code is None or not str(location_code).strip():
            super().__init__("No location given")
        else:
            super().__init__(f"Could not resolve location '{location_code}' to a state")


class TaxRulesError(FinanceProError):
    """Raised when a tax rules file is missing or fails validation."""
    pass


def describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into a single readable line.

    Example: "amount: Input should be greater than or equal to 0"
    """
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()))
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts)
