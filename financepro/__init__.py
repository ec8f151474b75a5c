"""FinancePro - personal finance calculation engine."""

__version__ = "2.0.0"
