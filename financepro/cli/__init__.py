"""FinancePro command-line interface."""
