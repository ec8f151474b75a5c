"""FinancePro MCP Server - FastMCP tools over the calculation engine.

Lets an assistant compute income, budget and growth figures for the user
instead of estimating them. Every tool returns a JSON-able dict, or
{"error": ...} when the input is rejected.
"""

import logging
from typing import Any

from mcp.server.fastmcp import FastMCP
from pydantic import Field

from financepro.sdk import (
    FinanceEngine,
    FinanceProError,
    amortization_schedule,
    amortized_payment,
    analyze,
    compound_growth,
    get_tax_year,
    growth_schedule,
    round_currency,
)

logger = logging.getLogger(__name__)

# Initialize FastMCP server
mcp = FastMCP("financepro")


def _engine(year: int | None) -> FinanceEngine:
    return FinanceEngine.for_year(get_tax_year(year))


# --- Tools ---

@mcp.tool()
async def calculate_income(
    amount: float = Field(..., description="Pay amount per frequency unit"),
    frequency: str = Field(default="annual", description="hourly, daily, weekly, biweekly, semimonthly, monthly or annual"),
    location_code: str | None = Field(default=None, description="ZIP code or two-letter state (e.g. '94105', 'CA')"),
    hours_per_day: float | None = Field(default=None, description="Hours per day (default 8)"),
    days_per_week: float | None = Field(default=None, description="Days per week (default 5)"),
    weeks_per_year: float | None = Field(default=None, description="Weeks per year (default 52)"),
    year: int | None = Field(default=None, description="Tax year (default: configured year)"),
) -> dict[str, Any]:
    """Annualize pay and estimate federal, state, Social Security and Medicare taxes."""
    try:
        result = _engine(year).calculate_income({
            "amount": amount,
            "frequency": frequency,
            "location_code": location_code,
            "hours_per_day": hours_per_day,
            "days_per_week": days_per_week,
            "weeks_per_year": weeks_per_year,
        })
        return result.model_dump()
    except FinanceProError as e:
        logger.info("calculate_income rejected: %s", e)
        return {"error": str(e)}


@mcp.tool()
async def analyze_budget(
    monthly_income: float = Field(..., description="Monthly income"),
    expenses: dict[str, float] = Field(default_factory=dict, description="Category name -> monthly amount"),
) -> dict[str, Any]:
    """Total a monthly budget and compute the savings rate and category shares."""
    try:
        return analyze(monthly_income, expenses).model_dump()
    except FinanceProError as e:
        logger.info("analyze_budget rejected: %s", e)
        return {"error": str(e)}


@mcp.tool()
async def project_growth(
    principal: float = Field(..., description="Starting balance"),
    annual_rate: float = Field(..., description="Annual return as a decimal (0.07 = 7%)"),
    years: float = Field(..., description="Years to grow"),
    compounding_frequency: int = Field(default=12, description="Compounding periods per year"),
) -> dict[str, Any]:
    """Project compound growth, with the balance at each year end."""
    data = {
        "principal": principal,
        "annual_rate": annual_rate,
        "years": years,
        "compounding_frequency": compounding_frequency,
    }
    try:
        return {
            "final_balance": compound_growth(data),
            "schedule": [p.model_dump() for p in growth_schedule(data)],
        }
    except FinanceProError as e:
        logger.info("project_growth rejected: %s", e)
        return {"error": str(e)}


@mcp.tool()
async def loan_payment(
    principal: float = Field(..., description="Loan amount"),
    annual_rate: float = Field(..., description="Annual interest rate as a decimal"),
    term_months: int = Field(..., description="Term in months"),
) -> dict[str, Any]:
    """Monthly payment and total interest for a fully amortizing loan."""
    data = {"principal": principal, "annual_rate": annual_rate, "term_months": term_months}
    try:
        rows = amortization_schedule(data)
        return {
            "monthly_payment": amortized_payment(data),
            "total_interest": round_currency(sum(r.interest for r in rows)),
            "months": len(rows),
        }
    except FinanceProError as e:
        logger.info("loan_payment rejected: %s", e)
        return {"error": str(e)}


def run_server():
    """Entry point for the MCP server (stdio transport)."""
    mcp.run()


if __name__ == "__main__":
    run_server()
