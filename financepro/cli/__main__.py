"""FinancePro CLI - Command-line interface for income, tax, budget and growth calculations."""

import json
import logging
import os

import click
from rich.console import Console

from financepro import __version__
from financepro.sdk import (
    FinanceEngine,
    FinanceProError,
    analyze,
    emergency_fund_target,
    format_currency,
    get_setting,
    get_tax_year,
)
from financepro.sdk.budget import DEFAULT_EMERGENCY_FUND_LIMITS

from .growth_commands import growth as growth_group
from .renderers.result_renderer import render_budget, render_income
from .rules_commands import rules as rules_group
from .settings_commands import settings as settings_group

# Configure logging based on LOG_LEVEL environment variable
_log_level = os.environ.get("LOG_LEVEL", "WARNING").upper()
logging.basicConfig(
    level=getattr(logging, _log_level, logging.WARNING),
    format="%(asctime)s.%(msecs)03d %(levelname)s: %(message)s",
    datefmt="%H:%M:%S"
)

FREQUENCIES = ["hourly", "daily", "weekly", "biweekly", "semimonthly", "monthly", "annual"]


def build_engine(year=None) -> FinanceEngine:
    """Build an engine for the requested (or configured) tax year."""
    try:
        return FinanceEngine.for_year(get_tax_year(year))
    except FinanceProError as e:
        raise click.ClickException(str(e))


def _echo_json(data) -> None:
    click.echo(json.dumps(data, indent=2))


@click.group()
@click.version_option(version=__version__, prog_name="financepro")
def cli():
    """FinancePro - Personal finance calculations.

    Annualize pay, estimate taxes, analyze a monthly budget and project
    investment growth or loan payments.

    Settings are loaded from (in order):

    \b
    1. FINANCEPRO_CONFIG_PATH environment variable
    2. ~/.config/financepro/settings.json (XDG default)

    Run 'financepro settings show' to see the effective settings.
    """
    pass


cli.add_command(growth_group)
cli.add_command(rules_group)
cli.add_command(settings_group)


@cli.command("income")
@click.argument("amount", type=float)
@click.option("--frequency", "-f", type=click.Choice(FREQUENCIES), default="annual", show_default=True,
              help="What AMOUNT is paid per.")
@click.option("--hours-per-day", type=float, help="Hours worked per day (default 8).")
@click.option("--days-per-week", type=float, help="Days worked per week (default 5).")
@click.option("--weeks-per-year", type=float, help="Weeks worked per year (default 52).")
@click.option("--location", "-l", "location_code", help="ZIP code or two-letter state, e.g. 94105 or CA.")
@click.option("--year", type=int, help="Tax year (default: tax_year setting).")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def income(amount, frequency, hours_per_day, days_per_week, weeks_per_year, location_code, year, output_format):
    """Annualize pay and estimate federal, state and payroll taxes.

    Examples:
        financepro income 25 -f hourly -l 94105
        financepro income 85000 -l TX --format json
    """
    engine = build_engine(year)
    try:
        result = engine.calculate_income({
            "amount": amount,
            "frequency": frequency,
            "hours_per_day": hours_per_day,
            "days_per_week": days_per_week,
            "weeks_per_year": weeks_per_year,
            "location_code": location_code,
        })
    except FinanceProError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        _echo_json(result.model_dump())
    else:
        render_income(Console(), result)


def _parse_expense(value: str) -> tuple:
    """Parse 'Category=Amount' into (category, amount)."""
    if "=" not in value:
        raise click.BadParameter(f"Expected CATEGORY=AMOUNT, got '{value}'")
    name, amount = value.rsplit("=", 1)
    name = name.strip()
    if not name:
        raise click.BadParameter(f"Missing category name in '{value}'")
    try:
        return name, float(amount.replace(",", ""))
    except ValueError:
        raise click.BadParameter(f"Amount for '{name}' is not a number: '{amount}'")


@cli.command("budget")
@click.argument("monthly_income", type=float)
@click.option("--expense", "-e", "expenses", multiple=True,
              help="Monthly expense as CATEGORY=AMOUNT (repeatable, order preserved).")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def budget(monthly_income, expenses, output_format):
    """Analyze a monthly budget against MONTHLY_INCOME.

    Repeating a category adds the amounts together.

    Examples:
        financepro budget 5000 -e Housing=1500 -e Food=500
    """
    parsed = {}
    for value in expenses:
        name, amount = _parse_expense(value)
        parsed[name] = parsed.get(name, 0) + amount

    try:
        analysis = analyze(monthly_income, parsed)
    except FinanceProError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        _echo_json(analysis.model_dump())
    else:
        render_budget(Console(), analysis)


@cli.command("emergency-fund")
@click.argument("monthly_expenses", type=float)
@click.option("--months", type=int, help="Months of expenses to cover (default: emergency_fund_months setting, else 3).")
def emergency_fund(monthly_expenses, months):
    """Target emergency fund for MONTHLY_EXPENSES."""
    if months is None:
        months = get_setting("emergency_fund_months")
    try:
        target = emergency_fund_target(monthly_expenses, months)
    except FinanceProError as e:
        raise click.ClickException(str(e))

    months = months or DEFAULT_EMERGENCY_FUND_LIMITS.min_months
    click.echo(f"Emergency fund target ({months} months): {format_currency(target)}")


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
