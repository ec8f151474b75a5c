"""Growth CLI commands for FinancePro.

Compound growth projections for investments and amortized payments for
loans and debt payoff planning.
"""

import json

import click
from rich.console import Console

from financepro.sdk import (
    FinanceProError,
    GrowthInput,
    LoanInput,
    amortization_schedule,
    amortized_payment,
    compound_growth,
    format_currency,
    get_setting,
    growth_schedule,
    inflation_adjusted,
)
from financepro.sdk.config import DEFAULT_COMPOUNDING_FREQUENCY
from financepro.sdk.money import coerce

from .renderers.result_renderer import render_amortization, render_growth_schedule


@click.group()
def growth():
    """Project investment growth and loan payments.

    Rates are decimals: 0.07 means 7% per year.
    """
    pass


@growth.command("compound")
@click.argument("principal", type=float)
@click.option("--rate", "-r", type=float, required=True, help="Annual rate as a decimal (0.07 = 7%).")
@click.option("--years", "-y", type=float, required=True, help="Years to grow.")
@click.option("--frequency", type=int, help="Compounding periods per year (default: compounding_frequency setting, else 12).")
@click.option("--schedule", is_flag=True, help="Show the balance at the end of each year.")
@click.option("--inflation", type=float, help="Also show values in today's money at this inflation rate.")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def growth_compound(principal, rate, years, frequency, schedule, inflation, output_format):
    """Future value of PRINCIPAL with compound interest.

    Examples:
        financepro growth compound 10000 --rate 0.07 --years 30
        financepro growth compound 10000 -r 0.07 -y 10 --schedule --inflation 0.03
    """
    if frequency is None:
        frequency = get_setting("compounding_frequency", DEFAULT_COMPOUNDING_FREQUENCY)

    try:
        data = coerce(GrowthInput, {
            "principal": principal,
            "annual_rate": rate,
            "years": years,
            "compounding_frequency": frequency,
        })
        final = compound_growth(data)
        points = growth_schedule(data) if schedule else []
        real_value = inflation_adjusted(final, years, inflation) if inflation is not None else None
    except FinanceProError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        output = {"input": data.model_dump(), "final_balance": final}
        if schedule:
            output["schedule"] = [p.model_dump() for p in points]
        if real_value is not None:
            output["inflation_adjusted"] = real_value
        click.echo(json.dumps(output, indent=2))
        return

    if schedule:
        render_growth_schedule(Console(), points, inflation)
    click.echo(f"Final balance after {years:g} years: {format_currency(final)}")
    if real_value is not None:
        click.echo(f"In today's money ({inflation:.1%} inflation): {format_currency(real_value)}")


@growth.command("loan")
@click.argument("principal", type=float)
@click.option("--rate", "-r", type=float, required=True, help="Annual interest rate as a decimal.")
@click.option("--months", "-m", type=int, required=True, help="Loan term in months.")
@click.option("--schedule", is_flag=True, help="Show the month-by-month amortization schedule.")
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def growth_loan(principal, rate, months, schedule, output_format):
    """Monthly payment for a loan of PRINCIPAL.

    Examples:
        financepro growth loan 25000 --rate 0.065 --months 60
    """
    try:
        loan = coerce(LoanInput, {"principal": principal, "annual_rate": rate, "term_months": months})
        payment = amortized_payment(loan)
        rows = amortization_schedule(loan) if schedule else []
    except FinanceProError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        output = {"input": loan.model_dump(), "monthly_payment": payment}
        if schedule:
            output["schedule"] = [r.model_dump() for r in rows]
        click.echo(json.dumps(output, indent=2))
        return

    if schedule:
        render_amortization(Console(), rows)
        total_interest = sum(r.interest for r in rows)
        click.echo(f"Total interest: {format_currency(total_interest)}")
    click.echo(f"Monthly payment: {format_currency(payment)}")
