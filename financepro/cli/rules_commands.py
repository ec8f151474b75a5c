"""Tax rules CLI commands for FinancePro.

Inspects the tax_rules/<year>.yaml files the engine is configured from.
"""

import json

import click
from rich import box
from rich.console import Console
from rich.table import Table

from financepro.sdk import (
    FinanceProError,
    format_currency,
    get_available_years,
    get_tax_rules_dir,
    get_tax_year,
    load_tax_rules,
)


@click.group()
def rules():
    """Inspect tax rules (brackets, state rates, payroll limits)."""
    pass


@rules.command("years")
def rules_years():
    """List tax years with a rules file."""
    years = get_available_years()
    if not years:
        click.echo(f"No tax rules found in {get_tax_rules_dir()}")
        return
    default_year = get_tax_year()
    for year in years:
        marker = " (default)" if year == default_year else ""
        click.echo(f"{year}{marker}")


@rules.command("show")
@click.argument("year", type=int, required=False)
@click.option("--format", "output_format", type=click.Choice(["text", "json"]), default="text",
              help="Output format (default: text)")
def rules_show(year, output_format):
    """Show the tax rules for YEAR (default: tax_year setting)."""
    try:
        tax_rules = load_tax_rules(get_tax_year(year))
    except FinanceProError as e:
        raise click.ClickException(str(e))

    if output_format == "json":
        click.echo(json.dumps(tax_rules.model_dump(mode="json"), indent=2))
        return

    console = Console()
    brackets = Table(title=f"{tax_rules.year} Federal Brackets", box=box.SIMPLE)
    brackets.add_column("Over", justify="right")
    brackets.add_column("Up To", justify="right")
    brackets.add_column("Rate", justify="right")
    for bracket in tax_rules.federal.brackets:
        up_to = format_currency(bracket.up_to) if bracket.up_to is not None else "-"
        brackets.add_row(format_currency(bracket.over), up_to, f"{bracket.rate:.1%}")
    console.print(brackets)

    ss = tax_rules.social_security
    medicare = tax_rules.medicare
    click.echo(f"Social Security: {ss.rate:.2%} up to {format_currency(ss.wage_base)}")
    click.echo(
        f"Medicare: {medicare.rate:.2%}, plus {medicare.additional_rate:.2%} "
        f"over {format_currency(medicare.additional_threshold)}"
    )
    click.echo(f"States with a flat rate: {len(tax_rules.state.flat_rates)}")
    click.echo(f"No income tax: {', '.join(sorted(tax_rules.state.no_tax))}")
