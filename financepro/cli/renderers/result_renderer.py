"""Rich renderers for engine results.

Transforms SDK result models into formatted Rich tables.
"""

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from financepro.sdk import format_currency, inflation_adjusted


def _render_warnings(console: Console, warnings) -> None:
    for warning in warnings:
        console.print(Panel(
            f"[yellow]{warning}[/yellow]",
            title="Note",
            border_style="yellow"
        ))


def render_income(console: Console, result) -> None:
    """Render an IncomeResult: income summary plus tax breakdown.

    Args:
        console: Rich Console instance
        result: IncomeResult from FinanceEngine.calculate_income()
    """
    taxes = result.taxes
    _render_warnings(console, taxes.warnings)

    summary = Table(title="Income Summary", box=box.SIMPLE, show_header=False)
    summary.add_column("label", style="dim")
    summary.add_column("value", justify="right")
    summary.add_row("Annual Gross", format_currency(result.annual_gross))
    summary.add_row("Annual Net", format_currency(taxes.net_income))
    summary.add_row("Monthly Net", format_currency(taxes.monthly_net_income))
    summary.add_row("Weekly Net", format_currency(taxes.weekly_net_income))
    if result.pay.frequency != "annual":
        summary.add_row(f"Net Per Period ({result.pay.frequency})", format_currency(result.net_per_period))
    console.print(summary)

    render_taxes(console, taxes)


def render_taxes(console: Console, taxes) -> None:
    """Render a TaxResult breakdown table."""
    region = taxes.region or "none"
    table = Table(title=f"Tax Breakdown (state: {region})", box=box.SIMPLE)
    table.add_column("Tax")
    table.add_column("Amount", justify="right")
    table.add_row("Federal Tax", format_currency(taxes.federal_tax))
    table.add_row("Social Security", format_currency(taxes.social_security_tax))
    table.add_row("Medicare", format_currency(taxes.medicare_tax))
    table.add_row("State Tax", format_currency(taxes.state_tax))
    table.add_row("[bold]Total Tax[/bold]", f"[bold]{format_currency(taxes.total_tax)}[/bold]")
    table.add_row("Effective Rate", f"{taxes.effective_rate:.2f}%")
    console.print(table)


def render_budget(console: Console, analysis) -> None:
    """Render a BudgetAnalysis with one row per category."""
    table = Table(title="Budget Analysis", box=box.SIMPLE)
    table.add_column("Category")
    table.add_column("Amount", justify="right")
    table.add_column("% of Expenses", justify="right")
    for entry in analysis.categories:
        table.add_row(entry.category, format_currency(entry.amount), f"{entry.percentage:.2f}%")
    table.add_row("[bold]Total Expenses[/bold]", f"[bold]{format_currency(analysis.total_expenses)}[/bold]", "")
    console.print(table)

    remaining_style = "green" if analysis.remaining_income >= 0 else "red"
    console.print(
        f"Monthly income: {format_currency(analysis.monthly_income)}  "
        f"Remaining: [{remaining_style}]{format_currency(analysis.remaining_income)}[/{remaining_style}]  "
        f"Savings rate: {analysis.savings_rate:.2f}%"
    )


def render_growth_schedule(console: Console, points, inflation_rate=None) -> None:
    """Render year-end balances, optionally with inflation-adjusted values."""
    table = Table(title="Growth Projection", box=box.SIMPLE)
    table.add_column("Year", justify="right")
    table.add_column("Balance", justify="right")
    table.add_column("Growth", justify="right")
    if inflation_rate is not None:
        table.add_column("Today's Money", justify="right")
    for point in points:
        row = [str(point.year), format_currency(point.balance), format_currency(point.growth)]
        if inflation_rate is not None:
            row.append(format_currency(inflation_adjusted(point.balance, point.year, inflation_rate)))
        table.add_row(*row)
    console.print(table)


def render_amortization(console: Console, rows) -> None:
    """Render a loan amortization schedule."""
    table = Table(title="Amortization Schedule", box=box.SIMPLE)
    for column in ("Month", "Payment", "Principal", "Interest", "Balance"):
        table.add_column(column, justify="right")
    for row in rows:
        table.add_row(
            str(row.month),
            format_currency(row.payment),
            format_currency(row.principal),
            format_currency(row.interest),
            format_currency(row.balance),
        )
    console.print(table)
