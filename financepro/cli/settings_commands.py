"""Settings CLI commands for FinancePro.

Manages settings.json - default tax year, rules directory, preferences.
"""

import click

from financepro.sdk import (
    KNOWN_SETTINGS,
    load_settings,
    get_settings_path,
    get_tax_rules_dir,
    get_tax_year,
    set_setting,
    unset_setting,
)


@click.group()
def settings():
    """Manage settings (settings.json).

    Available settings:
    - tax_year: default tax year for calculations
    - tax_rules_dir: directory with custom <year>.yaml rules files
    - compounding_frequency: default compounding periods per year
    - emergency_fund_months: default months of expenses to reserve
    """
    pass


@settings.command("show")
def settings_show():
    """Show current settings and their values."""
    settings_path = get_settings_path()
    current = load_settings()

    click.echo(f"Settings file: {settings_path}")
    click.echo(f"File exists: {settings_path.exists()}")
    click.echo()

    if not current:
        click.echo("No settings configured (using defaults).")
    else:
        click.echo("Current settings:")
        for key, value in current.items():
            click.echo(f"  {key}: {value}")

    click.echo()
    click.echo("Effective values:")
    click.echo(f"  tax_year: {get_tax_year()}")
    click.echo(f"  tax_rules_dir: {get_tax_rules_dir()}")


@settings.command("set")
@click.argument("key", type=click.Choice(sorted(KNOWN_SETTINGS)))
@click.argument("value")
def settings_set(key, value):
    """Set KEY to VALUE.

    Examples:
        financepro settings set tax_year 2025
        financepro settings set tax_rules_dir ~/finance/tax_rules
    """
    try:
        path = set_setting(key, value)
    except ValueError as e:
        raise click.ClickException(f"Invalid value for {key}: {e}")
    click.echo(f"Set {key}: {value}")
    click.echo(f"Saved to: {path}")


@settings.command("unset")
@click.argument("key")
def settings_unset(key):
    """Remove KEY, reverting to its default."""
    if unset_setting(key):
        click.echo(f"Cleared {key} setting.")
    else:
        click.echo(f"{key} was not set.")
