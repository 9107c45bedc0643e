#!/usr/bin/env python3
"""
Main CLI Entry Point for the Household Ledger

Provides the command-line surface over the record store: entering and editing
records, the dashboard, CSV import/export and reports.
"""

import logging
import os

import click

from ..core.config import get_config, reload_config
from ..core.json_utils import format_json
from .common import get_store


@click.group()
@click.option(
    "--config-env",
    type=click.Choice(["development", "test", "production"]),
    help="Override environment configuration",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def main(ctx: click.Context, config_env: str | None, verbose: bool, debug: bool) -> None:
    """
    Household Ledger - expenses, assets and liabilities in one local document.

    Tracks spending, what you own and what you owe, shows this month's spend
    and your net worth, and moves collections in and out as CSV.
    """
    ctx.ensure_object(dict)

    if config_env:
        os.environ["LEDGER_ENV"] = config_env

    if debug:
        os.environ["LOG_LEVEL"] = "DEBUG"

    config = reload_config() if (config_env or debug) else get_config()

    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
        logging.getLogger("ledger").setLevel(logging.DEBUG)

    ctx.obj["verbose"] = verbose
    ctx.obj["debug"] = debug
    ctx.obj["config"] = config

    if verbose:
        click.echo(f"Environment: {config.environment.value}")
        click.echo(f"Data directory: {config.data_dir}")

    if debug:
        click.echo("Debug logging enabled")


@main.command()
def version() -> None:
    """Show version information."""
    from ledger import __author__, __version__

    click.echo(f"Household Ledger v{__version__}")
    click.echo(f"Author: {__author__}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print the configuration as JSON")
@click.pass_context
def config(ctx: click.Context, as_json: bool) -> None:
    """Show current configuration."""
    config_obj = ctx.obj["config"]

    if as_json:
        click.echo(format_json(config_obj.to_dict()))
        return

    click.echo("Current Configuration:")
    click.echo(f"  Environment: {config_obj.environment.value}")
    click.echo(f"  Data Directory: {config_obj.data_dir}")
    click.echo(f"  Export Directory: {config_obj.export_dir}")
    click.echo(f"  Storage Key: {config_obj.storage.storage_key}")
    click.echo(f"  Currency Symbol: {config_obj.display.currency_symbol}")
    click.echo(f"  Grouping: {config_obj.display.grouping.value}")
    click.echo(f"  Debug Mode: {config_obj.debug}")
    click.echo(f"  Log Level: {config_obj.log_level}")


@main.command()
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def clear(ctx: click.Context, yes: bool) -> None:
    """Wipe all data. This cannot be undone."""
    store = get_store(ctx)
    if not yes and not click.confirm("Wipe all data?", default=False):
        click.echo("Aborted.")
        return

    store.clear()
    click.echo("All data removed.")


# Register command modules
from .records import add, delete, list_records, update  # noqa: E402
from .summary import dashboard, report  # noqa: E402
from .transfer import export, import_  # noqa: E402

main.add_command(add)
main.add_command(update)
main.add_command(delete)
main.add_command(list_records)
main.add_command(dashboard)
main.add_command(report)
main.add_command(export)
main.add_command(import_)


if __name__ == "__main__":
    main()
