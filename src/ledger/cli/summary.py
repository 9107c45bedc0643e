#!/usr/bin/env python3
"""
Summary CLI - Dashboard and Expense Report Commands
"""

import json
from datetime import date

import click

from ..analysis.dashboard import compute_dashboard
from ..analysis.report import build_expense_report
from ..core.dates import LedgerDate
from ..core.models import RecordKind
from .common import format_amount, get_store


def _parse_as_of(value: str | None) -> LedgerDate:
    if not value:
        return LedgerDate.today()
    try:
        return LedgerDate(date=date.fromisoformat(value))
    except ValueError as e:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {value!r}", param_hint="--as-of") from e


@click.command()
@click.option("--as-of", help="Reference date (YYYY-MM-DD) for the monthly total, defaults to today (UTC)")
@click.option("--json", "as_json", is_flag=True, help="Print the totals as JSON")
@click.pass_context
def dashboard(ctx: click.Context, as_of: str | None, as_json: bool) -> None:
    """Show total assets, liabilities, this month's expenses and net worth."""
    summary = compute_dashboard(get_store(ctx).snapshot(), _parse_as_of(as_of))

    if as_json:
        click.echo(json.dumps(summary.to_dict(), indent=2))
        return

    click.echo(f"Dashboard for {summary.as_of.month_key()}")
    click.echo(f"  Total Assets:      {format_amount(ctx, summary.total_assets)}")
    click.echo(f"  Total Liabilities: {format_amount(ctx, summary.total_liabilities)}")
    click.echo(f"  Monthly Expenses:  {format_amount(ctx, summary.monthly_expenses)}")
    click.echo(f"Net Worth: {format_amount(ctx, summary.net_worth)}")


@click.command()
@click.option("--start", help="First month (YYYY-MM)")
@click.option("--end", help="Last month (YYYY-MM)")
@click.pass_context
def report(ctx: click.Context, start: str | None, end: str | None) -> None:
    """
    Spending per month and category.

    Examples:
      ledger report
      ledger report --start 2024-01 --end 2024-06
    """
    table = build_expense_report(get_store(ctx).records(RecordKind.EXPENSES), start=start, end=end)
    if table.empty:
        click.echo("No expenses in range.")
        return

    for month, row in table.iterrows():
        click.echo(f"{month}: {format_amount(ctx, row.sum())}")
        for category, amount in row.items():
            if amount:
                click.echo(f"    {category}: {format_amount(ctx, amount)}")
