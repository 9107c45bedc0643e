#!/usr/bin/env python3
"""
Record CLI - Add, Update, Delete and List Commands
"""

import click

from ..core.dates import LedgerDate
from ..core.errors import LedgerError
from ..core.models import Asset, Expense, Liability, RecordKind
from .common import format_amount, get_store

KIND_CHOICE = click.Choice([kind.value for kind in RecordKind] + [kind.singular for kind in RecordKind])


def _today() -> str:
    return LedgerDate.today().to_iso_string()


@click.group()
def add() -> None:
    """Add an expense, asset or liability."""
    pass


@add.command("expense")
@click.option("--date", "date_str", default=_today, show_default="today (UTC)", help="Date (YYYY-MM-DD)")
@click.option("--category", required=True, help="Expense category")
@click.option("--amount", required=True, help="Amount spent")
@click.option("--note", default="", help="Optional note")
@click.pass_context
def add_expense(ctx: click.Context, date_str: str, category: str, amount: str, note: str) -> None:
    """Record an expense."""
    record = get_store(ctx).add(RecordKind.EXPENSES, Expense(date=date_str, category=category, amount=amount, note=note))
    click.echo(f"Added expense {record.id}: {category} {format_amount(ctx, amount)} on {date_str}")


@add.command("asset")
@click.option("--name", required=True, help="Asset name")
@click.option("--type", "type_", required=True, help="Asset type (e.g. Bank, Gold, Stocks)")
@click.option("--value", required=True, help="Current value")
@click.pass_context
def add_asset(ctx: click.Context, name: str, type_: str, value: str) -> None:
    """Record an asset."""
    record = get_store(ctx).add(RecordKind.ASSETS, Asset(name=name, type=type_, value=value))
    click.echo(f"Added asset {record.id}: {name} {format_amount(ctx, value)}")


@add.command("liability")
@click.option("--name", required=True, help="Liability name")
@click.option("--type", "type_", required=True, help="Liability type (e.g. Loan, Credit Card)")
@click.option("--amount", required=True, help="Amount owed")
@click.pass_context
def add_liability(ctx: click.Context, name: str, type_: str, amount: str) -> None:
    """Record a liability."""
    record = get_store(ctx).add(RecordKind.LIABILITIES, Liability(name=name, type=type_, amount=amount))
    click.echo(f"Added liability {record.id}: {name} {format_amount(ctx, amount)}")


def _parse_assignments(assignments: tuple[str, ...]) -> dict[str, str]:
    fields: dict[str, str] = {}
    for item in assignments:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"expected FIELD=VALUE, got {item!r}", param_hint="FIELDS")
        fields[name.strip()] = value
    return fields


@click.command()
@click.argument("kind", type=KIND_CHOICE)
@click.argument("record_id")
@click.argument("fields", nargs=-1, required=True)
@click.pass_context
def update(ctx: click.Context, kind: str, record_id: str, fields: tuple[str, ...]) -> None:
    """
    Replace a record with new fields, keeping its id.

    Fields not given are not carried over.

    Examples:
      ledger update expense 1709251200000 date=2024-03-01 category=Food amount=250
    """
    try:
        record = get_store(ctx).update(kind, record_id, _parse_assignments(fields))
    except LedgerError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Updated {record.kind.singular} {record.id}")


@click.command()
@click.argument("kind", type=KIND_CHOICE)
@click.argument("record_id")
@click.option("--yes", "-y", is_flag=True, help="Do not ask for confirmation")
@click.pass_context
def delete(ctx: click.Context, kind: str, record_id: str, yes: bool) -> None:
    """Delete one record. This cannot be undone."""
    store = get_store(ctx)
    try:
        store.get(kind, record_id)
    except LedgerError as e:
        raise click.ClickException(str(e)) from e

    if not yes and not click.confirm("Delete this entry?", default=False):
        click.echo("Aborted.")
        return

    removed = store.delete(kind, record_id)
    click.echo(f"Deleted {removed.kind.singular} {removed.id}")


@click.command("list")
@click.argument("kind", type=KIND_CHOICE)
@click.pass_context
def list_records(ctx: click.Context, kind: str) -> None:
    """List a collection, newest first."""
    records = get_store(ctx).sorted_records(kind)
    if not records:
        click.echo(f"No {RecordKind.parse(kind).value} recorded.")
        return

    for record in records:
        if isinstance(record, Expense):
            note = f"  {record.note}" if record.note else ""
            click.echo(f"{record.id}  {record.date}  {record.category}  {format_amount(ctx, record.amount)}{note}")
        elif isinstance(record, Asset):
            click.echo(f"{record.id}  {record.name}  ({record.type})  {format_amount(ctx, record.value)}")
        else:
            click.echo(f"{record.id}  {record.name}  ({record.type})  {format_amount(ctx, record.amount)}")
