#!/usr/bin/env python3
"""
Transfer CLI - CSV Export and Import Commands
"""

import asyncio
from pathlib import Path

import click

from ..core.errors import ImportReadError
from ..exchange.exporter import export_collection
from ..exchange.importer import import_csv_file
from .common import get_store
from .records import KIND_CHOICE


@click.command()
@click.argument("kind", type=KIND_CHOICE)
@click.option("--output-dir", type=click.Path(file_okay=False), help="Override export directory")
@click.option("--no-date", is_flag=True, help="Name the file {collection}.csv instead of {collection}_{date}.csv")
@click.pass_context
def export(ctx: click.Context, kind: str, output_dir: str | None, no_date: bool) -> None:
    """Export a collection to CSV."""
    directory = Path(output_dir) if output_dir else ctx.obj["config"].export_dir
    path = export_collection(get_store(ctx), kind, directory, dated=not no_date)
    if path is None:
        click.echo("No data to export.")
        return

    click.echo(f"Exported to {path}")


@click.command("import")
@click.argument("kind", type=KIND_CHOICE)
@click.argument("file", type=click.Path(dir_okay=False))
@click.pass_context
def import_(ctx: click.Context, kind: str, file: str) -> None:
    """
    Import CSV rows into a collection.

    Rows are appended under new ids; nothing already stored is replaced.
    """
    try:
        result = asyncio.run(import_csv_file(get_store(ctx), kind, file))
    except ImportReadError as e:
        raise click.ClickException(str(e)) from e

    click.echo(f"Import successful: {result.count} {result.kind.value} added.")
