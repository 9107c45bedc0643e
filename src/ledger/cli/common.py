#!/usr/bin/env python3
"""
Shared CLI helpers: store access and money display.
"""

import click

from ..core.config import Config
from ..core.money import Money
from ..store.datastore import RecordStore
from ..store.slots import FileSlotStorage


def open_store(config: Config) -> RecordStore:
    """Create and load the record store described by `config`."""
    storage = FileSlotStorage(config.storage.slot_dir)
    return RecordStore(storage, key=config.storage.storage_key).load()


def get_store(ctx: click.Context) -> RecordStore:
    """The store for this invocation, loaded on first use."""
    obj = ctx.ensure_object(dict)
    if "store" not in obj:
        obj["store"] = open_store(obj["config"])
    return obj["store"]


def format_amount(ctx: click.Context, value: object) -> str:
    """Format an untyped amount using the configured symbol and grouping."""
    display = ctx.ensure_object(dict)["config"].display
    money = value if isinstance(value, Money) else Money.from_value(value)
    return money.format(symbol=display.currency_symbol, grouping=display.grouping)
