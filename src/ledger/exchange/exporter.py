#!/usr/bin/env python3
"""
CSV Export

Writes one collection to `{collection}_{YYYY-MM-DD}.csv` (or
`{collection}.csv` when undated).
"""

import logging
from datetime import date
from pathlib import Path

from ..core.dates import LedgerDate
from ..core.json_utils import write_text_atomic
from ..core.models import RecordKind
from ..store.datastore import RecordStore
from .codec import encode

logger = logging.getLogger(__name__)


def export_filename(kind: RecordKind | str, on: date | None = None, dated: bool = True) -> str:
    """
    Build the export filename for a collection.

    Examples:
        export_filename('expenses', date(2024, 3, 1)) -> 'expenses_2024-03-01.csv'
        export_filename('assets', dated=False) -> 'assets.csv'
    """
    kind = RecordKind.parse(kind)
    if not dated:
        return f"{kind.value}.csv"
    on = on or LedgerDate.today().date
    return f"{kind.value}_{on.isoformat()}.csv"


def export_collection(
    store: RecordStore,
    kind: RecordKind | str,
    directory: str | Path,
    on: date | None = None,
    dated: bool = True,
) -> Path | None:
    """
    Export a collection as CSV.

    Returns:
        Path of the written file, or None when the collection is empty
        (nothing to export; no file is written)
    """
    kind = RecordKind.parse(kind)
    text = encode(store.records(kind))
    if not text:
        logger.info("No %s to export", kind.value)
        return None

    path = Path(directory) / export_filename(kind, on=on, dated=dated)
    write_text_atomic(path, text + "\n")
    logger.info("Exported %d %s to %s", len(store.records(kind)), kind.value, path)
    return path
