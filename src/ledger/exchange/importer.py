#!/usr/bin/env python3
"""
CSV Import

Reads a user-selected CSV file and merges its rows into a collection.

Merge policy: every decoded row is appended under a freshly generated id.
Ids found in the file are discarded, existing records are never replaced,
and rows are not deduplicated by content. Any header set is accepted;
columns the record kind does not know are kept as extra fields.
"""

import asyncio
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path

from ..core.errors import ImportReadError
from ..core.models import Record, RecordKind, record_from_dict
from ..store.datastore import RecordStore
from .codec import decode

logger = logging.getLogger(__name__)


@dataclass
class ImportResult:
    """Outcome of one import."""

    kind: RecordKind
    records: list[Record] = field(default_factory=list)
    source: Path | None = None

    @property
    def count(self) -> int:
        return len(self.records)


def merge_records(store: RecordStore, kind: RecordKind | str, rows: Iterable[Mapping[str, str]]) -> list[Record]:
    """
    Append decoded rows to a collection under fresh ids, then persist once.

    Every row is converted before any is appended, so a row that cannot
    become a record leaves the store untouched.

    Returns:
        The stored records, in file order
    """
    kind = RecordKind.parse(kind)

    converted = []
    for row in rows:
        data = {key: value for key, value in row.items() if key != "id"}
        converted.append(record_from_dict(kind, data))

    stored = [store.append_imported(kind, record) for record in converted]
    if stored:
        store.persist()
    logger.info("Imported %d %s", len(stored), kind.value)
    return stored


def import_csv_text(store: RecordStore, kind: RecordKind | str, text: str) -> ImportResult:
    """Decode CSV text and merge it into `kind`."""
    kind = RecordKind.parse(kind)
    return ImportResult(kind=kind, records=merge_records(store, kind, decode(text)))


async def read_import_file(path: str | Path) -> str:
    """
    Read an import file off the event loop.

    A UTF-8 byte order mark is dropped.

    Raises:
        ImportReadError: If the file is missing, unreadable or not UTF-8
    """
    path = Path(path)
    try:
        return await asyncio.to_thread(path.read_text, encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise ImportReadError(path, str(e)) from e


async def import_csv_file(store: RecordStore, kind: RecordKind | str, path: str | Path) -> ImportResult:
    """
    Read, decode and merge a CSV file.

    Nothing is imported if the read fails.

    Raises:
        ImportReadError: If the file cannot be read
    """
    path = Path(path)
    text = await read_import_file(path)
    result = import_csv_text(store, kind, text)
    result.source = path
    return result
