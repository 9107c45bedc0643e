#!/usr/bin/env python3
"""
Record Store

Holds the aggregate document (expenses, assets, liabilities) in memory and
persists it wholesale to one named slot after every mutation.
"""

import json
import logging
from dataclasses import dataclass
from datetime import datetime
from types import MappingProxyType
from typing import Any, Mapping

from ..core.config import DEFAULT_STORAGE_KEY
from ..core.errors import RecordNotFoundError, RecordValidationError
from ..core.json_utils import format_json
from ..core.models import BaseRecord, Record, RecordKind, coerce_record, record_from_dict
from .ids import IdGenerator, id_sort_key
from .slots import SlotStorage

logger = logging.getLogger(__name__)


def empty_document() -> dict[RecordKind, list[Record]]:
    return {kind: [] for kind in RecordKind}


@dataclass(frozen=True)
class StoreSnapshot:
    """Read-only view of the three collections at one point in time."""

    expenses: tuple[Record, ...]
    assets: tuple[Record, ...]
    liabilities: tuple[Record, ...]

    def records(self, kind: RecordKind | str) -> tuple[Record, ...]:
        return getattr(self, RecordKind.parse(kind).value)


class RecordStore:
    """
    In-memory aggregate document backed by a persisted slot.

    Mutations persist immediately when `autosave` is on (the default). With
    `autosave=False` the caller batches changes and calls `persist()` itself.
    """

    def __init__(
        self,
        storage: SlotStorage,
        key: str = DEFAULT_STORAGE_KEY,
        autosave: bool = True,
        id_generator: IdGenerator | None = None,
    ):
        """
        Initialize the record store.

        Args:
            storage: Slot backend holding the serialized document
            key: Slot name
            autosave: Persist after every mutation
            id_generator: Source of fresh record ids
        """
        self.storage = storage
        self.key = key
        self.autosave = autosave
        self.ids = id_generator or IdGenerator()
        self._collections = empty_document()

    # --- loading and persistence ---

    def load(self) -> "RecordStore":
        """
        Read the persisted document into memory.

        An absent slot gives three empty collections. A malformed slot
        (undecodable bytes, invalid or too deeply nested JSON, wrong shape,
        records that are not objects) is treated as absent: it is logged and
        never raised.
        """
        self._collections = empty_document()

        try:
            text = self.storage.read(self.key)
            if text is None:
                logger.debug("Slot %s is empty, starting with an empty document", self.key)
                return self
            self._collections = self._parse_document(text)
        except (ValueError, TypeError, RecursionError, RecordValidationError) as e:
            logger.warning("Ignoring malformed document in slot %s: %s", self.key, e)
            self._collections = empty_document()

        return self

    @staticmethod
    def _parse_document(text: str) -> dict[RecordKind, list[Record]]:
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError(f"document must be an object, got {type(data).__name__}")

        collections = empty_document()
        for kind in RecordKind:
            items = data.get(kind.value, [])
            if not isinstance(items, list):
                raise ValueError(f"{kind.value} must be a list, got {type(items).__name__}")
            collections[kind] = [record_from_dict(kind, item) for item in items]
        return collections

    def to_document(self) -> dict[str, list[dict[str, Any]]]:
        """The aggregate document as plain JSON-ready data."""
        return {kind.value: [record.to_dict() for record in self._collections[kind]] for kind in RecordKind}

    def persist(self) -> None:
        """Serialize the whole document and overwrite the slot."""
        self.storage.write(self.key, format_json(self.to_document()))
        logger.debug("Persisted %s (%d records)", self.key, self.item_count())

    def clear(self) -> None:
        """Reset to three empty collections and remove the slot."""
        self._collections = empty_document()
        self.storage.remove(self.key)
        logger.info("Cleared all records from %s", self.key)

    def _changed(self) -> None:
        if self.autosave:
            self.persist()

    # --- queries ---

    def records(self, kind: RecordKind | str) -> list[Record]:
        """Records of one collection in insertion order (a copy)."""
        return list(self._collections[RecordKind.parse(kind)])

    def sorted_records(self, kind: RecordKind | str) -> list[Record]:
        """Records of one collection, newest (highest id) first."""
        return sorted(self._collections[RecordKind.parse(kind)], key=lambda r: id_sort_key(r.id), reverse=True)

    def get(self, kind: RecordKind | str, record_id: str) -> Record:
        """
        Look up a record by id.

        Raises:
            RecordNotFoundError: If the id is not in the collection
        """
        kind = RecordKind.parse(kind)
        return self._collections[kind][self._index_of(kind, record_id)]

    def ids_in(self, kind: RecordKind | str) -> set[str]:
        return {record.id for record in self._collections[RecordKind.parse(kind)]}

    def snapshot(self) -> StoreSnapshot:
        """Immutable view for aggregation."""
        return StoreSnapshot(
            expenses=tuple(self._collections[RecordKind.EXPENSES]),
            assets=tuple(self._collections[RecordKind.ASSETS]),
            liabilities=tuple(self._collections[RecordKind.LIABILITIES]),
        )

    def counts(self) -> Mapping[str, int]:
        return MappingProxyType({kind.value: len(self._collections[kind]) for kind in RecordKind})

    def _index_of(self, kind: RecordKind, record_id: str) -> int:
        for index, record in enumerate(self._collections[kind]):
            if record.id == record_id:
                return index
        raise RecordNotFoundError(kind.value, record_id)

    # --- mutations ---

    def add(self, kind: RecordKind | str, record: BaseRecord | dict[str, Any]) -> Record:
        """
        Append a new record under a freshly generated id.

        Any id already present on `record` is replaced.

        Returns:
            The stored record
        """
        kind = RecordKind.parse(kind)
        new_id = self.ids.new_id(self.ids_in(kind))
        stored = coerce_record(kind, record).with_id(new_id)
        self._collections[kind].append(stored)  # type: ignore[arg-type]
        logger.debug("Added %s %s", kind.singular, new_id)
        self._changed()
        return stored  # type: ignore[return-value]

    def append_imported(self, kind: RecordKind | str, record: BaseRecord | dict[str, Any]) -> Record:
        """Append a record under a fresh bulk id without persisting."""
        kind = RecordKind.parse(kind)
        new_id = self.ids.new_bulk_id(self.ids_in(kind))
        stored = coerce_record(kind, record).with_id(new_id)
        self._collections[kind].append(stored)  # type: ignore[arg-type]
        return stored  # type: ignore[return-value]

    def update(self, kind: RecordKind | str, record_id: str, record: BaseRecord | dict[str, Any]) -> Record:
        """
        Replace the record at `record_id` wholesale, keeping its id.

        Raises:
            RecordNotFoundError: If the id is not in the collection; nothing is persisted
        """
        kind = RecordKind.parse(kind)
        index = self._index_of(kind, record_id)
        stored = coerce_record(kind, record).with_id(record_id)
        self._collections[kind][index] = stored  # type: ignore[assignment]
        logger.debug("Updated %s %s", kind.singular, record_id)
        self._changed()
        return stored  # type: ignore[return-value]

    def delete(self, kind: RecordKind | str, record_id: str) -> Record:
        """
        Remove the record with `record_id`.

        Returns:
            The removed record

        Raises:
            RecordNotFoundError: If the id is not in the collection
        """
        kind = RecordKind.parse(kind)
        index = self._index_of(kind, record_id)
        removed = self._collections[kind].pop(index)
        logger.debug("Deleted %s %s", kind.singular, record_id)
        self._changed()
        return removed

    # --- metadata ---

    def exists(self) -> bool:
        """Check if the slot holds a document."""
        return self.storage.read(self.key) is not None

    def last_modified(self) -> datetime | None:
        return self.storage.modified(self.key)

    def age_days(self) -> int | None:
        last_mod = self.last_modified()
        if last_mod is None:
            return None
        return (datetime.now() - last_mod).days

    def item_count(self) -> int:
        """Total records across all collections held in memory."""
        return sum(len(items) for items in self._collections.values())

    def size_bytes(self) -> int | None:
        return self.storage.size(self.key)

    def summary_text(self) -> str:
        """Get human-readable summary."""
        counts = self.counts()
        return (
            f"Ledger {self.key}: {counts['expenses']} expenses, "
            f"{counts['assets']} assets, {counts['liabilities']} liabilities"
        )
