#!/usr/bin/env python3
"""
Slot Storage Backends

A slot is one named entry in a key-value store holding a serialized document.
The record store only ever reads a slot whole, overwrites it whole, or removes
it, so backends implement exactly those operations plus metadata queries.
"""

from datetime import datetime
from pathlib import Path
from typing import Protocol

from ..core.json_utils import write_text_atomic


class SlotStorage(Protocol):
    """Protocol for named-slot persistence."""

    def read(self, key: str) -> str | None:
        """Return the slot contents, or None if the slot is absent."""
        ...

    def write(self, key: str, text: str) -> None:
        """Overwrite the slot in a single step."""
        ...

    def remove(self, key: str) -> None:
        """Delete the slot. Removing an absent slot is not an error."""
        ...

    def modified(self, key: str) -> datetime | None:
        """Time of the last write, or None if the slot is absent."""
        ...

    def size(self, key: str) -> int | None:
        """Size of the stored text in bytes, or None if the slot is absent."""
        ...


class FileSlotStorage:
    """
    Slots stored as `<directory>/<key>.json` files.

    Writes go through a temp file and rename, so a crash mid-write leaves the
    previous document in place.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{key}.json"

    def read(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.read_text(encoding="utf-8")

    def write(self, key: str, text: str) -> None:
        write_text_atomic(self.path_for(key), text)

    def remove(self, key: str) -> None:
        self.path_for(key).unlink(missing_ok=True)

    def modified(self, key: str) -> datetime | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return datetime.fromtimestamp(path.stat().st_mtime)

    def size(self, key: str) -> int | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        return path.stat().st_size


class MemorySlotStorage:
    """In-process slots, for tests and embedding."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.slots: dict[str, str] = dict(initial or {})
        self._modified: dict[str, datetime] = {key: datetime.now() for key in self.slots}

    def read(self, key: str) -> str | None:
        return self.slots.get(key)

    def write(self, key: str, text: str) -> None:
        self.slots[key] = text
        self._modified[key] = datetime.now()

    def remove(self, key: str) -> None:
        self.slots.pop(key, None)
        self._modified.pop(key, None)

    def modified(self, key: str) -> datetime | None:
        return self._modified.get(key)

    def size(self, key: str) -> int | None:
        text = self.slots.get(key)
        if text is None:
            return None
        return len(text.encode("utf-8"))
