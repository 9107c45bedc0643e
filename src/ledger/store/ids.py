#!/usr/bin/env python3
"""
Record Id Generation

Ids are wall-clock millisecond timestamps rendered as decimal strings, so that
sorting ids numerically puts the newest record first. Bulk imports append a
three-digit random suffix to tell apart records created in the same
millisecond.
"""

import random
import time
from collections.abc import Callable, Iterable


class IdGenerator:
    """
    Issues timestamp ids that are never reused within the process.

    If the clock has not advanced past the last id (or the candidate already
    exists in the target collection) the timestamp is bumped by one.
    """

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        rng: random.Random | None = None,
    ):
        self._clock = clock
        self._rng = rng or random.Random()
        self._last_millis = 0
        self._issued: set[str] = set()

    def _next_millis(self) -> int:
        millis = max(int(self._clock() * 1000), self._last_millis + 1)
        self._last_millis = millis
        return millis

    def new_id(self, existing: Iterable[str] = ()) -> str:
        """Issue an id for a single new record."""
        taken = set(existing) | self._issued
        candidate = str(self._next_millis())
        while candidate in taken:
            candidate = str(self._next_millis())
        self._issued.add(candidate)
        return candidate

    def new_bulk_id(self, existing: Iterable[str] = ()) -> str:
        """Issue an id for an imported record: timestamp plus random suffix."""
        taken = set(existing) | self._issued
        base = str(int(self._clock() * 1000))
        candidate = base + f"{self._rng.randrange(1000):03d}"
        while candidate in taken:
            candidate = str(self._next_millis()) + f"{self._rng.randrange(1000):03d}"
        self._issued.add(candidate)
        return candidate


def id_sort_key(record_id: str) -> tuple[int, int | str]:
    """
    Sort key placing numeric ids by value and any other ids after them.

    Timestamp ids and bulk ids have different lengths, so they are compared
    as integers, never as strings.
    """
    try:
        return (1, int(record_id))
    except (TypeError, ValueError):
        return (0, str(record_id))
