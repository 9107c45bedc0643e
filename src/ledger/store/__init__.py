"""
Record Store Package

The aggregate document of expenses, assets and liabilities, held in memory
and persisted wholesale to a named slot.
"""

from .datastore import RecordStore, StoreSnapshot
from .ids import IdGenerator, id_sort_key
from .slots import FileSlotStorage, MemorySlotStorage, SlotStorage

__all__ = [
    "FileSlotStorage",
    "IdGenerator",
    "MemorySlotStorage",
    "RecordStore",
    "SlotStorage",
    "StoreSnapshot",
    "id_sort_key",
]
