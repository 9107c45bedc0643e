"""
Household Ledger - Local Personal Finance Tracker

Records expenses, assets and liabilities in one locally persisted document,
derives a dashboard (this month's spend, totals, net worth) and moves
collections in and out as CSV.

Domain Packages:
- core: Money and date primitives, record models, configuration
- store: The record store and its persisted slot backends
- analysis: Dashboard aggregation and expense reports
- exchange: CSV codec, import merge policy and export
- cli: Command-line interface

Example Usage:
    from ledger import MemorySlotStorage, RecordStore, compute_dashboard

    store = RecordStore(MemorySlotStorage()).load()
    store.add("assets", {"name": "Savings", "type": "Bank", "value": "1000"})
    summary = compute_dashboard(store.snapshot(), as_of="2024-03-15")
"""

__version__ = "0.1.0"
__author__ = "Household Ledger Developers"

from .analysis.dashboard import DashboardSummary, compute_dashboard
from .core.currency import Grouping, format_money
from .core.errors import ImportReadError, LedgerError, RecordNotFoundError
from .core.models import Asset, Expense, Liability, RecordKind
from .core.money import Money
from .exchange.codec import decode, encode
from .store.datastore import RecordStore
from .store.slots import FileSlotStorage, MemorySlotStorage

__all__ = [
    # Primitives
    "Grouping",
    "Money",
    "format_money",
    # Records
    "Asset",
    "Expense",
    "Liability",
    "RecordKind",
    # Store
    "FileSlotStorage",
    "MemorySlotStorage",
    "RecordStore",
    # Dashboard
    "DashboardSummary",
    "compute_dashboard",
    # CSV
    "decode",
    "encode",
    # Errors
    "ImportReadError",
    "LedgerError",
    "RecordNotFoundError",
]
