"""
Core Utilities Package

Shared primitives and data models used across the ledger.

This package provides:
- Amount coercion and currency formatting with explicit digit grouping
- Money and LedgerDate value types
- Record models for expenses, assets and liabilities
- Configuration management for environment-specific settings
"""

from .config import Config, Environment, get_config, reload_config
from .currency import Grouping, format_cents, format_money, safe_amount_to_cents
from .dates import LedgerDate, parse_record_date
from .errors import (
    ImportReadError,
    LedgerError,
    RecordNotFoundError,
    RecordValidationError,
    UnknownRecordKindError,
)
from .models import Asset, BaseRecord, Expense, Liability, Record, RecordKind, coerce_record, record_from_dict
from .money import Money

__all__ = [
    "Asset",
    "BaseRecord",
    # Configuration
    "Config",
    "Environment",
    "Expense",
    "Grouping",
    "ImportReadError",
    "LedgerDate",
    "LedgerError",
    "Liability",
    "Money",
    "Record",
    "RecordKind",
    "RecordNotFoundError",
    "RecordValidationError",
    "UnknownRecordKindError",
    "coerce_record",
    # Currency utilities
    "format_cents",
    "format_money",
    "get_config",
    "parse_record_date",
    "record_from_dict",
    "reload_config",
    "safe_amount_to_cents",
]
