#!/usr/bin/env python3
"""
Record Models for the Household Ledger

Concrete record types for the three collections held in the aggregate
document. Records are open attribute mappings on disk and in CSV files, so
each type carries its known fields plus an `extra` mapping for any other
columns; nothing is dropped when a document or import is read back.

Amount fields keep the raw value they were entered with (string or number).
Use the `*_money` properties to get a coerced Money value.
"""

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Union

from .dates import LedgerDate, parse_record_date
from .errors import RecordValidationError, UnknownRecordKindError
from .money import Money

Scalar = Union[str, int, float, bool, None]


class RecordKind(Enum):
    """The three named collections of the aggregate document."""

    EXPENSES = "expenses"
    ASSETS = "assets"
    LIABILITIES = "liabilities"

    @classmethod
    def parse(cls, value: "RecordKind | str") -> "RecordKind":
        """
        Resolve a collection name.

        Accepts the collection name ('expenses') or its singular ('expense'),
        case-insensitive.

        Raises:
            UnknownRecordKindError: If the name is not a record kind
        """
        if isinstance(value, RecordKind):
            return value
        if isinstance(value, str):
            name = value.strip().lower()
            for kind in cls:
                if name in (kind.value, kind.singular):
                    return kind
        raise UnknownRecordKindError(value)

    @property
    def singular(self) -> str:
        return {"expenses": "expense", "assets": "asset", "liabilities": "liability"}[self.value]


@dataclass
class BaseRecord:
    """Fields and conversions shared by every record kind."""

    kind: ClassVar[RecordKind]

    id: str = ""
    extra: dict[str, Scalar] = field(default_factory=dict)

    @classmethod
    def field_names(cls) -> list[str]:
        """Known field names in canonical order, id first."""
        return [f.name for f in fields(cls) if f.name != "extra"]

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BaseRecord":
        """
        Create a record from a generic mapping.

        Known fields are picked out, every other key goes to `extra`.

        Args:
            data: Persisted JSON object or decoded CSV row

        Raises:
            RecordValidationError: If keys are not strings or values are not scalars
        """
        if not isinstance(data, dict):
            raise RecordValidationError(f"Expected a mapping for {cls.kind.singular}, got {type(data).__name__}")

        for key, value in data.items():
            if not isinstance(key, str):
                raise RecordValidationError(f"Field names must be strings, got {key!r}")
            if value is not None and not isinstance(value, (str, int, float, bool)):
                raise RecordValidationError(f"Field {key!r} must be a string or number, got {type(value).__name__}")

        known = set(cls.field_names())
        values = {name: data[name] for name in known if name in data}
        if "id" in values:
            values["id"] = "" if values["id"] is None else str(values["id"])
        extra = {key: value for key, value in data.items() if key not in known}
        return cls(**values, extra=extra)

    def to_dict(self) -> dict[str, Scalar]:
        """Convert to a plain mapping: known fields in order, then extras."""
        result: dict[str, Scalar] = {name: getattr(self, name) for name in self.field_names()}
        for key, value in self.extra.items():
            result.setdefault(key, value)
        return result

    def with_id(self, record_id: str) -> "BaseRecord":
        """Return a copy of this record carrying a different id."""
        data = self.to_dict()
        data["id"] = record_id
        return type(self).from_dict(data)


@dataclass
class Expense(BaseRecord):
    """A dated spend in a free-text category."""

    kind: ClassVar[RecordKind] = RecordKind.EXPENSES

    date: str = ""
    category: str = ""
    amount: Scalar = ""
    note: str = ""

    @property
    def amount_money(self) -> Money:
        return Money.from_value(self.amount)

    @property
    def ledger_date(self) -> LedgerDate | None:
        """Parsed date, or None when the stored date is unreadable."""
        return parse_record_date(self.date)


@dataclass
class Asset(BaseRecord):
    """Something owned, with its current value."""

    kind: ClassVar[RecordKind] = RecordKind.ASSETS

    name: str = ""
    type: str = ""
    value: Scalar = ""

    @property
    def value_money(self) -> Money:
        return Money.from_value(self.value)


@dataclass
class Liability(BaseRecord):
    """Something owed, with its outstanding amount."""

    kind: ClassVar[RecordKind] = RecordKind.LIABILITIES

    name: str = ""
    type: str = ""
    amount: Scalar = ""

    @property
    def amount_money(self) -> Money:
        return Money.from_value(self.amount)


Record = Union[Expense, Asset, Liability]

RECORD_TYPES: dict[RecordKind, type[BaseRecord]] = {
    RecordKind.EXPENSES: Expense,
    RecordKind.ASSETS: Asset,
    RecordKind.LIABILITIES: Liability,
}


def record_from_dict(kind: RecordKind | str, data: dict[str, Any]) -> Record:
    """Build the concrete record type for `kind` from a generic mapping."""
    return RECORD_TYPES[RecordKind.parse(kind)].from_dict(data)  # type: ignore[return-value]


def coerce_record(kind: RecordKind | str, record: "BaseRecord | dict[str, Any]") -> Record:
    """
    Accept either a record instance or a plain field mapping.

    Raises:
        RecordValidationError: If a record instance of another kind is passed
    """
    kind = RecordKind.parse(kind)
    if isinstance(record, BaseRecord):
        if record.kind != kind:
            raise RecordValidationError(f"Cannot store a {record.kind.singular} in {kind.value}")
        return record  # type: ignore[return-value]
    return record_from_dict(kind, record)
