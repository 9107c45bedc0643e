#!/usr/bin/env python3
"""
LedgerDate Primitive Type

Immutable calendar date wrapper used for expense dates and dashboard reference
months. All conversions follow one convention: UTC. Date-only strings are plain
calendar dates (the same day at UTC midnight); timestamps carrying an offset
are shifted to UTC before their calendar fields are read; naive timestamps are
taken to already be UTC.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timezone

# Year-month-day with the month and day optionally unpadded (2024-3-1)
_CALENDAR_DATE = re.compile(r"(\d{4})-(\d{1,2})-(\d{1,2})")


@dataclass(frozen=True, order=True)
class LedgerDate:
    """Immutable calendar date with UTC-normalized parsing."""

    date: date

    @classmethod
    def from_string(cls, date_str: str) -> "LedgerDate":
        """
        Parse an ISO date or timestamp string.

        Args:
            date_str: '2024-03-01', '2024-3-1', '2024-03-01T23:30:00Z' or
                '2024-03-01T23:30:00+05:30'

        Returns:
            LedgerDate in UTC calendar terms

        Raises:
            ValueError: If the string is not an ISO date or timestamp
        """
        text = date_str.strip()
        match = _CALENDAR_DATE.fullmatch(text)
        if match:
            year, month, day = (int(part) for part in match.groups())
            return cls(date=date(year, month, day))
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        return cls.from_datetime(datetime.fromisoformat(text))

    @classmethod
    def from_datetime(cls, value: datetime) -> "LedgerDate":
        """Create from a datetime; aware values are converted to UTC first."""
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return cls(date=value.date())

    @classmethod
    def coerce(cls, value: "LedgerDate | date | datetime | str") -> "LedgerDate":
        """Accept any supported date representation."""
        if isinstance(value, LedgerDate):
            return value
        if isinstance(value, datetime):
            return cls.from_datetime(value)
        if isinstance(value, date):
            return cls(date=value)
        return cls.from_string(value)

    @classmethod
    def today(cls) -> "LedgerDate":
        """Get today's date in UTC."""
        return cls(date=datetime.now(timezone.utc).date())

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    def same_month(self, other: "LedgerDate") -> bool:
        """True when both dates fall in the same calendar month and year."""
        return (self.year, self.month) == (other.year, other.month)

    def month_key(self) -> str:
        """Format as YYYY-MM."""
        return f"{self.year:04d}-{self.month:02d}"

    def to_iso_string(self) -> str:
        """Format as YYYY-MM-DD."""
        return self.date.isoformat()

    def __str__(self) -> str:
        return self.to_iso_string()

    def __repr__(self) -> str:
        return f"LedgerDate(date={self.date!r})"


def parse_record_date(value: object) -> LedgerDate | None:
    """
    Parse a stored expense date, returning None when it cannot be read.

    Stored dates come from free-form input, so failures are expected and
    never raised.
    """
    if isinstance(value, (LedgerDate, date)):
        return LedgerDate.coerce(value)
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return LedgerDate.from_string(value)
    except ValueError:
        return None
