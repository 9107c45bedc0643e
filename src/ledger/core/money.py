#!/usr/bin/env python3
"""
Money Primitive Type

Immutable currency value wrapper that uses integer cents internally.
Prevents floating-point drift when totals are summed and subtracted.
"""

from dataclasses import dataclass
from typing import Any

from .currency import DEFAULT_SYMBOL, Grouping, format_cents, safe_amount_to_cents


@dataclass(frozen=True)
class Money:
    """
    Immutable money value in cents.

    Examples:
        >>> total = Money.from_value(100) + Money.from_value("50.5")
        >>> total.to_cents()
        15050
        >>> str(total)
        '₹150.50'
        >>> Money.from_value("garbage")
        Money(cents=0)
    """

    cents: int

    @classmethod
    def from_cents(cls, cents: int) -> "Money":
        """Create Money from cents."""
        return cls(cents=cents)

    @classmethod
    def from_value(cls, value: Any) -> "Money":
        """
        Coerce an untyped amount (number or string) to Money.

        Unparsable, empty and non-finite values become zero.
        """
        return cls(cents=safe_amount_to_cents(value))

    @classmethod
    def zero(cls) -> "Money":
        return cls(cents=0)

    def to_cents(self) -> int:
        """Get value in cents."""
        return self.cents

    def to_float(self) -> float:
        """Get value as a float in whole currency units."""
        return self.cents / 100

    def format(self, symbol: str = DEFAULT_SYMBOL, grouping: Grouping = Grouping.INDIAN) -> str:
        """Format with an explicit symbol and grouping convention."""
        return format_cents(self.cents, symbol=symbol, grouping=grouping)

    def __add__(self, other: "Money") -> "Money":
        return Money(cents=self.cents + other.cents)

    def __sub__(self, other: "Money") -> "Money":
        return Money(cents=self.cents - other.cents)

    def __neg__(self) -> "Money":
        return Money(cents=-self.cents)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Money):
            return NotImplemented
        return self.cents == other.cents

    def __hash__(self) -> int:
        return hash(self.cents)

    def __lt__(self, other: "Money") -> bool:
        return self.cents < other.cents

    def __le__(self, other: "Money") -> bool:
        return self.cents <= other.cents

    def __gt__(self, other: "Money") -> bool:
        return self.cents > other.cents

    def __ge__(self, other: "Money") -> bool:
        return self.cents >= other.cents

    def __str__(self) -> str:
        """Format with the default symbol and grouping."""
        return self.format()

    def __repr__(self) -> str:
        return f"Money(cents={self.cents})"
