#!/usr/bin/env python3
"""
Currency Coercion and Formatting Utilities

Amount handling for the household ledger. Amounts arrive untyped from the
command line, the persisted document, or imported CSV files, so every value is
coerced into integer cents with decimal arithmetic before it is summed or shown.

Key Principles:
- Never use floating-point arithmetic for totals
- Coercion never raises: anything unparsable is worth zero
- Digit grouping is explicit configuration, never implied by the host locale
"""

import logging
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

DEFAULT_SYMBOL = "₹"

# Characters removed from amount strings before parsing
_STRIP_CHARS = ("₹", "$", "€", "£", ",", "_", " ", " ")


class Grouping(Enum):
    """Thousands grouping conventions."""

    INDIAN = "indian"  # 12,34,567.89
    WESTERN = "western"  # 1,234,567.89


def safe_amount_to_cents(value: Any) -> int:
    """
    Coerce an untyped amount to integer cents.

    Very large amounts keep their magnitude; digits beyond the decimal context
    precision (28 significant digits) are rounded away.

    Args:
        value: int, float, Decimal or string like '₹1,234.50', '50.5', ''

    Returns:
        Integer cents (rounded half-up), 0 for missing or unparsable input

    Examples:
        safe_amount_to_cents(100) -> 10000
        safe_amount_to_cents('50.5') -> 5050
        safe_amount_to_cents('abc') -> 0
        safe_amount_to_cents(float('nan')) -> 0
    """
    if value is None or isinstance(value, bool):
        return 0

    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, int):
            return value * 100
        elif isinstance(value, float):
            amount = Decimal(repr(float(value)))
        else:
            clean = str(value)
            for char in _STRIP_CHARS:
                clean = clean.replace(char, "")
            if not clean:
                return 0
            amount = Decimal(clean)

        if not amount.is_finite():
            return 0
        return int((amount * 100).to_integral_value(rounding=ROUND_HALF_UP))
    except (ValueError, TypeError, ArithmeticError, InvalidOperation):
        logger.debug("Treating unparsable amount %r as zero", value)
        return 0


def group_digits(digits: str, grouping: Grouping = Grouping.INDIAN) -> str:
    """
    Insert thousands separators into a string of digits.

    Examples:
        group_digits('1234567', Grouping.INDIAN) -> '12,34,567'
        group_digits('1234567', Grouping.WESTERN) -> '1,234,567'
    """
    if len(digits) <= 3:
        return digits

    head, tail = digits[:-3], digits[-3:]
    size = 2 if grouping == Grouping.INDIAN else 3

    groups = []
    while len(head) > size:
        groups.insert(0, head[-size:])
        head = head[:-size]
    groups.insert(0, head)

    return ",".join(groups + [tail])


def format_cents(cents: int, symbol: str = DEFAULT_SYMBOL, grouping: Grouping = Grouping.INDIAN) -> str:
    """
    Format integer cents as a currency string.

    Args:
        cents: Amount in cents (negative allowed)
        symbol: Currency symbol prefix
        grouping: Thousands grouping convention

    Returns:
        String like '₹1,234.50' or '₹-12,34,567.00'
    """
    sign = "-" if cents < 0 else ""
    whole, fraction = divmod(abs(int(cents)), 100)
    return f"{symbol}{sign}{group_digits(str(whole), grouping)}.{fraction:02d}"


def format_money(value: Any, symbol: str = DEFAULT_SYMBOL, grouping: Grouping = Grouping.INDIAN) -> str:
    """
    Format an untyped amount as a currency string.

    Non-numeric input renders as zero and never raises.

    Examples:
        format_money(1234.5) -> '₹1,234.50'
        format_money('not a number') -> '₹0.00'
    """
    return format_cents(safe_amount_to_cents(value), symbol=symbol, grouping=grouping)
