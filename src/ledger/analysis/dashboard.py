#!/usr/bin/env python3
"""
Dashboard Aggregation

Derives the dashboard totals from a store snapshot. The reference date is
always passed in by the caller; nothing here reads the clock.

Month matching uses UTC calendar fields for both the stored expense dates and
the reference date (see LedgerDate).
"""

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime

from ..core.dates import LedgerDate
from ..core.models import Asset, Expense, Liability
from ..core.money import Money

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DashboardSummary:
    """Dashboard totals for one reference month."""

    as_of: LedgerDate
    total_assets: Money
    total_liabilities: Money
    monthly_expenses: Money

    @property
    def net_worth(self) -> Money:
        return self.total_assets - self.total_liabilities

    def to_dict(self) -> dict[str, object]:
        """Plain values (floats in currency units) for JSON output."""
        return {
            "month": self.as_of.month_key(),
            "total_assets": self.total_assets.to_float(),
            "total_liabilities": self.total_liabilities.to_float(),
            "monthly_expenses": self.monthly_expenses.to_float(),
            "net_worth": self.net_worth.to_float(),
        }


def total_assets(assets: Iterable[Asset]) -> Money:
    """Sum of asset values; unparsable or missing values count as zero."""
    return sum((asset.value_money for asset in assets), Money.zero())


def total_liabilities(liabilities: Iterable[Liability]) -> Money:
    """Sum of liability amounts; unparsable or missing amounts count as zero."""
    return sum((liability.amount_money for liability in liabilities), Money.zero())


def monthly_expenses(expenses: Iterable[Expense], as_of: LedgerDate | date | datetime | str) -> Money:
    """
    Sum of expense amounts dated in the calendar month of `as_of`.

    Expenses whose date cannot be parsed are left out.
    """
    reference = LedgerDate.coerce(as_of)
    total = Money.zero()
    for expense in expenses:
        when = expense.ledger_date
        if when is None:
            logger.debug("Skipping expense %s with unreadable date %r", expense.id, expense.date)
            continue
        if when.same_month(reference):
            total = total + expense.amount_money
    return total


def compute_dashboard(snapshot, as_of: LedgerDate | date | datetime | str) -> DashboardSummary:
    """
    Compute the dashboard for a store snapshot.

    Args:
        snapshot: StoreSnapshot (or anything with expenses/assets/liabilities)
        as_of: Reference date selecting the month for monthly_expenses

    Returns:
        DashboardSummary; net_worth is total_assets minus total_liabilities
    """
    reference = LedgerDate.coerce(as_of)
    return DashboardSummary(
        as_of=reference,
        total_assets=total_assets(snapshot.assets),
        total_liabilities=total_liabilities(snapshot.liabilities),
        monthly_expenses=monthly_expenses(snapshot.expenses, reference),
    )
