#!/usr/bin/env python3
"""
Expense Report Module

Month-by-category spending tables built with pandas. Amounts are summed in
integer cents and only converted to currency units for the final table.
"""

import logging
from collections.abc import Iterable

import pandas as pd

from ..core.models import Expense

logger = logging.getLogger(__name__)

TOTAL_COLUMN = "Total"
UNCATEGORIZED = "Uncategorized"


def expenses_frame(expenses: Iterable[Expense]) -> pd.DataFrame:
    """
    One row per dated expense with Month, Category and Cents columns.

    Expenses with an unreadable date are skipped.
    """
    rows = []
    skipped = 0
    for expense in expenses:
        when = expense.ledger_date
        if when is None:
            skipped += 1
            continue
        rows.append(
            {
                "Month": when.month_key(),
                "Category": (str(expense.category).strip() or UNCATEGORIZED),
                "Cents": expense.amount_money.to_cents(),
            }
        )

    if skipped:
        logger.info("Skipped %d expenses without a readable date", skipped)

    return pd.DataFrame(rows, columns=["Month", "Category", "Cents"])


def build_expense_report(
    expenses: Iterable[Expense], start: str | None = None, end: str | None = None
) -> pd.DataFrame:
    """
    Pivot expenses into months (rows) by categories (columns).

    Args:
        expenses: Expense records
        start: First month to include (YYYY-MM), inclusive
        end: Last month to include (YYYY-MM), inclusive

    Returns:
        DataFrame indexed by month with one column per category, values in
        currency units. Month totals are `table.sum(axis=1)`.
        Empty when nothing matches.
    """
    df = expenses_frame(expenses)
    if start:
        df = df[df["Month"] >= start]
    if end:
        df = df[df["Month"] <= end]

    if df.empty:
        return pd.DataFrame()

    table = df.pivot_table(index="Month", columns="Category", values="Cents", aggfunc="sum", fill_value=0)
    table = table.sort_index()
    table.columns.name = None
    return table / 100


def monthly_totals(expenses: Iterable[Expense]) -> pd.Series:
    """Total spend per month (YYYY-MM), in currency units, oldest first."""
    df = expenses_frame(expenses)
    if df.empty:
        return pd.Series(dtype=float, name=TOTAL_COLUMN)
    return (df.groupby("Month")["Cents"].sum().sort_index() / 100).rename(TOTAL_COLUMN)
