"""
Financial Analysis Package

Key Components:
- dashboard: Totals and net worth for a reference month
- report: Month-by-category expense tables (pandas)
"""

from .dashboard import DashboardSummary, compute_dashboard, monthly_expenses, total_assets, total_liabilities
from .report import build_expense_report, monthly_totals

__all__ = [
    "DashboardSummary",
    "build_expense_report",
    "compute_dashboard",
    "monthly_expenses",
    "monthly_totals",
    "total_assets",
    "total_liabilities",
]
