"""
Command Line Interface Package

Command Structure:
- ledger: Main entry point with utility commands (version, config, clear)
- ledger add/update/delete/list: Record management
- ledger dashboard/report: Totals and spending reports
- ledger export/import: CSV transfer
"""
