#!/usr/bin/env python3
"""
Integration tests for record, dashboard and CSV commands.
"""

import json
import re

import pytest
from click.testing import CliRunner

from ledger.cli.common import open_store
from ledger.cli.main import main
from ledger.core.config import get_config, reload_config


def added_id(output: str) -> str:
    match = re.search(r"Added \w+ (\d+):", output)
    assert match, output
    return match.group(1)


@pytest.mark.integration
class TestRecordCommands:
    """Test add, update, delete and list."""

    def setup_method(self):
        self.runner = CliRunner()

    def invoke(self, *args, **kwargs):
        return self.runner.invoke(main, list(args), **kwargs)

    def test_add_expense_persists(self):
        result = self.invoke("add", "expense", "--date", "2024-03-01", "--category", "Food", "--amount", "1234.5")

        assert result.exit_code == 0, result.output
        assert "₹1,234.50" in result.output
        store = open_store(get_config())
        [expense] = store.records("expenses")
        assert expense.id == added_id(result.output)
        assert expense.amount == "1234.5"

    def test_add_expense_defaults_to_today(self):
        result = self.invoke("add", "expense", "--category", "Tea", "--amount", "20")
        assert result.exit_code == 0, result.output
        assert re.search(r"on \d{4}-\d{2}-\d{2}", result.output)

    def test_add_asset_and_liability(self):
        assert self.invoke("add", "asset", "--name", "FD", "--type", "Bank", "--value", "250000").exit_code == 0
        assert self.invoke("add", "liability", "--name", "Loan", "--type", "Home", "--amount", "100000").exit_code == 0

        store = open_store(get_config())
        assert store.records("assets")[0].name == "FD"
        assert store.records("liabilities")[0].type == "Home"

    def test_add_requires_fields(self):
        result = self.invoke("add", "asset", "--name", "FD")
        assert result.exit_code != 0

    def test_list_newest_first(self):
        first = added_id(self.invoke("add", "asset", "--name", "Old", "--type", "Bank", "--value", "1").output)
        second = added_id(self.invoke("add", "asset", "--name", "New", "--type", "Bank", "--value", "2").output)

        result = self.invoke("list", "assets")

        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0].startswith(second)
        assert lines[1].startswith(first)

    def test_list_empty(self):
        result = self.invoke("list", "liabilities")
        assert "No liabilities recorded." in result.output

    def test_update_replaces_fields(self):
        record_id = added_id(self.invoke("add", "asset", "--name", "Car", "--type", "Vehicle", "--value", "500000").output)

        result = self.invoke("update", "asset", record_id, "name=Car", "value=450000")

        assert result.exit_code == 0, result.output
        record = open_store(get_config()).get("assets", record_id)
        assert record.value == "450000"
        assert record.type == ""

    def test_update_unknown_id_fails(self):
        result = self.invoke("update", "asset", "123", "name=X")
        assert result.exit_code != 0
        assert "No assets record with id '123'" in result.output

    def test_update_rejects_bad_assignment(self):
        record_id = added_id(self.invoke("add", "asset", "--name", "A", "--type", "B", "--value", "1").output)
        result = self.invoke("update", "asset", record_id, "novalue")
        assert result.exit_code != 0

    def test_delete_with_confirmation(self):
        record_id = added_id(self.invoke("add", "expense", "--category", "X", "--amount", "1").output)

        result = self.invoke("delete", "expense", record_id, input="y\n")

        assert result.exit_code == 0
        assert "Delete this entry?" in result.output
        assert open_store(get_config()).records("expenses") == []

    def test_delete_declined_keeps_record(self):
        record_id = added_id(self.invoke("add", "expense", "--category", "X", "--amount", "1").output)

        result = self.invoke("delete", "expense", record_id, input="n\n")

        assert "Aborted." in result.output
        assert len(open_store(get_config()).records("expenses")) == 1

    def test_delete_unknown_id_fails(self):
        result = self.invoke("delete", "expense", "42", "--yes")
        assert result.exit_code != 0

    def test_clear_requires_confirmation(self):
        self.invoke("add", "asset", "--name", "A", "--type", "B", "--value", "1")

        assert "Aborted." in self.invoke("clear", input="n\n").output
        assert open_store(get_config()).item_count() == 1

        result = self.invoke("clear", "--yes")
        assert result.exit_code == 0
        assert open_store(get_config()).item_count() == 0
        assert not open_store(get_config()).exists()


@pytest.mark.integration
class TestDashboardCommand:
    def setup_method(self):
        self.runner = CliRunner()

    def test_dashboard_totals(self):
        for args in [
            ["add", "asset", "--name", "FD", "--type", "Bank", "--value", "1000"],
            ["add", "liability", "--name", "Card", "--type", "Credit", "--amount", "400"],
            ["add", "expense", "--date", "2024-03-01", "--category", "Food", "--amount", "10"],
            ["add", "expense", "--date", "2024-03-31", "--category", "Food", "--amount", "20"],
            ["add", "expense", "--date", "2024-04-01", "--category", "Food", "--amount", "40"],
        ]:
            assert self.runner.invoke(main, args).exit_code == 0

        result = self.runner.invoke(main, ["dashboard", "--as-of", "2024-03-15"])

        assert result.exit_code == 0, result.output
        assert "Dashboard for 2024-03" in result.output
        assert "Total Assets:      ₹1,000.00" in result.output
        assert "Monthly Expenses:  ₹30.00" in result.output
        assert "Net Worth: ₹600.00" in result.output

    def test_dashboard_json(self):
        self.runner.invoke(main, ["add", "asset", "--name", "FD", "--type", "Bank", "--value", "50.5"])
        result = self.runner.invoke(main, ["dashboard", "--as-of", "2024-03-15", "--json"])

        assert json.loads(result.output)["net_worth"] == 50.5

    def test_dashboard_western_grouping(self, monkeypatch):
        monkeypatch.setenv("LEDGER_GROUPING", "western")
        monkeypatch.setenv("LEDGER_CURRENCY_SYMBOL", "$")
        reload_config()
        self.runner.invoke(main, ["add", "asset", "--name", "House", "--type", "Property", "--value", "1234567"])

        result = self.runner.invoke(main, ["dashboard"])
        assert "$1,234,567.00" in result.output

    def test_dashboard_bad_date(self):
        result = self.runner.invoke(main, ["dashboard", "--as-of", "March"])
        assert result.exit_code != 0

    def test_report(self):
        self.runner.invoke(main, ["add", "expense", "--date", "2024-01-05", "--category", "Food", "--amount", "100"])
        self.runner.invoke(main, ["add", "expense", "--date", "2024-02-05", "--category", "Fuel", "--amount", "50"])

        result = self.runner.invoke(main, ["report", "--start", "2024-02"])

        assert result.exit_code == 0, result.output
        assert "2024-02: ₹50.00" in result.output
        assert "Fuel: ₹50.00" in result.output
        assert "2024-01" not in result.output

    def test_report_lists_category_named_total(self):
        self.runner.invoke(main, ["add", "expense", "--date", "2024-03-02", "--category", "Total", "--amount", "10"])
        self.runner.invoke(main, ["add", "expense", "--date", "2024-03-03", "--category", "Food", "--amount", "5"])

        result = self.runner.invoke(main, ["report"])

        assert result.exit_code == 0, result.output
        assert "2024-03: ₹15.00" in result.output
        assert "    Total: ₹10.00" in result.output
        assert "    Food: ₹5.00" in result.output

    def test_report_empty(self):
        assert "No expenses in range." in self.runner.invoke(main, ["report"]).output


@pytest.mark.integration
class TestTransferCommands:
    def setup_method(self):
        self.runner = CliRunner()

    def test_export_nothing(self):
        result = self.runner.invoke(main, ["export", "assets"])
        assert result.exit_code == 0
        assert "No data to export." in result.output

    def test_export_then_import(self, tmp_path):
        self.runner.invoke(main, ["add", "expense", "--date", "2024-03-01", "--category", 'Food, "fancy"', "--amount", "10"])

        out_dir = tmp_path / "out"
        result = self.runner.invoke(main, ["export", "expenses", "--output-dir", str(out_dir), "--no-date"])
        assert result.exit_code == 0, result.output
        exported = out_dir / "expenses.csv"
        assert exported.exists()

        result = self.runner.invoke(main, ["import", "expenses", str(exported)])
        assert result.exit_code == 0, result.output
        assert "Import successful: 1 expenses added." in result.output

        expenses = open_store(get_config()).records("expenses")
        assert [e.category for e in expenses] == ['Food, "fancy"', 'Food, "fancy"']
        assert expenses[0].id != expenses[1].id

    def test_default_export_directory(self):
        self.runner.invoke(main, ["add", "asset", "--name", "FD", "--type", "Bank", "--value", "1"])
        result = self.runner.invoke(main, ["export", "asset"])

        assert result.exit_code == 0
        files = list(get_config().export_dir.glob("assets_*.csv"))
        assert len(files) == 1

    def test_import_missing_file(self, tmp_path):
        result = self.runner.invoke(main, ["import", "assets", str(tmp_path / "missing.csv")])

        assert result.exit_code != 0
        assert "Could not read import file" in result.output
        assert open_store(get_config()).records("assets") == []
