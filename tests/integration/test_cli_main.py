#!/usr/bin/env python3
"""
Integration tests for CLI Main Entry Point

Tests end-to-end CLI command execution with real command invocation.
"""

import json

import pytest
from click.testing import CliRunner

from ledger.cli.main import main


@pytest.mark.integration
class TestCLIMainIntegration:
    """Test main CLI entry point with real command execution."""

    def setup_method(self):
        self.runner = CliRunner()

    def test_help_command_lists_all_subcommands(self):
        result = self.runner.invoke(main, ["--help"])

        assert result.exit_code == 0
        assert "Household Ledger" in result.output
        for command in ["add", "update", "delete", "list", "dashboard", "report", "export", "import", "clear"]:
            assert command in result.output

    def test_version_command_shows_version_info(self):
        result = self.runner.invoke(main, ["version"])

        assert result.exit_code == 0
        assert "Household Ledger v" in result.output
        assert "Author:" in result.output

    def test_config_command_shows_configuration(self, tmp_path):
        result = self.runner.invoke(main, ["config"])

        assert result.exit_code == 0
        assert "Current Configuration:" in result.output
        assert "Environment: test" in result.output
        assert str(tmp_path / "ledger_data") in result.output
        assert "Storage Key: local_finance_v1" in result.output
        assert "Grouping: indian" in result.output

    def test_config_json(self, tmp_path):
        result = self.runner.invoke(main, ["config", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["environment"] == "test"
        assert data["data_dir"] == str(tmp_path / "ledger_data")
        assert data["storage"]["storage_key"] == "local_finance_v1"
        assert data["display"] == {"currency_symbol": "₹", "grouping": "indian"}

    def test_verbose_flag(self):
        result = self.runner.invoke(main, ["--verbose", "config"])
        assert result.exit_code == 0
        assert "Data directory:" in result.output

    def test_debug_flag(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "INFO")
        result = self.runner.invoke(main, ["--debug", "version"])
        assert result.exit_code == 0
        assert "Debug logging enabled" in result.output

    def test_invalid_command_shows_error(self):
        result = self.runner.invoke(main, ["nonexistent"])
        assert result.exit_code != 0
        assert "No such command" in result.output
