"""
Pytest Configuration and Shared Fixtures

Provides common test fixtures and configuration for the entire test suite.
"""

import tempfile
from pathlib import Path

import pytest

from ledger.core.config import reload_config
from ledger.core.models import Asset, Expense, Liability
from ledger.store.datastore import RecordStore
from ledger.store.ids import IdGenerator
from ledger.store.slots import FileSlotStorage, MemorySlotStorage


class FakeClock:
    """Deterministic wall clock advancing one millisecond per reading."""

    def __init__(self, start: float = 1_709_251_200.0):
        self.now = start

    def __call__(self) -> float:
        self.now += 0.001
        return self.now


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as temp_path:
        yield Path(temp_path)


@pytest.fixture
def memory_storage() -> MemorySlotStorage:
    return MemorySlotStorage()


@pytest.fixture
def store(memory_storage) -> RecordStore:
    """Empty in-memory store with a deterministic id source."""
    return RecordStore(memory_storage, id_generator=IdGenerator(clock=FakeClock())).load()


@pytest.fixture
def file_store(temp_dir) -> RecordStore:
    """Empty store persisted under a temporary directory."""
    return RecordStore(FileSlotStorage(temp_dir), id_generator=IdGenerator(clock=FakeClock())).load()


@pytest.fixture
def sample_expense() -> Expense:
    return Expense(date="2024-03-15", category="Groceries", amount="1250.75", note="Weekly shop")


@pytest.fixture
def sample_asset() -> Asset:
    return Asset(name="Savings Account", type="Bank", value="100000")


@pytest.fixture
def sample_liability() -> Liability:
    return Liability(name="Car Loan", type="Loan", amount="40000")


@pytest.fixture(autouse=True)
def setup_test_environment(monkeypatch, tmp_path):
    """Point configuration at a per-test data directory."""
    monkeypatch.setenv("LEDGER_ENV", "test")
    monkeypatch.setenv("LEDGER_DATA_DIR", str(tmp_path / "ledger_data"))
    monkeypatch.delenv("LEDGER_STORAGE_KEY", raising=False)
    monkeypatch.delenv("LEDGER_CURRENCY_SYMBOL", raising=False)
    monkeypatch.delenv("LEDGER_GROUPING", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    reload_config()


# Test markers for categorizing tests
def pytest_configure(config):
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests for individual components")
    config.addinivalue_line("markers", "integration: Integration tests for complete workflows")
    config.addinivalue_line("markers", "currency: Tests for currency handling and precision")
    config.addinivalue_line("markers", "csv: Tests for CSV encoding, decoding and import")
