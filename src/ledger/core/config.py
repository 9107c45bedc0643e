#!/usr/bin/env python3
"""
Configuration Management for the Household Ledger

Handles environment-based configuration with defaults and validation.
Supports multiple environments (development, test, production).
"""

import logging
import os
import tempfile
from dataclasses import dataclass, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any

from dotenv import load_dotenv

from .currency import DEFAULT_SYMBOL, Grouping

# Load environment variables from .env file
load_dotenv()

DEFAULT_STORAGE_KEY = "local_finance_v1"


class Environment(Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TEST = "test"
    PRODUCTION = "production"


@dataclass
class StorageConfig:
    """Persisted slot settings."""

    slot_dir: Path
    storage_key: str = DEFAULT_STORAGE_KEY


@dataclass
class DisplayConfig:
    """Money formatting settings."""

    currency_symbol: str = DEFAULT_SYMBOL
    grouping: Grouping = Grouping.INDIAN


@dataclass
class Config:
    """
    Main configuration class for the ledger.

    Loads configuration from environment variables with defaults
    and validation for each environment type.
    """

    environment: Environment

    # Core directories
    data_dir: Path
    export_dir: Path

    # Component configurations
    storage: StorageConfig
    display: DisplayConfig

    # Application settings
    debug: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_environment(cls) -> "Config":
        """Create configuration from environment variables."""
        env = Environment(os.getenv("LEDGER_ENV", "development"))

        if env == Environment.TEST:
            default_test_dir = Path(tempfile.gettempdir()) / "test_ledger"
            base_dir = Path(os.getenv("LEDGER_DATA_DIR", str(default_test_dir)))
        else:
            base_dir = Path(os.getenv("LEDGER_DATA_DIR", "./data")).expanduser().resolve()

        data_dir = base_dir
        export_dir = data_dir / "exports"

        for directory in [data_dir, export_dir]:
            directory.mkdir(parents=True, exist_ok=True)

        storage = StorageConfig(
            slot_dir=data_dir,
            storage_key=os.getenv("LEDGER_STORAGE_KEY", DEFAULT_STORAGE_KEY),
        )

        display = DisplayConfig(
            currency_symbol=os.getenv("LEDGER_CURRENCY_SYMBOL", DEFAULT_SYMBOL),
            grouping=_parse_grouping(os.getenv("LEDGER_GROUPING", Grouping.INDIAN.value)),
        )

        return cls(
            environment=env,
            data_dir=data_dir,
            export_dir=export_dir,
            storage=storage,
            display=display,
            debug=os.getenv("DEBUG", "false").lower() == "true",
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def validate(self) -> list:
        """Validate configuration and return list of errors."""
        errors = []

        for name, path in [("data_dir", self.data_dir), ("export_dir", self.export_dir)]:
            if not path.exists():
                errors.append(f"{name} does not exist: {path}")

        key = self.storage.storage_key
        if not key or "/" in key or "\\" in key or key.startswith("."):
            errors.append(f"LEDGER_STORAGE_KEY is not a valid slot name: {key!r}")

        if self.display.grouping is None:
            errors.append("LEDGER_GROUPING must be 'indian' or 'western'")

        if not isinstance(logging.getLevelName(self.log_level), int):
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return errors

    def setup_logging(self) -> None:
        """Configure logging based on configuration."""
        level = getattr(logging, self.log_level, logging.INFO)

        if self.environment == Environment.DEVELOPMENT:
            format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        else:
            format_str = "%(asctime)s - %(levelname)s - %(message)s"

        logging.basicConfig(level=level, format=format_str, datefmt="%Y-%m-%d %H:%M:%S")

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a plain dictionary for display."""
        result: dict[str, Any] = {}

        for field_name, field_value in self.__dict__.items():
            if is_dataclass(field_value):
                result[field_name] = {name: _plain(value) for name, value in field_value.__dict__.items()}
            else:
                result[field_name] = _plain(field_value)

        return result


def _plain(value: Any) -> Any:
    if isinstance(value, Path):
        return str(value)
    if isinstance(value, Enum):
        return value.value
    return value


def _parse_grouping(value: str) -> Grouping | None:
    """Parse grouping name, leaving None for validate() to report."""
    try:
        return Grouping(value.strip().lower())
    except ValueError:
        return None


# Global configuration instance
_config: Config | None = None


def get_config() -> Config:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_environment()

        errors = _config.validate()
        if errors:
            raise ValueError(f"Configuration validation failed: {'; '.join(errors)}")

        _config.setup_logging()

    return _config


def reload_config() -> Config:
    """Reload configuration from environment (useful for testing)."""
    global _config
    _config = None
    return get_config()
