#!/usr/bin/env python3
"""
Ledger Exception Hierarchy

Every failure the ledger reports on purpose derives from LedgerError, so the
CLI can turn any of them into a single user-facing message.
"""


class LedgerError(Exception):
    """Base class for ledger errors."""


class UnknownRecordKindError(LedgerError, ValueError):
    """Raised when a collection name is not expenses, assets or liabilities."""

    def __init__(self, kind: object):
        super().__init__(f"Unknown record kind: {kind!r}")
        self.kind = kind


class RecordNotFoundError(LedgerError, KeyError):
    """Raised when update or delete targets an id that is not in the collection."""

    def __init__(self, kind: str, record_id: str):
        super().__init__(f"No {kind} record with id {record_id!r}")
        self.kind = kind
        self.record_id = record_id

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return str(self.args[0])


class RecordValidationError(LedgerError, ValueError):
    """Raised when a mapping cannot be turned into a record."""


class ImportReadError(LedgerError):
    """Raised when an import file cannot be read. Nothing is imported."""

    def __init__(self, path: object, reason: str):
        super().__init__(f"Could not read import file {path}: {reason}")
        self.path = path
        self.reason = reason
