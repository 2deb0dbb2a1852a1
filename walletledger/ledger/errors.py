"""Mini README: Exception hierarchy for the wallet ledger.

Structure:
    * LedgerError - common base so callers can catch every ledger failure.
    * LoadError - persisted ledger missing or undecodable.
    * SaveError - persisted ledger could not be written.
    * ValidationError - user supplied values rejected before any mutation.

None of these are fatal: load failures start an empty ledger, save failures
keep the in-memory ledger, and validation failures leave state untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class LedgerError(Exception):
    """Base class for ledger failures."""


class LoadError(LedgerError):
    """Raised when the persisted ledger cannot be read or decoded."""

    def __init__(self, path: Path, reason: str, *, missing: bool = False) -> None:
        super().__init__(f"Could not load ledger from {path}: {reason}")
        self.path = path
        self.missing = missing


class SaveError(LedgerError, OSError):
    """Raised when the ledger cannot be written to storage."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"Could not save ledger to {path}: {reason}")
        self.path = path

    def __str__(self) -> str:
        return str(self.args[0])


class ValidationError(LedgerError, ValueError):
    """Raised when a transaction cannot be built from the supplied values."""

    def __init__(self, message: str, *, field: Optional[str] = None) -> None:
        super().__init__(message)
        self.field = field
