"""Mini README: Shared fixtures for the wallet ledger tests.

Structure:
    * ledger_path - JSON file location inside the test's temporary directory.
    * store - empty LedgerStore bound to ``ledger_path``.
    * isolated_settings - points the cached settings at the temporary directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from walletledger.configuration import get_settings
from walletledger.ledger import LedgerStore


@pytest.fixture
def ledger_path(tmp_path: Path) -> Path:
    return tmp_path / "transaction.json"


@pytest.fixture
def store(ledger_path: Path) -> LedgerStore:
    return LedgerStore.open(ledger_path)


@pytest.fixture
def isolated_settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    """Redirect configuration to the temporary directory for each test."""

    monkeypatch.setenv("WALLETLEDGER_DATA_DIRECTORY", str(tmp_path / "data"))
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()
