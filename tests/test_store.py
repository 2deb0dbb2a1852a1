"""Mini README: Tests for the ledger store's mutation and persistence rules.

These tests confirm that inserts land at the head, removal tolerates misses,
the JSON file round-trips, unreadable files start an empty ledger, and save
failures keep the in-memory ledger authoritative.
"""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from walletledger.ledger import (
    LedgerStore,
    LoadError,
    SaveError,
    Transaction,
    TransactionKind,
    compute_balance,
)

BASE = datetime(2024, 6, 1, 8, 0, tzinfo=timezone.utc)


def _transaction(kind: TransactionKind, category: str, amount: float, minutes: int = 0) -> Transaction:
    return Transaction(kind, category, amount, BASE + timedelta(minutes=minutes))


def test_insert_places_newest_first_and_persists(store: LedgerStore, ledger_path: Path) -> None:
    """New entries should land first and reach the file."""

    first = _transaction(TransactionKind.INCOME, "Maaş", 5000.0)
    second = _transaction(TransactionKind.EXPENSE, "Kira", 1500.0, minutes=1)

    store.insert(first)
    ledger = store.insert(second)

    assert ledger == (second, first)
    assert len(store) == 2
    persisted = json.loads(ledger_path.read_text(encoding="utf-8"))
    assert [entry["category"] for entry in persisted] == ["Kira", "Maaş"]


def test_save_then_load_round_trips(store: LedgerStore, ledger_path: Path) -> None:
    """Reloading a saved ledger should reproduce it byte for byte."""

    store.insert(_transaction(TransactionKind.INCOME, "Maaş", 5000.0))
    store.insert(_transaction(TransactionKind.EXPENSE, "Market", 312.45, minutes=5))
    store.insert(_transaction(TransactionKind.INCOME, "Hediye", 0.1, minutes=9))

    reopened = LedgerStore.open(ledger_path)

    assert reopened.transactions == store.transactions
    before = ledger_path.read_bytes()
    reopened.save()
    assert ledger_path.read_bytes() == before


def test_remove_missing_transaction_is_noop(store: LedgerStore) -> None:
    """Removing an unknown transaction should leave the ledger alone."""

    store.insert(_transaction(TransactionKind.INCOME, "Maaş", 5000.0))
    before = store.transactions

    after = store.remove(_transaction(TransactionKind.EXPENSE, "Kira", 1500.0))

    assert after == before


def test_remove_prefers_identifier_over_duplicate_values(store: LedgerStore) -> None:
    """Removal should pick the entry with the same id among duplicates."""

    older = _transaction(TransactionKind.EXPENSE, "Market", 20.0)
    newer = Transaction(older.kind, older.category, older.amount, older.timestamp)
    store.insert(older)
    store.insert(newer)

    remaining = store.remove(older)

    assert remaining == (newer,)


def test_remove_falls_back_to_value_match(store: LedgerStore) -> None:
    """Without a known id, removal should match on the stored values."""

    stored = _transaction(TransactionKind.EXPENSE, "Ulaşım", 42.0)
    store.insert(stored)
    lookalike = Transaction(stored.kind, stored.category, stored.amount, stored.timestamp)

    assert store.remove(lookalike) == ()


def test_clear_empties_ledger(store: LedgerStore, ledger_path: Path) -> None:
    """Clearing should empty both memory and file."""

    store.insert(_transaction(TransactionKind.INCOME, "Prim", 100.0))

    assert store.clear() == ()
    assert compute_balance(store.transactions) == 0
    assert json.loads(ledger_path.read_text(encoding="utf-8")) == []


def test_load_reports_missing_file(tmp_path: Path) -> None:
    """Loading an absent file should flag it as missing."""

    with pytest.raises(LoadError) as excinfo:
        LedgerStore(tmp_path / "absent.json").load()
    assert excinfo.value.missing


@pytest.mark.parametrize(
    "content",
    [
        "not json",
        '{"type": "Gelir"}',
        '[{"type": "Gelir", "category": "Kira", "amount": 1, "date": "2024-01-01T00:00:00"}]',
        '[{"type": "Gelir", "category": "Maaş"}]',
    ],
)
def test_malformed_file_starts_empty(ledger_path: Path, content: str) -> None:
    """Undecodable files should raise on load and open as empty."""

    ledger_path.write_text(content, encoding="utf-8")

    with pytest.raises(LoadError):
        LedgerStore(ledger_path).load()
    assert LedgerStore.open(ledger_path).transactions == ()


def test_load_accepts_files_without_identifiers(ledger_path: Path) -> None:
    """Files written by the mobile app should load in order."""

    ledger_path.write_text(
        json.dumps(
            [
                {"type": "Gider", "category": "Kira", "amount": 1500, "date": 739000000.5},
                {"type": "Gelir", "category": "Maaş", "amount": 5000, "date": 738990000},
            ]
        ),
        encoding="utf-8",
    )

    store = LedgerStore.open(ledger_path)

    assert [t.category for t in store.transactions] == ["Kira", "Maaş"]
    assert compute_balance(store.transactions) == pytest.approx(3500.0)


def test_save_failure_keeps_in_memory_mutation(tmp_path: Path) -> None:
    """A failed save should keep the new entry and record the error."""

    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    store = LedgerStore(blocker / "transaction.json")
    transaction = _transaction(TransactionKind.INCOME, "Maaş", 10.0)

    ledger = store.insert(transaction)

    assert ledger == (transaction,)
    assert isinstance(store.last_save_error, SaveError)
    with pytest.raises(SaveError):
        store.save()
    with pytest.raises(OSError):
        store.save()


def test_successful_save_clears_previous_error(tmp_path: Path) -> None:
    """A later successful save should clear the recorded error."""

    blocker = tmp_path / "blocker"
    blocker.write_text("x", encoding="utf-8")
    store = LedgerStore(blocker / "transaction.json")
    store.insert(_transaction(TransactionKind.INCOME, "Maaş", 10.0))
    assert store.last_save_error is not None

    blocker.unlink()
    store.insert(_transaction(TransactionKind.EXPENSE, "Market", 4.0, minutes=1))

    assert store.last_save_error is None
    assert len(LedgerStore.open(blocker / "transaction.json")) == 2


def test_legacy_file_with_negative_amount_survives_next_insert(ledger_path: Path) -> None:
    """Entries the mobile app saved with odd values should not be discarded."""

    ledger_path.write_text(
        json.dumps(
            [
                {"type": "Gider", "category": "Market", "amount": -5, "date": "2024-01-02T10:00:00Z"},
                {"type": "Gelir", "category": "Maaş", "amount": 100, "date": 738990000},
            ]
        ),
        encoding="utf-8",
    )
    store = LedgerStore.open(ledger_path)
    assert len(store) == 2

    store.insert(_transaction(TransactionKind.INCOME, "Prim", 10.0))

    persisted = json.loads(ledger_path.read_text(encoding="utf-8"))
    assert [entry["category"] for entry in persisted] == ["Prim", "Market", "Maaş"]
    assert persisted[1]["amount"] == -5.0
    assert compute_balance(LedgerStore.open(ledger_path).transactions) == pytest.approx(115.0)
