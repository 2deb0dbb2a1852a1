"""Mini README: Durable owner of the transaction ledger.

Structure:
    * Ledger - immutable, newest-first tuple of transactions.
    * LedgerStore - loads, mutates, and persists the ledger as one JSON file.

Every mutator swaps in a new snapshot and then saves the whole file through a
temporary file and ``os.replace``. When the save fails the new snapshot is
kept, the failure is logged, and ``last_save_error`` records it until the next
successful save. Mutators are serialised with a re-entrant lock so callbacks
from more than one thread never interleave.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from ..logging_utils import get_logger
from .errors import LoadError, SaveError, ValidationError
from .models import Transaction

LOGGER = get_logger(__name__)

Ledger = Tuple[Transaction, ...]


def decode_ledger(raw: Union[str, bytes]) -> Ledger:
    """Decode the persisted JSON array into a ledger, keeping file order."""

    payload = json.loads(raw)
    if not isinstance(payload, list):
        raise ValueError("Ledger file must contain a JSON array")
    entries: List[Transaction] = []
    for index, item in enumerate(payload):
        if not isinstance(item, dict):
            raise ValueError(f"Ledger entry {index} is not an object")
        entries.append(Transaction.from_dict(item))
    return tuple(entries)


def encode_ledger(ledger: Iterable[Transaction]) -> str:
    return json.dumps([transaction.as_dict() for transaction in ledger], ensure_ascii=False)


class LedgerStore:
    """Own the ledger snapshot and its JSON file."""

    def __init__(self, path: Union[str, Path]) -> None:
        self._path = Path(path)
        self._lock = threading.RLock()
        self._ledger: Ledger = ()
        self.last_save_error: Optional[SaveError] = None

    @classmethod
    def open(cls, path: Union[str, Path]) -> "LedgerStore":
        """Create a store and populate it from disk, starting empty on failure."""

        store = cls(path)
        store.reload()
        return store

    @property
    def path(self) -> Path:
        return self._path

    @property
    def transactions(self) -> Ledger:
        return self._ledger

    def __len__(self) -> int:
        return len(self._ledger)

    def load(self) -> Ledger:
        """Read and decode the persisted ledger without touching the snapshot."""

        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError as error:
            raise LoadError(self._path, "file does not exist", missing=True) from error
        except OSError as error:
            raise LoadError(self._path, str(error)) from error
        try:
            return decode_ledger(raw)
        except (ValueError, ValidationError) as error:
            raise LoadError(self._path, str(error)) from error

    def reload(self) -> Ledger:
        """Replace the snapshot with the persisted ledger, or an empty one."""

        with self._lock:
            try:
                self._ledger = self.load()
            except LoadError as error:
                if error.missing:
                    LOGGER.info("No ledger at %s yet; starting empty", self._path)
                else:
                    LOGGER.warning("%s; starting with an empty ledger", error)
                self._ledger = ()
            else:
                LOGGER.debug("Loaded %s transactions from %s", len(self._ledger), self._path)
            return self._ledger

    def save(self, ledger: Optional[Ledger] = None) -> None:
        """Atomically replace the persisted file with ``ledger``."""

        ledger = self._ledger if ledger is None else ledger
        data = encode_ledger(ledger)
        temp_name: Optional[str] = None
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            handle, temp_name = tempfile.mkstemp(
                dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
            )
            with os.fdopen(handle, "w", encoding="utf-8") as stream:
                stream.write(data)
            os.replace(temp_name, self._path)
        except OSError as error:
            if temp_name is not None and os.path.exists(temp_name):
                os.unlink(temp_name)
            raise SaveError(self._path, str(error)) from error
        LOGGER.debug("Saved %s transactions to %s", len(ledger), self._path)

    def _commit(self, ledger: Ledger) -> Ledger:
        self._ledger = ledger
        try:
            self.save(ledger)
        except SaveError as error:
            LOGGER.warning("%s; keeping in-memory ledger", error)
            self.last_save_error = error
        else:
            self.last_save_error = None
        return ledger

    def insert(self, transaction: Transaction) -> Ledger:
        """Put ``transaction`` at the head of the ledger and persist."""

        with self._lock:
            LOGGER.info(
                "Recording %s %s %.2f", transaction.kind.value, transaction.category, transaction.amount
            )
            return self._commit((transaction,) + self._ledger)

    def find_index(self, transaction: Transaction) -> Optional[int]:
        """Locate ``transaction`` by identifier, then by its value 4-tuple."""

        ledger = self._ledger
        for index, candidate in enumerate(ledger):
            if candidate.transaction_id == transaction.transaction_id:
                return index
        for index, candidate in enumerate(ledger):
            if candidate.same_values(transaction):
                return index
        return None

    def remove(self, transaction: Transaction) -> Ledger:
        """Drop the matching entry and persist; a miss leaves the ledger alone."""

        with self._lock:
            index = self.find_index(transaction)
            if index is None:
                LOGGER.info("Transaction %s not found; nothing removed", transaction.transaction_id)
                return self._ledger
            LOGGER.info("Removing transaction %s", self._ledger[index].transaction_id)
            return self._commit(self._ledger[:index] + self._ledger[index + 1 :])

    def clear(self) -> Ledger:
        """Empty the ledger and persist."""

        with self._lock:
            LOGGER.info("Clearing %s transactions", len(self._ledger))
            return self._commit(())
