"""Mini README: Presentation-facing entry points for the wallet ledger.

Structure:
    * WalletController - translates screen events into ledger mutations and
      hands back the balance and the filtered list to render.

The controller never prompts the user. Screens obtain confirmation (for
example before clearing everything) and only then call the matching
``on_*`` method. Validation failures raise ``ValidationError`` before any
state changes; save failures are reported through ``last_save_warning``.
"""

from __future__ import annotations

from typing import Dict, Optional, Tuple, Union

from .ledger import (
    FilterMode,
    Ledger,
    LedgerStore,
    Transaction,
    TransactionKind,
    ValidationError,
    categories_for,
    category_totals,
    compute_balance,
    filter_transactions,
    summarise,
)
from .logging_utils import get_logger

LOGGER = get_logger(__name__)


class WalletController:
    """Bind screen events to the ledger store and its projections."""

    def __init__(self, store: LedgerStore, mode: object = FilterMode.ALL) -> None:
        self._store = store
        self._mode = FilterMode.coerce(mode)
        LOGGER.debug("Wallet controller ready with %s transactions", len(store))

    @property
    def store(self) -> LedgerStore:
        return self._store

    @property
    def filter_mode(self) -> FilterMode:
        return self._mode

    @property
    def last_save_warning(self) -> Optional[str]:
        error = self._store.last_save_error
        return str(error) if error else None

    def categories_for(self, kind: Union[TransactionKind, str]) -> Tuple[str, ...]:
        if not isinstance(kind, TransactionKind):
            kind = TransactionKind.from_str(kind)
        return categories_for(kind)

    def on_add_transaction(
        self, kind: Union[TransactionKind, str], category: Optional[str], amount_text: object
    ) -> Transaction:
        """Validate form input, record the transaction, and return it."""

        try:
            if not isinstance(kind, TransactionKind):
                kind = TransactionKind.from_str(kind)
            transaction = Transaction.create(kind, category, amount_text)
        except ValidationError as error:
            LOGGER.info("Rejected transaction input: %s", error)
            raise
        self._store.insert(transaction)
        return transaction

    def on_delete_row(self, filtered_index: int) -> Transaction:
        """Remove the transaction shown at ``filtered_index`` in the current view."""

        view = self.get_filtered_view()
        if not 0 <= filtered_index < len(view):
            raise IndexError(f"Row {filtered_index} is outside the {len(view)} visible transactions")
        transaction = view[filtered_index]
        self._store.remove(transaction)
        return transaction

    def on_filter_changed(self, mode: object) -> Ledger:
        self._mode = FilterMode.coerce(mode)
        LOGGER.debug("Filter changed to %s", self._mode.name)
        return self.get_filtered_view()

    def on_clear_all(self) -> None:
        """Empty the ledger; call only after the user confirmed."""

        self._store.clear()

    def get_balance(self) -> float:
        return compute_balance(self._store.transactions)

    def get_filtered_view(self) -> Ledger:
        return filter_transactions(self._store.transactions, self._mode)

    def get_summary(self) -> Dict[str, float]:
        return summarise(self._store.transactions)

    def get_category_totals(
        self, kind: Optional[TransactionKind] = None
    ) -> Dict[Tuple[TransactionKind, str], float]:
        return category_totals(self._store.transactions, kind)
