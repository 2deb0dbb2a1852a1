"""Mini README: Ledger core for the wallet tracker.

This package keeps the authoritative transaction list and derives everything
the screens display from it. ``store`` owns persistence and mutation,
``projection`` computes balances and filtered views, ``models`` defines the
transaction value object, and ``errors`` the recoverable failure types.
"""

from .errors import LedgerError, LoadError, SaveError, ValidationError
from .models import (
    EXPENSE_CATEGORIES,
    INCOME_CATEGORIES,
    Transaction,
    TransactionKind,
    categories_for,
    parse_amount,
)
from .projection import (
    FilterMode,
    category_totals,
    compute_balance,
    describe,
    filter_transactions,
    format_amount,
    summarise,
)
from .store import Ledger, LedgerStore

__all__ = [
    "EXPENSE_CATEGORIES",
    "FilterMode",
    "INCOME_CATEGORIES",
    "Ledger",
    "LedgerError",
    "LedgerStore",
    "LoadError",
    "SaveError",
    "Transaction",
    "TransactionKind",
    "ValidationError",
    "categories_for",
    "category_totals",
    "compute_balance",
    "describe",
    "filter_transactions",
    "format_amount",
    "parse_amount",
    "summarise",
]
