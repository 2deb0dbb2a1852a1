"""Mini README: Read-only projections derived from a ledger snapshot.

Structure:
    * FilterMode - the three list filters, numbered like the segment control.
    * compute_balance - signed sum of every transaction.
    * filter_transactions - order preserving subsequence for a filter mode.
    * category_totals - per category sums backing the detail chart.
    * summarise - totals dictionary for dashboards and the CLI.
    * format_amount - two decimal rendering with a currency symbol.

Every function here is pure: it reads the sequence it is given and never
mutates or reorders it.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, List, Optional, Sequence, Tuple

from ..logging_utils import get_logger
from .models import Transaction, TransactionKind

LOGGER = get_logger(__name__)


class FilterMode(IntEnum):
    """Selectable list filters."""

    ALL = 0
    INCOME_ONLY = 1
    EXPENSE_ONLY = 2

    @classmethod
    def coerce(cls, value: object) -> "FilterMode":
        """Resolve indices, names or aliases; anything unknown means ``ALL``."""

        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            try:
                return cls(value)
            except ValueError:
                return cls.ALL
        if isinstance(value, str):
            aliases = {
                "all": cls.ALL,
                "income": cls.INCOME_ONLY,
                "income_only": cls.INCOME_ONLY,
                "gelir": cls.INCOME_ONLY,
                "expense": cls.EXPENSE_ONLY,
                "expense_only": cls.EXPENSE_ONLY,
                "gider": cls.EXPENSE_ONLY,
            }
            return aliases.get(value.strip().lower(), cls.ALL)
        return cls.ALL


def compute_balance(ledger: Sequence[Transaction]) -> float:
    """Return income minus expenses without any rounding."""

    balance = 0.0
    for transaction in ledger:
        balance += transaction.signed_amount
    return balance


def filter_transactions(ledger: Sequence[Transaction], mode: object = FilterMode.ALL) -> Tuple[Transaction, ...]:
    """Return the entries visible under ``mode`` in ledger order."""

    resolved = FilterMode.coerce(mode)
    if resolved is FilterMode.INCOME_ONLY:
        view = tuple(t for t in ledger if t.kind is TransactionKind.INCOME)
    elif resolved is FilterMode.EXPENSE_ONLY:
        view = tuple(t for t in ledger if t.kind is TransactionKind.EXPENSE)
    else:
        view = tuple(ledger)
    LOGGER.debug("Filter %s selected %s of %s transactions", resolved.name, len(view), len(ledger))
    return view


def category_totals(
    ledger: Sequence[Transaction], kind: Optional[TransactionKind] = None
) -> Dict[Tuple[TransactionKind, str], float]:
    """Sum amounts per (kind, category) in first-seen order.

    Categories shared by both kinds, such as "Diğer", are kept apart because
    the kind is part of the key.
    """

    totals: Dict[Tuple[TransactionKind, str], float] = {}
    for transaction in ledger:
        if kind is not None and transaction.kind is not kind:
            continue
        key = (transaction.kind, transaction.category)
        totals[key] = totals.get(key, 0.0) + transaction.amount
    return totals


def summarise(ledger: Sequence[Transaction]) -> Dict[str, float]:
    """Aggregate ledger totals for display."""

    income_total = sum(t.amount for t in ledger if t.kind is TransactionKind.INCOME)
    expense_total = sum(t.amount for t in ledger if t.kind is TransactionKind.EXPENSE)
    return {
        "transaction_count": len(ledger),
        "income_total": float(income_total),
        "expense_total": float(expense_total),
        "balance": compute_balance(ledger),
    }


def format_amount(value: float, symbol: str = "₺") -> str:
    return f"{value:.2f}{symbol}"


def describe(transactions: Sequence[Transaction], symbol: str = "₺") -> List[str]:
    """Render one display line per transaction, as the list rows show them."""

    lines: List[str] = []
    for transaction in transactions:
        stamp = transaction.timestamp.strftime("%d %b %Y %H:%M")
        lines.append(
            f"{transaction.kind.value}: {transaction.category} "
            f"{format_amount(transaction.amount, symbol)} • {stamp}"
        )
    return lines
