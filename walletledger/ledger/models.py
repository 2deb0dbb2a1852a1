"""Mini README: Transaction value objects and category vocabularies.

Structure:
    * TransactionKind - closed income/expense tag using the persisted values.
    * INCOME_CATEGORIES / EXPENSE_CATEGORIES - fixed vocabulary per kind.
    * Transaction - immutable ledger entry with a unique identifier.
    * parse_amount - converts free text typed by the user into an amount.

Transactions are validated at construction so a ledger never holds an entry
with an unknown category or a non-finite amount. Typed amounts must also be
non-negative; stored entries keep whatever sign they were saved with. The
``as_dict``/``from_dict`` pair defines the JSON shape written by the ledger
store.
"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Dict, Mapping, Optional, Tuple

from .errors import ValidationError

# Swift's JSONEncoder default: seconds since 2001-01-01T00:00:00Z.
APPLE_REFERENCE_DATE = datetime(2001, 1, 1, tzinfo=timezone.utc)


class TransactionKind(str, Enum):
    """Enumerate the supported transaction kinds."""

    INCOME = "Gelir"
    EXPENSE = "Gider"

    @classmethod
    def from_str(cls, value: str) -> "TransactionKind":
        """Accept the stored tag, the member name, or plain English aliases."""

        aliases = {
            "gelir": cls.INCOME,
            "income": cls.INCOME,
            "gider": cls.EXPENSE,
            "expense": cls.EXPENSE,
        }
        try:
            return aliases[value.strip().lower()]
        except (KeyError, AttributeError) as error:
            raise ValidationError(
                f"Unsupported transaction kind: {value}", field="kind"
            ) from error

    @property
    def sign(self) -> int:
        return 1 if self is TransactionKind.INCOME else -1


INCOME_CATEGORIES: Tuple[str, ...] = ("Maaş", "Prim", "Hediye", "Diğer")
EXPENSE_CATEGORIES: Tuple[str, ...] = ("Market", "Kira", "Eğlence", "Ulaşım", "Diğer")

CATEGORIES: Dict[TransactionKind, Tuple[str, ...]] = {
    TransactionKind.INCOME: INCOME_CATEGORIES,
    TransactionKind.EXPENSE: EXPENSE_CATEGORIES,
}


def categories_for(kind: TransactionKind) -> Tuple[str, ...]:
    """Return the category vocabulary offered for ``kind``."""

    return CATEGORIES[kind]


def parse_amount(text: object) -> float:
    """Parse user typed text into a finite, non-negative amount."""

    if text is None:
        raise ValidationError("An amount is required.", field="amount")
    raw = str(text)
    # float() also takes digit separators and padding; typed amounts may not.
    if "_" in raw or raw != raw.strip():
        raise ValidationError(f"Amount '{text}' is not a number.", field="amount")
    try:
        amount = float(raw)
    except ValueError as error:
        raise ValidationError(f"Amount '{text}' is not a number.", field="amount") from error
    _check_finite(amount)
    if amount < 0:
        raise ValidationError("Amount must not be negative; the kind carries the sign.", field="amount")
    return amount


def _check_finite(amount: float) -> None:
    if not math.isfinite(amount):
        raise ValidationError("Amount must be a finite number.", field="amount")


def _now() -> datetime:
    return datetime.now(timezone.utc).astimezone()


def _new_id() -> str:
    return uuid.uuid4().hex


def _encode_timestamp(value: datetime) -> str:
    return value.isoformat()


def _decode_timestamp(value: object) -> datetime:
    """Read ISO-8601 strings or Apple reference-date seconds."""

    if isinstance(value, bool):
        raise ValidationError("Transaction date is not a timestamp.", field="timestamp")
    if isinstance(value, (int, float)):
        try:
            return APPLE_REFERENCE_DATE + timedelta(seconds=value)
        except (OverflowError, ValueError) as error:
            raise ValidationError(f"Transaction date {value} is out of range.", field="timestamp") from error
    if isinstance(value, str):
        text = value.strip()
        # Python 3.10 fromisoformat rejects the "Z" suffix.
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as error:
            raise ValidationError(f"Invalid transaction date '{value}'.", field="timestamp") from error
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return parsed
    raise ValidationError("Transaction date must be an ISO string or a number.", field="timestamp")


@dataclass(frozen=True, slots=True)
class Transaction:
    """A single income or expense entry."""

    kind: TransactionKind
    category: str
    amount: float
    timestamp: datetime = field(default_factory=_now)
    transaction_id: str = field(default_factory=_new_id)

    def __post_init__(self) -> None:
        if not isinstance(self.kind, TransactionKind):
            raise ValidationError(f"Unsupported transaction kind: {self.kind!r}", field="kind")
        if not self.category:
            raise ValidationError("A category must be selected.", field="category")
        if self.category not in CATEGORIES[self.kind]:
            raise ValidationError(
                f"Category '{self.category}' is not available for {self.kind.value}.",
                field="category",
            )
        if isinstance(self.amount, bool) or not isinstance(self.amount, (int, float)):
            raise ValidationError("Amount must be numeric.", field="amount")
        _check_finite(self.amount)
        if not isinstance(self.timestamp, datetime):
            raise ValidationError("Timestamp must be a datetime.", field="timestamp")

    @classmethod
    def create(
        cls,
        kind: TransactionKind,
        category: Optional[str],
        amount_text: object,
        *,
        timestamp: Optional[datetime] = None,
    ) -> "Transaction":
        """Build a transaction from raw form input, stamping the current time."""

        if not category:
            raise ValidationError("A category must be selected.", field="category")
        amount = parse_amount(amount_text)
        return cls(kind=kind, category=category, amount=amount, timestamp=timestamp or _now())

    @property
    def signed_amount(self) -> float:
        return self.amount * self.kind.sign

    def values(self) -> Tuple[TransactionKind, str, float, datetime]:
        return (self.kind, self.category, self.amount, self.timestamp)

    def same_values(self, other: "Transaction") -> bool:
        """Compare kind, category, amount and timestamp, ignoring the identifier."""

        return self.values() == other.values()

    def as_dict(self) -> Dict[str, object]:
        """Export the transaction in the persisted JSON shape."""

        return {
            "id": self.transaction_id,
            "type": self.kind.value,
            "category": self.category,
            "amount": self.amount,
            "date": _encode_timestamp(self.timestamp),
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, object]) -> "Transaction":
        """Rebuild a transaction, assigning an identifier when none was stored."""

        try:
            kind = TransactionKind.from_str(str(payload["type"]))
            category = payload["category"]
            amount = payload["amount"]
            timestamp = _decode_timestamp(payload["date"])
        except KeyError as error:
            raise ValidationError(f"Transaction is missing field {error}.") from error
        if not isinstance(category, str):
            raise ValidationError("Category must be a string.", field="category")
        if isinstance(amount, int) and not isinstance(amount, bool):
            amount = float(amount)
        transaction_id = payload.get("id") or _new_id()
        return cls(
            kind=kind,
            category=category,
            amount=amount,
            timestamp=timestamp,
            transaction_id=str(transaction_id),
        )
