"""Enumeration types for ledger entities."""

from enum import Enum


class TransactionType(str, Enum):
    OPEN_ACCOUNT = "OPEN_ACCOUNT"
    DEPOSIT = "DEPOSIT"
    WITHDRAWAL = "WITHDRAWAL"

    @property
    def label(self) -> str:
        """Human-readable name shown in statements."""
        return _TRANSACTION_LABELS[self]


_TRANSACTION_LABELS = {
    TransactionType.OPEN_ACCOUNT: "Открытие счета",
    TransactionType.DEPOSIT: "Пополнение",
    TransactionType.WITHDRAWAL: "Снятие",
}
