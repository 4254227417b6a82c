"""Domain models for the in-memory ledger."""

from bank_ledger.models.account import Account
from bank_ledger.models.enums import TransactionType
from bank_ledger.models.transaction import Transaction

__all__ = ["Account", "Transaction", "TransactionType"]
