"""In-memory account storage for a ledger session."""

from bank_ledger.store.ledger import AccountBook

__all__ = ["AccountBook"]
