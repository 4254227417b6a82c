"""In-memory banking ledger: accounts, transaction history and attribute search."""

__version__ = "0.1.0"
