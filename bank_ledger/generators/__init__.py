"""Synthetic data generators for demos and tests."""

from bank_ledger.generators.account import AccountGenerator

__all__ = ["AccountGenerator"]
