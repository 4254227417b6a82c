"""Shared serialization utilities for sinks."""

from dataclasses import fields
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from bank_ledger.models import Account, Transaction


def to_dict(obj: Account | Transaction) -> dict:
    """Convert an account or a transaction to a JSON-friendly dict."""
    if isinstance(obj, Account):
        return account_to_dict(obj)
    elif isinstance(obj, Transaction):
        return transaction_to_dict(obj)
    raise TypeError(f"Cannot serialize {type(obj).__name__}")


def dataclass_to_dict(obj: Any) -> dict:
    """Convert a flat dataclass to dict with proper serialization."""
    return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}


def transaction_to_dict(transaction: Transaction) -> dict:
    """Convert a transaction to a JSON-friendly dict."""
    return dataclass_to_dict(transaction)


def account_to_dict(account: Account, include_transactions: bool = True) -> dict:
    """Convert an account, optionally with its history, to a dict."""
    result = {
        "account_number": account.account_number,
        "bik": account.bik,
        "kpp": account.kpp,
        "correspondent_account": account.correspondent_account,
        "tax_id": account.tax_id,
        "owner_name": account.owner_name,
        "balance": serialize_value(account.balance),
        "open_date": serialize_value(account.open_date),
    }
    if include_transactions:
        result["transactions"] = [transaction_to_dict(tx) for tx in account.transactions]
    return result


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return str(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value
