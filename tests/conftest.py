"""Pytest configuration and fixtures."""

from decimal import Decimal

import pytest

from bank_ledger.models import Account


@pytest.fixture
def seed() -> int:
    """Fixed seed for reproducible tests."""
    return 42


@pytest.fixture
def sample_account_number() -> str:
    """Valid 20-digit account number."""
    return "11111111112222222222"


@pytest.fixture
def sample_account(sample_account_number: str) -> Account:
    """Account opened with 1000.00."""
    return Account(
        account_number=sample_account_number,
        bik="123456789",
        kpp="987654321",
        correspondent_account=None,
        tax_id=None,
        owner_name="Ann",
        initial_balance=Decimal("1000.00"),
    )


@pytest.fixture
def accounts() -> list[Account]:
    """Small collection with overlapping requisites for search tests."""
    return [
        Account(
            "12345678901234567890",
            "044525225",
            "773601001",
            "30101810400000000225",
            "7707083893",
            "Ivan Petrov",
            Decimal("100"),
        ),
        Account(
            "12345678901234567891",
            "044525225",
            "773601002",
            None,
            None,
            "Maria Ivanova",
            Decimal("500"),
        ),
        Account(
            "40817810000000000001",
            "044525974",
            "773601001",
            None,
            "500100732259",
            "Petr Sidorov",
            Decimal("99.99"),
        ),
        Account(
            "40817810000000000002",
            "045004641",
            "540601001",
            "30101810500000000641",
            None,
            "Anna IVANOVA",
            Decimal("500.01"),
        ),
    ]
