"""Attribute search over collections of accounts.

Every function here is pure: it never mutates the supplied collection or
any account in it, and results keep the relative order of the input.
"""

from typing import Callable, Iterable

from bank_ledger.exceptions import ValidationError
from bank_ledger.models import Account
from bank_ledger.models.amount import Amount, to_decimal

AccountPredicate = Callable[[Account], bool]


def search(accounts: Iterable[Account], predicate: AccountPredicate) -> list[Account]:
    """Return the accounts satisfying ``predicate``, in input order."""
    return [account for account in accounts if predicate(account)]


def by_account_number(accounts: Iterable[Account], account_number: str) -> list[Account]:
    """Exact match on account number."""
    return search(accounts, lambda account: account.account_number == account_number)


def by_bik(accounts: Iterable[Account], bik: str) -> list[Account]:
    """Exact match on BIK."""
    return search(accounts, lambda account: account.bik == bik)


def by_kpp(accounts: Iterable[Account], kpp: str) -> list[Account]:
    """Exact match on KPP."""
    return search(accounts, lambda account: account.kpp == kpp)


def by_owner_name(accounts: Iterable[Account], owner_name: str) -> list[Account]:
    """Case-insensitive substring match on owner name."""
    return search(accounts, _name_contains(owner_name))


def by_tax_id(accounts: Iterable[Account], tax_id: str | None) -> list[Account]:
    """Exact match on tax id.

    ``None`` is a value here, not a wildcard: it selects the accounts
    that have no tax id.
    """
    return search(accounts, lambda account: account.tax_id == tax_id)


def by_balance_range(
    accounts: Iterable[Account],
    min_balance: Amount,
    max_balance: Amount,
) -> list[Account]:
    """Accounts with ``min_balance <= balance <= max_balance``.

    An inverted range (``min_balance > max_balance``) matches nothing.
    """
    low = to_decimal(min_balance, ValidationError, "min_balance")
    high = to_decimal(max_balance, ValidationError, "max_balance")
    return search(accounts, lambda account: low <= account.balance <= high)


def advanced_search(
    accounts: Iterable[Account],
    account_number: str | None = None,
    bik: str | None = None,
    kpp: str | None = None,
    owner_name: str | None = None,
) -> list[Account]:
    """Combine several partial filters with logical AND.

    Empty or missing arguments do not constrain the result. Account
    number, BIK and KPP match as substrings here, unlike the exact
    single-field lookups above; owner name matches case-insensitively.
    """
    predicates: list[AccountPredicate] = []

    if account_number:
        predicates.append(lambda account: account_number in account.account_number)

    if bik:
        predicates.append(lambda account: bik in account.bik)

    if kpp:
        predicates.append(lambda account: kpp in account.kpp)

    if owner_name:
        predicates.append(_name_contains(owner_name))

    return search(accounts, lambda account: all(p(account) for p in predicates))


def _name_contains(fragment: str) -> AccountPredicate:
    needle = fragment.casefold()
    return lambda account: needle in account.owner_name.casefold()
