"""Session account book: the ordered in-memory collection of accounts."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterator

from bank_ledger.exceptions import AccountNotFoundError, DuplicateAccountError, ValidationError
from bank_ledger.logging import get_logger
from bank_ledger.models import Account
from bank_ledger.models.amount import Amount
from bank_ledger.search import by_account_number

logger = get_logger(__name__)


@dataclass
class AccountBook:
    """In-memory store of accounts kept in opening order.

    Nothing is persisted; the book lives for the duration of a session.
    Accounts are never removed.
    """

    _accounts: list[Account] = field(default_factory=list, init=False, repr=False)
    _numbers: set[str] = field(default_factory=set, init=False, repr=False)

    def add_account(self, account: Account) -> None:
        """Add an already constructed account to the book."""
        if account.account_number in self._numbers:
            raise DuplicateAccountError(f"Account {account.account_number} already exists")

        self._accounts.append(account)
        self._numbers.add(account.account_number)
        logger.info(
            "Account %s added for %s",
            account.account_number,
            account.owner_name,
            extra={"extra": {"account_number": account.account_number, "event": "account.added"}},
        )

    def open_account(
        self,
        account_number: str,
        bik: str,
        kpp: str,
        correspondent_account: str | None = None,
        tax_id: str | None = None,
        owner_name: str = "",
        initial_balance: Amount = Decimal("0"),
    ) -> Account:
        """Construct a new account and add it to the book.

        Raises
        ------
        ValidationError
            If the requisites are invalid. The book is left unchanged.
        DuplicateAccountError
            If the account number is already in the book.
        """
        try:
            account = Account(
                account_number=account_number,
                bik=bik,
                kpp=kpp,
                correspondent_account=correspondent_account,
                tax_id=tax_id,
                owner_name=owner_name,
                initial_balance=initial_balance,
            )
        except ValidationError as e:
            logger.warning("Rejected account %r: %s", account_number, e)
            raise

        self.add_account(account)
        return account

    def get_account(self, account_number: str) -> Account:
        """Get the account with exactly this number."""
        found = by_account_number(self._accounts, account_number)
        if not found:
            raise AccountNotFoundError(f"Account {account_number} not found")
        return found[0]

    def deposit(self, account_number: str, amount: Amount) -> Decimal:
        """Deposit into an account and return its new balance."""
        account = self.get_account(account_number)
        account.deposit(amount)
        return account.balance

    def withdraw(self, account_number: str, amount: Amount) -> bool:
        """Withdraw from an account; ``False`` means insufficient funds."""
        return self.get_account(account_number).withdraw(amount)

    @property
    def accounts(self) -> list[Account]:
        """All accounts in opening order (a copy)."""
        return list(self._accounts)

    def summary(self) -> dict[str, int | Decimal]:
        """Return summary counts of the book."""
        return {
            "accounts": len(self._accounts),
            "transactions": sum(len(a.transactions) for a in self._accounts),
            "total_balance": sum((a.balance for a in self._accounts), Decimal("0")),
        }

    def __len__(self) -> int:
        return len(self._accounts)

    def __iter__(self) -> Iterator[Account]:
        return iter(list(self._accounts))

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Account):
            return item.account_number in self._numbers
        if isinstance(item, str):
            return item in self._numbers
        return False
