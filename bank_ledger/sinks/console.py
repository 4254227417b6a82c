"""Console sink rendering accounts and statements as text."""

import sys
from decimal import Decimal
from typing import Sequence, TextIO

from bank_ledger.config import DisplayConfig
from bank_ledger.models import Account

SEPARATOR = "---"
NO_ACCOUNTS = "Счета не найдены."
NO_TRANSACTIONS = "Транзакций не найдено."


class ConsoleSink:
    """Write human-readable ledger output to a text stream."""

    def __init__(self, stream: TextIO | None = None, display: DisplayConfig | None = None) -> None:
        """Initialize console sink.

        Parameters
        ----------
        stream : TextIO | None
            Destination stream (stdout when None).
        display : DisplayConfig | None
            Currency and date formatting options.
        """
        self.stream = stream if stream is not None else sys.stdout
        self.display = display or DisplayConfig()

    def write_account(self, account: Account) -> None:
        """Write a single account card."""
        self._print(account.format(self.display.currency, self.display.date_format))

    def write_accounts(self, accounts: Sequence[Account]) -> None:
        """Write a numbered list of accounts."""
        if not accounts:
            self._print(NO_ACCOUNTS)
            return

        for i, account in enumerate(accounts, start=1):
            self._print(f"{i}. {account.format(self.display.currency, self.display.date_format)}")
            self._print(SEPARATOR)

    def write_search_results(self, results: Sequence[Account]) -> None:
        """Write search results preceded by a match count."""
        if not results:
            self._print(NO_ACCOUNTS)
            return

        self._print(f"\nНайдено счетов: {len(results)}")
        for account in results:
            self.write_account(account)
            self._print(SEPARATOR)

    def write_transactions(self, account: Account) -> None:
        """Write the transaction history of an account."""
        transactions = account.transactions
        if not transactions:
            self._print(NO_TRANSACTIONS)
            return

        self._print(f"История транзакций для счета {account.account_number}:")
        for transaction in transactions:
            self._print(transaction.format(self.display.currency, self.display.timestamp_format))

    def write_balance(self, account: Account) -> None:
        """Write the current balance of an account."""
        self._print(f"Текущий баланс: {self._money(account.balance)}")

    def write_summary(self, summary: dict[str, int | Decimal]) -> None:
        """Write book summary counts."""
        self._print(f"\n{'=' * 60}")
        self._print("Ledger Summary")
        self._print("=" * 60)
        for key, value in summary.items():
            if isinstance(value, Decimal):
                value = self._money(value)
            self._print(f"  {key}: {value}")

    def _money(self, amount: Decimal) -> str:
        return f"{amount:.2f} {self.display.currency}"

    def _print(self, text: str) -> None:
        print(text, file=self.stream)
