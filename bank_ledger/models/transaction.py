"""Transaction model for the ledger."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal

from bank_ledger.models.enums import TransactionType

TIMESTAMP_FORMAT = "%d.%m.%Y %H:%M:%S"


@dataclass(frozen=True)
class Transaction:
    """A single balance-affecting event in an account history.

    Instances are created by :class:`~bank_ledger.models.account.Account`
    when an operation succeeds and are never modified afterwards.
    """

    transaction_type: TransactionType
    amount: Decimal
    description: str
    timestamp: datetime = field(default_factory=datetime.now)

    def format(self, currency: str = "руб.", timestamp_format: str = TIMESTAMP_FORMAT) -> str:
        """Render the transaction as a statement line."""
        return (
            f"[{self.timestamp.strftime(timestamp_format)}] "
            f"{self.transaction_type.label}: {self.amount:.2f} {currency} - {self.description}"
        )

    def __str__(self) -> str:
        return self.format()
