"""Account model: balance plus an append-only transaction history."""

import re
from datetime import date
from decimal import Decimal

from bank_ledger.exceptions import InvalidAmountError, ValidationError
from bank_ledger.logging import get_logger
from bank_ledger.models.amount import Amount, exact_add, exact_subtract, to_decimal
from bank_ledger.models.enums import TransactionType
from bank_ledger.models.transaction import Transaction

logger = get_logger(__name__)

ACCOUNT_NUMBER_LENGTH = 20
BIK_LENGTH = 9
KPP_LENGTH = 9
CORR_ACCOUNT_LENGTH = 20

OPEN_DESCRIPTION = "Открытие счета с начальным балансом"
DEPOSIT_DESCRIPTION = "Пополнение счета"
WITHDRAWAL_DESCRIPTION = "Снятие наличных"


def _digits_pattern(length: int) -> re.Pattern[str]:
    # [0-9] rather than \d: \d also matches non-ASCII digits
    return re.compile(rf"[0-9]{{{length}}}")


_ACCOUNT_NUMBER_RE = _digits_pattern(ACCOUNT_NUMBER_LENGTH)
_BIK_RE = _digits_pattern(BIK_LENGTH)
_KPP_RE = _digits_pattern(KPP_LENGTH)
_CORR_ACCOUNT_RE = _digits_pattern(CORR_ACCOUNT_LENGTH)


def _require_digits(value: str | None, pattern: re.Pattern[str], field_name: str, length: int) -> None:
    if value is None:
        raise ValidationError(f"{field_name} is required")
    if not isinstance(value, str) or pattern.fullmatch(value) is None:
        raise ValidationError(f"{field_name} must contain exactly {length} digits")


class Account:
    """Bank account with Russian banking requisites.

    Identity fields (account number, BIK, KPP, correspondent account) are
    validated once here and are read-only afterwards. The balance changes
    only through :meth:`deposit` and :meth:`withdraw`, each of which records
    exactly one :class:`Transaction` on success.

    Two accounts are equal when their account numbers are equal.

    Parameters
    ----------
    account_number : str
        20-digit account number.
    bik : str
        9-digit bank identification code.
    kpp : str
        9-digit tax registration reason code.
    correspondent_account : str | None
        Optional 20-digit correspondent account of the bank.
    tax_id : str | None
        Optional owner INN, not validated.
    owner_name : str
        Account holder name, not validated.
    initial_balance : Decimal | int | float | str
        Opening balance. The sign is not checked, so a negative opening
        balance is recorded as given.

    Raises
    ------
    ValidationError
        If a requisite has the wrong format or the initial balance is
        not a number.
    """

    def __init__(
        self,
        account_number: str,
        bik: str,
        kpp: str,
        correspondent_account: str | None = None,
        tax_id: str | None = None,
        owner_name: str = "",
        initial_balance: Amount = Decimal("0"),
    ) -> None:
        _require_digits(account_number, _ACCOUNT_NUMBER_RE, "account_number", ACCOUNT_NUMBER_LENGTH)
        _require_digits(bik, _BIK_RE, "bik", BIK_LENGTH)
        _require_digits(kpp, _KPP_RE, "kpp", KPP_LENGTH)
        if correspondent_account is not None:
            _require_digits(
                correspondent_account,
                _CORR_ACCOUNT_RE,
                "correspondent_account",
                CORR_ACCOUNT_LENGTH,
            )
        balance = to_decimal(initial_balance, ValidationError, "initial_balance")

        self._account_number = account_number
        self._bik = bik
        self._kpp = kpp
        self._correspondent_account = correspondent_account
        self._tax_id = tax_id
        self._owner_name = owner_name
        self._balance = balance
        self._open_date = date.today()
        self._transactions: list[Transaction] = []

        self._record(TransactionType.OPEN_ACCOUNT, balance, OPEN_DESCRIPTION)
        logger.debug("Opened account %s with balance %s", account_number, balance)

    # Read accessors
    @property
    def account_number(self) -> str:
        return self._account_number

    @property
    def bik(self) -> str:
        return self._bik

    @property
    def kpp(self) -> str:
        return self._kpp

    @property
    def correspondent_account(self) -> str | None:
        return self._correspondent_account

    @property
    def tax_id(self) -> str | None:
        return self._tax_id

    @property
    def owner_name(self) -> str:
        return self._owner_name

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def open_date(self) -> date:
        return self._open_date

    @property
    def transactions(self) -> list[Transaction]:
        """Snapshot of the history, oldest first."""
        return list(self._transactions)

    # Operations
    def deposit(self, amount: Amount) -> None:
        """Add ``amount`` to the balance.

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not a number greater than zero.
        """
        value = self._positive_amount(amount, "deposit")
        self._balance = exact_add(self._balance, value)
        self._record(TransactionType.DEPOSIT, value, DEPOSIT_DESCRIPTION)
        logger.debug("Deposited %s to %s, balance %s", value, self._account_number, self._balance)

    def withdraw(self, amount: Amount) -> bool:
        """Take ``amount`` from the balance.

        Returns
        -------
        bool
            ``True`` when the withdrawal was applied, ``False`` when the
            balance is insufficient (nothing is changed in that case).

        Raises
        ------
        InvalidAmountError
            If ``amount`` is not a number greater than zero.
        """
        value = self._positive_amount(amount, "withdrawal")
        if value > self._balance:
            logger.info(
                "Insufficient funds on %s: requested %s, available %s",
                self._account_number,
                value,
                self._balance,
                extra={
                    "extra": {
                        "account_number": self._account_number,
                        "event": "withdrawal.insufficient_funds",
                    }
                },
            )
            return False

        self._balance = exact_subtract(self._balance, value)
        self._record(TransactionType.WITHDRAWAL, value, WITHDRAWAL_DESCRIPTION)
        logger.debug("Withdrew %s from %s, balance %s", value, self._account_number, self._balance)
        return True

    def _positive_amount(self, amount: Amount, operation: str) -> Decimal:
        value = to_decimal(amount, InvalidAmountError, f"{operation} amount")
        if value <= 0:
            raise InvalidAmountError(f"{operation} amount must be positive, got {value}")
        return value

    def _record(self, transaction_type: TransactionType, amount: Decimal, description: str) -> None:
        self._transactions.append(Transaction(transaction_type, amount, description))

    # Presentation
    def format(self, currency: str = "руб.", date_format: str = "%Y-%m-%d") -> str:
        """Render the three-line account card."""
        return (
            f"Счет: {self._account_number} | Владелец: {self._owner_name} | "
            f"Баланс: {self._balance:.2f} {currency}\n"
            f"БИК: {self._bik} | КПП: {self._kpp} | ИНН: {self._tax_id}\n"
            f"Корр. счет: {self._correspondent_account} | "
            f"Дата открытия: {self._open_date.strftime(date_format)}"
        )

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"Account(account_number={self._account_number!r}, "
            f"owner_name={self._owner_name!r}, balance={self._balance!r})"
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Account):
            return NotImplemented
        return self._account_number == other._account_number

    def __hash__(self) -> int:
        return hash(self._account_number)
