"""Account generator producing valid synthetic requisites."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterator

from bank_ledger.generators.base import BaseGenerator
from bank_ledger.models import Account


class AccountGenerator(BaseGenerator):
    """Generate synthetic bank accounts with valid requisites.

    Account numbers use the ``40817810`` prefix of a personal rouble
    account, correspondent accounts the ``30101810`` prefix, and BIKs
    start with the ``04`` country code.
    """

    ACCOUNT_PREFIX = "40817810"
    CORR_ACCOUNT_PREFIX = "30101810"
    BIK_PREFIX = "04"

    # Share of accounts carrying the optional fields
    CORR_ACCOUNT_RATE = 0.8
    TAX_ID_RATE = 0.7

    MAX_BALANCE_KOPECKS = 10_000_000

    def __init__(self, seed: int | None = None, locale: str = "ru_RU") -> None:
        super().__init__(seed, locale)
        self._issued: set[str] = set()

    def generate(self) -> Account:
        """Generate a single account.

        Returns
        -------
        Account
            Generated account with a number not issued before by this
            generator.
        """
        return self._generate_one()

    def generate_batch(self, count: int) -> Iterator[Account]:
        """Generate multiple accounts.

        Parameters
        ----------
        count : int
            Number of accounts to generate.

        Yields
        ------
        Account
            Generated accounts.
        """
        for _ in range(count):
            yield self._generate_one()

    def _generate_one(self) -> Account:
        """Generate a single account."""
        fake = self.fake

        has_corr = fake.random.random() < self.CORR_ACCOUNT_RATE
        has_tax_id = fake.random.random() < self.TAX_ID_RATE
        kopecks = fake.random_int(min=0, max=self.MAX_BALANCE_KOPECKS)

        return Account(
            account_number=self._unique_account_number(),
            bik=self.BIK_PREFIX + fake.numerify("#" * 7),
            kpp=fake.numerify("#" * 9),
            correspondent_account=(
                self.CORR_ACCOUNT_PREFIX + fake.numerify("#" * 12) if has_corr else None
            ),
            tax_id=fake.numerify("#" * 12) if has_tax_id else None,
            owner_name=fake.name(),
            initial_balance=(Decimal(kopecks) / 100).quantize(Decimal("0.01")),
        )

    def _unique_account_number(self) -> str:
        while True:
            number = self.ACCOUNT_PREFIX + self.fake.numerify("#" * 12)
            if number not in self._issued:
                self._issued.add(number)
                return number
