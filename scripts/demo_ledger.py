#!/usr/bin/env python3
"""Run a non-interactive ledger session.

Generates synthetic accounts, applies a round of deposits and
withdrawals, then prints account cards, one statement and a few
attribute searches to stdout.
"""

import argparse
import json
import sys
from decimal import Decimal
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from bank_ledger import search
from bank_ledger.config import LedgerConfig
from bank_ledger.exceptions import LedgerError
from bank_ledger.generators import AccountGenerator
from bank_ledger.logging import get_logger, setup_logging
from bank_ledger.sinks import ConsoleSink, to_dict
from bank_ledger.store import AccountBook

logger = get_logger(__name__)


def populate(book: AccountBook, generator: AccountGenerator, num_accounts: int) -> None:
    """Open generated accounts in the book."""
    for account in generator.generate_batch(num_accounts):
        book.add_account(account)


def run_operations(book: AccountBook, generator: AccountGenerator) -> None:
    """Deposit into every account, then try to withdraw a random sum."""
    rng = generator.fake.random
    for account in book:
        book.deposit(account.account_number, Decimal(rng.randint(100, 5000)))
        requested = Decimal(rng.randint(1, 60000))
        if not book.withdraw(account.account_number, requested):
            print(f"Недостаточно средств на счете {account.account_number} для снятия {requested:.2f}")


def show_searches(book: AccountBook, sink: ConsoleSink) -> None:
    """Print a sample of each search kind."""
    accounts = book.accounts
    first = accounts[0]

    print(f"\nПоиск по БИК {first.bik}:")
    sink.write_search_results(search.by_bik(accounts, first.bik))

    fragment = first.owner_name.split()[0][:3]
    print(f"\nПоиск по имени владельца '{fragment}':")
    sink.write_search_results(search.by_owner_name(accounts, fragment))

    print("\nСчета без ИНН:")
    sink.write_search_results(search.by_tax_id(accounts, None))

    print("\nБаланс от 10000 до 50000:")
    sink.write_search_results(search.by_balance_range(accounts, 10000, 50000))

    print(f"\nКомплексный поиск (КПП содержит '{first.kpp[:4]}'):")
    sink.write_search_results(search.advanced_search(accounts, kpp=first.kpp[:4]))


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Run a sample in-memory ledger session")
    parser.add_argument(
        "--accounts",
        type=int,
        default=5,
        help="Number of accounts to open (default: 5)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducibility (default: LEDGER_SEED or none)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the final book as JSON instead of text",
    )
    args = parser.parse_args()

    try:
        config = LedgerConfig.from_env()
    except LedgerError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        sys.exit(2)

    setup_logging(config.log_level, config.log_format)
    seed = args.seed if args.seed is not None else config.seed

    if args.accounts < 1:
        parser.error("--accounts must be at least 1")

    book = AccountBook()
    generator = AccountGenerator(seed=seed)
    sink = ConsoleSink(display=config.display)

    populate(book, generator, args.accounts)
    run_operations(book, generator)
    logger.info("Session finished with %d accounts", len(book))

    if args.json:
        print(json.dumps([to_dict(a) for a in book], indent=2, ensure_ascii=False))
        return

    print("\n--- ВСЕ СЧЕТА ---")
    sink.write_accounts(book.accounts)

    first = book.accounts[0]
    print("\n--- ИСТОРИЯ ТРАНЗАКЦИЙ ---")
    sink.write_transactions(first)
    sink.write_balance(first)

    show_searches(book, sink)
    sink.write_summary(book.summary())


if __name__ == "__main__":
    main()
