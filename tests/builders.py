"""Builders for ledger test data (no fixtures, importable from any test)."""

from datetime import date
from decimal import Decimal

from ledger_kernel.domain.ledger import (
    AccountCategory,
    BankStatementItem,
    Transaction,
    TransactionType,
)

CASH = ("Cash", AccountCategory.ASSET)
EQUIPMENT = ("Equipment", AccountCategory.ASSET)
LOAN = ("Bank Loan", AccountCategory.LIABILITY)
COMMON_STOCK = ("Common Stock", AccountCategory.EQUITY)
SALES = ("Sales Revenue", AccountCategory.REVENUE)
RENT = ("Rent Expense", AccountCategory.EXPENSE)


def make_tx(
    tx_id: str,
    account_name: str,
    category: AccountCategory,
    amount: str | Decimal,
    tx_type: TransactionType,
    day: date = date(2024, 1, 15),
    description: str = "",
) -> Transaction:
    return Transaction(
        id=tx_id,
        date=day,
        description=description or f"{account_name} {tx_type.value}",
        account_name=account_name,
        category=category,
        amount=Decimal(amount),
        type=tx_type,
    )


def make_line(
    line_id: str,
    amount: str | Decimal,
    day: date = date(2024, 1, 15),
    description: str = "",
) -> BankStatementItem:
    return BankStatementItem(
        id=line_id,
        date=day,
        description=description or f"LINE {line_id}",
        amount=Decimal(amount),
    )


def balanced_pair(
    pair_id: str,
    debit: tuple[str, AccountCategory],
    credit: tuple[str, AccountCategory],
    amount: str | Decimal,
    day: date = date(2024, 1, 15),
    description: str = "",
) -> tuple[Transaction, Transaction]:
    """A Debit/Credit pair of equal amount sharing a date and description."""
    desc = description or f"Entry {pair_id}"
    return (
        make_tx(f"{pair_id}-dr", debit[0], debit[1], amount,
                TransactionType.DEBIT, day, desc),
        make_tx(f"{pair_id}-cr", credit[0], credit[1], amount,
                TransactionType.CREDIT, day, desc),
    )


def three_pair_ledger() -> tuple[Transaction, ...]:
    """Capital 50000, sale 12000, rent 2000 -- all through Cash."""
    return (
        *balanced_pair("1", CASH, COMMON_STOCK, "50000", date(2024, 1, 1), "Capital"),
        *balanced_pair("2", CASH, SALES, "12000", date(2024, 1, 10), "Sale"),
        *balanced_pair("3", RENT, CASH, "2000", date(2024, 1, 5), "Rent"),
    )
