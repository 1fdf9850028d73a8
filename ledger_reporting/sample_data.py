"""Sample ledger and bank statement for a one-month trading company."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from ledger_kernel.domain.ledger import (
    AccountCategory,
    BankStatementItem,
    Transaction,
    TransactionType,
)

_A = AccountCategory
_DR = TransactionType.DEBIT
_CR = TransactionType.CREDIT


def _tx(
    tx_id: str,
    day: date,
    description: str,
    account_name: str,
    category: AccountCategory,
    amount: str,
    tx_type: TransactionType,
) -> Transaction:
    return Transaction(
        id=tx_id,
        date=day,
        description=description,
        account_name=account_name,
        category=category,
        amount=Decimal(amount),
        type=tx_type,
    )


SAMPLE_TRANSACTIONS: tuple[Transaction, ...] = (
    _tx("1", date(2023, 10, 1), "Initial Capital", "Cash", _A.ASSET, "50000", _DR),
    _tx("2", date(2023, 10, 1), "Initial Capital", "Common Stock", _A.EQUITY, "50000", _CR),
    _tx("3", date(2023, 10, 5), "Monthly Rent", "Rent Expense", _A.EXPENSE, "2000", _DR),
    _tx("4", date(2023, 10, 5), "Monthly Rent", "Cash", _A.ASSET, "2000", _CR),
    _tx("5", date(2023, 10, 10), "Product Sale", "Cash", _A.ASSET, "12000", _DR),
    _tx("6", date(2023, 10, 10), "Product Sale", "Sales Revenue", _A.REVENUE, "12000", _CR),
    _tx("7", date(2023, 10, 15), "Office Equipment", "Equipment", _A.ASSET, "5000", _DR),
    _tx("8", date(2023, 10, 15), "Office Equipment", "Cash", _A.ASSET, "5000", _CR),
    _tx("9", date(2023, 10, 20), "Employee Salaries", "Payroll Expense", _A.EXPENSE, "4500", _DR),
    _tx("10", date(2023, 10, 20), "Employee Salaries", "Cash", _A.ASSET, "4500", _CR),
    # Unpaired prior-month postings
    _tx("11", date(2023, 9, 10), "Prior Sale", "Sales Revenue", _A.REVENUE, "40000", _CR),
    _tx("12", date(2023, 9, 15), "Prior Rent", "Rent Expense", _A.EXPENSE, "2000", _DR),
)


SAMPLE_BANK_STATEMENT: tuple[BankStatementItem, ...] = (
    BankStatementItem("st1", date(2023, 10, 1), "DEPOSIT CAPITAL", Decimal("50000")),
    BankStatementItem("st2", date(2023, 10, 5), "CHECK #101 RENT", Decimal("-2000")),
    BankStatementItem("st3", date(2023, 10, 10), "POS CREDIT SALE", Decimal("12000")),
    BankStatementItem("st4", date(2023, 10, 15), "EQUIPMENT PURCHASE", Decimal("-5000")),
    BankStatementItem("st5", date(2023, 10, 22), "BANK FEE", Decimal("-25")),
)
