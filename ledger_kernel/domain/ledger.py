"""
Ledger -- Immutable transaction and bank statement records.

Responsibility:
    Defines the value types that enter the reporting core: ledger
    transactions (one side of a double entry each) and external bank
    statement lines.  Also owns the category -> normal-balance mapping
    used by every natural-balance computation.

Architecture position:
    Kernel > Domain -- pure functional core, zero I/O.
    Imported by engines, ingestion, and the reporting module.

Invariants enforced:
    - Transaction.amount is a non-negative Decimal magnitude; the sign is
      implied by ``type`` and never stored.
    - BankStatementItem.amount is signed (positive = deposit).
    - All records are frozen.

Failure modes:
    - ValueError on a Transaction constructed with a negative amount or a
      non-Decimal amount.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum


class AccountCategory(str, Enum):
    """Statement category of a ledger account."""

    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    REVENUE = "Revenue"
    EXPENSE = "Expense"


class TransactionType(str, Enum):
    """Side of the double entry a transaction posts to."""

    DEBIT = "Debit"
    CREDIT = "Credit"


class NormalBalance(str, Enum):
    """Normal balance side for an account category."""

    DEBIT = "debit"
    CREDIT = "credit"


_NORMAL_BALANCES: dict[AccountCategory, NormalBalance] = {
    AccountCategory.ASSET: NormalBalance.DEBIT,
    AccountCategory.EXPENSE: NormalBalance.DEBIT,
    AccountCategory.LIABILITY: NormalBalance.CREDIT,
    AccountCategory.EQUITY: NormalBalance.CREDIT,
    AccountCategory.REVENUE: NormalBalance.CREDIT,
}


def normal_balance_for(category: AccountCategory) -> NormalBalance:
    """Return the side on which accounts of ``category`` naturally increase."""
    return _NORMAL_BALANCES[category]


@dataclass(frozen=True)
class Transaction:
    """
    One side of a double-entry posting.

    A balanced ledger is built from pairs of transactions sharing a date
    and description, one Debit and one Credit of equal amount.
    """

    id: str
    date: date
    description: str
    account_name: str
    category: AccountCategory
    amount: Decimal
    type: TransactionType

    def __post_init__(self) -> None:
        if not isinstance(self.amount, Decimal):
            raise ValueError(
                f"Transaction amount must be Decimal, got {type(self.amount).__name__}"
            )
        if self.amount < Decimal("0"):
            raise ValueError(
                f"Transaction amount must be a non-negative magnitude: {self.amount}"
            )

    @property
    def is_debit(self) -> bool:
        return self.type == TransactionType.DEBIT

    @property
    def signed_amount(self) -> Decimal:
        """Amount from the posted account's perspective: +debit, -credit."""
        return self.amount if self.is_debit else -self.amount


@dataclass(frozen=True)
class BankStatementItem:
    """One line of an external bank statement."""

    id: str
    date: date
    description: str
    amount: Decimal  # Positive is deposit, negative is withdrawal

    @property
    def is_deposit(self) -> bool:
        return self.amount > Decimal("0")
