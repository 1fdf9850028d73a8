"""
Pure domain layer.

This module contains immutable value types with NO dependencies on:
- Database
- Time/clock
- I/O

All domain objects are immutable and deterministic.
"""

from ledger_kernel.domain.ledger import (
    AccountCategory,
    BankStatementItem,
    NormalBalance,
    Transaction,
    TransactionType,
    normal_balance_for,
)

__all__ = [
    "AccountCategory",
    "TransactionType",
    "NormalBalance",
    "Transaction",
    "BankStatementItem",
    "normal_balance_for",
]
