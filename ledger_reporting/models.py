"""
Financial Reporting Domain Models (``ledger_reporting.models``).

Responsibility
--------------
Frozen dataclass value objects representing the derived reports: trial
balance rows, statement rows, the income statement, balance sheet, cash
flow breakdown, equity roll-forward, narrative notes, and the
``FinancialStatements`` aggregate that owns them all.

Architecture position
---------------------
**Modules layer** -- pure data definitions with ZERO I/O.  Built by
``statements.py`` and returned to callers through ``ReportingService``.

Invariants enforced
-------------------
* All models are ``frozen=True``; collections are tuples.
* All monetary fields use ``Decimal`` -- NEVER ``float``.
* ``FinancialStatements`` is replaced wholesale on recomputation, never
  partially updated.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ledger_engines.variance import BudgetVariance
from ledger_kernel.domain.ledger import AccountCategory


def _total(items: tuple[StatementItem, ...]) -> Decimal:
    return sum((item.amount for item in items), Decimal("0"))


# =========================================================================
# Trial Balance
# =========================================================================


@dataclass(frozen=True)
class TrialBalanceItem:
    """Cumulative debit and credit totals for one account."""

    account_name: str
    category: AccountCategory  # First-seen category for the account
    debit: Decimal
    credit: Decimal


# =========================================================================
# Statement rows
# =========================================================================


@dataclass(frozen=True)
class StatementItem:
    """A single report row with a natural-balance signed amount."""

    label: str
    amount: Decimal
    is_total: bool = False


@dataclass(frozen=True)
class IncomeStatement:
    """
    Single-step income statement.

    Total Revenue - Total Expenses = Net Income
    """

    revenue: tuple[StatementItem, ...]
    expenses: tuple[StatementItem, ...]
    total_revenue: Decimal
    total_expenses: Decimal
    net_income: Decimal


@dataclass(frozen=True)
class BalanceSheet:
    """
    Unclassified balance sheet.

    ``equity`` includes the synthetic current-period earnings row, so a
    balanced ledger satisfies Assets = Liabilities + Equity.
    """

    assets: tuple[StatementItem, ...]
    liabilities: tuple[StatementItem, ...]
    equity: tuple[StatementItem, ...]
    total_assets: Decimal
    total_liabilities: Decimal
    total_equity: Decimal

    @property
    def total_liabilities_and_equity(self) -> Decimal:
        return self.total_liabilities + self.total_equity

    @property
    def is_balanced(self) -> bool:
        return self.total_assets == self.total_liabilities_and_equity


@dataclass(frozen=True)
class CashFlow:
    """
    Cash account movements bucketed by activity.

    ``net_cash_flow`` is the identity figure
    total_assets - total_liabilities - total_equity + net_income,
    not the sum of the three buckets.
    """

    operating: tuple[StatementItem, ...]
    investing: tuple[StatementItem, ...]
    financing: tuple[StatementItem, ...]
    net_cash_flow: Decimal

    @property
    def operating_total(self) -> Decimal:
        return _total(self.operating)

    @property
    def investing_total(self) -> Decimal:
        return _total(self.investing)

    @property
    def financing_total(self) -> Decimal:
        return _total(self.financing)


# =========================================================================
# Equity roll-forward
# =========================================================================


@dataclass(frozen=True)
class EquityChangeItem:
    """One row of the statement of changes in equity."""

    account_name: str
    opening_balance: Decimal
    additions: Decimal
    net_income: Decimal
    withdrawals: Decimal
    closing_balance: Decimal


# =========================================================================
# Notes
# =========================================================================


@dataclass(frozen=True)
class FinancialNote:
    """A numbered narrative note, optionally backed by statement rows."""

    note_number: int
    title: str
    content: str
    data: tuple[StatementItem, ...] | None = None


# =========================================================================
# Aggregate root
# =========================================================================


@dataclass(frozen=True)
class FinancialStatements:
    """Complete, immutable snapshot of every report derived from a ledger."""

    trial_balance: tuple[TrialBalanceItem, ...]
    income_statement: IncomeStatement
    balance_sheet: BalanceSheet
    cash_flow: CashFlow
    equity_changes: tuple[EquityChangeItem, ...]
    notes: tuple[FinancialNote, ...]
    variance: BudgetVariance
