"""
Pure financial statement transformation functions.

These functions transform a transaction list into the trial balance and
the statements derived from it. ZERO I/O. ZERO side effects besides log
records.

All monetary values are Decimal. All outputs are frozen dataclasses.

Derivation order:
    transactions -> trial balance -> income statement -> balance sheet
    -> {equity roll-forward, cash flow, notes, budget variance}
    -> FinancialStatements
"""

from __future__ import annotations

import dataclasses
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal
from enum import Enum

from ledger_engines.variance import VarianceCalculator
from ledger_kernel.domain.ledger import (
    AccountCategory,
    NormalBalance,
    Transaction,
    TransactionType,
    normal_balance_for,
)
from ledger_kernel.exceptions import CategoryConflictError
from ledger_kernel.logging_config import get_logger
from ledger_reporting.config import ReportingConfig
from ledger_reporting.models import (
    BalanceSheet,
    CashFlow,
    EquityChangeItem,
    FinancialNote,
    FinancialStatements,
    IncomeStatement,
    StatementItem,
    TrialBalanceItem,
)

logger = get_logger("reporting.statements")

_ZERO = Decimal("0")


# =========================================================================
# Helpers
# =========================================================================


def compute_natural_balance(
    debit_total: Decimal,
    credit_total: Decimal,
    normal_balance: NormalBalance,
) -> Decimal:
    """
    Net balance on the side the account normally carries.

    Asset and expense accounts are debit-normal; liability, equity and
    revenue accounts are credit-normal.
    """
    if normal_balance == NormalBalance.DEBIT:
        return debit_total - credit_total
    return credit_total - debit_total


def _sum_amounts(items: Iterable[StatementItem]) -> Decimal:
    return sum((item.amount for item in items), _ZERO)


def rows_for_category(
    trial_balance: Sequence[TrialBalanceItem],
    category: AccountCategory,
) -> tuple[StatementItem, ...]:
    """Statement rows for one category, natural-balance signed, in TB order."""
    normal = normal_balance_for(category)
    return tuple(
        StatementItem(
            label=item.account_name,
            amount=compute_natural_balance(item.debit, item.credit, normal),
        )
        for item in trial_balance
        if item.category == category
    )


# =========================================================================
# 1. TRIAL BALANCE
# =========================================================================


def build_trial_balance(
    transactions: Iterable[Transaction],
    config: ReportingConfig | None = None,
) -> tuple[TrialBalanceItem, ...]:
    """
    Aggregate transactions into per-account debit/credit totals.

    One row per distinct account name, in first-seen order.  The category
    of each row is the category of the first transaction seen for that
    account.  A later transaction with a different category is logged and
    otherwise ignored, unless ``config.strict_categories`` is set, in
    which case CategoryConflictError is raised.
    """
    strict = config.strict_categories if config is not None else False
    totals: dict[str, list] = {}  # name -> [category, debit, credit]

    for tx in transactions:
        entry = totals.get(tx.account_name)
        if entry is None:
            entry = [tx.category, _ZERO, _ZERO]
            totals[tx.account_name] = entry
        elif entry[0] != tx.category:
            if strict:
                raise CategoryConflictError(
                    tx.account_name, entry[0].value, tx.category.value,
                )
            logger.warning("trial_balance_category_conflict", extra={
                "account_name": tx.account_name,
                "first_category": entry[0].value,
                "conflicting_category": tx.category.value,
                "transaction_id": tx.id,
            })

        if tx.type == TransactionType.DEBIT:
            entry[1] += tx.amount
        else:
            entry[2] += tx.amount

    return tuple(
        TrialBalanceItem(
            account_name=name,
            category=category,
            debit=debit,
            credit=credit,
        )
        for name, (category, debit, credit) in totals.items()
    )


def trial_balance_totals(
    trial_balance: Sequence[TrialBalanceItem],
) -> tuple[Decimal, Decimal]:
    """Return (total debits, total credits) across all rows."""
    total_debits = sum((item.debit for item in trial_balance), _ZERO)
    total_credits = sum((item.credit for item in trial_balance), _ZERO)
    return total_debits, total_credits


# =========================================================================
# 2. INCOME STATEMENT
# =========================================================================


def build_income_statement(
    trial_balance: Sequence[TrialBalanceItem],
) -> IncomeStatement:
    """
    Build a single-step income statement.

    Revenue rows are credit-normal, expense rows debit-normal.
    Net Income = Total Revenue - Total Expenses.
    """
    revenue = rows_for_category(trial_balance, AccountCategory.REVENUE)
    expenses = rows_for_category(trial_balance, AccountCategory.EXPENSE)
    total_revenue = _sum_amounts(revenue)
    total_expenses = _sum_amounts(expenses)

    return IncomeStatement(
        revenue=revenue,
        expenses=expenses,
        total_revenue=total_revenue,
        total_expenses=total_expenses,
        net_income=total_revenue - total_expenses,
    )


# =========================================================================
# 3. BALANCE SHEET
# =========================================================================


def build_balance_sheet(
    trial_balance: Sequence[TrialBalanceItem],
    net_income: Decimal,
    config: ReportingConfig,
) -> BalanceSheet:
    """
    Build an unclassified balance sheet.

    Net income for the period is appended to equity as a synthetic row
    (closing-entry emulation).  The trial balance itself is not modified.
    """
    assets = rows_for_category(trial_balance, AccountCategory.ASSET)
    liabilities = rows_for_category(trial_balance, AccountCategory.LIABILITY)
    equity = rows_for_category(trial_balance, AccountCategory.EQUITY) + (
        StatementItem(label=config.current_earnings_label, amount=net_income),
    )

    sheet = BalanceSheet(
        assets=assets,
        liabilities=liabilities,
        equity=equity,
        total_assets=_sum_amounts(assets),
        total_liabilities=_sum_amounts(liabilities),
        total_equity=_sum_amounts(equity),
    )
    if not sheet.is_balanced:
        logger.info("balance_sheet_not_balanced", extra={
            "total_assets": str(sheet.total_assets),
            "total_liabilities_and_equity": str(sheet.total_liabilities_and_equity),
        })
    return sheet


# =========================================================================
# 4. STATEMENT OF CHANGES IN EQUITY
# =========================================================================


def build_equity_changes(
    equity_rows: Sequence[StatementItem],
    net_income: Decimal,
    config: ReportingConfig,
) -> tuple[EquityChangeItem, ...]:
    """
    Build the single-period equity roll-forward.

    ``equity_rows`` are the raw equity account rows (without the synthetic
    earnings row).  An account above the opening threshold is shown as
    opening = threshold plus additions = the remainder; otherwise all of
    it is additions.  A retained earnings row carries the net income.
    """
    threshold = config.equity_opening_threshold
    changes: list[EquityChangeItem] = []
    for row in equity_rows:
        above = row.amount > threshold
        changes.append(EquityChangeItem(
            account_name=row.label,
            opening_balance=threshold if above else _ZERO,
            additions=row.amount - threshold if above else row.amount,
            net_income=_ZERO,
            withdrawals=_ZERO,
            closing_balance=row.amount,
        ))

    changes.append(EquityChangeItem(
        account_name=config.retained_earnings_label,
        opening_balance=_ZERO,
        additions=_ZERO,
        net_income=net_income,
        withdrawals=_ZERO,
        closing_balance=net_income,
    ))
    return tuple(changes)


# =========================================================================
# 5. CASH FLOW
# =========================================================================


def build_cash_flow(
    transactions: Iterable[Transaction],
    balance_sheet: BalanceSheet,
    net_income: Decimal,
    config: ReportingConfig,
) -> CashFlow:
    """
    Bucket cash-account transactions into operating, investing, financing.

    Only transactions whose account name contains a cash marker are
    considered; each is signed +amount for Debit, -amount for Credit.
        Revenue / Expense     -> operating
        Asset (non-cash acct) -> investing
        Liability / Equity    -> financing
    Cash-account asset transactions fall in no bucket.
    """
    operating: list[StatementItem] = []
    investing: list[StatementItem] = []
    financing: list[StatementItem] = []

    for tx in transactions:
        if not config.is_cash_account(tx.account_name):
            continue
        row = StatementItem(label=tx.description, amount=tx.signed_amount)
        if tx.category in (AccountCategory.REVENUE, AccountCategory.EXPENSE):
            operating.append(row)
        elif tx.category == AccountCategory.ASSET:
            # Always false after the cash filter; investing stays empty
            if not config.is_cash_account(tx.account_name):
                investing.append(row)
        elif tx.category in (AccountCategory.LIABILITY, AccountCategory.EQUITY):
            financing.append(row)

    net_cash_flow = (
        balance_sheet.total_assets
        - balance_sheet.total_liabilities
        - balance_sheet.total_equity
        + net_income
    )

    return CashFlow(
        operating=tuple(operating),
        investing=tuple(investing),
        financing=tuple(financing),
        net_cash_flow=net_cash_flow,
    )


# =========================================================================
# 6. NOTES
# =========================================================================


def build_notes(
    income_statement: IncomeStatement,
    balance_sheet: BalanceSheet,
    config: ReportingConfig,
) -> tuple[FinancialNote, ...]:
    """
    Build the four numbered notes.

    1. Basis of preparation (no data)
    2. Revenue recognition (revenue rows)
    3. Cash and equivalents (asset rows matching a cash marker)
    4. Property and equipment (all other asset rows)
    """
    cash_assets = tuple(
        a for a in balance_sheet.assets if config.is_cash_account(a.label)
    )
    other_assets = tuple(
        a for a in balance_sheet.assets if not config.is_cash_account(a.label)
    )
    attached: tuple[tuple[StatementItem, ...] | None, ...] = (
        None,
        income_statement.revenue,
        cash_assets,
        other_assets,
    )

    return tuple(
        FinancialNote(
            note_number=number,
            title=text.title,
            content=text.content,
            data=data,
        )
        for number, (text, data) in enumerate(zip(config.notes, attached), start=1)
    )


# =========================================================================
# 7. COMPOSITION
# =========================================================================


def compute_financial_statements(
    transactions: Sequence[Transaction],
    config: ReportingConfig,
) -> FinancialStatements:
    """Derive every report from a transaction list in one pass."""
    trial_balance = build_trial_balance(transactions, config)
    income_statement = build_income_statement(trial_balance)
    net_income = income_statement.net_income

    balance_sheet = build_balance_sheet(trial_balance, net_income, config)
    equity_rows = rows_for_category(trial_balance, AccountCategory.EQUITY)

    variance = VarianceCalculator().budget_variance(
        total_revenue=income_statement.total_revenue,
        total_expenses=income_statement.total_expenses,
        revenue_budget=config.budget.revenue_budget,
        expense_budget=config.budget.expense_budget,
    )

    return FinancialStatements(
        trial_balance=trial_balance,
        income_statement=income_statement,
        balance_sheet=balance_sheet,
        cash_flow=build_cash_flow(transactions, balance_sheet, net_income, config),
        equity_changes=build_equity_changes(equity_rows, net_income, config),
        notes=build_notes(income_statement, balance_sheet, config),
        variance=variance,
    )


# =========================================================================
# 8. RENDERER (dict/JSON output)
# =========================================================================


def render_to_dict(obj: object) -> dict | list | str | int | float | bool | None:
    """
    Turn a report (dataclass, tuple of records, or scalar) into JSON-ready
    primitives.

    Decimals become strings so precision survives; dates become ISO
    strings and enums their values. Dataclasses map to dicts field by
    field, and tuples become lists.
    """
    if obj is None:
        return None
    if isinstance(obj, Decimal):
        return str(obj)
    if isinstance(obj, date):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (list, tuple)):
        return [render_to_dict(item) for item in obj]
    if isinstance(obj, dict):
        return {str(k): render_to_dict(v) for k, v in obj.items()}
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        return {
            f.name: render_to_dict(getattr(obj, f.name))
            for f in dataclasses.fields(obj)
        }
    if isinstance(obj, (str, int, float, bool)):
        return obj
    return str(obj)
