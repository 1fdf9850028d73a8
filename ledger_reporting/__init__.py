"""
Financial Reporting Module (``ledger_reporting``).

Responsibility
--------------
Read-only module that derives financial reports from a flat transaction
list: trial balance, income statement, balance sheet (with a synthetic
current-period earnings row), cash flow breakdown, statement of changes
in equity, narrative notes, and budget variance.  Also exposes bank
reconciliation and the monthly trend series through ``ReportingService``.

Architecture position
---------------------
**Modules layer** -- all statement generation is implemented as pure
functions in ``statements.py``; ``ReportingService`` wires configuration
and logging around them and the engines.

Invariants enforced
-------------------
* Statement computations derive entirely from the transaction list; no
  stored balances.
* For a balanced double-entry ledger, total assets equal total
  liabilities plus total equity.

Failure modes
-------------
* Strict category mode with a conflicting account -> CategoryConflictError.
* Duplicate bank statement ids -> DuplicateStatementIdError.
"""

from ledger_reporting.config import (
    BudgetConfig,
    NoteText,
    ReconciliationConfig,
    ReportingConfig,
    load_reporting_config,
)
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
from ledger_reporting.service import ReportingService
from ledger_reporting.statements import (
    compute_financial_statements,
    render_to_dict,
)

__all__ = [
    # Service
    "ReportingService",
    # Config
    "ReportingConfig",
    "ReconciliationConfig",
    "BudgetConfig",
    "NoteText",
    "load_reporting_config",
    # Models
    "TrialBalanceItem",
    "StatementItem",
    "IncomeStatement",
    "BalanceSheet",
    "CashFlow",
    "EquityChangeItem",
    "FinancialNote",
    "FinancialStatements",
    # Pure functions
    "compute_financial_statements",
    "render_to_dict",
]
