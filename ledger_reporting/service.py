"""
Reporting Module Service (``ledger_reporting.service``).

Responsibility
--------------
Single entry point for the report consumers: derives the
``FinancialStatements`` snapshot, runs bank reconciliation for the
configured book account, and builds the monthly trend series.  All
financial logic lives in ``statements.py`` and the engines; this class
only wires configuration, validation and logging around them.

Architecture position
---------------------
**Modules layer** -- thin glue over pure functions.  Constructor takes a
``ReportingConfig`` and a ``ReconciliationConfig``; both default to
their ``with_defaults()`` instances.

Invariants enforced
-------------------
* Read-only -- transaction lists and statement lines are never mutated.
* Every call recomputes from scratch; nothing is cached between calls.
* Statement line ids are validated unique before matching.

Failure modes
-------------
* Duplicate statement ids  -> ``DuplicateStatementIdError``.
* Category conflict in strict mode  -> ``CategoryConflictError``.
"""

from __future__ import annotations

from collections.abc import Sequence
from uuid import uuid4

from ledger_engines.reconciliation import (
    BankReconciliationMatcher,
    ReconciliationSummary,
    ReconMatch,
    ensure_unique_statement_ids,
    select_book_entries,
    summarize_matches,
)
from ledger_engines.trend import TrendAggregator, TrendPoint
from ledger_kernel.domain.ledger import BankStatementItem, Transaction
from ledger_kernel.exceptions import LedgerError
from ledger_kernel.logging_config import LogContext, get_logger
from ledger_reporting.config import ReconciliationConfig, ReportingConfig
from ledger_reporting.models import FinancialStatements
from ledger_reporting.statements import (
    compute_financial_statements,
    render_to_dict,
)

logger = get_logger("reporting.service")


class ReportingService:
    """
    Financial statement, reconciliation, and trend generation service.

    Contract
    --------
    * ``generate_statements`` returns a complete ``FinancialStatements``.
    * ``reconcile`` returns one ``ReconMatch`` per book entry followed by
      one per unmatched statement line.
    * ``monthly_trend`` returns exactly twelve ``TrendPoint`` values.
    * Statement, reconciliation and trend runs each log under their own
      ``report_id``; ``ledger_id`` is bound too when the service was
      given one.

    Non-goals
    ---------
    * Does NOT parse or coerce raw rows (see ``ledger_ingestion``).
    * Does NOT persist anything.
    """

    def __init__(
        self,
        config: ReportingConfig | None = None,
        reconciliation_config: ReconciliationConfig | None = None,
        ledger_id: str | None = None,
    ):
        self._config = config or ReportingConfig.with_defaults()
        self._recon_config = (
            reconciliation_config or ReconciliationConfig.with_defaults()
        )
        self._ledger_id = ledger_id
        self._matcher = BankReconciliationMatcher()
        self._trend = TrendAggregator()

        logger.info(
            "reporting_service_initialized",
            extra={
                "cash_account_markers": list(self._config.cash_account_markers),
                "book_account_name": self._recon_config.book_account_name,
                "strict_categories": self._config.strict_categories,
            },
        )

    @property
    def config(self) -> ReportingConfig:
        return self._config

    @property
    def reconciliation_config(self) -> ReconciliationConfig:
        return self._recon_config

    def _report_context(self):
        """Bind a fresh report_id (and the ledger_id, if any) for one report run."""
        return LogContext.bind(report_id=str(uuid4()), ledger_id=self._ledger_id)

    # =========================================================================
    # Public API
    # =========================================================================

    def generate_statements(
        self,
        transactions: Sequence[Transaction],
    ) -> FinancialStatements:
        """Derive the full FinancialStatements snapshot for a ledger."""
        with self._report_context():
            try:
                statements = compute_financial_statements(transactions, self._config)
            except LedgerError:
                logger.exception("financial_statements_failed", extra={
                    "transaction_count": len(transactions),
                })
                raise

            logger.info(
                "financial_statements_generated",
                extra={
                    "transaction_count": len(transactions),
                    "account_count": len(statements.trial_balance),
                    "net_income": str(statements.income_statement.net_income),
                    "is_balanced": statements.balance_sheet.is_balanced,
                },
            )
            return statements

    def reconcile(
        self,
        transactions: Sequence[Transaction],
        statement_entries: Sequence[BankStatementItem],
    ) -> tuple[ReconMatch, ...]:
        """
        Reconcile the configured book account against a bank statement.

        Book entries are the transactions posted to exactly
        ``ReconciliationConfig.book_account_name``.
        """
        book_entries = select_book_entries(
            transactions, self._recon_config.book_account_name,
        )
        return self.reconcile_entries(book_entries, statement_entries)

    def reconcile_entries(
        self,
        book_entries: Sequence[Transaction],
        statement_entries: Sequence[BankStatementItem],
    ) -> tuple[ReconMatch, ...]:
        """Reconcile book entries already restricted to one cash account."""
        with self._report_context():
            ensure_unique_statement_ids(statement_entries)
            matches = self._matcher.match(
                book_entries=book_entries,
                statement_entries=statement_entries,
                amount_tolerance=self._recon_config.amount_tolerance,
            )
            logger.info(
                "bank_reconciliation_generated",
                extra={
                    "book_account_name": self._recon_config.book_account_name,
                    "record_count": len(matches),
                },
            )
            return matches

    def reconciliation_summary(
        self,
        matches: Sequence[ReconMatch],
    ) -> ReconciliationSummary:
        """Count reconciliation records by status."""
        return summarize_matches(matches)

    def monthly_trend(
        self,
        transactions: Sequence[Transaction],
    ) -> tuple[TrendPoint, ...]:
        """Twelve-month revenue/expense/profit series, Jan through Dec."""
        with self._report_context():
            return self._trend.monthly_trend(transactions=transactions)

    def to_dict(self, report: object) -> dict | list:
        """
        Convert any report (or tuple of records) to a JSON-serializable dict.

        Delegates to the pure render_to_dict function.
        """
        return render_to_dict(report)
