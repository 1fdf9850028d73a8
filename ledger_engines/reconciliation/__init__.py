"""
Reconciliation - Pure book-to-bank matching.

Domain types and the matcher engine for reconciling ledger entries posted
to a cash account against an external bank statement.
"""

from ledger_kernel.logging_config import get_logger

logger = get_logger("engines.reconciliation")

from ledger_engines.reconciliation.types import (
    ReconciliationSummary,
    ReconMatch,
    ReconStatus,
)

from ledger_engines.reconciliation.matcher import (
    BankReconciliationMatcher,
    ensure_unique_statement_ids,
    find_duplicate_statement_ids,
    select_book_entries,
    summarize_matches,
)

__all__ = [
    # Domain types
    "ReconStatus",
    "ReconMatch",
    "ReconciliationSummary",
    # Engine
    "BankReconciliationMatcher",
    # Caller-side helpers
    "select_book_entries",
    "find_duplicate_statement_ids",
    "ensure_unique_statement_ids",
    "summarize_matches",
]
