"""
Module: ledger_engines
Responsibility:
    Package entrypoint that re-exports the public symbols of the pure
    calculation engines.  This is the canonical import surface for the
    reporting module.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    May only import ledger_kernel (and sibling engine modules).
    MUST NOT import ledger_reporting or ledger_ingestion.

Invariants enforced:
    - Purity: engines never read the clock; no I/O besides log records.
    - Decimal-only arithmetic: all monetary amounts use ``Decimal``.
    - Determinism: identical inputs always produce identical outputs.

Audit relevance:
    Every engine invocation is traced via the ``@traced_engine`` decorator
    (see ``ledger_engines.tracer``), emitting LEDGER_ENGINE_TRACE log
    records with engine name, version, input fingerprint, and duration.
"""

from ledger_kernel.logging_config import get_logger

logger = get_logger("engines")

from ledger_engines.reconciliation import (
    BankReconciliationMatcher,
    ReconciliationSummary,
    ReconMatch,
    ReconStatus,
    ensure_unique_statement_ids,
    find_duplicate_statement_ids,
    select_book_entries,
    summarize_matches,
)
from ledger_engines.trend import (
    MONTH_LABELS,
    TrendAggregator,
    TrendPoint,
)
from ledger_engines.variance import (
    BudgetVariance,
    VarianceCalculator,
)

__all__ = [
    # Reconciliation
    "BankReconciliationMatcher",
    "ReconMatch",
    "ReconStatus",
    "ReconciliationSummary",
    "select_book_entries",
    "find_duplicate_statement_ids",
    "ensure_unique_statement_ids",
    "summarize_matches",
    # Trend
    "MONTH_LABELS",
    "TrendAggregator",
    "TrendPoint",
    # Variance
    "BudgetVariance",
    "VarianceCalculator",
]
