"""
ledger_ingestion -- Raw-record coercion into ledger domain types.

Turns loosely typed mappings (CSV rows, JSON payloads) into
``Transaction`` and ``BankStatementItem`` values, and runs the batch
checks that must pass before reconciliation.

Architecture:
    ledger_ingestion/ is a top-level package. Nothing in kernel/,
    engines/, or reporting/ imports from ingestion.
"""

from ledger_ingestion.records import (
    statement_item_from_record,
    statement_items_from_records,
    transaction_from_record,
    transactions_from_records,
)
from ledger_ingestion.validators import (
    ValidationIssue,
    find_category_conflicts,
    validate_batch_uniqueness,
)

__all__ = [
    "transaction_from_record",
    "transactions_from_records",
    "statement_item_from_record",
    "statement_items_from_records",
    "ValidationIssue",
    "find_category_conflicts",
    "validate_batch_uniqueness",
]
