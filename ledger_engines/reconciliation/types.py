"""
Bank reconciliation domain types.

Pure frozen dataclasses for matching book entries against bank statement
lines.  Produced by the matcher engine, consumed by the reporting service
and by export collaborators.

Architecture: ledger_engines/reconciliation -- pure domain, zero I/O.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from ledger_kernel.domain.ledger import BankStatementItem, Transaction


class ReconStatus(str, Enum):
    """Outcome of matching one book entry or statement line."""

    MATCHED = "matched"
    MISSING_IN_STATEMENT = "missing_in_statement"
    MISSING_IN_BOOK = "missing_in_book"
    AMOUNT_MISMATCH = "amount_mismatch"  # Only with an explicit amount tolerance


@dataclass(frozen=True)
class ReconMatch:
    """One reconciliation record.

    ``missing_in_statement`` carries only a book entry, ``missing_in_book``
    only a statement entry; ``matched`` and ``amount_mismatch`` carry both.
    """

    status: ReconStatus
    book_entry: Transaction | None = None
    statement_entry: BankStatementItem | None = None


@dataclass(frozen=True)
class ReconciliationSummary:
    """Per-status counts over a sequence of ReconMatch records."""

    total_records: int
    matched: int
    missing_in_statement: int
    missing_in_book: int
    amount_mismatch: int

    @property
    def is_fully_reconciled(self) -> bool:
        """True if every record is an exact match."""
        return self.matched == self.total_records

    @property
    def exception_count(self) -> int:
        return self.total_records - self.matched

    @classmethod
    def from_matches(cls, matches: Iterable[ReconMatch]) -> ReconciliationSummary:
        counts = Counter(m.status for m in matches)
        return cls(
            total_records=sum(counts.values()),
            matched=counts[ReconStatus.MATCHED],
            missing_in_statement=counts[ReconStatus.MISSING_IN_STATEMENT],
            missing_in_book=counts[ReconStatus.MISSING_IN_BOOK],
            amount_mismatch=counts[ReconStatus.AMOUNT_MISMATCH],
        )
