"""
BankReconciliationMatcher -- Pure engine pairing book entries with bank lines.

Responsibility:
    Match ledger transactions posted to one cash account against the lines
    of an external bank statement, producing one ReconMatch per book entry
    followed by one ReconMatch per statement line left unconsumed.

Architecture: ledger_engines -- pure calculation, zero I/O.

Matching contract:
    - Book entries are processed in input order.  A book entry's signed
      amount is +amount for Debit, -amount for Credit.
    - A book entry matches the EARLIEST not-yet-consumed statement line
      with the same date and the same signed amount.  Each statement line
      is consumed at most once.
    - Unconsumed statement lines are reported as ``missing_in_book`` in
      original statement order, after all book records.
    - ``amount_mismatch`` is produced only when an ``amount_tolerance`` is
      given: a second pass pairs book entries left unmatched by the exact
      pass with the earliest unconsumed same-date line whose amount is
      within the tolerance.  The exact pass never sees the tolerance.

Complexity:
    Statement lines are indexed by (date, signed amount) with a FIFO queue
    of positions per key, so the exact pass is linear in the input size.
    Popping the queue head yields the same line a first-match linear scan
    would find.

Preconditions:
    Statement line ids are unique.  Callers validate with
    ``ensure_unique_statement_ids`` before matching.
"""

from __future__ import annotations

import time
from collections import defaultdict, deque
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from ledger_engines.reconciliation.types import (
    ReconciliationSummary,
    ReconMatch,
    ReconStatus,
)
from ledger_engines.tracer import traced_engine
from ledger_kernel.domain.ledger import BankStatementItem, Transaction
from ledger_kernel.exceptions import DuplicateStatementIdError
from ledger_kernel.logging_config import elapsed_ms, get_logger

logger = get_logger("engines.reconciliation.matcher")


# =============================================================================
# Caller-side helpers
# =============================================================================


def select_book_entries(
    transactions: Iterable[Transaction],
    account_name: str,
) -> list[Transaction]:
    """Return the transactions posted to exactly ``account_name``, in order.

    This is an exact-name filter.  It is deliberately unrelated to the
    substring markers used to classify cash flows.
    """
    return [tx for tx in transactions if tx.account_name == account_name]


def find_duplicate_statement_ids(
    statement_entries: Iterable[BankStatementItem],
) -> list[str]:
    """Return ids that occur more than once, in first-duplicate order."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for entry in statement_entries:
        if entry.id in seen and entry.id not in duplicates:
            duplicates.append(entry.id)
        seen.add(entry.id)
    return duplicates


def ensure_unique_statement_ids(
    statement_entries: Iterable[BankStatementItem],
) -> None:
    """Raise DuplicateStatementIdError if any statement id repeats."""
    duplicates = find_duplicate_statement_ids(statement_entries)
    if duplicates:
        logger.error("statement_ids_not_unique", extra={
            "duplicate_ids": duplicates,
        })
        raise DuplicateStatementIdError(duplicates)


def summarize_matches(matches: Iterable[ReconMatch]) -> ReconciliationSummary:
    """Count reconciliation records by status."""
    return ReconciliationSummary.from_matches(matches)


# =============================================================================
# Engine
# =============================================================================


class BankReconciliationMatcher:
    """Pure engine for book-to-bank matching.

    Usage:
        matcher = BankReconciliationMatcher()
        matches = matcher.match(
            book_entries=cash_transactions,
            statement_entries=statement_lines,
        )
    """

    @traced_engine(
        "bank_reconciliation", "1.0",
        fingerprint_fields=("book_entries", "statement_entries", "amount_tolerance"),
    )
    def match(
        self,
        book_entries: Sequence[Transaction],
        statement_entries: Sequence[BankStatementItem],
        amount_tolerance: Decimal | None = None,
    ) -> tuple[ReconMatch, ...]:
        """Match book entries against statement lines.

        Returns one record per book entry (in book order) followed by one
        ``missing_in_book`` record per unconsumed statement line (in
        statement order).
        """
        t0 = time.monotonic()
        logger.info("bank_reconciliation_started", extra={
            "book_entry_count": len(book_entries),
            "statement_entry_count": len(statement_entries),
            "amount_tolerance": (
                str(amount_tolerance) if amount_tolerance is not None else None
            ),
        })

        consumed = [False] * len(statement_entries)
        records: list[ReconMatch] = []
        unmatched_book_positions: list[int] = []

        # (date, signed amount) -> statement positions, earliest first
        index: dict[tuple[date, Decimal], deque[int]] = defaultdict(deque)
        for pos, entry in enumerate(statement_entries):
            index[(entry.date, entry.amount)].append(pos)

        for book_pos, book in enumerate(book_entries):
            queue = index.get((book.date, book.signed_amount))
            if queue:
                pos = queue.popleft()
                consumed[pos] = True
                records.append(ReconMatch(
                    status=ReconStatus.MATCHED,
                    book_entry=book,
                    statement_entry=statement_entries[pos],
                ))
            else:
                records.append(ReconMatch(
                    status=ReconStatus.MISSING_IN_STATEMENT,
                    book_entry=book,
                ))
                unmatched_book_positions.append(book_pos)

        if amount_tolerance is not None and unmatched_book_positions:
            self._pair_within_tolerance(
                book_entries,
                statement_entries,
                records,
                unmatched_book_positions,
                consumed,
                amount_tolerance,
            )

        for pos, entry in enumerate(statement_entries):
            if not consumed[pos]:
                records.append(ReconMatch(
                    status=ReconStatus.MISSING_IN_BOOK,
                    statement_entry=entry,
                ))

        result = tuple(records)
        summary = ReconciliationSummary.from_matches(result)
        duration_ms = elapsed_ms(t0)
        logger.info("bank_reconciliation_completed", extra={
            "matched": summary.matched,
            "missing_in_statement": summary.missing_in_statement,
            "missing_in_book": summary.missing_in_book,
            "amount_mismatch": summary.amount_mismatch,
            "duration_ms": duration_ms,
        })
        return result

    @staticmethod
    def _pair_within_tolerance(
        book_entries: Sequence[Transaction],
        statement_entries: Sequence[BankStatementItem],
        records: list[ReconMatch],
        unmatched_book_positions: list[int],
        consumed: list[bool],
        tolerance: Decimal,
    ) -> None:
        """Second pass: replace missing_in_statement records with near matches."""
        by_date: dict[date, list[int]] = defaultdict(list)
        for pos, entry in enumerate(statement_entries):
            if not consumed[pos]:
                by_date[entry.date].append(pos)

        for book_pos in unmatched_book_positions:
            book = book_entries[book_pos]
            signed = book.signed_amount
            for pos in by_date.get(book.date, ()):
                if consumed[pos]:
                    continue
                if abs(statement_entries[pos].amount - signed) <= tolerance:
                    consumed[pos] = True
                    records[book_pos] = ReconMatch(
                        status=ReconStatus.AMOUNT_MISMATCH,
                        book_entry=book,
                        statement_entry=statement_entries[pos],
                    )
                    logger.debug("bank_reconciliation_amount_mismatch", extra={
                        "book_entry_id": book.id,
                        "statement_entry_id": statement_entries[pos].id,
                        "difference": str(statement_entries[pos].amount - signed),
                    })
                    break
