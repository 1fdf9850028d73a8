"""
Module: ledger_engines.trend
Responsibility:
    Bucket revenue and expense transactions into a twelve-month calendar
    series for trend charts.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    Consumes the raw transaction list, independently of the composed
    financial statements.

Invariants enforced:
    - Output always has exactly twelve points, "Jan" through "Dec".
    - The year is discarded: transactions from different years with the
      same calendar month land in the same bucket.
    - Amounts are raw magnitudes, regardless of Debit/Credit side.
    - profit = revenue - expense per bucket.

Usage:
    from ledger_engines.trend import TrendAggregator

    points = TrendAggregator().monthly_trend(transactions=transactions)
"""

from __future__ import annotations

import time
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from ledger_engines.tracer import traced_engine
from ledger_kernel.domain.ledger import AccountCategory, Transaction
from ledger_kernel.logging_config import elapsed_ms, get_logger

logger = get_logger("engines.trend")

MONTH_LABELS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


@dataclass(frozen=True)
class TrendPoint:
    """Revenue, expense, and profit for one calendar month."""

    month: str
    revenue: Decimal
    expense: Decimal
    profit: Decimal


class TrendAggregator:
    """Pure calculator for the monthly revenue/expense series."""

    @traced_engine("trend", "1.0", fingerprint_fields=("transactions",))
    def monthly_trend(
        self,
        transactions: Iterable[Transaction],
    ) -> tuple[TrendPoint, ...]:
        """Sum Revenue and Expense amounts per calendar month."""
        t0 = time.monotonic()
        revenue = [Decimal("0")] * 12
        expense = [Decimal("0")] * 12
        counted = 0

        for tx in transactions:
            slot = tx.date.month - 1
            if tx.category == AccountCategory.REVENUE:
                revenue[slot] += tx.amount
                counted += 1
            elif tx.category == AccountCategory.EXPENSE:
                expense[slot] += tx.amount
                counted += 1

        points = tuple(
            TrendPoint(
                month=label,
                revenue=revenue[i],
                expense=expense[i],
                profit=revenue[i] - expense[i],
            )
            for i, label in enumerate(MONTH_LABELS)
        )

        logger.info("monthly_trend_calculated", extra={
            "transactions_counted": counted,
            "total_revenue": str(sum(revenue, Decimal("0"))),
            "total_expense": str(sum(expense, Decimal("0"))),
            "duration_ms": elapsed_ms(t0),
        })
        return points
