"""
ledger_engines.variance -- Budget vs. actual figures.

Responsibility:
    Pair the period's actual revenue and expense totals with their budget
    figures.  Budgets are supplied by the caller (configuration), never
    hardcoded here.

Architecture position:
    Engines -- pure calculation layer, zero I/O.
    Consumed by ``ledger_reporting.statements`` when composing
    FinancialStatements.

Non-goals:
    - No percentages or favorability flags.  Ratios divide by budget
      figures that may be zero; presentation layers own that guard.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from ledger_engines.tracer import traced_engine
from ledger_kernel.logging_config import get_logger

logger = get_logger("engines.variance")


@dataclass(frozen=True)
class BudgetVariance:
    """Actual and budgeted revenue and expense for the period."""

    revenue_actual: Decimal
    revenue_budget: Decimal
    expense_actual: Decimal
    expense_budget: Decimal


class VarianceCalculator:
    """
    Pure function calculator for budget variance figures.

    Contract:
        No I/O, fully deterministic.  All budget data passed as parameters.
    """

    @traced_engine(
        "variance", "1.0",
        fingerprint_fields=(
            "total_revenue", "total_expenses", "revenue_budget", "expense_budget",
        ),
    )
    def budget_variance(
        self,
        total_revenue: Decimal,
        total_expenses: Decimal,
        revenue_budget: Decimal,
        expense_budget: Decimal,
    ) -> BudgetVariance:
        """Return actual totals side by side with their budgets."""
        logger.info("budget_variance_calculated", extra={
            "revenue_actual": str(total_revenue),
            "revenue_budget": str(revenue_budget),
            "expense_actual": str(total_expenses),
            "expense_budget": str(expense_budget),
        })
        return BudgetVariance(
            revenue_actual=total_revenue,
            revenue_budget=revenue_budget,
            expense_actual=total_expenses,
            expense_budget=expense_budget,
        )
