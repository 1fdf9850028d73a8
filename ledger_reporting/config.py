"""
Reporting Configuration Schema.

Defines the classification markers, budget figures, heuristic thresholds,
labels and note text used when deriving financial statements, plus the
account selection used for bank reconciliation.

The cash-flow markers (substring match, any of several) and the
reconciliation book account (exact name, exactly one) are separate
settings and are never derived from each other.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Self

import yaml

from ledger_kernel.exceptions import InvalidConfigurationError
from ledger_kernel.logging_config import get_logger

logger = get_logger("reporting.config")


def _to_decimal(value: Any, setting: str) -> Decimal:
    """Coerce a config scalar (str/int/float/Decimal) to Decimal."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, bool):
        raise InvalidConfigurationError(setting, value, "expected a number")
    try:
        return Decimal(str(value))
    except (InvalidOperation, ValueError, TypeError):
        raise InvalidConfigurationError(setting, value, "expected a number") from None


@dataclass(frozen=True)
class NoteText:
    """Title and body of one narrative note. Text is not load-bearing."""

    title: str
    content: str


DEFAULT_NOTES: tuple[NoteText, ...] = (
    NoteText(
        title="Basis of Preparation",
        content=(
            "The financial statements have been prepared on the historical "
            "cost basis in accordance with International Financial Reporting "
            "Standards (IFRS)."
        ),
    ),
    NoteText(
        title="Revenue Recognition",
        content=(
            "Revenue is recognized when the significant risks and rewards of "
            "ownership have been transferred to the customer. For this period, "
            "revenue primarily consists of product sales."
        ),
    ),
    NoteText(
        title="Cash and Cash Equivalents",
        content=(
            "Cash and cash equivalents comprise cash on hand and demand "
            "deposits with banks."
        ),
    ),
    NoteText(
        title="Property, Plant and Equipment",
        content=(
            "Equipment is stated at cost less accumulated depreciation. "
            "Depreciation is calculated on a straight-line basis over the "
            "estimated useful lives of the assets."
        ),
    ),
)


@dataclass
class BudgetConfig:
    """Budgeted revenue and expense totals for the period."""

    revenue_budget: Decimal = Decimal("65000")
    expense_budget: Decimal = Decimal("15000")

    def __post_init__(self):
        self.revenue_budget = _to_decimal(self.revenue_budget, "revenue_budget")
        self.expense_budget = _to_decimal(self.expense_budget, "expense_budget")
        if self.revenue_budget < 0:
            raise InvalidConfigurationError(
                "revenue_budget", self.revenue_budget, "cannot be negative",
            )
        if self.expense_budget < 0:
            raise InvalidConfigurationError(
                "expense_budget", self.expense_budget, "cannot be negative",
            )


@dataclass
class ReportingConfig:
    """
    Configuration schema for statement derivation.

    Controls cash-account classification, budget figures, the equity
    roll-forward heuristic, synthetic row labels, and note text.
    """

    # Substrings identifying cash accounts for cash flow and notes
    cash_account_markers: tuple[str, ...] = ("Cash", "Bank", "Petty Cash")

    budget: BudgetConfig = field(default_factory=BudgetConfig)

    # Equity rows above this amount are split into opening + additions
    equity_opening_threshold: Decimal = Decimal("50000")

    current_earnings_label: str = "Current Period Earnings"
    retained_earnings_label: str = "Retained Earnings"

    # Exactly four notes, numbered 1..4 in order
    notes: tuple[NoteText, ...] = DEFAULT_NOTES

    # Reject accounts posted under two categories instead of keeping the first
    strict_categories: bool = False

    def __post_init__(self):
        if not isinstance(self.cash_account_markers, (list, tuple)):
            raise InvalidConfigurationError(
                "cash_account_markers",
                self.cash_account_markers,
                "expected a list of account name substrings",
            )
        self.cash_account_markers = tuple(self.cash_account_markers)
        if not self.cash_account_markers or not all(
            isinstance(m, str) and m for m in self.cash_account_markers
        ):
            raise InvalidConfigurationError(
                "cash_account_markers",
                self.cash_account_markers,
                "must contain at least one non-empty marker",
            )
        if not isinstance(self.budget, BudgetConfig):
            raise InvalidConfigurationError(
                "budget", self.budget, "expected revenue_budget and expense_budget",
            )
        if not isinstance(self.notes, (list, tuple)):
            raise InvalidConfigurationError("notes", self.notes, "expected a list of notes")
        self.notes = tuple(self.notes)
        if not all(isinstance(n, NoteText) for n in self.notes):
            raise InvalidConfigurationError(
                "notes", self.notes, "each note needs a title and content",
            )
        self.equity_opening_threshold = _to_decimal(
            self.equity_opening_threshold, "equity_opening_threshold",
        )
        if self.equity_opening_threshold < 0:
            raise InvalidConfigurationError(
                "equity_opening_threshold",
                self.equity_opening_threshold,
                "cannot be negative",
            )
        if len(self.notes) != len(DEFAULT_NOTES):
            raise InvalidConfigurationError(
                "notes", len(self.notes), f"exactly {len(DEFAULT_NOTES)} notes required",
            )
        if not isinstance(self.strict_categories, bool):
            raise InvalidConfigurationError(
                "strict_categories", self.strict_categories, "expected true or false",
            )

    def is_cash_account(self, account_name: str) -> bool:
        """Check if an account name contains any cash marker."""
        return any(marker in account_name for marker in self.cash_account_markers)

    @classmethod
    def with_defaults(cls) -> Self:
        """Create config with standard defaults."""
        logger.info("reporting_config_created_with_defaults")
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create config from dictionary."""
        data = dict(data)
        if isinstance(data.get("budget"), dict):
            data["budget"] = BudgetConfig(**data["budget"])
        # Anything left unconverted is rejected by __post_init__
        if isinstance(data.get("notes"), (list, tuple)):
            data["notes"] = tuple(
                NoteText(**n) if isinstance(n, dict) else n
                for n in data["notes"]
            )
        logger.info(
            "reporting_config_loading_from_dict",
            extra={"keys": sorted(data.keys())},
        )
        return cls(**data)


@dataclass
class ReconciliationConfig:
    """
    Configuration for bank reconciliation.

    ``book_account_name`` selects book entries by exact account name.
    ``amount_tolerance`` enables amount_mismatch pairing; None disables it.
    """

    book_account_name: str = "Cash"
    amount_tolerance: Decimal | None = None

    def __post_init__(self):
        if not isinstance(self.book_account_name, str) or not self.book_account_name:
            raise InvalidConfigurationError(
                "book_account_name", self.book_account_name, "expected a non-empty account name",
            )
        if self.amount_tolerance is not None:
            self.amount_tolerance = _to_decimal(
                self.amount_tolerance, "amount_tolerance",
            )
            if self.amount_tolerance < 0:
                raise InvalidConfigurationError(
                    "amount_tolerance", self.amount_tolerance, "cannot be negative",
                )

    @classmethod
    def with_defaults(cls) -> Self:
        """Create config with standard defaults."""
        logger.info("reconciliation_config_created_with_defaults")
        return cls()

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create config from dictionary."""
        logger.info(
            "reconciliation_config_loading_from_dict",
            extra={"keys": sorted(data.keys())},
        )
        return cls(**data)


def load_reporting_config(
    path: Path | str,
) -> tuple[ReportingConfig, ReconciliationConfig]:
    """
    Load reporting and reconciliation settings from one YAML file.

    Both top-level sections (``reporting:`` and ``reconciliation:``) are
    optional; a missing section yields that config's defaults.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
        InvalidConfigurationError: if the document is not a mapping or a
            value is out of range.
    """
    path = Path(path)
    with path.open(encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise InvalidConfigurationError(
            str(path), type(raw).__name__, "top level must be a mapping",
        )

    sections = {}
    for name in ("reporting", "reconciliation"):
        section = raw.get(name) or {}
        if not isinstance(section, dict):
            raise InvalidConfigurationError(
                name, type(section).__name__, "section must be a mapping",
            )
        sections[name] = section

    reporting = ReportingConfig.from_dict(sections["reporting"])
    reconciliation = ReconciliationConfig.from_dict(sections["reconciliation"])
    logger.info("reporting_config_loaded", extra={"path": str(path)})
    return reporting, reconciliation
