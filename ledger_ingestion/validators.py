"""
Batch validators for coerced ledger imports.

Each validator inspects a whole batch and returns a list of
``ValidationIssue`` values rather than raising, so an import screen can
show every problem at once.  The reporting core itself never calls these;
it resolves category conflicts first-seen (or raises in strict mode).

Architecture: ledger_ingestion. ZERO I/O. Imports only from ledger_kernel.
"""

from __future__ import annotations

import dataclasses
from collections import defaultdict
from collections.abc import Sequence
from typing import Any

from ledger_kernel.domain.ledger import AccountCategory, Transaction


@dataclasses.dataclass(frozen=True)
class ValidationIssue:
    """
    A single batch validation problem.

    ``code`` is machine-readable; ``details`` carries the offending
    values and row positions.
    """

    code: str
    message: str
    field: str | None = None
    details: dict[str, Any] = dataclasses.field(default_factory=dict)


def validate_batch_uniqueness(
    records: Sequence[Any],
    field_name: str = "id",
) -> list[ValidationIssue]:
    """
    Report every value of ``field_name`` that occurs more than once.

    Works on domain records (attribute access) as well as raw mappings.
    One issue per duplicated value, in first-occurrence order.
    """
    positions: dict[Any, list[int]] = defaultdict(list)
    for i, record in enumerate(records):
        if isinstance(record, dict):
            value = record.get(field_name)
        else:
            value = getattr(record, field_name, None)
        positions[value].append(i)

    return [
        ValidationIssue(
            code="DUPLICATE_VALUE_IN_BATCH",
            message=f"Duplicate value for {field_name!r} in batch",
            field=field_name,
            details={"value": value, "row_indices": indices},
        )
        for value, indices in positions.items()
        if len(indices) > 1
    ]


def find_category_conflicts(
    transactions: Sequence[Transaction],
) -> list[ValidationIssue]:
    """
    Report accounts posted under more than one category.

    The first category seen for an account is the one the trial balance
    keeps; each later transaction with a different category is one issue.
    """
    first_seen: dict[str, AccountCategory] = {}
    issues: list[ValidationIssue] = []
    for i, tx in enumerate(transactions):
        category = first_seen.setdefault(tx.account_name, tx.category)
        if category != tx.category:
            issues.append(ValidationIssue(
                code="CATEGORY_CONFLICT",
                message=(
                    f"Account {tx.account_name!r} first seen as {category.value}, "
                    f"later posted as {tx.category.value}"
                ),
                field="category",
                details={
                    "account_name": tx.account_name,
                    "first_category": category.value,
                    "conflicting_category": tx.category.value,
                    "transaction_id": tx.id,
                    "row_index": i,
                },
            ))
    return issues
