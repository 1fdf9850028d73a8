"""
Record coercion for ledger imports.

Raw records are plain mappings as produced by a CSV reader or a JSON
decoder.  Coercion rules:

* ``amount`` -- anything ``Decimal(str(v))`` accepts; blank, missing or
  non-numeric values become zero.  Transaction amounts are stored as
  magnitudes; statement amounts keep their sign.
* ``date`` -- a ``date``/``datetime`` or an ISO ``YYYY-MM-DD`` string.
* ``category`` / ``type`` -- matched case-insensitively against the enum
  values (``"asset"``, ``"DEBIT"``...).

Architecture: ledger_ingestion. ZERO I/O. Imports only from ledger_kernel.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, TypeVar

from ledger_kernel.domain.ledger import (
    AccountCategory,
    BankStatementItem,
    Transaction,
    TransactionType,
)
from ledger_kernel.exceptions import InvalidRecordError
from ledger_kernel.logging_config import get_logger

logger = get_logger("ingestion.records")

E = TypeVar("E", bound=Enum)

_ZERO = Decimal("0")


def _coerce_amount(value: Any) -> Decimal:
    if value is None or isinstance(value, bool):
        return _ZERO
    if isinstance(value, Decimal):
        amount = value
    else:
        try:
            amount = Decimal(str(value).strip().replace(",", ""))
        except (InvalidOperation, ValueError):
            return _ZERO
    if not amount.is_finite():
        return _ZERO
    return amount


def _coerce_date(value: Any, field_name: str = "date") -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip()[:10])
        except ValueError:
            pass
    raise InvalidRecordError(field_name, value, "expected an ISO date (YYYY-MM-DD)")


def _coerce_enum(enum_cls: type[E], value: Any, field_name: str) -> E:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        wanted = value.strip().lower()
        for member in enum_cls:
            if member.value.lower() == wanted or member.name.lower() == wanted:
                return member
    allowed = ", ".join(m.value for m in enum_cls)
    raise InvalidRecordError(field_name, value, f"expected one of {allowed}")


def _text(record: Mapping[str, Any], *keys: str) -> str:
    for key in keys:
        value = record.get(key)
        if value is not None:
            return str(value).strip()
    return ""


def transaction_from_record(
    record: Mapping[str, Any],
    default_id: str | None = None,
) -> Transaction:
    """
    Coerce one raw mapping into a Transaction.

    Accepts ``account_name`` or ``accountName`` for the account.  A
    missing ``id`` falls back to ``default_id``; with neither present
    the record is rejected.
    """
    tx_id = _text(record, "id") or (default_id or "")
    if not tx_id:
        raise InvalidRecordError("id", record.get("id"), "transaction id is required")

    amount = _coerce_amount(record.get("amount"))
    if amount < 0:
        logger.debug("transaction_amount_negated", extra={
            "transaction_id": tx_id,
            "raw_amount": str(amount),
        })
        amount = -amount

    return Transaction(
        id=tx_id,
        date=_coerce_date(record.get("date")),
        description=_text(record, "description"),
        account_name=_text(record, "account_name", "accountName"),
        category=_coerce_enum(AccountCategory, record.get("category"), "category"),
        amount=amount,
        type=_coerce_enum(TransactionType, record.get("type"), "type"),
    )


def transactions_from_records(
    records: Iterable[Mapping[str, Any]],
) -> tuple[Transaction, ...]:
    """
    Coerce a batch of raw mappings, assigning sequential ids where absent.

    Generated ids are the 1-based row position as a string.
    """
    transactions = tuple(
        transaction_from_record(record, default_id=str(position))
        for position, record in enumerate(records, start=1)
    )
    logger.info("transactions_ingested", extra={"record_count": len(transactions)})
    return transactions


def statement_item_from_record(
    record: Mapping[str, Any],
    default_id: str | None = None,
) -> BankStatementItem:
    """Coerce one raw bank statement row; the amount keeps its sign."""
    item_id = _text(record, "id") or (default_id or "")
    if not item_id:
        raise InvalidRecordError("id", record.get("id"), "statement id is required")

    return BankStatementItem(
        id=item_id,
        date=_coerce_date(record.get("date")),
        description=_text(record, "description"),
        amount=_coerce_amount(record.get("amount")),
    )


def statement_items_from_records(
    records: Iterable[Mapping[str, Any]],
) -> tuple[BankStatementItem, ...]:
    items = tuple(
        statement_item_from_record(record, default_id=f"st{position}")
        for position, record in enumerate(records, start=1)
    )
    logger.info("statement_items_ingested", extra={"record_count": len(items)})
    return items
