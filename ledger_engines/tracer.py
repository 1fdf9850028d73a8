"""
ledger_engines.tracer -- Engine invocation tracer emitting LEDGER_ENGINE_TRACE.

Responsibility:
    ``@traced_engine`` wraps a pure engine entry point and, after each
    successful call, logs one LEDGER_ENGINE_TRACE record carrying the
    engine name and version, a fingerprint of the selected inputs, and
    the call duration.

Architecture position:
    Engines -- infrastructure support for the pure calculation layer.
    Emits a log record only; engines stay free of I/O.

Invariants enforced:
    - Positional and keyword calls fingerprint identically: arguments are
      bound to the signature before the selected fields are read.
    - Canonical form is stable: mapping keys sorted, sequences in order,
      dataclasses expanded field by field, Decimals by their string form.
    - Fingerprint is the first 16 hex chars of SHA-256 over that form.

Failure modes:
    - Selected fields absent from the call (defaults included) hash as
      "null".
    - Exceptions from the engine propagate unchanged and no trace record
      is written for the failed call.

Usage:
    from ledger_engines.tracer import traced_engine

    @traced_engine("trend", "1.0", fingerprint_fields=("transactions",))
    def build_monthly_trend(transactions):
        ...
"""

from __future__ import annotations

import dataclasses
import functools
import hashlib
import inspect
import time
from collections.abc import Callable, Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

from ledger_kernel.logging_config import elapsed_ms, get_logger

_logger = get_logger("engines.tracer")

TRACE_TYPE = "LEDGER_ENGINE_TRACE"


def _canonicalize(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, (str, int, float, Decimal)):
        return str(value)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        value = {f.name: getattr(value, f.name) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        body = ",".join(
            f"{k}:{_canonicalize(v)}"
            for k, v in sorted(value.items(), key=lambda kv: str(kv[0]))
        )
        return "{" + body + "}"
    if isinstance(value, (list, tuple)):
        return "[" + ",".join(_canonicalize(v) for v in value) + "]"
    return str(value)


def compute_input_fingerprint(
    fingerprint_fields: tuple[str, ...],
    kwargs: Mapping[str, Any],
) -> str:
    """SHA-256 prefix (16 hex chars) over the named fields of ``kwargs``."""
    digest = hashlib.sha256()
    for i, name in enumerate(fingerprint_fields):
        if i:
            digest.update(b"|")
        digest.update(f"{name}={_canonicalize(kwargs.get(name))}".encode("utf-8"))
    return digest.hexdigest()[:16]


@dataclasses.dataclass(frozen=True)
class EngineTrace:
    """One engine invocation, as written to the trace log."""

    engine_name: str
    engine_version: str
    input_fingerprint: str
    duration_ms: float
    function: str

    def as_log_extra(self) -> dict[str, Any]:
        return {"trace_type": TRACE_TYPE, **dataclasses.asdict(self)}


def traced_engine(
    engine_name: str,
    engine_version: str,
    fingerprint_fields: tuple[str, ...] = (),
) -> Callable:
    """Decorator that emits LEDGER_ENGINE_TRACE for pure engine invocations.

    Args:
        engine_name: Engine identifier (e.g., "bank_reconciliation").
        engine_version: Engine version (e.g., "1.0").
        fingerprint_fields: Parameter names to include in the input
            fingerprint hash.
    """

    def decorator(func: Callable) -> Callable:
        signature = inspect.signature(func)

        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            fingerprint = ""
            if fingerprint_fields:
                bound = signature.bind_partial(*args, **kwargs)
                fingerprint = compute_input_fingerprint(
                    fingerprint_fields, bound.arguments,
                )

            started = time.monotonic()
            result = func(*args, **kwargs)
            trace = EngineTrace(
                engine_name=engine_name,
                engine_version=engine_version,
                input_fingerprint=fingerprint,
                duration_ms=elapsed_ms(started),
                function=func.__qualname__,
            )
            _logger.info(TRACE_TYPE, extra=trace.as_log_extra())
            return result

        return wrapper

    return decorator
