"""Tests for the engine tracer and input fingerprinting."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

import pytest

from ledger_engines.tracer import compute_input_fingerprint, traced_engine
from ledger_kernel.domain.ledger import AccountCategory, TransactionType
from tests.builders import make_tx


@dataclass(frozen=True)
class _Point:
    x: Decimal
    label: str


class TestFingerprint:

    def test_deterministic(self):
        kwargs = {"amount": Decimal("10.00"), "rows": [1, 2]}
        fp1 = compute_input_fingerprint(("amount", "rows"), kwargs)
        fp2 = compute_input_fingerprint(("amount", "rows"), dict(kwargs))
        assert fp1 == fp2
        assert len(fp1) == 16

    def test_changes_with_input(self):
        fp1 = compute_input_fingerprint(("amount",), {"amount": Decimal("1")})
        fp2 = compute_input_fingerprint(("amount",), {"amount": Decimal("2")})
        assert fp1 != fp2

    def test_missing_field_is_null(self):
        assert compute_input_fingerprint(("a",), {}) == compute_input_fingerprint(
            ("a",), {"a": None},
        )

    def test_dict_key_order_irrelevant(self):
        fp1 = compute_input_fingerprint(("m",), {"m": {"a": 1, "b": 2}})
        fp2 = compute_input_fingerprint(("m",), {"m": {"b": 2, "a": 1}})
        assert fp1 == fp2

    def test_sequence_order_matters(self):
        fp1 = compute_input_fingerprint(("s",), {"s": [1, 2]})
        fp2 = compute_input_fingerprint(("s",), {"s": [2, 1]})
        assert fp1 != fp2

    def test_dataclasses_compared_by_value(self):
        a = make_tx("1", "Cash", AccountCategory.ASSET, "5", TransactionType.DEBIT, date(2024, 1, 1))
        b = make_tx("1", "Cash", AccountCategory.ASSET, "5", TransactionType.DEBIT, date(2024, 1, 1))
        assert compute_input_fingerprint(("t",), {"t": [a]}) == compute_input_fingerprint(
            ("t",), {"t": [b]},
        )
        assert compute_input_fingerprint(("p",), {"p": _Point(Decimal("1"), "x")}) != (
            compute_input_fingerprint(("p",), {"p": _Point(Decimal("1"), "y")})
        )


class TestTracedEngine:

    def test_returns_wrapped_result_and_logs_trace(self, captured_logs):
        @traced_engine("sample", "2.1", fingerprint_fields=("value",))
        def double(value):
            return value * 2

        assert double(value=Decimal("3")) == Decimal("6")

        trace = next(r for r in captured_logs() if r["message"] == "LEDGER_ENGINE_TRACE")
        assert trace["trace_type"] == "LEDGER_ENGINE_TRACE"
        assert trace["engine_name"] == "sample"
        assert trace["engine_version"] == "2.1"
        assert trace["input_fingerprint"] == compute_input_fingerprint(
            ("value",), {"value": Decimal("3")},
        )
        assert trace["duration_ms"] >= 0
        assert trace["function"].endswith("double")

    def test_positional_and_keyword_calls_fingerprint_alike(self, captured_logs):
        @traced_engine("bind", "1.0", fingerprint_fields=("rows", "limit"))
        def take(rows, limit=2):
            return rows[:limit]

        take([1, 2, 3], 2)
        take(rows=[1, 2, 3], limit=2)
        traces = [r for r in captured_logs() if r["message"] == "LEDGER_ENGINE_TRACE"]
        assert len(traces) == 2
        assert traces[0]["input_fingerprint"] == traces[1]["input_fingerprint"]

    def test_no_fingerprint_fields(self, captured_logs):
        @traced_engine("bare", "1.0")
        def noop():
            return None

        noop()
        trace = next(r for r in captured_logs() if r["message"] == "LEDGER_ENGINE_TRACE")
        assert trace["input_fingerprint"] == ""

    def test_exception_propagates_without_trace(self, captured_logs):
        @traced_engine("failing", "1.0")
        def boom():
            raise RuntimeError("engine failed")

        with pytest.raises(RuntimeError, match="engine failed"):
            boom()
        assert not any(r["message"] == "LEDGER_ENGINE_TRACE" for r in captured_logs())

    def test_preserves_function_metadata(self):
        @traced_engine("meta", "1.0")
        def documented():
            """Docstring kept."""

        assert documented.__name__ == "documented"
        assert documented.__doc__ == "Docstring kept."
