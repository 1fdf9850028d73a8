"""
Pytest fixtures for the ledger statements test suite.

Provides:
- Structured logging setup and a JSON log capture fixture
- The sample ledger, a small balanced ledger, and service instances
"""

import json
import logging
from io import StringIO

import pytest

from ledger_kernel.domain.ledger import BankStatementItem, Transaction
from ledger_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    reset_logging,
)
from ledger_reporting.config import ReconciliationConfig, ReportingConfig
from ledger_reporting.sample_data import SAMPLE_BANK_STATEMENT, SAMPLE_TRANSACTIONS
from ledger_reporting.service import ReportingService
from tests.builders import three_pair_ledger


# =============================================================================
# Logging fixtures
# =============================================================================


@pytest.fixture(autouse=True, scope="session")
def _configure_test_logging():
    """Configure structured logging for the test suite."""
    reset_logging()
    configure_logging(level=logging.DEBUG)
    yield
    reset_logging()


@pytest.fixture(autouse=True)
def _clear_log_context():
    """Clear LogContext between tests to prevent cross-test contamination."""
    LogContext.clear()
    yield
    LogContext.clear()


@pytest.fixture
def captured_logs():
    """
    Capture ledger_kernel logs as parsed JSON dicts.

    Usage::

        def test_something(captured_logs, reporting_service):
            reporting_service.generate_statements(transactions)
            logs = captured_logs()
            assert any(r["message"] == "financial_statements_generated" for r in logs)
    """
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    root = logging.getLogger("ledger_kernel")
    previous_level = root.level
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)

    def _get_records() -> list[dict]:
        lines = stream.getvalue().strip().split("\n")
        return [json.loads(line) for line in lines if line]

    yield _get_records

    root.removeHandler(handler)
    root.setLevel(previous_level)


# =============================================================================
# Data fixtures
# =============================================================================


@pytest.fixture
def balanced_ledger() -> tuple[Transaction, ...]:
    return three_pair_ledger()


@pytest.fixture
def sample_transactions() -> tuple[Transaction, ...]:
    return SAMPLE_TRANSACTIONS


@pytest.fixture
def sample_statement() -> tuple[BankStatementItem, ...]:
    return SAMPLE_BANK_STATEMENT


@pytest.fixture
def reporting_config() -> ReportingConfig:
    """Standard reporting configuration for tests."""
    return ReportingConfig.with_defaults()


@pytest.fixture
def reporting_service(reporting_config) -> ReportingService:
    """ReportingService with default reporting and reconciliation settings."""
    return ReportingService(
        config=reporting_config,
        reconciliation_config=ReconciliationConfig.with_defaults(),
    )
