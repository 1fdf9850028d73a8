"""Tests for reporting configuration and YAML loading."""

from decimal import Decimal

import pytest
import yaml

from ledger_kernel.exceptions import InvalidConfigurationError
from ledger_reporting.config import (
    DEFAULT_NOTES,
    BudgetConfig,
    NoteText,
    ReconciliationConfig,
    ReportingConfig,
    load_reporting_config,
)


class TestReportingConfigDefaults:

    def test_defaults(self):
        config = ReportingConfig.with_defaults()
        assert config.cash_account_markers == ("Cash", "Bank", "Petty Cash")
        assert config.budget.revenue_budget == Decimal("65000")
        assert config.budget.expense_budget == Decimal("15000")
        assert config.equity_opening_threshold == Decimal("50000")
        assert config.current_earnings_label == "Current Period Earnings"
        assert config.retained_earnings_label == "Retained Earnings"
        assert config.notes == DEFAULT_NOTES
        assert config.strict_categories is False

    def test_note_titles(self):
        assert [n.title for n in DEFAULT_NOTES] == [
            "Basis of Preparation",
            "Revenue Recognition",
            "Cash and Cash Equivalents",
            "Property, Plant and Equipment",
        ]

    @pytest.mark.parametrize("name, expected", [
        ("Cash", True),
        ("Petty Cash", True),
        ("Bank - Checking", True),
        ("Cash Sales", True),
        ("Equipment", False),
        ("cash", False),  # case-sensitive
    ])
    def test_is_cash_account(self, name, expected):
        assert ReportingConfig().is_cash_account(name) is expected


class TestReportingConfigValidation:

    def test_empty_markers_rejected(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ReportingConfig(cash_account_markers=())
        assert exc_info.value.setting == "cash_account_markers"

    def test_blank_marker_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            ReportingConfig(cash_account_markers=("Cash", ""))

    def test_negative_threshold_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            ReportingConfig(equity_opening_threshold=Decimal("-1"))

    def test_threshold_coerced(self):
        assert ReportingConfig(equity_opening_threshold="1000").equity_opening_threshold == Decimal("1000")

    def test_wrong_note_count_rejected(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ReportingConfig(notes=DEFAULT_NOTES[:3])
        assert exc_info.value.setting == "notes"

    def test_negative_budget_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            BudgetConfig(revenue_budget=Decimal("-5"))

    def test_non_numeric_budget_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            BudgetConfig(expense_budget="lots")

    def test_budget_from_float(self):
        assert BudgetConfig(revenue_budget=70000.5).revenue_budget == Decimal("70000.5")

    def test_single_string_marker_rejected(self):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ReportingConfig(cash_account_markers="Cash")
        assert exc_info.value.setting == "cash_account_markers"

    def test_non_string_marker_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            ReportingConfig(cash_account_markers=("Cash", 7))

    @pytest.mark.parametrize("budget", [None, "65000", (65000, 15000)])
    def test_budget_must_be_budget_config(self, budget):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ReportingConfig(budget=budget)
        assert exc_info.value.setting == "budget"

    @pytest.mark.parametrize("notes", [None, "notes", ("a", "b", "c", "d")])
    def test_notes_must_be_note_texts(self, notes):
        with pytest.raises(InvalidConfigurationError) as exc_info:
            ReportingConfig(notes=notes)
        assert exc_info.value.setting == "notes"

    def test_strict_categories_must_be_bool(self):
        with pytest.raises(InvalidConfigurationError):
            ReportingConfig(strict_categories="sometimes")


class TestFromDict:

    def test_nested_values_built(self):
        config = ReportingConfig.from_dict({
            "cash_account_markers": ["Till"],
            "budget": {"revenue_budget": "100", "expense_budget": 20},
            "notes": [{"title": f"T{i}", "content": "c"} for i in range(4)],
            "strict_categories": True,
        })
        assert config.cash_account_markers == ("Till",)
        assert config.budget == BudgetConfig(Decimal("100"), Decimal("20"))
        assert config.notes[3] == NoteText("T3", "c")
        assert config.strict_categories is True

    def test_unknown_key_rejected(self):
        with pytest.raises(TypeError):
            ReportingConfig.from_dict({"no_such_setting": 1})


class TestReconciliationConfig:

    def test_defaults(self):
        config = ReconciliationConfig.with_defaults()
        assert config.book_account_name == "Cash"
        assert config.amount_tolerance is None

    def test_tolerance_coerced(self):
        assert ReconciliationConfig(amount_tolerance="0.05").amount_tolerance == Decimal("0.05")

    def test_negative_tolerance_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            ReconciliationConfig(amount_tolerance=Decimal("-0.01"))

    def test_empty_book_account_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            ReconciliationConfig(book_account_name="")

    def test_non_string_book_account_rejected(self):
        with pytest.raises(InvalidConfigurationError):
            ReconciliationConfig(book_account_name=1010)


class TestLoadReportingConfig:

    def test_full_file(self, tmp_path):
        path = tmp_path / "reporting.yaml"
        path.write_text(yaml.safe_dump({
            "reporting": {
                "cash_account_markers": ["Cash", "Wallet"],
                "budget": {"revenue_budget": 80000, "expense_budget": "12000"},
                "equity_opening_threshold": 25000,
            },
            "reconciliation": {
                "book_account_name": "Operating Bank",
                "amount_tolerance": "0.50",
            },
        }))

        reporting, recon = load_reporting_config(path)

        assert reporting.cash_account_markers == ("Cash", "Wallet")
        assert reporting.budget.revenue_budget == Decimal("80000")
        assert reporting.budget.expense_budget == Decimal("12000")
        assert reporting.equity_opening_threshold == Decimal("25000")
        assert recon.book_account_name == "Operating Bank"
        assert recon.amount_tolerance == Decimal("0.50")

    def test_missing_sections_use_defaults(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        reporting, recon = load_reporting_config(str(path))
        assert reporting == ReportingConfig()
        assert recon == ReconciliationConfig()

    def test_non_mapping_rejected(self, tmp_path):
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n")
        with pytest.raises(InvalidConfigurationError):
            load_reporting_config(path)

    def test_invalid_value_rejected(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("reporting:\n  equity_opening_threshold: -10\n")
        with pytest.raises(InvalidConfigurationError):
            load_reporting_config(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_reporting_config(tmp_path / "absent.yaml")

    def test_scalar_marker_rejected(self, tmp_path):
        path = tmp_path / "scalar.yaml"
        path.write_text("reporting:\n  cash_account_markers: Cash\n")
        with pytest.raises(InvalidConfigurationError) as exc_info:
            load_reporting_config(path)
        assert exc_info.value.setting == "cash_account_markers"

    @pytest.mark.parametrize("setting", ["budget", "notes"])
    def test_null_nested_section_rejected(self, tmp_path, setting):
        path = tmp_path / "null.yaml"
        path.write_text(f"reporting:\n  {setting}:\n")
        with pytest.raises(InvalidConfigurationError) as exc_info:
            load_reporting_config(path)
        assert exc_info.value.setting == setting

    def test_non_mapping_section_rejected(self, tmp_path):
        path = tmp_path / "section.yaml"
        path.write_text("reconciliation: Cash\n")
        with pytest.raises(InvalidConfigurationError) as exc_info:
            load_reporting_config(path)
        assert exc_info.value.setting == "reconciliation"
