"""Tests for the demo report script's command line handling."""

import json
import sys

import pytest

from scripts.demo_reports import main


@pytest.fixture
def run_demo(monkeypatch):
    def _run(*argv: str) -> int:
        monkeypatch.setattr(sys, "argv", ["demo_reports.py", *argv])
        return main()
    return _run


class TestDemoReports:

    def test_json_output(self, run_demo, capsys):
        assert run_demo("--json") == 0
        payload = json.loads(capsys.readouterr().out)
        assert set(payload) == {"statements", "reconciliation", "trend"}
        assert payload["statements"]["income_statement"]["net_income"] == "43500"
        assert len(payload["trend"]) == 12

    def test_text_output(self, run_demo, capsys):
        assert run_demo() == 0
        out = capsys.readouterr().out
        assert "TRIAL BALANCE" in out
        assert "[FAIL] Assets = Liabilities + Equity" in out

    def test_malformed_yaml_reported(self, run_demo, tmp_path, capsys):
        path = tmp_path / "broken.yaml"
        path.write_text("reporting: [unclosed\n")
        assert run_demo("--config", str(path)) == 1
        assert "ERROR: Could not load" in capsys.readouterr().err

    def test_invalid_value_reported(self, run_demo, tmp_path, capsys):
        path = tmp_path / "scalar.yaml"
        path.write_text("reporting:\n  cash_account_markers: Cash\n")
        assert run_demo("--config", str(path)) == 1
        assert "cash_account_markers" in capsys.readouterr().err

    def test_missing_config_reported(self, run_demo, tmp_path, capsys):
        assert run_demo("--config", str(tmp_path / "absent.yaml")) == 1
        assert "ERROR: Could not load" in capsys.readouterr().err
