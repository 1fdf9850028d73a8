#!/usr/bin/env python3
"""
Print the sample ledger's reports to the terminal.

Every statement is derived from the bundled sample transactions, then the
bank reconciliation and the twelve-month trend follow.

Usage:
    python3 scripts/demo_reports.py
    python3 scripts/demo_reports.py --config reporting.yaml
    python3 scripts/demo_reports.py --json
"""

import argparse
import json
import sys
from decimal import Decimal
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

ENTITY = "Sample Trading Co."

# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

W = 72
AMT_W = 16
LABEL_W = W - AMT_W - 2


def _money(v) -> str:
    """$1,234.56, negatives in parentheses."""
    if v is None:
        return ""
    d = Decimal(str(v))
    text = f"${abs(d):,.2f}"
    return f"({text})" if d < 0 else f" {text} "


def _banner(title: str, subtitle: str = "") -> str:
    rule = "=" * W
    return "\n".join(["", rule, title.center(W), subtitle.center(W), rule])


def _line(label: str, amount, indent: int = 0, total: bool = False) -> str:
    text = label.upper() if total else "  " * indent + label
    return f"  {text:<{LABEL_W}}{_money(amount):>{AMT_W}}"


def _rule() -> str:
    return "  " + " " * LABEL_W + "-" * AMT_W


def _check(label: str, ok: bool) -> str:
    return f"  [{'OK' if ok else 'FAIL'}] {label}"


def _section(label: str, rows) -> None:
    print(f"  {label}")
    for item in rows:
        print(_line(item.label, item.amount, indent=1))
    print(_rule())


# ---------------------------------------------------------------------------
# Report printers
# ---------------------------------------------------------------------------


def print_trial_balance(tb) -> None:
    from ledger_reporting.statements import trial_balance_totals

    name_w = W - 2 * AMT_W - 2
    print(_banner("TRIAL BALANCE", ENTITY))
    print(f"  {'Account':<{name_w}}{'Debit':>{AMT_W}}{'Credit':>{AMT_W}}")
    print(f"  {'-' * name_w}{'-' * AMT_W:>{AMT_W}}{'-' * AMT_W:>{AMT_W}}")
    for item in tb:
        dr = _money(item.debit) if item.debit else ""
        cr = _money(item.credit) if item.credit else ""
        print(f"  {item.account_name:<{name_w}}{dr:>{AMT_W}}{cr:>{AMT_W}}")
    total_dr, total_cr = trial_balance_totals(tb)
    print(f"  {'-' * name_w}{'-' * AMT_W:>{AMT_W}}{'-' * AMT_W:>{AMT_W}}")
    print(f"  {'TOTALS':<{name_w}}{_money(total_dr):>{AMT_W}}{_money(total_cr):>{AMT_W}}")
    print(_check("Debits = Credits", total_dr == total_cr))
    print()


def print_income_statement(is_rpt) -> None:
    print(_banner("INCOME STATEMENT", ENTITY))
    print()
    _section("Revenue", is_rpt.revenue)
    print(_line("Total Revenue", is_rpt.total_revenue, indent=1))
    print()
    _section("Expenses", is_rpt.expenses)
    print(_line("Total Expenses", is_rpt.total_expenses, indent=1))
    print()
    print(_line("Net Income", is_rpt.net_income, total=True))
    print()


def print_balance_sheet(bs) -> None:
    print(_banner("BALANCE SHEET", ENTITY))
    print()
    _section("Assets", bs.assets)
    print(_line("Total Assets", bs.total_assets, total=True))
    print()
    _section("Liabilities", bs.liabilities)
    print(_line("Total Liabilities", bs.total_liabilities, total=True))
    print()
    _section("Equity", bs.equity)
    print(_line("Total Equity", bs.total_equity, total=True))
    print()
    print(_line("Total Liabilities & Equity", bs.total_liabilities_and_equity, total=True))
    print(_check("Assets = Liabilities + Equity", bs.is_balanced))
    print()


def print_equity_changes(changes) -> None:
    print(_banner("STATEMENT OF CHANGES IN EQUITY", ENTITY))
    print()
    for c in changes:
        print(f"  {c.account_name}")
        print(_line("Opening Balance", c.opening_balance, indent=1))
        print(_line("Additions", c.additions, indent=1))
        print(_line("Net Income", c.net_income, indent=1))
        print(_line("Withdrawals", c.withdrawals, indent=1))
        print(_rule())
        print(_line("Closing Balance", c.closing_balance, indent=1))
        print()


def print_cash_flow(cf) -> None:
    print(_banner("CASH FLOW BREAKDOWN", ENTITY))
    print()
    _section("Operating Activities", cf.operating)
    print(_line("Operating Total", cf.operating_total, indent=1))
    print()
    _section("Investing Activities", cf.investing)
    print(_line("Investing Total", cf.investing_total, indent=1))
    print()
    _section("Financing Activities", cf.financing)
    print(_line("Financing Total", cf.financing_total, indent=1))
    print()
    print(_line("Net Cash Flow", cf.net_cash_flow, total=True))
    print()


def print_notes(notes) -> None:
    print(_banner("NOTES TO THE FINANCIAL STATEMENTS", ENTITY))
    for note in notes:
        print()
        print(f"  {note.note_number}. {note.title}")
        print(f"     {note.content}")
        for item in note.data or ():
            print(_line(item.label, item.amount, indent=2))
    print()


def print_variance(v) -> None:
    print(_banner("BUDGET VARIANCE", ENTITY))
    print()
    print(_line("Revenue (actual)", v.revenue_actual))
    print(_line("Revenue (budget)", v.revenue_budget))
    print(_line("Expenses (actual)", v.expense_actual))
    print(_line("Expenses (budget)", v.expense_budget))
    print()


def print_reconciliation(matches, summary) -> None:
    print(_banner("BANK RECONCILIATION", ENTITY))
    print()
    for m in matches:
        book = m.book_entry
        line = m.statement_entry
        label = book.description if book is not None else line.description
        amount = book.signed_amount if book is not None else line.amount
        print(_line(f"[{m.status.value}] {label}", amount))
    print()
    print(_check("Fully reconciled", summary.is_fully_reconciled))
    print()


def print_trend(points) -> None:
    print(_banner("MONTHLY TREND", ENTITY))
    print(f"  {'Month':<{W - 3 * AMT_W - 2}}{'Revenue':>{AMT_W}}{'Expense':>{AMT_W}}{'Profit':>{AMT_W}}")
    for p in points:
        print(
            f"  {p.month:<{W - 3 * AMT_W - 2}}"
            f"{_money(p.revenue):>{AMT_W}}{_money(p.expense):>{AMT_W}}{_money(p.profit):>{AMT_W}}"
        )
    print()


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------


def main() -> int:
    parser = argparse.ArgumentParser(description="Print every report for the sample ledger.")
    parser.add_argument("--config", type=Path, default=None, help="Reporting YAML file")
    parser.add_argument("--json", action="store_true", help="Emit the report as JSON")
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    import yaml

    from ledger_kernel.exceptions import LedgerError
    from ledger_kernel.logging_config import configure_logging
    from ledger_reporting.config import load_reporting_config
    from ledger_reporting.sample_data import SAMPLE_BANK_STATEMENT, SAMPLE_TRANSACTIONS
    from ledger_reporting.service import ReportingService

    configure_logging(level=args.log_level, stream=sys.stderr)

    config = recon_config = None
    if args.config is not None:
        try:
            config, recon_config = load_reporting_config(args.config)
        except (OSError, yaml.YAMLError, LedgerError) as exc:
            print(f"ERROR: Could not load {args.config}: {exc}", file=sys.stderr)
            return 1

    svc = ReportingService(config=config, reconciliation_config=recon_config)
    statements = svc.generate_statements(SAMPLE_TRANSACTIONS)
    matches = svc.reconcile(SAMPLE_TRANSACTIONS, SAMPLE_BANK_STATEMENT)
    trend = svc.monthly_trend(SAMPLE_TRANSACTIONS)

    if args.json:
        payload = {
            "statements": svc.to_dict(statements),
            "reconciliation": svc.to_dict(matches),
            "trend": svc.to_dict(trend),
        }
        print(json.dumps(payload, indent=2))
        return 0

    print_trial_balance(statements.trial_balance)
    print_income_statement(statements.income_statement)
    print_balance_sheet(statements.balance_sheet)
    print_equity_changes(statements.equity_changes)
    print_cash_flow(statements.cash_flow)
    print_notes(statements.notes)
    print_variance(statements.variance)
    print_reconciliation(matches, svc.reconciliation_summary(matches))
    print_trend(trend)
    return 0


if __name__ == "__main__":
    sys.exit(main())
