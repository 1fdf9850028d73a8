"""Tests for ledger_kernel.domain.ledger value types."""

from datetime import date
from decimal import Decimal

import pytest

from ledger_kernel.domain import (
    AccountCategory,
    BankStatementItem,
    NormalBalance,
    Transaction,
    TransactionType,
    normal_balance_for,
)
from tests.builders import make_line, make_tx


class TestTransaction:

    def test_debit_signed_amount_positive(self):
        tx = make_tx("1", "Cash", AccountCategory.ASSET, "100", TransactionType.DEBIT)
        assert tx.is_debit is True
        assert tx.signed_amount == Decimal("100")

    def test_credit_signed_amount_negative(self):
        tx = make_tx("1", "Cash", AccountCategory.ASSET, "100", TransactionType.CREDIT)
        assert tx.is_debit is False
        assert tx.signed_amount == Decimal("-100")

    def test_zero_amount_allowed(self):
        tx = make_tx("1", "Cash", AccountCategory.ASSET, "0", TransactionType.DEBIT)
        assert tx.signed_amount == Decimal("0")

    def test_negative_amount_rejected(self):
        with pytest.raises(ValueError, match="non-negative"):
            make_tx("1", "Cash", AccountCategory.ASSET, "-1", TransactionType.DEBIT)

    def test_float_amount_rejected(self):
        with pytest.raises(ValueError, match="Decimal"):
            Transaction(
                id="1",
                date=date(2024, 1, 1),
                description="x",
                account_name="Cash",
                category=AccountCategory.ASSET,
                amount=100.0,
                type=TransactionType.DEBIT,
            )

    def test_frozen(self):
        tx = make_tx("1", "Cash", AccountCategory.ASSET, "1", TransactionType.DEBIT)
        with pytest.raises(AttributeError):
            tx.amount = Decimal("2")

    def test_enum_values_match_wire_strings(self):
        assert [c.value for c in AccountCategory] == [
            "Asset", "Liability", "Equity", "Revenue", "Expense",
        ]
        assert [t.value for t in TransactionType] == ["Debit", "Credit"]


class TestBankStatementItem:

    def test_deposit(self):
        assert make_line("st1", "50").is_deposit is True

    def test_withdrawal(self):
        assert make_line("st1", "-50").is_deposit is False

    def test_amount_keeps_sign(self):
        item = BankStatementItem("st1", date(2024, 1, 1), "FEE", Decimal("-25"))
        assert item.amount == Decimal("-25")


class TestNormalBalance:

    @pytest.mark.parametrize("category", [AccountCategory.ASSET, AccountCategory.EXPENSE])
    def test_debit_normal(self, category):
        assert normal_balance_for(category) == NormalBalance.DEBIT

    @pytest.mark.parametrize("category", [
        AccountCategory.LIABILITY, AccountCategory.EQUITY, AccountCategory.REVENUE,
    ])
    def test_credit_normal(self, category):
        assert normal_balance_for(category) == NormalBalance.CREDIT
