"""Tests for domain entities."""

import pytest
from decimal import Decimal

from bankledger.domain.entities import AccountSummary, Transaction, TransactionKind


class TestTransactionKind:
    """Tests for TransactionKind."""

    def test_kind_values_match_stored_names(self):
        """Test that enum values are the names written to storage."""
        assert [k.value for k in TransactionKind] == [
            "DEPOSIT",
            "WITHDRAW",
            "TRANSFER_OUT",
            "TRANSFER_IN",
        ]

    @pytest.mark.parametrize(
        "kind,is_credit",
        [
            (TransactionKind.DEPOSIT, True),
            (TransactionKind.TRANSFER_IN, True),
            (TransactionKind.WITHDRAW, False),
            (TransactionKind.TRANSFER_OUT, False),
        ],
    )
    def test_is_credit(self, kind, is_credit):
        """Test which kinds add to the balance."""
        assert kind.is_credit is is_credit


class TestTransaction:
    """Tests for Transaction entity."""

    def test_signed_amount_credit(self):
        """Test that credits contribute positively."""
        txn = Transaction("2024-01-15 10:00:00", TransactionKind.TRANSFER_IN, Decimal("20.00"))
        assert txn.signed_amount == Decimal("20.00")

    def test_signed_amount_debit(self):
        """Test that debits contribute negatively."""
        txn = Transaction("2024-01-15 10:00:00", TransactionKind.WITHDRAW, Decimal("20.00"))
        assert txn.signed_amount == Decimal("-20.00")

    def test_transaction_immutability(self):
        """Test that Transaction entities are immutable."""
        txn = Transaction("2024-01-15 10:00:00", TransactionKind.DEPOSIT, Decimal("1.00"))
        with pytest.raises(Exception):
            txn.amount = Decimal("2.00")


class TestAccountSummary:
    """Tests for AccountSummary entity."""

    def test_summary_equality(self):
        """Test that summaries compare by value."""
        assert AccountSummary(1, "Alice", Decimal("1.00")) == AccountSummary(
            1, "Alice", Decimal("1.00")
        )
