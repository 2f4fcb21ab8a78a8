"""Tests for storage mappers."""

import pytest
from decimal import Decimal

from bankledger.domain.account import Account
from bankledger.domain.entities import Transaction, TransactionKind
from bankledger.domain.errors import MalformedRecordError
from bankledger.storage.mappers import account_to_domain, account_to_orm, transaction_to_domain
from bankledger.storage.models import Account as ORMAccount, Transaction as ORMTransaction


class TestTransactionMapper:
    """Tests for Transaction mapper."""

    def test_transaction_to_domain(self):
        """Test converting ORM Transaction to domain Transaction."""
        orm_txn = ORMTransaction(
            sequence=0,
            timestamp="2024-01-15 10:00:00",
            kind="WITHDRAW",
            amount=Decimal("12.5"),
        )
        assert transaction_to_domain(orm_txn) == Transaction(
            "2024-01-15 10:00:00", TransactionKind.WITHDRAW, Decimal("12.50")
        )

    def test_unknown_kind(self):
        """Test an unknown kind is malformed."""
        orm_txn = ORMTransaction(
            sequence=0, timestamp="2024-01-15 10:00:00", kind="GIFT", amount=Decimal("1")
        )
        with pytest.raises(MalformedRecordError):
            transaction_to_domain(orm_txn)

    @pytest.mark.parametrize("amount", [Decimal("1E+30"), Decimal("-1.00")])
    def test_out_of_range_amount(self, amount):
        """Test stored amounts outside the ledger range are malformed."""
        orm_txn = ORMTransaction(
            sequence=0, timestamp="2024-01-15 10:00:00", kind="DEPOSIT", amount=amount
        )
        with pytest.raises(MalformedRecordError):
            transaction_to_domain(orm_txn)


class TestAccountMapper:
    """Tests for Account mapper."""

    def test_account_to_orm(self, clock):
        """Test converting a domain Account to ORM rows."""
        account = Account(3, "Alice", clock=clock)
        account.deposit(Decimal("50.00"))
        account.withdraw(Decimal("20.00"))

        orm_account = account_to_orm(account, position=1)

        assert orm_account.id == 3
        assert orm_account.owner == "Alice"
        assert orm_account.balance == Decimal("30.00")
        assert orm_account.position == 1
        assert [(t.sequence, t.kind, t.amount) for t in orm_account.transactions] == [
            (0, "DEPOSIT", Decimal("50.00")),
            (1, "WITHDRAW", Decimal("20.00")),
        ]

    def test_account_to_domain(self):
        """Test converting ORM Account to domain Account."""
        orm_account = ORMAccount(
            id=2,
            owner="Bob",
            balance=Decimal("20.00"),
            position=0,
            transactions=[
                ORMTransaction(
                    sequence=0,
                    timestamp="2024-01-15 10:00:00",
                    kind="TRANSFER_IN",
                    amount=Decimal("20.00"),
                )
            ],
        )
        account = account_to_domain(orm_account)

        assert isinstance(account, Account)
        assert account.id == 2
        assert account.owner == "Bob"
        assert account.balance == Decimal("20.00")
        assert account.history[0].kind == TransactionKind.TRANSFER_IN

    def test_account_to_domain_uses_given_clock(self, clock):
        """Test the restored account stamps new transactions with the given clock."""
        orm_account = ORMAccount(id=1, owner="Alice", balance=Decimal("0.00"), position=0)
        account = account_to_domain(orm_account, clock=clock)

        account.deposit(Decimal("1.00"))
        assert account.history[0].timestamp == "2024-01-15 10:00:00"
