"""Tests for the SQLite ledger store."""

import pytest
from decimal import Decimal

from bankledger.domain.account import Account
from bankledger.domain.entities import TransactionKind
from bankledger.domain.errors import MalformedRecordError, StorageError
from bankledger.domain.ledger import Ledger
from bankledger.storage.models import Account as ORMAccount, Transaction as ORMTransaction
from bankledger.storage.sqlalchemy_store import SQLAlchemyStore


def test_load_empty_database(sqlite_store):
    """Test a fresh database yields an empty ledger."""
    ledger = sqlite_store.load()
    assert len(ledger) == 0
    assert ledger.next_id == 1


def test_round_trip(sqlite_store, funded_ledger, clock):
    """Test save followed by load reproduces accounts and history."""
    funded_ledger.transfer(1, 2, "20")
    sqlite_store.save(funded_ledger)

    loaded = sqlite_store.load(clock=clock)

    assert loaded.list() == funded_ledger.list()
    assert loaded.history(1) == funded_ledger.history(1)
    assert loaded.history(2) == funded_ledger.history(2)
    assert loaded.next_id == 3


def test_save_replaces_previous_snapshot(sqlite_store, funded_ledger):
    """Test a second save overwrites rather than appends."""
    sqlite_store.save(funded_ledger)
    funded_ledger.withdraw(1, "10")
    sqlite_store.save(funded_ledger)

    loaded = sqlite_store.load()
    assert loaded.find(1).balance == Decimal("40.00")
    assert [t.kind for t in loaded.history(1)] == [
        TransactionKind.DEPOSIT,
        TransactionKind.WITHDRAW,
    ]


def test_insertion_order_preserved(sqlite_store):
    """Test accounts come back in ledger order, not id order."""
    sqlite_store.save(Ledger.restore([Account(7, "Zed"), Account(3, "Amy")]))

    loaded = sqlite_store.load()

    assert [s.id for s in loaded.list()] == [7, 3]
    assert loaded.next_id == 8


def test_unknown_kind_blocks_save(sqlite_store):
    """Test a corrupted row aborts the load and blocks saving."""
    with sqlite_store.session_factory() as session, session.begin():
        session.add(
            ORMAccount(
                id=1,
                owner="Alice",
                balance=Decimal("5.00"),
                position=0,
                transactions=[
                    ORMTransaction(
                        sequence=0,
                        timestamp="2024-01-15 10:00:00",
                        kind="BONUS",
                        amount=Decimal("5.00"),
                    )
                ],
            )
        )

    with pytest.raises(MalformedRecordError):
        sqlite_store.load()
    with pytest.raises(StorageError):
        sqlite_store.save(Ledger())


def test_unopenable_database(tmp_path):
    """Test a database in a missing directory raises StorageError."""
    with pytest.raises(StorageError):
        SQLAlchemyStore(f"sqlite:///{tmp_path / 'missing' / 'x.db'}")


def test_load_uses_given_clock(sqlite_store, clock):
    """Test accounts loaded from the database use the given clock."""
    ledger = Ledger()
    ledger.create("Alice")
    sqlite_store.save(ledger)

    loaded = sqlite_store.load(clock=clock)
    loaded.deposit(1, "5")
    assert loaded.history(1)[0].timestamp == "2024-01-15 10:00:00"
