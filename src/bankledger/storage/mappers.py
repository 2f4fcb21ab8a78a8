"""Mapper functions to convert between domain models and SQLAlchemy models."""

from decimal import Decimal
from typing import Callable

from bankledger.domain.account import Account
from bankledger.domain.entities import Transaction, TransactionKind
from bankledger.domain.errors import MalformedRecordError
from bankledger.storage.models import (
    Account as ORMAccount,
    Transaction as ORMTransaction,
)
from bankledger.utils.amount_parser import exceeds_max, quantize_amount
from bankledger.utils.clock import now


def transaction_to_domain(orm_transaction: ORMTransaction) -> Transaction:
    """Convert SQLAlchemy Transaction model to domain Transaction entity."""
    try:
        kind = TransactionKind(orm_transaction.kind)
    except ValueError:
        raise MalformedRecordError(f"Unknown transaction kind {orm_transaction.kind!r}")
    amount = Decimal(orm_transaction.amount)
    if not amount.is_finite() or amount < 0 or exceeds_max(amount):
        raise MalformedRecordError(f"Invalid amount {orm_transaction.amount!r}")
    return Transaction(
        timestamp=orm_transaction.timestamp,
        kind=kind,
        amount=quantize_amount(amount),
    )


def account_to_domain(orm_account: ORMAccount, clock: Callable[[], str] = now) -> Account:
    """Convert SQLAlchemy Account model to domain Account."""
    return Account.restore(
        orm_account.id,
        orm_account.owner,
        [transaction_to_domain(txn) for txn in orm_account.transactions],
        clock=clock,
    )


def account_to_orm(account: Account, position: int) -> ORMAccount:
    """Convert domain Account to a new SQLAlchemy Account model."""
    return ORMAccount(
        id=account.id,
        owner=account.owner,
        balance=account.balance,
        position=position,
        transactions=[
            ORMTransaction(
                sequence=sequence,
                timestamp=txn.timestamp,
                kind=txn.kind.value,
                amount=txn.amount,
            )
            for sequence, txn in enumerate(account.history)
        ],
    )
