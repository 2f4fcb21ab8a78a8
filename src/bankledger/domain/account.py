"""Account domain model."""

import logging
from decimal import Decimal
from typing import Callable, Iterable, NamedTuple

from bankledger.domain.entities import AccountSummary, Transaction, TransactionKind
from bankledger.domain.errors import (
    InsufficientFundsError,
    MalformedRecordError,
    ValidationError,
    balance_limit_exceeded,
    insufficient_funds,
)
from bankledger.utils.amount_parser import MAX_AMOUNT
from bankledger.utils.clock import now

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


class Checkpoint(NamedTuple):
    """Account state captured before a mutation that may be undone."""

    balance: Decimal
    history_length: int


class Account:
    """A named account with a running balance and its transaction history.

    Amounts passed to the mutation methods are assumed to be validated by
    the ledger: positive Decimals with at most two decimal places.
    """

    def __init__(self, account_id: int, owner: str, clock: Callable[[], str] = now):
        """Initialize an empty account.

        Args:
            account_id: Ledger-unique account ID
            owner: Display name of the owner
            clock: Callable returning the timestamp for new transactions
        """
        self.id = account_id
        self.owner = owner
        self._clock = clock
        self._balance = ZERO
        self._history: list[Transaction] = []

    @classmethod
    def restore(
        cls,
        account_id: int,
        owner: str,
        history: Iterable[Transaction],
        clock: Callable[[], str] = now,
    ) -> "Account":
        """Rebuild an account from persisted history.

        The balance is the signed sum of the history.

        Raises:
            MalformedRecordError: If the history reduces to a negative balance
                or passes the maximum balance
        """
        account = cls(account_id, owner, clock=clock)
        for txn in history:
            account._history.append(txn)
            account._balance += txn.signed_amount
            if account._balance > MAX_AMOUNT:
                raise MalformedRecordError(
                    f"Account {account_id} history exceeds the maximum balance"
                )
        if account._balance < 0:
            raise MalformedRecordError(
                f"Account {account_id} history reduces to a negative balance "
                f"({account._balance:.2f})"
            )
        return account

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def history(self) -> tuple[Transaction, ...]:
        """Transactions in insertion order."""
        return tuple(self._history)

    def deposit(self, amount: Decimal) -> None:
        self.check_credit(amount)
        self._apply(TransactionKind.DEPOSIT, amount)

    def withdraw(self, amount: Decimal) -> None:
        """Withdraw funds if the balance covers the amount.

        Raises:
            InsufficientFundsError: If amount exceeds the balance; the
                account is left unchanged
        """
        self._require_funds(amount)
        self._apply(TransactionKind.WITHDRAW, amount)

    def transfer_out(self, amount: Decimal) -> None:
        self._require_funds(amount)
        self._apply(TransactionKind.TRANSFER_OUT, amount)

    def transfer_in(self, amount: Decimal) -> None:
        self.check_credit(amount)
        self._apply(TransactionKind.TRANSFER_IN, amount)

    def summary(self) -> AccountSummary:
        return AccountSummary(id=self.id, owner=self.owner, balance=self._balance)

    def checkpoint(self) -> Checkpoint:
        """Capture the current state for a later :meth:`rollback`."""
        return Checkpoint(self._balance, len(self._history))

    def rollback(self, checkpoint: Checkpoint) -> None:
        """Drop every transaction recorded since ``checkpoint``."""
        del self._history[checkpoint.history_length:]
        self._balance = checkpoint.balance

    def check_credit(self, amount: Decimal) -> None:
        """Check that crediting ``amount`` keeps the balance within MAX_AMOUNT.

        Raises:
            ValidationError: If the new balance would exceed MAX_AMOUNT
        """
        if self._balance + amount > MAX_AMOUNT:
            raise ValidationError(balance_limit_exceeded(self.id, self._balance, amount))

    def _require_funds(self, amount: Decimal) -> None:
        if amount > self._balance:
            raise InsufficientFundsError(insufficient_funds(self.id, self._balance, amount))

    def _apply(self, kind: TransactionKind, amount: Decimal) -> None:
        txn = Transaction(timestamp=self._clock(), kind=kind, amount=amount)
        self._history.append(txn)
        self._balance += txn.signed_amount
        logger.debug("Account %d: %s %s -> balance %s", self.id, kind.value, amount, self._balance)

    def __repr__(self) -> str:
        return f"Account(id={self.id!r}, owner={self.owner!r}, balance={self._balance!r})"
