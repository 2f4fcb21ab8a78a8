"""Ledger domain service."""

import logging
from decimal import Decimal, InvalidOperation
from typing import Callable, Iterable, Iterator, Optional, Union

from bankledger.domain.account import Account
from bankledger.domain.entities import AccountSummary, Transaction
from bankledger.domain.errors import (
    InsufficientFundsError,
    MalformedRecordError,
    NotFoundError,
    ValidationError,
    account_not_found,
    amount_too_large,
    insufficient_funds,
    invalid_owner,
    non_positive_amount,
    self_transfer,
)
from bankledger.utils.amount_parser import exceeds_max, has_sub_cent_digits, quantize_amount
from bankledger.utils.clock import now

logger = logging.getLogger(__name__)

OWNER_FORBIDDEN = (";", "\n", "\r")

AmountLike = Union[Decimal, int, str]


class Ledger:
    """Collection of accounts keyed by ID, with an ID allocator."""

    def __init__(self, clock: Callable[[], str] = now):
        """Initialize an empty ledger.

        Args:
            clock: Callable returning timestamps for new transactions
        """
        self.clock = clock
        self._accounts: dict[int, Account] = {}
        self.next_id = 1

    @classmethod
    def restore(cls, accounts: Iterable[Account], clock: Callable[[], str] = now) -> "Ledger":
        """Build a ledger from accounts loaded from storage.

        Accounts keep the given order. ``next_id`` ends up past the highest ID.

        Raises:
            MalformedRecordError: If two accounts share an ID or an ID is not positive
        """
        ledger = cls(clock=clock)
        for account in accounts:
            if account.id < 1:
                raise MalformedRecordError(f"Account ID must be positive, got {account.id}")
            if account.id in ledger._accounts:
                raise MalformedRecordError(f"Duplicate account ID {account.id}")
            ledger._accounts[account.id] = account
            ledger.next_id = max(ledger.next_id, account.id + 1)
        return ledger

    def create(self, owner: str) -> int:
        """Create a new account with zero balance.

        Args:
            owner: Owner display name

        Returns:
            Account ID

        Raises:
            ValidationError: If owner is empty, contains ';' or a line break,
                or cannot be stored as UTF-8
        """
        owner = owner.strip()
        if not owner or any(ch in owner for ch in OWNER_FORBIDDEN):
            raise ValidationError(invalid_owner(owner))
        try:
            owner.encode("utf-8")
        except UnicodeEncodeError:
            raise ValidationError(f"Owner name {owner!r} is not valid text")

        account_id = self.next_id
        self._accounts[account_id] = Account(account_id, owner, clock=self.clock)
        self.next_id += 1
        logger.debug("Created account %d for %r", account_id, owner)
        return account_id

    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID, or None if not found."""
        return self._accounts.get(account_id)

    def find(self, account_id: int) -> Account:
        """Get account by ID.

        Raises:
            NotFoundError: If the account does not exist
        """
        account = self._accounts.get(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account

    def deposit(self, account_id: int, amount: AmountLike) -> Decimal:
        """Deposit funds into an account.

        Returns:
            The new balance

        Raises:
            ValidationError: If amount is not a positive whole-cent amount
                or the balance would exceed MAX_AMOUNT
            NotFoundError: If the account does not exist
        """
        amount = validate_amount(amount)
        account = self.find(account_id)
        account.deposit(amount)
        return account.balance

    def withdraw(self, account_id: int, amount: AmountLike) -> Decimal:
        """Withdraw funds from an account.

        Returns:
            The new balance

        Raises:
            ValidationError: If amount is not a positive whole-cent amount
            NotFoundError: If the account does not exist
            InsufficientFundsError: If amount exceeds the balance
        """
        amount = validate_amount(amount)
        account = self.find(account_id)
        account.withdraw(amount)
        return account.balance

    def transfer(self, from_id: int, to_id: int, amount: AmountLike) -> None:
        """Move funds between two accounts.

        Either both legs are recorded or neither is.

        Raises:
            ValidationError: If amount is invalid, the accounts are the same or
                the destination balance would exceed MAX_AMOUNT
            NotFoundError: If either account does not exist
            InsufficientFundsError: If the source balance is below amount
        """
        amount = validate_amount(amount)
        if from_id == to_id:
            raise ValidationError(self_transfer(from_id))

        source = self.find(from_id)
        destination = self.find(to_id)
        if source.balance < amount:
            raise InsufficientFundsError(insufficient_funds(from_id, source.balance, amount))
        destination.check_credit(amount)

        checkpoint = source.checkpoint()
        source.transfer_out(amount)
        try:
            destination.transfer_in(amount)
        except Exception:
            source.rollback(checkpoint)
            logger.error("Transfer %d -> %d failed; source leg rolled back", from_id, to_id)
            raise
        logger.debug("Transferred %s from %d to %d", amount, from_id, to_id)

    def list(self) -> list[AccountSummary]:
        """Summaries of every account in insertion order."""
        return [account.summary() for account in self._accounts.values()]

    def history(self, account_id: int) -> tuple[Transaction, ...]:
        """Transaction history of an account in insertion order.

        Raises:
            NotFoundError: If the account does not exist
        """
        return self.find(account_id).history

    def total_balance(self) -> Decimal:
        return sum((acc.balance for acc in self._accounts.values()), Decimal("0.00"))

    def accounts(self) -> Iterator[Account]:
        """Iterate accounts in insertion order."""
        return iter(self._accounts.values())

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_id: object) -> bool:
        return account_id in self._accounts


def validate_amount(amount: AmountLike) -> Decimal:
    """Coerce an amount to Decimal and check it is a positive whole-cent value.

    Raises:
        ValidationError: If amount is not a number, not positive, above
            MAX_AMOUNT, or has digits below one cent
    """
    if isinstance(amount, float):
        amount = str(amount)
    try:
        value = amount if isinstance(amount, Decimal) else Decimal(amount)
    except (InvalidOperation, TypeError, ValueError):
        raise ValidationError(f"Invalid amount {amount!r}")

    if not value.is_finite() or value <= 0:
        raise ValidationError(non_positive_amount(amount))
    if exceeds_max(value):
        raise ValidationError(amount_too_large(amount))
    if has_sub_cent_digits(value):
        raise ValidationError(f"Amount {amount} has more than two decimal places")
    return quantize_amount(value)
