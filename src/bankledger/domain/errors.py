"""Shared domain error messages and error types."""

from decimal import Decimal
from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested account does not exist."""


class InsufficientFundsError(DomainError):
    """Withdrawal or transfer exceeds the available balance."""


class MalformedRecordError(DomainError):
    """A persisted record could not be parsed."""

    def __init__(self, message: str, line_number: Optional[int] = None):
        self.line_number = line_number
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)


class StorageError(DomainError):
    """Reading or writing the ledger storage failed."""


def account_not_found(account_id: int) -> str:
    """Return message for missing account."""
    return f"Account {account_id} not found"


def insufficient_funds(account_id: int, balance: Decimal, amount: Decimal) -> str:
    """Return message for a debit larger than the balance."""
    return (
        f"Insufficient funds in account {account_id}: "
        f"balance {balance:.2f}, requested {amount:.2f}"
    )


def invalid_owner(owner: str) -> str:
    """Return message for an owner name that cannot be stored."""
    if not owner.strip():
        return "Owner name must not be empty"
    return f"Owner name {owner!r} must not contain ';' or line breaks"


def non_positive_amount(amount) -> str:
    """Return message for a zero or negative amount."""
    return f"Amount must be greater than zero, got {amount}"


def self_transfer(account_id: int) -> str:
    """Return message for a transfer whose source and destination match."""
    return f"Cannot transfer from account {account_id} to itself"


def amount_too_large(amount) -> str:
    """Return message for an amount above the supported maximum."""
    return f"Amount {amount} exceeds the maximum of 999,999,999,999.99"


def balance_limit_exceeded(account_id: int, balance: Decimal, amount: Decimal) -> str:
    """Return message for a credit that would push a balance past the maximum."""
    return (
        f"Crediting {amount:.2f} to account {account_id} would exceed the maximum "
        f"balance (current balance {balance:.2f})"
    )
