"""Domain layer for bankledger application."""

from bankledger.domain.account import Account
from bankledger.domain.entities import AccountSummary, Transaction, TransactionKind
from bankledger.domain.ledger import Ledger

__all__ = [
    "Account",
    "AccountSummary",
    "Ledger",
    "Transaction",
    "TransactionKind",
]
