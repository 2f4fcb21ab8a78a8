"""Domain model entities for bankledger.

These are pure data classes representing the ledger's records, independent
of how a store persists them.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class TransactionKind(str, Enum):
    """Kinds of balance-changing events recorded in an account history."""

    DEPOSIT = "DEPOSIT"
    WITHDRAW = "WITHDRAW"
    TRANSFER_OUT = "TRANSFER_OUT"
    TRANSFER_IN = "TRANSFER_IN"

    @property
    def is_credit(self) -> bool:
        """True when the kind adds to the balance."""
        return self in (TransactionKind.DEPOSIT, TransactionKind.TRANSFER_IN)


@dataclass(frozen=True)
class Transaction:
    """Transaction domain entity."""

    timestamp: str
    kind: TransactionKind
    amount: Decimal

    @property
    def signed_amount(self) -> Decimal:
        """Amount with the sign it contributes to the balance."""
        return self.amount if self.kind.is_credit else -self.amount


@dataclass(frozen=True)
class AccountSummary:
    """Identity and balance of one account."""

    id: int
    owner: str
    balance: Decimal
