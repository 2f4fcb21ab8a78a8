"""Abstract ledger storage interface."""

from abc import ABC, abstractmethod
from typing import Callable

from bankledger.domain.ledger import Ledger
from bankledger.utils.clock import now


class LedgerStore(ABC):
    """Abstract persistence interface for a whole ledger."""

    @property
    @abstractmethod
    def location(self) -> str:
        """Human-readable location of the stored ledger."""
        pass

    @abstractmethod
    def load(self, clock: Callable[[], str] = now) -> Ledger:
        """Load the stored ledger. A store with no data yields an empty ledger."""
        pass

    @abstractmethod
    def save(self, ledger: Ledger) -> None:
        """Replace the stored ledger with ``ledger``."""
        pass
