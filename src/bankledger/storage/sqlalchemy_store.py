"""SQLAlchemy-backed ledger store."""

import logging
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError

from bankledger.domain.errors import MalformedRecordError, StorageError
from bankledger.domain.ledger import Ledger
from bankledger.storage.base import LedgerStore
from bankledger.storage.mappers import account_to_domain, account_to_orm
from bankledger.storage.models import (
    Account as ORMAccount,
    Transaction as ORMTransaction,
    create_session_factory,
)
from bankledger.utils.clock import now

logger = logging.getLogger(__name__)


class SQLAlchemyStore(LedgerStore):
    """SQLAlchemy-based implementation of the LedgerStore interface."""

    def __init__(self, database_url: str):
        """Initialize SQLAlchemy store.

        Args:
            database_url: SQLAlchemy database URL (e.g., 'sqlite:///path/to.db')

        Raises:
            StorageError: If the database cannot be opened or its schema created
        """
        self.database_url = database_url
        self.load_failed = False
        try:
            self.session_factory = create_session_factory(database_url)
        except SQLAlchemyError as e:
            raise StorageError(f"Could not open {database_url}: {e}") from e

    @property
    def location(self) -> str:
        return self.database_url

    def load(self, clock: Callable[[], str] = now) -> Ledger:
        """Load the ledger from the database.

        Raises:
            MalformedRecordError: If a stored row cannot be converted
            StorageError: If the database cannot be queried
        """
        try:
            with self.session_factory() as session:
                rows = session.query(ORMAccount).order_by(ORMAccount.position).all()
                accounts = [account_to_domain(row, clock=clock) for row in rows]
            ledger = Ledger.restore(accounts, clock=clock)
        except MalformedRecordError:
            self.load_failed = True
            raise
        except SQLAlchemyError as e:
            self.load_failed = True
            raise StorageError(f"Could not read {self.database_url}: {e}") from e

        self.load_failed = False
        logger.info("Loaded %d account(s) from %s", len(ledger), self.database_url)
        return ledger

    def save(self, ledger: Ledger) -> None:
        """Replace the stored ledger inside a single database transaction.

        Raises:
            StorageError: If the last load failed or the write fails
        """
        if self.load_failed:
            raise StorageError(
                f"Refusing to overwrite {self.database_url}: it could not be loaded"
            )

        try:
            with self.session_factory() as session, session.begin():
                session.query(ORMTransaction).delete()
                session.query(ORMAccount).delete()
                session.add_all(
                    account_to_orm(account, position)
                    for position, account in enumerate(ledger.accounts())
                )
        except SQLAlchemyError as e:
            raise StorageError(f"Could not write {self.database_url}: {e}") from e

        logger.info("Saved %d account(s) to %s", len(ledger), self.database_url)
