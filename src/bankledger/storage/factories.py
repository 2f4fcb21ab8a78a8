"""Store factory functions for creating ledger stores."""

from pathlib import Path
from typing import Optional, Union

from bankledger.config import BACKEND_SQLITE, BACKEND_TEXT, DEFAULT_DATA_FILE, DEFAULT_SQLITE_FILE
from bankledger.storage.base import LedgerStore
from bankledger.storage.sqlalchemy_store import SQLAlchemyStore
from bankledger.storage.text_file import TextFileStore


def create_text_store(data_path: Optional[Union[str, Path]] = None) -> TextFileStore:
    """Create a text file store.

    Args:
        data_path: Path to the ledger file. Defaults to bank_data.txt in the
            working directory.
    """
    return TextFileStore(data_path if data_path is not None else DEFAULT_DATA_FILE)


def create_sqlite_store(database_path: Optional[Union[str, Path]] = None) -> SQLAlchemyStore:
    """Create a SQLite store.

    Args:
        database_path: Path to the SQLite database file. Defaults to
            bank_data.db in the working directory.
    """
    if database_path is None:
        database_path = DEFAULT_SQLITE_FILE
    return SQLAlchemyStore(f"sqlite:///{database_path}")


def create_store(
    data_path: Optional[Union[str, Path]] = None, backend: str = BACKEND_TEXT
) -> LedgerStore:
    """Create the store for a backend name.

    Raises:
        ValueError: If the backend is unknown
    """
    if backend == BACKEND_TEXT:
        return create_text_store(data_path)
    if backend == BACKEND_SQLITE:
        return create_sqlite_store(data_path)
    raise ValueError(f"Unknown storage backend '{backend}'")
