"""Storage layer for bankledger application."""

from bankledger.storage.base import LedgerStore
from bankledger.storage.factories import create_sqlite_store, create_store, create_text_store

__all__ = ["LedgerStore", "create_store", "create_text_store", "create_sqlite_store"]
