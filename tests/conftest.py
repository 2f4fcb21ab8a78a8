"""Shared pytest fixtures for bankledger tests."""

import itertools
import logging

import pytest

from bankledger.domain.ledger import Ledger
from bankledger.storage.factories import create_sqlite_store, create_text_store


@pytest.fixture(autouse=True)
def reset_app_logger():
    """Undo handlers installed by the CLI so caplog keeps working."""
    yield
    logger = logging.getLogger("bankledger")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def clock():
    """Deterministic clock ticking one second per call."""
    counter = itertools.count()

    def tick() -> str:
        seconds = next(counter)
        return f"2024-01-15 10:{seconds // 60:02d}:{seconds % 60:02d}"

    return tick


@pytest.fixture
def ledger(clock):
    """Create an empty ledger with a deterministic clock."""
    return Ledger(clock=clock)


@pytest.fixture
def funded_ledger(ledger):
    """Ledger with Alice (id 1) holding 50.00 and Bob (id 2) empty."""
    alice = ledger.create("Alice")
    ledger.create("Bob")
    ledger.deposit(alice, "50")
    return ledger


@pytest.fixture
def data_file(tmp_path):
    """Path to a not-yet-existing ledger file."""
    return tmp_path / "bank_data.txt"


@pytest.fixture
def text_store(data_file):
    """Create a text file store in a temporary directory."""
    return create_text_store(data_file)


@pytest.fixture
def sqlite_store(tmp_path):
    """Create a SQLite store in a temporary directory."""
    return create_sqlite_store(tmp_path / "bank_data.db")


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
