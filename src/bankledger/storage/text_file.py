"""Plain-text file ledger store."""

import logging
import os
import tempfile
from pathlib import Path
from typing import Callable, Union

from bankledger.domain.errors import MalformedRecordError, StorageError
from bankledger.domain.ledger import Ledger
from bankledger.storage import codec
from bankledger.storage.base import LedgerStore
from bankledger.utils.clock import now

logger = logging.getLogger(__name__)


class TextFileStore(LedgerStore):
    """Ledger store backed by a single UTF-8 text file."""

    def __init__(self, path: Union[str, Path]):
        """Initialize text file store.

        Args:
            path: Path of the ledger file; it need not exist yet
        """
        self.path = Path(path)
        self.load_failed = False

    @property
    def location(self) -> str:
        return str(self.path)

    def load(self, clock: Callable[[], str] = now) -> Ledger:
        """Load the ledger from the file.

        A missing file yields an empty ledger.

        Raises:
            MalformedRecordError: If a record cannot be parsed
            StorageError: If the file exists but cannot be read
        """
        try:
            with open(self.path, encoding="utf-8", newline="") as f:
                accounts = codec.loads(f, clock=clock)
        except FileNotFoundError:
            logger.info("No ledger file at %s; starting empty", self.path)
            self.load_failed = False
            return Ledger(clock=clock)
        except MalformedRecordError:
            self.load_failed = True
            raise
        except (OSError, UnicodeDecodeError) as e:
            self.load_failed = True
            raise StorageError(f"Could not read {self.path}: {e}") from e

        try:
            ledger = Ledger.restore(accounts, clock=clock)
        except MalformedRecordError:
            self.load_failed = True
            raise

        self.load_failed = False
        logger.info("Loaded %d account(s) from %s", len(ledger), self.path)
        return ledger

    def save(self, ledger: Ledger) -> None:
        """Write the ledger to the file, replacing it atomically.

        Raises:
            StorageError: If the last load failed or the file cannot be written
        """
        if self.load_failed:
            raise StorageError(
                f"Refusing to overwrite {self.path}: it could not be loaded"
            )

        data = codec.dumps(ledger)
        try:
            fd, tmp_path = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
        except OSError as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e

        replaced = False
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
                f.write(data)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
            replaced = True
        except (OSError, UnicodeEncodeError) as e:
            raise StorageError(f"Could not write {self.path}: {e}") from e
        finally:
            if not replaced and os.path.exists(tmp_path):
                os.unlink(tmp_path)

        logger.info("Saved %d account(s) to %s", len(ledger), self.path)
