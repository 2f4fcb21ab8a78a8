"""Wall-clock timestamps for transaction records."""

from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def now() -> str:
    """Return the current local time as ``YYYY-MM-DD HH:MM:SS``."""
    return datetime.now().strftime(TIMESTAMP_FORMAT)


def parse_timestamp(timestamp: str) -> datetime:
    """Parse a timestamp produced by :func:`now`.

    Raises:
        ValueError: If the string does not match the timestamp format
    """
    return datetime.strptime(timestamp, TIMESTAMP_FORMAT)
