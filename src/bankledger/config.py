"""Default settings for the bankledger CLI."""

DEFAULT_DATA_FILE = "bank_data.txt"
DEFAULT_SQLITE_FILE = "bank_data.db"

BACKEND_TEXT = "text"
BACKEND_SQLITE = "sqlite"
BACKENDS = (BACKEND_TEXT, BACKEND_SQLITE)
DEFAULT_BACKEND = BACKEND_TEXT

DEFAULT_LOG_LEVEL = "WARNING"
VERBOSE_LOG_LEVEL = "DEBUG"
