"""Text encoding of the ledger.

Each account is one block: a ``<id>;<owner>;<balance>`` header, zero or
more ``T:<timestamp>|<kind>|<amount>`` lines and an ``END`` terminator.
"""

import logging
from decimal import Decimal, InvalidOperation
from typing import Callable, Iterable, Optional

from bankledger.domain.account import Account
from bankledger.domain.entities import Transaction, TransactionKind
from bankledger.domain.errors import MalformedRecordError
from bankledger.domain.ledger import Ledger
from bankledger.utils.amount_parser import exceeds_max, format_amount, quantize_amount
from bankledger.utils.clock import now, parse_timestamp

logger = logging.getLogger(__name__)

FIELD_SEP = ";"
TXN_SEP = "|"
TXN_PREFIX = "T:"
BLOCK_END = "END"


def encode_transaction(txn: Transaction) -> str:
    """Encode a transaction as ``timestamp|kind|amount``."""
    return TXN_SEP.join((txn.timestamp, txn.kind.value, format_amount(txn.amount)))


def decode_transaction(line: str) -> Transaction:
    """Decode a ``timestamp|kind|amount`` line.

    Amounts with more than two decimals are rounded to cents.

    Raises:
        MalformedRecordError: If the line has fewer than three fields, an
            unknown kind, a bad timestamp, or an amount that is not a
            non-negative number up to MAX_AMOUNT
    """
    fields = line.split(TXN_SEP)
    if len(fields) < 3:
        raise MalformedRecordError(f"Expected timestamp|kind|amount, got {line!r}")
    timestamp, kind, raw_amount = fields[0], fields[1], fields[2]

    try:
        parse_timestamp(timestamp)
    except ValueError:
        raise MalformedRecordError(f"Invalid timestamp {timestamp!r}")

    try:
        txn_kind = TransactionKind(kind)
    except ValueError:
        raise MalformedRecordError(f"Unknown transaction kind {kind!r}")

    amount = _parse_decimal(raw_amount, "amount")
    if amount < 0:
        raise MalformedRecordError(f"Negative amount {raw_amount!r}")

    return Transaction(timestamp=timestamp, kind=txn_kind, amount=quantize_amount(amount))


def encode_header(account: Account) -> str:
    return FIELD_SEP.join((str(account.id), account.owner, format_amount(account.balance)))


def decode_header(line: str) -> tuple[int, str, Decimal]:
    """Decode an ``id;owner;balance`` header line.

    Raises:
        MalformedRecordError: If the line does not have exactly three fields,
            the ID is not an integer or the balance is not a number in range
    """
    fields = line.split(FIELD_SEP)
    if len(fields) != 3:
        raise MalformedRecordError(f"Expected id;owner;balance, got {line!r}")
    raw_id, owner, raw_balance = fields

    try:
        account_id = int(raw_id)
    except ValueError:
        raise MalformedRecordError(f"Invalid account ID {raw_id!r}")
    if not owner.strip():
        raise MalformedRecordError(f"Account {account_id} has an empty owner")

    return account_id, owner, quantize_amount(_parse_decimal(raw_balance, "balance"))


def encode_account(account: Account) -> list[str]:
    """Lines of one account block, terminator included."""
    lines = [encode_header(account)]
    lines.extend(TXN_PREFIX + encode_transaction(txn) for txn in account.history)
    lines.append(BLOCK_END)
    return lines


def dumps(ledger: Ledger) -> str:
    """Encode every account of the ledger in insertion order."""
    lines: list[str] = []
    for account in ledger.accounts():
        lines.extend(encode_account(account))
    return "".join(line + "\n" for line in lines)


def loads(lines: Iterable[str], clock: Callable[[], str] = now) -> list[Account]:
    """Decode account blocks from text lines.

    Blank lines between blocks are skipped. Lines inside a block that are
    neither transactions nor the terminator are ignored. Restored accounts
    stamp new transactions with ``clock``.

    Raises:
        MalformedRecordError: On the first record that cannot be parsed,
            with its 1-based line number
    """
    accounts: list[Account] = []
    header: Optional[tuple[int, str, Decimal]] = None
    header_line = 0
    history: list[Transaction] = []

    for line_number, raw in enumerate(lines, start=1):
        line = raw.rstrip("\r\n")
        try:
            if header is None:
                if not line.strip():
                    continue
                header = decode_header(line)
                header_line = line_number
                history = []
            elif line == BLOCK_END:
                accounts.append(_build_account(header, history, clock))
                header = None
            elif line.startswith(TXN_PREFIX):
                history.append(decode_transaction(line[len(TXN_PREFIX):]))
            else:
                logger.debug("Ignoring unrecognized line %d: %r", line_number, line)
        except MalformedRecordError as e:
            raise MalformedRecordError(str(e), line_number=line_number) from e

    if header is not None:
        raise MalformedRecordError(
            f"Account {header[0]} block is missing its {BLOCK_END} terminator",
            line_number=header_line,
        )
    return accounts


def _build_account(
    header: tuple[int, str, Decimal], history: list[Transaction], clock: Callable[[], str]
) -> Account:
    account_id, owner, stored_balance = header
    account = Account.restore(account_id, owner, history, clock=clock)
    if account.balance != stored_balance:
        logger.warning(
            "Account %d: stored balance %s differs from history total %s; using history",
            account_id,
            format_amount(stored_balance),
            format_amount(account.balance),
        )
    return account


def _parse_decimal(raw: str, field: str) -> Decimal:
    try:
        value = Decimal(raw.strip())
    except InvalidOperation:
        raise MalformedRecordError(f"Invalid {field} {raw!r}")
    if not value.is_finite():
        raise MalformedRecordError(f"Invalid {field} {raw!r}")
    if exceeds_max(value):
        raise MalformedRecordError(f"{field.capitalize()} {raw!r} is out of range")
    return value
