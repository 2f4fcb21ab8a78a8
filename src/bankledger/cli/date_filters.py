"""CLI helpers for history date ranges."""

from datetime import datetime
from typing import Iterable

import click

from bankledger.domain.entities import Transaction
from bankledger.utils.clock import parse_timestamp
from bankledger.utils.date_parser import parse_history_bound


def resolve_cli_date_range(
    ctx, *, start_date: str | None, end_date: str | None
) -> tuple[datetime | None, datetime | None]:
    """Parse --start-date/--end-date, exiting with an error on bad input."""
    start = None
    end = None

    if start_date:
        try:
            start = parse_history_bound(start_date)
        except ValueError as e:
            click.echo(f"Error: Invalid start date: {e}", err=True)
            ctx.exit(1)

    if end_date:
        try:
            end = parse_history_bound(end_date, end=True)
        except ValueError as e:
            click.echo(f"Error: Invalid end date: {e}", err=True)
            ctx.exit(1)

    if start is not None and end is not None and start > end:
        click.echo("Error: --start-date must not be after --end-date.", err=True)
        ctx.exit(1)

    return start, end


def filter_history(
    history: Iterable[Transaction], start: datetime | None, end: datetime | None
) -> list[Transaction]:
    """Keep transactions stamped between start and end, both inclusive."""
    selected = []
    for txn in history:
        stamped = parse_timestamp(txn.timestamp)
        if start is not None and stamped < start:
            continue
        if end is not None and stamped > end:
            continue
        selected.append(txn)
    return selected
