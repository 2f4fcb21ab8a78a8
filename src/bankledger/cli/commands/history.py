"""Transaction history command."""

import click

from bankledger.cli.date_filters import filter_history, resolve_cli_date_range
from bankledger.cli.error_handling import handle_domain_error
from bankledger.cli.formatting import format_history
from bankledger.cli.session import get_ledger
from bankledger.domain.errors import DomainError


@click.command("history")
@click.argument("account_id", type=int, metavar="ACCOUNT_ID")
@click.option("--start-date", help="Only show transactions on or after this date")
@click.option("--end-date", help="Only show transactions on or before this date")
@click.pass_context
def show_history(ctx, account_id: int, start_date: str | None, end_date: str | None):
    """Show the transaction history of an account.

    Bounds accept a date (YYYY-MM-DD and similar), a full 'YYYY-MM-DD
    HH:MM:SS' timestamp, 'today', 'yesterday' or 'N days/weeks/months/years
    ago'. A bare date covers the whole day.

    Examples:
        bankledger history 1
        bankledger history 1 --start-date "7 days ago"
    """
    ledger = get_ledger(ctx)
    try:
        history = ledger.history(account_id)
    except DomainError as e:
        handle_domain_error(ctx, e)

    start, end = resolve_cli_date_range(ctx, start_date=start_date, end_date=end_date)
    if start is not None or end is not None:
        history = filter_history(history, start, end)

    for line in format_history(history):
        click.echo(line)


def register_commands(cli):
    """Register history command with main CLI."""
    cli.add_command(show_history)
