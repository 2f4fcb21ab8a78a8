"""Account management commands."""

import click

from bankledger.cli.error_handling import handle_domain_error
from bankledger.cli.formatting import format_accounts
from bankledger.cli.session import get_ledger, save_ledger
from bankledger.domain.errors import DomainError


@click.command("create")
@click.argument("owner", metavar="OWNER")
@click.pass_context
def create_account(ctx, owner: str):
    """Create a new account with a zero balance.

    Examples:
        bankledger create "Alice"
        bankledger create "Bob Smith"
    """
    ledger = get_ledger(ctx)

    try:
        account_id = ledger.create(owner)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not save_ledger(ctx):
        ctx.exit(1)
    click.echo(f"Created account for '{owner.strip()}' (ID: {account_id})")


@click.command("list")
@click.pass_context
def list_accounts(ctx):
    """List all accounts with their balances."""
    for line in format_accounts(get_ledger(ctx).list()):
        click.echo(line)


def register_commands(cli):
    """Register account commands with main CLI."""
    cli.add_command(create_account)
    cli.add_command(list_accounts)
