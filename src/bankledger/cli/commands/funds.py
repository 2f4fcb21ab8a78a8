"""Deposit, withdraw and transfer commands."""

from decimal import Decimal

import click

from bankledger.cli.error_handling import handle_domain_error
from bankledger.cli.params import AMOUNT
from bankledger.cli.session import get_ledger, save_ledger
from bankledger.domain.errors import DomainError


@click.command("deposit")
@click.argument("account_id", type=int, metavar="ACCOUNT_ID")
@click.argument("amount", type=AMOUNT)
@click.pass_context
def deposit(ctx, account_id: int, amount: Decimal):
    """Deposit AMOUNT into an account.

    Examples:
        bankledger deposit 1 100
        bankledger deposit 1 '$1,250.50'
    """
    ledger = get_ledger(ctx)
    try:
        balance = ledger.deposit(account_id, amount)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not save_ledger(ctx):
        ctx.exit(1)
    click.echo(f"Deposit successful. New balance: ${balance:,.2f}")


@click.command("withdraw")
@click.argument("account_id", type=int, metavar="ACCOUNT_ID")
@click.argument("amount", type=AMOUNT)
@click.pass_context
def withdraw(ctx, account_id: int, amount: Decimal):
    """Withdraw AMOUNT from an account."""
    ledger = get_ledger(ctx)
    try:
        balance = ledger.withdraw(account_id, amount)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not save_ledger(ctx):
        ctx.exit(1)
    click.echo(f"Withdrawal successful. New balance: ${balance:,.2f}")


@click.command("transfer")
@click.argument("from_id", type=int, metavar="FROM_ID")
@click.argument("to_id", type=int, metavar="TO_ID")
@click.argument("amount", type=AMOUNT)
@click.pass_context
def transfer(ctx, from_id: int, to_id: int, amount: Decimal):
    """Transfer AMOUNT from one account to another.

    Examples:
        bankledger transfer 1 2 20
    """
    ledger = get_ledger(ctx)
    try:
        ledger.transfer(from_id, to_id, amount)
    except DomainError as e:
        handle_domain_error(ctx, e)

    if not save_ledger(ctx):
        ctx.exit(1)
    click.echo("Transfer completed.")


def register_commands(cli):
    """Register funds commands with main CLI."""
    cli.add_command(deposit)
    cli.add_command(withdraw)
    cli.add_command(transfer)
