"""Interactive numeric menu."""

import click

from bankledger.cli.error_handling import report_domain_error
from bankledger.cli.formatting import format_accounts, format_history
from bankledger.cli.params import AMOUNT
from bankledger.cli.session import get_ledger, save_ledger
from bankledger.domain.errors import DomainError
from bankledger.domain.ledger import Ledger

MENU_TEXT = """
=== Console Banking System ===
1. Create Account
2. Deposit
3. Withdraw
4. Transfer
5. List Accounts
6. Show History
7. Save
0. Exit"""

EXIT_CHOICE = 0
SAVE_CHOICE = 7


def _create(ledger: Ledger) -> None:
    owner = click.prompt("Owner name")
    account_id = ledger.create(owner)
    click.echo(f"Account created successfully (ID: {account_id}).")


def _deposit(ledger: Ledger) -> None:
    account_id = click.prompt("Account ID", type=int)
    amount = click.prompt("Amount", type=AMOUNT)
    ledger.deposit(account_id, amount)
    click.echo("Deposit successful.")


def _withdraw(ledger: Ledger) -> None:
    account_id = click.prompt("Account ID", type=int)
    amount = click.prompt("Amount", type=AMOUNT)
    ledger.withdraw(account_id, amount)
    click.echo("Withdrawal successful.")


def _transfer(ledger: Ledger) -> None:
    from_id = click.prompt("From ID", type=int)
    to_id = click.prompt("To ID", type=int)
    amount = click.prompt("Amount", type=AMOUNT)
    ledger.transfer(from_id, to_id, amount)
    click.echo("Transfer completed.")


def _list(ledger: Ledger) -> None:
    for line in format_accounts(ledger.list()):
        click.echo(line)


def _history(ledger: Ledger) -> None:
    account_id = click.prompt("Account ID", type=int)
    for line in format_history(ledger.history(account_id)):
        click.echo(line)


ACTIONS = {
    1: _create,
    2: _deposit,
    3: _withdraw,
    4: _transfer,
    5: _list,
    6: _history,
}


@click.command("menu")
@click.pass_context
def run_menu(ctx):
    """Run the interactive menu (the default when no command is given).

    The ledger is saved on '0. Exit' and on '7. Save'. Ending input
    (Ctrl-D) or interrupting (Ctrl-C) leaves the file untouched.
    """
    ledger = get_ledger(ctx)

    while True:
        click.echo(MENU_TEXT)
        choice = click.prompt("Select", type=int)

        if choice == EXIT_CHOICE:
            if not save_ledger(ctx):
                ctx.exit(1)
            click.echo("Goodbye.")
            return

        if choice == SAVE_CHOICE:
            if save_ledger(ctx):
                click.echo("Ledger saved.")
            continue

        action = ACTIONS.get(choice)
        if action is None:
            click.echo("Invalid choice.")
            continue

        try:
            action(ledger)
        except DomainError as e:
            report_domain_error(e)


def register_commands(cli):
    """Register menu command with main CLI."""
    cli.add_command(run_menu)
