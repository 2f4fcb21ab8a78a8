"""Main CLI entry point."""

import click

from bankledger.config import (
    BACKENDS,
    DEFAULT_BACKEND,
    DEFAULT_LOG_LEVEL,
    VERBOSE_LOG_LEVEL,
)
from bankledger.logging_config import setup_logging

# Import and register all commands at module level
from bankledger.cli.commands import account, funds, history, menu


@click.group(invoke_without_command=True)
@click.option(
    "--data-file",
    type=click.Path(dir_okay=False),
    help="Ledger file (default: bank_data.txt, or bank_data.db with --backend sqlite)",
)
@click.option(
    "--backend",
    type=click.Choice(BACKENDS),
    default=DEFAULT_BACKEND,
    show_default=True,
    help="Storage backend for the ledger",
)
@click.option("--verbose", "-v", is_flag=True, help="Log ledger activity to stderr")
@click.pass_context
def cli(ctx, data_file: str | None, backend: str, verbose: bool):
    """Bankledger - console ledger for a small set of accounts.

    Create accounts, deposit, withdraw, transfer between them and review
    their history. Without a command, the interactive menu starts.
    """
    ctx.ensure_object(dict)
    setup_logging(VERBOSE_LOG_LEVEL if verbose else DEFAULT_LOG_LEVEL)

    ctx.obj["data_file"] = data_file
    ctx.obj["backend"] = backend

    if ctx.invoked_subcommand is None:
        ctx.invoke(menu.run_menu)


# Register all commands
account.register_commands(cli)
funds.register_commands(cli)
history.register_commands(cli)
menu.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
