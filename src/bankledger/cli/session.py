"""Access to the ledger and store, loaded on first use by a command.

The group callback only records ``data_file`` and ``backend`` in
``ctx.obj``; nothing touches storage until a command asks for the ledger,
so ``--help`` works even when the data file is unreadable.
"""

import click

from bankledger.cli.error_handling import LOAD_FAILURE_EXIT_CODE
from bankledger.domain.errors import DomainError, StorageError
from bankledger.domain.ledger import Ledger
from bankledger.storage.base import LedgerStore
from bankledger.storage.factories import create_store


def get_store(ctx: click.Context) -> LedgerStore:
    if "store" not in ctx.obj:
        try:
            ctx.obj["store"] = create_store(ctx.obj["data_file"], ctx.obj["backend"])
        except DomainError as e:
            _abort_load(ctx, e)
    return ctx.obj["store"]


def get_ledger(ctx: click.Context) -> Ledger:
    """Return the session ledger, loading it from the store on first call.

    Exits with LOAD_FAILURE_EXIT_CODE if the store cannot be loaded.
    """
    if "ledger" not in ctx.obj:
        store = get_store(ctx)
        try:
            ctx.obj["ledger"] = store.load()
        except DomainError as e:
            _abort_load(ctx, e)
    return ctx.obj["ledger"]


def save_ledger(ctx: click.Context) -> bool:
    """Persist the ledger, reporting failures on stderr.

    Returns:
        True if the ledger was saved
    """
    store = get_store(ctx)
    try:
        store.save(get_ledger(ctx))
    except StorageError as e:
        click.echo(f"Error: Could not save ledger: {e}", err=True)
        return False
    return True


def _abort_load(ctx: click.Context, error: DomainError) -> None:
    click.echo(f"Error: Could not load ledger: {error}", err=True)
    ctx.exit(LOAD_FAILURE_EXIT_CODE)
