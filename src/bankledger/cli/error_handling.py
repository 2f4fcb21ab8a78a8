"""CLI error handling helpers."""

import click

from bankledger.domain.errors import DomainError

LOAD_FAILURE_EXIT_CODE = 2


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def report_domain_error(error: DomainError | ValueError) -> None:
    """Render a domain error without leaving the interactive menu."""
    click.echo(f"Error: {error}", err=True)
