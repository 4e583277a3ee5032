"""CLI error handling helpers."""

import logging

import click

from ermay.domain.errors import DomainError, StorageError

logger = logging.getLogger(__name__)

# Errors a command reports as a one-line message instead of a traceback.
HANDLED_ERRORS = (DomainError, StorageError)


def handle_domain_error(ctx: click.Context, error: DomainError | StorageError | ValueError) -> None:
    """Render the error on stderr and exit with status 1.

    The traceback is logged at DEBUG, so it only shows with --verbose.
    """
    logger.debug("%s in '%s'", type(error).__name__, ctx.command_path, exc_info=error)
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
