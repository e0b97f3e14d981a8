"""CLI error handling helpers."""

import click

from categorytree.domain.errors import DomainError
from categorytree.logger import get_logger

logger = get_logger()


def handle_domain_error(ctx: click.Context, error: DomainError | ValueError) -> None:
    """Render a domain error and exit with failure."""
    click.echo(f"Error: {error}", err=True)
    ctx.exit(1)


def handle_unexpected_error(ctx: click.Context, error: Exception, action: str) -> None:
    """Log an unclassified failure and report it without internal detail."""
    logger.exception(f"Unexpected error while {action}: {error}")
    click.echo(f"Error: an unexpected error occurred while {action}.", err=True)
    ctx.exit(1)
