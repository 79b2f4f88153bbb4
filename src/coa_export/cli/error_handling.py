"""CLI error handling helpers."""

import click

from coa_export.domain.errors import DomainError, NothingToExportError
from coa_export.logging_setup import get_logger

logger = get_logger(__name__)


def handle_domain_error(ctx: click.Context, error: DomainError | OSError) -> None:
    """Report a failed export on stderr and exit with status 1.

    An empty selection is an expected outcome and is echoed as-is; every
    other failure is prefixed with ``Error:``.
    """
    logger.debug("Command %s failed", ctx.info_name, exc_info=error)
    if isinstance(error, NothingToExportError):
        click.echo(str(error), err=True)
    else:
        click.echo(f"Error: {error}", err=True)
    ctx.exit(1)
