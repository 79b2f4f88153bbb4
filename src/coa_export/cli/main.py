"""Main CLI entry point."""

from pathlib import Path

import click

from coa_export.cli.commands import account_types, export
from coa_export.domain.export import ExportService
from coa_export.logging_setup import LEVEL_NAMES, LOG_LEVEL_ENV_VAR, configure_logging
from coa_export.utils.date_parser import parse_date


def _parse_export_date(ctx, param, value):
    if value is None:
        return None
    try:
        return parse_date(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from e


@click.group()
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False),
    default=".",
    show_default=True,
    envvar="COA_EXPORT_OUTPUT_DIR",
    help="Directory export files are written to (overrides COA_EXPORT_OUTPUT_DIR)",
)
@click.option(
    "--date",
    "export_date",
    callback=_parse_export_date,
    help="Date stamped into filenames (YYYY-MM-DD or relative like 'yesterday'). Defaults to today.",
)
@click.option(
    "--log-level",
    type=click.Choice(LEVEL_NAMES, case_sensitive=False),
    envvar=LOG_LEVEL_ENV_VAR,
    help="Logging level (overrides COA_EXPORT_LOG_LEVEL). Defaults to INFO.",
)
@click.pass_context
def cli(ctx, output_dir: str, export_date, log_level: str | None):
    """coa-export - Chart of Accounts and ledger exporter.

    Turn a Chart of Accounts and a reviewed ledger into import files for
    QuickBooks Online, QuickBooks Desktop and Xero.
    """
    ctx.ensure_object(dict)
    configure_logging(log_level)

    if export_date is None:
        service = ExportService()
    else:
        service = ExportService(clock=lambda: export_date)

    ctx.obj["service"] = service
    ctx.obj["output_dir"] = Path(output_dir)


# Register all commands
export.register_commands(cli)
account_types.register_commands(cli)


def main():
    """Main entry point for CLI."""
    cli()


if __name__ == "__main__":
    main()
