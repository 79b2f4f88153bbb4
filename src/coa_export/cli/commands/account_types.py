"""Account type mapping command."""

import click

from coa_export.domain.account_types import map_account_type, xero_tax_code
from coa_export.domain.entities import (
    DETAIL_TYPES_BY_ACCOUNT_TYPE,
    AccountType,
    ExportFormat,
)


@click.command("account-types")
@click.option(
    "--type",
    "account_type",
    type=click.Choice([t.value for t in AccountType]),
    help="Only show detail types of this account type",
)
def account_types(account_type: str | None):
    """Show how each detail type maps to QBO, QBD and Xero account types."""
    header = f"{'Type':<10} {'Detail Type':<32} {'QBO':<26} {'QBD':<9} {'Xero':<12} Tax"
    click.echo(header)
    click.echo("-" * len(header))

    for coarse_type, detail_types in DETAIL_TYPES_BY_ACCOUNT_TYPE.items():
        if account_type is not None and coarse_type.value != account_type:
            continue
        for detail_type in detail_types:
            qbo = map_account_type(detail_type, coarse_type, ExportFormat.QBO)
            qbd = map_account_type(detail_type, coarse_type, ExportFormat.QBD)
            xero = map_account_type(detail_type, coarse_type, ExportFormat.XERO)
            click.echo(
                f"{coarse_type.value:<10} {detail_type.value:<32} {qbo:<26} "
                f"{qbd:<9} {xero:<12} {xero_tax_code(xero)}"
            )


def register_commands(cli):
    """Register account type command with main CLI."""
    cli.add_command(account_types)
