"""Export commands."""

from pathlib import Path

import click

from coa_export.cli.error_handling import handle_domain_error
from coa_export.cli.loaders import load_accounts, load_transactions
from coa_export.domain.entities import ExportArtifact, ExportFormat, ExportOptions
from coa_export.domain.errors import DomainError, ValidationError

FORMAT_CHOICE = click.Choice([f.value for f in ExportFormat], case_sensitive=False)


def _write_artifact(output_dir: Path, artifact: ExportArtifact) -> Path:
    """Write an artifact into the output directory and return its path."""
    output_dir.mkdir(parents=True, exist_ok=True)
    path = output_dir / artifact.filename
    path.write_bytes(artifact.content)
    return path


def _export_ledger_file(ctx, transactions_file: str, build) -> None:
    """Load transactions, build one artifact from them and write it."""
    try:
        transactions = load_transactions(transactions_file)
        if not transactions:
            raise ValidationError("No transactions found. Please extract transactions first.")
        path = _write_artifact(ctx.obj["output_dir"], build(transactions))
        click.echo(f"Wrote {path} ({len(transactions)} transactions)")
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)


@click.command("bundle")
@click.argument("accounts_file", type=click.Path(dir_okay=False))
@click.argument("transactions_file", type=click.Path(dir_okay=False))
@click.option("--project", "project_name", required=True, help="Project name used in filenames")
@click.option("--format", "fmt", type=FORMAT_CHOICE, required=True, help="Target accounting system")
@click.option("--coa/--no-coa", "include_coa", default=True, help="Include the Chart of Accounts")
@click.option(
    "--transactions/--no-transactions",
    "include_transactions",
    default=True,
    help="Include transactions",
)
@click.option(
    "--summary/--no-summary", "include_summary", default=True, help="Include the account summary"
)
@click.pass_context
def bundle(
    ctx,
    accounts_file: str,
    transactions_file: str,
    project_name: str,
    fmt: str,
    include_coa: bool,
    include_transactions: bool,
    include_summary: bool,
):
    """Export a bundle of files for one accounting system.

    A single file is written as-is; several files are written as one zip
    archive. An input file is only read when its flags select it, so
    ACCOUNTS_FILE may be missing with --no-coa.

    Examples:
        coa-export bundle coa.json transactions.json --project "Acme" --format qbo
        coa-export bundle coa.json transactions.json --project "Acme" --format xero --no-summary
    """
    service = ctx.obj["service"]
    options = ExportOptions(
        format=ExportFormat(fmt.lower()),
        include_coa=include_coa,
        include_transactions=include_transactions,
        include_summary=include_summary,
    )

    try:
        accounts = load_accounts(accounts_file) if include_coa else None
        transactions = []
        if include_transactions or include_summary:
            transactions = load_transactions(transactions_file)
        result = service.build_bundle(project_name, accounts, transactions, options)
        path = _write_artifact(ctx.obj["output_dir"], result.payload)
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)

    click.echo(f"Wrote {path}")
    if result.is_archive:
        for artifact in result.artifacts:
            click.echo(f"  {artifact.filename}")


@click.command("accounts")
@click.argument("accounts_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--project", "project_name", required=True, help="Project name used in filenames")
@click.option("--format", "fmt", type=FORMAT_CHOICE, required=True, help="Target accounting system")
@click.pass_context
def export_accounts(ctx, accounts_file: str, project_name: str, fmt: str):
    """Export the Chart of Accounts.

    Examples:
        coa-export accounts coa.json --project "Acme" --format qbd
    """
    service = ctx.obj["service"]
    try:
        accounts = load_accounts(accounts_file)
        if not accounts:
            raise ValidationError("No accounts found in Chart of Accounts")
        artifact = service.export_chart_of_accounts(project_name, accounts, fmt.lower())
        path = _write_artifact(ctx.obj["output_dir"], artifact)
        click.echo(f"Wrote {path} ({len(accounts)} accounts)")
    except (DomainError, OSError) as e:
        handle_domain_error(ctx, e)


@click.command("transactions")
@click.argument("transactions_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--project", "project_name", required=True, help="Project name used in filenames")
@click.option("--format", "fmt", type=FORMAT_CHOICE, required=True, help="Target accounting system")
@click.pass_context
def export_transactions(ctx, transactions_file: str, project_name: str, fmt: str):
    """Export transactions for one accounting system."""
    service = ctx.obj["service"]
    _export_ledger_file(
        ctx,
        transactions_file,
        lambda txns: service.export_transactions(project_name, txns, fmt.lower()),
    )


@click.command("summary")
@click.argument("transactions_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--project", "project_name", required=True, help="Project name used in filenames")
@click.option(
    "--format",
    "fmt",
    type=FORMAT_CHOICE,
    default="qbo",
    show_default=True,
    help="Target whose label appears in the filename",
)
@click.pass_context
def export_summary(ctx, transactions_file: str, project_name: str, fmt: str):
    """Export the per-account totals CSV."""
    service = ctx.obj["service"]
    _export_ledger_file(
        ctx,
        transactions_file,
        lambda txns: service.export_summary(project_name, txns, fmt.lower()),
    )


@click.command("ledger")
@click.argument("transactions_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--project", "project_name", required=True, help="Project name used in filenames")
@click.option(
    "--format",
    "fmt",
    type=FORMAT_CHOICE,
    default="qbo",
    show_default=True,
    help="Target whose label appears in the filename",
)
@click.pass_context
def export_ledger(ctx, transactions_file: str, project_name: str, fmt: str):
    """Export a plain transactions listing CSV."""
    service = ctx.obj["service"]
    _export_ledger_file(
        ctx,
        transactions_file,
        lambda txns: service.export_ledger(project_name, txns, fmt.lower()),
    )


def register_commands(cli):
    """Register export commands with main CLI."""
    cli.add_command(bundle)
    cli.add_command(export_accounts)
    cli.add_command(export_transactions)
    cli.add_command(export_summary)
    cli.add_command(export_ledger)
