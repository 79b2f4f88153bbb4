"""Export bundle domain service."""

from datetime import date
import io
from typing import Callable, Iterable, Optional, Sequence
import zipfile

from coa_export.domain.encoders import (
    encode_accounts,
    encode_ledger,
    encode_transactions,
    get_target,
)
from coa_export.domain.entities import (
    Account,
    ArtifactKind,
    ExportArtifact,
    ExportBundle,
    ExportFormat,
    ExportOptions,
    Transaction,
)
from coa_export.domain.errors import NothingToExportError, nothing_to_export
from coa_export.domain.summary import generate_summary_csv
from coa_export.logging_setup import get_logger
from coa_export.utils.filenames import (
    CSV_CONTENT_TYPE,
    ZIP_CONTENT_TYPE,
    build_filename,
)

logger = get_logger(__name__)

ENCODING = "utf-8"

# Earliest timestamp the zip format can store
ZIP_EPOCH = date(1980, 1, 1)


class ExportService:
    """Service for building export files and bundles.

    The service holds no state besides the clock used to date filenames, so
    one instance can serve any number of exports.
    """

    def __init__(self, clock: Callable[[], date] = date.today):
        """Initialize export service.

        Args:
            clock: Returns the date stamped into filenames and archive entries
        """
        self.clock = clock

    def export_chart_of_accounts(
        self, project_name: str, accounts: Sequence[Account], fmt: ExportFormat | str
    ) -> ExportArtifact:
        """Encode a Chart of Accounts as one file for the given target."""
        target = get_target(fmt)
        return self._artifact(
            project_name,
            target.label,
            ArtifactKind.CHART_OF_ACCOUNTS,
            encode_accounts(accounts, target.format),
            target.extension,
            target.content_type,
        )

    def export_transactions(
        self,
        project_name: str,
        transactions: Sequence[Transaction],
        fmt: ExportFormat | str,
    ) -> ExportArtifact:
        """Encode transactions as one file for the given target."""
        target = get_target(fmt)
        return self._artifact(
            project_name,
            target.label,
            ArtifactKind.TRANSACTIONS,
            encode_transactions(transactions, target.format),
            target.extension,
            target.content_type,
        )

    def export_summary(
        self,
        project_name: str,
        transactions: Sequence[Transaction],
        fmt: ExportFormat | str,
    ) -> ExportArtifact:
        """Build the account summary CSV.

        The content never depends on the target; only the filename does.
        """
        target = get_target(fmt)
        return self._artifact(
            project_name,
            target.label,
            ArtifactKind.ACCOUNT_SUMMARY,
            generate_summary_csv(transactions),
            "csv",
            CSV_CONTENT_TYPE,
        )

    def export_ledger(
        self,
        project_name: str,
        transactions: Sequence[Transaction],
        fmt: ExportFormat | str,
    ) -> ExportArtifact:
        """Build the plain transactions listing CSV."""
        target = get_target(fmt)
        return self._artifact(
            project_name,
            target.label,
            ArtifactKind.LEDGER,
            encode_ledger(transactions),
            "csv",
            CSV_CONTENT_TYPE,
        )

    def build_bundle(
        self,
        project_name: str,
        accounts: Optional[Sequence[Account]],
        transactions: Iterable[Transaction],
        options: ExportOptions,
    ) -> ExportBundle:
        """Compose the requested artifacts into one file or a zip archive.

        Args:
            project_name: Project name used in filenames
            accounts: Chart of Accounts, or None when the project has none
            transactions: Ledger; read at most once
            options: Target format and inclusion flags

        Returns:
            ExportBundle with the artifacts, plus an archive when there is
            more than one

        Raises:
            NothingToExportError: If the selection produced no artifacts
            ValidationError: If the format is unknown or a date is malformed
        """
        target = get_target(options.format)
        artifacts: list[ExportArtifact] = []

        if options.include_coa and accounts:
            artifacts.append(
                self.export_chart_of_accounts(project_name, accounts, target.format)
            )

        ledger: tuple[Transaction, ...] = ()
        if options.include_transactions or options.include_summary:
            ledger = tuple(transactions)

        if options.include_transactions and ledger:
            artifacts.append(self.export_transactions(project_name, ledger, target.format))

        if options.include_summary and ledger:
            artifacts.append(self.export_summary(project_name, ledger, target.format))

        if not artifacts:
            logger.warning("Nothing to export for project %r", project_name)
            raise NothingToExportError(nothing_to_export(project_name))

        logger.info(
            "Exported %d file(s) for project %r in %s format: %s",
            len(artifacts),
            project_name,
            target.label,
            ", ".join(a.filename for a in artifacts),
        )

        if len(artifacts) == 1:
            return ExportBundle(artifacts=tuple(artifacts))

        archive_name = build_filename(
            project_name, target.label, ArtifactKind.EXPORT, self.clock(), "zip"
        )
        return ExportBundle(
            artifacts=tuple(artifacts),
            archive=self.package_archive(archive_name, artifacts),
        )

    def package_archive(
        self, filename: str, artifacts: Sequence[ExportArtifact]
    ) -> ExportArtifact:
        """Zip artifacts in memory.

        Entries are timestamped at midnight of the export date so the archive
        bytes depend only on the inputs and the clock. Dates before 1980 are
        stamped 1980-01-01.
        """
        export_date = max(self.clock(), ZIP_EPOCH)
        timestamp = (export_date.year, export_date.month, export_date.day, 0, 0, 0)

        buffer = io.BytesIO()
        with zipfile.ZipFile(buffer, "w", compression=zipfile.ZIP_DEFLATED) as archive:
            for artifact in artifacts:
                info = zipfile.ZipInfo(artifact.filename, date_time=timestamp)
                info.compress_type = zipfile.ZIP_DEFLATED
                info.external_attr = 0o644 << 16
                archive.writestr(info, artifact.content)

        return ExportArtifact(
            filename=filename,
            content=buffer.getvalue(),
            content_type=ZIP_CONTENT_TYPE,
        )

    def _artifact(
        self,
        project_name: str,
        target_label: str,
        kind: ArtifactKind,
        text: str,
        extension: str,
        content_type: str,
    ) -> ExportArtifact:
        return ExportArtifact(
            filename=build_filename(
                project_name, target_label, kind, self.clock(), extension
            ),
            content=text.encode(ENCODING),
            content_type=content_type,
        )
