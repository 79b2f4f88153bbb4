"""Export filename and content-type helpers."""

from datetime import date
import re

from coa_export.domain.entities import ArtifactKind

CSV_CONTENT_TYPE = "text/csv;charset=utf-8"
IIF_CONTENT_TYPE = "text/plain;charset=utf-8"
ZIP_CONTENT_TYPE = "application/zip"

_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9_-]")


def sanitize_project_name(project_name: str) -> str:
    """Remove every character outside ``[A-Za-z0-9_-]``."""
    return _UNSAFE_CHARS_RE.sub("", project_name or "")


def build_filename(
    project_name: str,
    target_label: str,
    kind: ArtifactKind,
    export_date: date,
    extension: str,
) -> str:
    """Build ``{Project}_{Target}_{Kind}_{YYYY-MM-DD}.{ext}``.

    Args:
        project_name: Raw project name (sanitized here)
        target_label: QBO, QBD or Xero
        kind: Artifact kind
        export_date: Date stamped into the name
        extension: File extension without the dot

    Returns:
        Filename
    """
    return (
        f"{sanitize_project_name(project_name)}_{target_label}_"
        f"{kind.value}_{export_date.isoformat()}.{extension}"
    )
