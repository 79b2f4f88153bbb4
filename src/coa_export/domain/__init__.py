"""Domain layer for coa_export."""

from coa_export.domain.entities import (
    Account,
    AccountType,
    DetailType,
    ExportFormat,
    ExportOptions,
    Transaction,
    TransactionType,
)
from coa_export.domain.errors import DomainError, NothingToExportError, ValidationError

__all__ = [
    "Account",
    "AccountType",
    "DetailType",
    "ExportFormat",
    "ExportOptions",
    "Transaction",
    "TransactionType",
    "DomainError",
    "NothingToExportError",
    "ValidationError",
]
