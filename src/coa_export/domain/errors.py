"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NothingToExportError(DomainError):
    """The requested export selection produced no files."""


def invalid_iso_date(value: str) -> str:
    """Return message for a transaction date that is not YYYY-MM-DD."""
    return f"Invalid transaction date '{value}': expected YYYY-MM-DD"


def invalid_transaction_type(value: str) -> str:
    """Return message for an unknown debit/credit marker."""
    return f"Invalid transaction type '{value}': expected 'debit' or 'credit'"


def invalid_account_type(value: str) -> str:
    """Return message for an unknown coarse account type."""
    return (
        f"Invalid account type '{value}': expected one of "
        "Asset, Liability, Equity, Income, Expense"
    )


def negative_amount(transaction_id: str) -> str:
    """Return message for a transaction with a signed amount."""
    return f"Transaction {transaction_id} has a negative amount; amounts must be magnitudes"


def amount_out_of_range(transaction_id: str) -> str:
    """Return message for an amount too large to render with two decimals."""
    return f"Transaction {transaction_id} has an amount too large to export"


def invalid_confidence(transaction_id: str, value: object) -> str:
    """Return message for a confidence score that is not a number."""
    return f"Transaction {transaction_id} has an invalid confidence '{value}': expected a number"


def unknown_export_format(value: str) -> str:
    """Return message for an unsupported export target."""
    return f"Unknown export format '{value}'. Must be one of: qbo, qbd, xero"


def missing_field(record: str, name: str) -> str:
    """Return message for a required field absent from an input record."""
    return f"{record} record is missing required field '{name}'"


def nothing_to_export(project_name: str) -> str:
    """Return message when the export selection produced no files."""
    return (
        f"Nothing to export for project '{project_name}': "
        "no Chart of Accounts or transactions match the selected options"
    )
