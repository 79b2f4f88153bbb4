"""Resolve the account a transaction is assigned to.

A human-reviewed account always wins over the system suggestion. Empty
strings count as unset.
"""

from typing import Optional

from coa_export.domain.entities import Transaction

UNCATEGORIZED = "Uncategorized"


def resolve_account_number(transaction: Transaction, default: str = "") -> str:
    """Return the reviewed, else suggested, account number, else ``default``."""
    return _first_set(
        transaction.reviewed_account_number,
        transaction.suggested_account_number,
        default,
    )


def resolve_account_name(transaction: Transaction, default: str = "") -> str:
    """Return the reviewed, else suggested, account name, else ``default``."""
    return _first_set(
        transaction.reviewed_account_name,
        transaction.suggested_account_name,
        default,
    )


def _first_set(reviewed: Optional[str], suggested: Optional[str], default: str) -> str:
    return reviewed or suggested or default
