"""Account summary aggregation."""

from decimal import Decimal
from typing import Iterable

from coa_export.domain.encoders import join_rows
from coa_export.domain.entities import AccountSummary, Transaction, TransactionType
from coa_export.utils.account_resolver import (
    UNCATEGORIZED,
    resolve_account_name,
    resolve_account_number,
)
from coa_export.utils.amount_parser import format_amount
from coa_export.utils.escaping import escape_delimited

SUMMARY_HEADER = (
    "Account Number",
    "Account Name",
    "Total Debits",
    "Total Credits",
    "Net Amount",
    "Transaction Count",
)


def build_account_summary(transactions: Iterable[Transaction]) -> list[AccountSummary]:
    """Group transactions by resolved account number and total them.

    Transactions without a reviewed or suggested account are grouped under
    "Uncategorized". The account name of a group comes from its first
    transaction.

    Args:
        transactions: Transactions to aggregate

    Returns:
        One AccountSummary per account, sorted by account number
    """
    summaries: dict[str, AccountSummary] = {}

    for txn in transactions:
        account_number = resolve_account_number(txn, UNCATEGORIZED)
        summary = summaries.get(account_number)
        if summary is None:
            summary = AccountSummary(
                account_number=account_number,
                account_name=resolve_account_name(txn, UNCATEGORIZED),
            )
            summaries[account_number] = summary

        if txn.type == TransactionType.DEBIT:
            summary.total_debits += txn.amount
        else:
            summary.total_credits += txn.amount
        summary.transaction_count += 1

    return sorted(summaries.values(), key=lambda s: s.account_number)


def generate_summary_csv(transactions: Iterable[Transaction]) -> str:
    """Render the account summary as CSV with a trailing TOTALS row.

    A blank line separates the account rows from the totals.
    """
    summary = build_account_summary(transactions)

    rows: list[list[str] | tuple[str, ...]] = [SUMMARY_HEADER]
    for item in summary:
        rows.append(
            [
                escape_delimited(item.account_number),
                escape_delimited(item.account_name),
                format_amount(item.total_debits),
                format_amount(item.total_credits),
                format_amount(item.net_amount),
                str(item.transaction_count),
            ]
        )

    total_debits = sum((item.total_debits for item in summary), Decimal(0))
    total_credits = sum((item.total_credits for item in summary), Decimal(0))
    total_net = sum((item.net_amount for item in summary), Decimal(0))
    total_count = sum(item.transaction_count for item in summary)

    rows.append([])
    rows.append(
        [
            "TOTALS",
            "",
            format_amount(total_debits),
            format_amount(total_credits),
            format_amount(total_net),
            str(total_count),
        ]
    )
    return join_rows(rows)
