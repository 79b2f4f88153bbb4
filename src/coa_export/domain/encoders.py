"""Chart of Accounts and transaction encoders for each export target.

The three targets share one generic encoder. Each target is described by an
``ExportTarget`` holding its delimiter, fixed header rows and row builders;
``encode_accounts`` and ``encode_transactions`` dispatch on that descriptor.
Rows are joined with CRLF and the artifact has no trailing line terminator.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Iterable, Sequence

from coa_export.domain.account_types import map_account_type, xero_tax_code
from coa_export.domain.entities import (
    Account,
    ExportFormat,
    Transaction,
    TransactionType,
)
from coa_export.domain.errors import ValidationError, unknown_export_format
from coa_export.logging_setup import get_logger
from coa_export.utils.account_resolver import (
    UNCATEGORIZED,
    resolve_account_name,
    resolve_account_number,
)
from coa_export.utils.amount_parser import format_amount
from coa_export.utils.date_parser import format_day_first_date, format_us_date
from coa_export.utils.escaping import escape_delimited, escape_tabbed
from coa_export.utils.filenames import CSV_CONTENT_TYPE, IIF_CONTENT_TYPE

logger = get_logger(__name__)

LINE_SEPARATOR = "\r\n"

QBD_OFFSET_ACCOUNT = "Opening Balance Equity"
QBD_JOURNAL_TYPE = "GENERAL JOURNAL"

Row = Sequence[str]


@dataclass(frozen=True)
class ExportTarget:
    """Formatting rules for one downstream accounting system."""

    format: ExportFormat
    label: str
    delimiter: str
    extension: str
    content_type: str
    accounts_header: tuple[Row, ...]
    transactions_header: tuple[Row, ...]
    account_row: Callable[[Account], Row]
    transaction_rows: Callable[[Transaction], list[Row]]


def _detail_type_label(account: Account) -> str:
    return getattr(account.detail_type, "value", account.detail_type) or ""


def _signed_amount(transaction: Transaction, debit_negative: bool) -> Decimal:
    """Apply the target's sign convention to a transaction magnitude."""
    is_debit = transaction.type == TransactionType.DEBIT
    if is_debit == debit_negative:
        return -transaction.amount
    return transaction.amount


# QuickBooks Online


def _qbo_account_row(account: Account) -> Row:
    qbo_type = map_account_type(account.detail_type, account.type, ExportFormat.QBO)
    return [
        escape_delimited(account.name),
        escape_delimited(qbo_type),
        escape_delimited(_detail_type_label(account)),
        escape_delimited(account.description),
        escape_delimited(account.number),
    ]


def _qbo_transaction_rows(transaction: Transaction) -> list[Row]:
    account_number = resolve_account_number(transaction)
    account_name = resolve_account_name(transaction)
    account = f"{account_number} - {account_name}" if account_name else account_number
    is_debit = transaction.type == TransactionType.DEBIT
    return [
        [
            escape_delimited(transaction.date),
            escape_delimited(transaction.description),
            format_amount(_signed_amount(transaction, debit_negative=True)),
            escape_delimited(account),
            escape_delimited(transaction.vendor),
            "Expense" if is_debit else "Deposit",
        ]
    ]


# QuickBooks Desktop (IIF)


def _qbd_account_row(account: Account) -> Row:
    return [
        "ACCNT",
        escape_tabbed(account.name),
        map_account_type(account.detail_type, account.type, ExportFormat.QBD),
        escape_tabbed(account.description),
        escape_tabbed(account.number),
    ]


def _qbd_transaction_rows(transaction: Transaction) -> list[Row]:
    """Build the TRNS/SPL/ENDTRNS general journal triad.

    The split line always carries the negated amount against a fixed offset
    account, so each entry nets to zero on its own.
    """
    qbd_date = format_us_date(transaction.date)
    amount = _signed_amount(transaction, debit_negative=False)
    memo = escape_tabbed(transaction.description)
    return [
        [
            "TRNS",
            QBD_JOURNAL_TYPE,
            qbd_date,
            escape_tabbed(resolve_account_name(transaction, UNCATEGORIZED)),
            escape_tabbed(transaction.vendor),
            format_amount(amount),
            memo,
        ],
        [
            "SPL",
            QBD_JOURNAL_TYPE,
            qbd_date,
            QBD_OFFSET_ACCOUNT,
            "",
            format_amount(-amount),
            memo,
        ],
        ["ENDTRNS"],
    ]


# Xero


def _xero_account_row(account: Account) -> Row:
    xero_type = map_account_type(account.detail_type, account.type, ExportFormat.XERO)
    return [
        escape_delimited(account.number),
        escape_delimited(account.name),
        xero_type,
        escape_delimited(account.description),
        xero_tax_code(xero_type),
    ]


def _xero_transaction_rows(transaction: Transaction) -> list[Row]:
    return [
        [
            format_day_first_date(transaction.date),
            format_amount(_signed_amount(transaction, debit_negative=True)),
            escape_delimited(transaction.vendor),
            escape_delimited(transaction.description),
            escape_delimited(transaction.id[-8:]),
            escape_delimited(resolve_account_number(transaction)),
        ]
    ]


TARGETS: dict[ExportFormat, ExportTarget] = {
    ExportFormat.QBO: ExportTarget(
        format=ExportFormat.QBO,
        label="QBO",
        delimiter=",",
        extension="csv",
        content_type=CSV_CONTENT_TYPE,
        accounts_header=(
            ("Account Name", "Type", "Detail Type", "Description", "Account Number"),
        ),
        transactions_header=(
            ("Date", "Description", "Amount", "Account", "Payee/Vendor", "Type"),
        ),
        account_row=_qbo_account_row,
        transaction_rows=_qbo_transaction_rows,
    ),
    ExportFormat.QBD: ExportTarget(
        format=ExportFormat.QBD,
        label="QBD",
        delimiter="\t",
        extension="iif",
        content_type=IIF_CONTENT_TYPE,
        accounts_header=(("!ACCNT", "NAME", "ACCNTTYPE", "DESC", "ACCNUM"),),
        transactions_header=(
            ("!TRNS", "TRNSTYPE", "DATE", "ACCNT", "NAME", "AMOUNT", "MEMO"),
            ("!SPL", "TRNSTYPE", "DATE", "ACCNT", "NAME", "AMOUNT", "MEMO"),
            ("!ENDTRNS",),
        ),
        account_row=_qbd_account_row,
        transaction_rows=_qbd_transaction_rows,
    ),
    ExportFormat.XERO: ExportTarget(
        format=ExportFormat.XERO,
        label="Xero",
        delimiter=",",
        extension="csv",
        content_type=CSV_CONTENT_TYPE,
        accounts_header=(("*Code", "*Name", "*Type", "Description", "Tax Code"),),
        transactions_header=(
            ("*Date", "*Amount", "Payee", "Description", "Reference", "Account Code"),
        ),
        account_row=_xero_account_row,
        transaction_rows=_xero_transaction_rows,
    ),
}


def get_target(fmt: ExportFormat | str) -> ExportTarget:
    """Look up the descriptor for an export format.

    Raises:
        ValidationError: If the format is not qbo, qbd or xero
    """
    try:
        return TARGETS[ExportFormat(fmt)]
    except ValueError as e:
        raise ValidationError(unknown_export_format(str(fmt))) from e


def join_rows(rows: Iterable[Row], delimiter: str = ",") -> str:
    """Join already-escaped rows into delimited text with CRLF separators."""
    return LINE_SEPARATOR.join(delimiter.join(row) for row in rows)


def encode_accounts(accounts: Iterable[Account], fmt: ExportFormat | str) -> str:
    """Encode a Chart of Accounts for the given target.

    Accounts are written in the order given.
    """
    target = get_target(fmt)
    rows: list[Row] = list(target.accounts_header)
    for account in accounts:
        rows.append(target.account_row(account))
    logger.debug(
        "Encoded %d accounts for %s", len(rows) - len(target.accounts_header), target.label
    )
    return join_rows(rows, target.delimiter)


def encode_transactions(transactions: Iterable[Transaction], fmt: ExportFormat | str) -> str:
    """Encode transactions for the given target.

    Raises:
        ValidationError: If a QBD or Xero transaction date is not YYYY-MM-DD
    """
    target = get_target(fmt)
    rows: list[Row] = list(target.transactions_header)
    count = 0
    for transaction in transactions:
        rows.extend(target.transaction_rows(transaction))
        count += 1
    logger.debug("Encoded %d transactions for %s", count, target.label)
    return join_rows(rows, target.delimiter)


LEDGER_HEADER = (
    "Date",
    "Description",
    "Vendor",
    "Amount",
    "Type",
    "Account Number",
    "Account Name",
    "Source Document",
    "Category",
)


def encode_ledger(transactions: Iterable[Transaction]) -> str:
    """Encode a plain transactions listing, independent of any target.

    Amounts are unsigned magnitudes and the type column carries the raw
    debit/credit marker.
    """
    rows: list[Row] = [LEDGER_HEADER]
    for transaction in transactions:
        rows.append(
            [
                escape_delimited(transaction.date),
                escape_delimited(transaction.description),
                escape_delimited(transaction.vendor),
                format_amount(transaction.amount),
                escape_delimited(TransactionType(transaction.type).value),
                escape_delimited(resolve_account_number(transaction)),
                escape_delimited(resolve_account_name(transaction)),
                escape_delimited(transaction.document_name),
                escape_delimited(transaction.category),
            ]
        )
    return join_rows(rows)
