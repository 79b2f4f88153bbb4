"""Domain model entities for coa_export.

These are pure data classes describing a Chart of Accounts and a ledger as
handed over by the onboarding workflow. The encoders only read them; nothing
in this package mutates or persists an entity.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Coarse account classification."""

    ASSET = "Asset"
    LIABILITY = "Liability"
    EQUITY = "Equity"
    INCOME = "Income"
    EXPENSE = "Expense"


class DetailType(str, Enum):
    """Fine-grained account subtype."""

    # Asset
    CASH = "Cash"
    BANK = "Bank"
    ACCOUNTS_RECEIVABLE = "Accounts Receivable"
    INVENTORY = "Inventory"
    OTHER_CURRENT_ASSET = "Other Current Asset"
    FIXED_ASSET = "Fixed Asset"
    # Liability
    ACCOUNTS_PAYABLE = "Accounts Payable"
    CREDIT_CARD = "Credit Card"
    OTHER_CURRENT_LIABILITY = "Other Current Liability"
    LONG_TERM_LIABILITY = "Long-term Liability"
    # Equity
    OWNERS_EQUITY = "Owner's Equity"
    RETAINED_EARNINGS = "Retained Earnings"
    PARTNERS_EQUITY = "Partner's Equity"
    # Income
    SALES = "Sales"
    SERVICE = "Service"
    OTHER_INCOME = "Other Income"
    DISCOUNT = "Discount"
    # Expense
    COST_OF_GOODS_SOLD = "Cost of Goods Sold"
    PAYROLL = "Payroll"
    RENT_OR_LEASE = "Rent or Lease"
    UTILITIES = "Utilities"
    INSURANCE = "Insurance"
    ADVERTISING = "Advertising"
    BANK_CHARGES = "Bank Charges"
    DEPRECIATION = "Depreciation"
    INTEREST = "Interest"
    LEGAL_AND_PROFESSIONAL = "Legal & Professional"
    OFFICE_GENERAL_ADMINISTRATIVE = "Office/General Administrative"
    REPAIR_AND_MAINTENANCE = "Repair & Maintenance"
    SUPPLIES = "Supplies"
    TAXES_PAID = "Taxes Paid"
    TRAVEL = "Travel"
    TRAVEL_MEALS = "Travel Meals"
    AUTO = "Auto"
    DUES_AND_SUBSCRIPTIONS = "Dues & Subscriptions"
    TRAINING = "Training"
    SHIPPING = "Shipping"
    OTHER_MISCELLANEOUS = "Other Miscellaneous"


DETAIL_TYPES_BY_ACCOUNT_TYPE: dict[AccountType, tuple[DetailType, ...]] = {
    AccountType.ASSET: (
        DetailType.CASH,
        DetailType.BANK,
        DetailType.ACCOUNTS_RECEIVABLE,
        DetailType.INVENTORY,
        DetailType.OTHER_CURRENT_ASSET,
        DetailType.FIXED_ASSET,
    ),
    AccountType.LIABILITY: (
        DetailType.ACCOUNTS_PAYABLE,
        DetailType.CREDIT_CARD,
        DetailType.OTHER_CURRENT_LIABILITY,
        DetailType.LONG_TERM_LIABILITY,
    ),
    AccountType.EQUITY: (
        DetailType.OWNERS_EQUITY,
        DetailType.RETAINED_EARNINGS,
        DetailType.PARTNERS_EQUITY,
    ),
    AccountType.INCOME: (
        DetailType.SALES,
        DetailType.SERVICE,
        DetailType.OTHER_INCOME,
        DetailType.DISCOUNT,
    ),
    AccountType.EXPENSE: (
        DetailType.COST_OF_GOODS_SOLD,
        DetailType.PAYROLL,
        DetailType.RENT_OR_LEASE,
        DetailType.UTILITIES,
        DetailType.INSURANCE,
        DetailType.ADVERTISING,
        DetailType.BANK_CHARGES,
        DetailType.DEPRECIATION,
        DetailType.INTEREST,
        DetailType.LEGAL_AND_PROFESSIONAL,
        DetailType.OFFICE_GENERAL_ADMINISTRATIVE,
        DetailType.REPAIR_AND_MAINTENANCE,
        DetailType.SUPPLIES,
        DetailType.TAXES_PAID,
        DetailType.TRAVEL,
        DetailType.TRAVEL_MEALS,
        DetailType.AUTO,
        DetailType.DUES_AND_SUBSCRIPTIONS,
        DetailType.TRAINING,
        DetailType.SHIPPING,
        DetailType.OTHER_MISCELLANEOUS,
    ),
}


class TransactionType(str, Enum):
    """Direction of a transaction amount."""

    DEBIT = "debit"
    CREDIT = "credit"


class ExportFormat(str, Enum):
    """Downstream accounting system an export targets."""

    QBO = "qbo"
    QBD = "qbd"
    XERO = "xero"


class ArtifactKind(str, Enum):
    """Kind of file produced by an export, as it appears in the filename."""

    CHART_OF_ACCOUNTS = "ChartOfAccounts"
    TRANSACTIONS = "Transactions"
    ACCOUNT_SUMMARY = "AccountSummary"
    LEDGER = "Ledger"
    EXPORT = "Export"


@dataclass(frozen=True)
class Account:
    """Chart of Accounts entry."""

    number: str
    name: str
    type: AccountType
    detail_type: DetailType | str
    description: str = ""
    is_custom: bool = False
    parent_account_number: Optional[str] = None
    id: Optional[str] = None


@dataclass(frozen=True)
class Transaction:
    """Extracted ledger transaction.

    ``amount`` is always a non-negative magnitude; ``type`` carries the
    direction. ``confidence`` and ``is_reviewed`` are carried through for the
    review UI and never affect an export.
    """

    id: str
    date: str
    description: str
    amount: Decimal
    type: TransactionType
    vendor: Optional[str] = None
    suggested_account_number: Optional[str] = None
    suggested_account_name: Optional[str] = None
    reviewed_account_number: Optional[str] = None
    reviewed_account_name: Optional[str] = None
    confidence: float = 0.0
    is_reviewed: bool = False
    document_id: Optional[str] = None
    document_name: Optional[str] = None
    category: Optional[str] = None


@dataclass(frozen=True)
class ExportOptions:
    """Format selection and inclusion flags for a bundle export."""

    format: ExportFormat
    include_coa: bool = True
    include_transactions: bool = True
    include_summary: bool = True


@dataclass(frozen=True)
class ExportArtifact:
    """A single downloadable file."""

    filename: str
    content: bytes
    content_type: str


@dataclass(frozen=True)
class ExportBundle:
    """Result of a bundle export.

    ``archive`` is set only when more than one artifact was produced.
    """

    artifacts: tuple[ExportArtifact, ...]
    archive: Optional[ExportArtifact] = None

    @property
    def is_archive(self) -> bool:
        return self.archive is not None

    @property
    def payload(self) -> ExportArtifact:
        """The file to hand back to the caller."""
        if self.archive is not None:
            return self.archive
        return self.artifacts[0]


@dataclass
class AccountSummary:
    """Per-account totals for the account summary report."""

    account_number: str
    account_name: str
    total_debits: Decimal = field(default_factory=Decimal)
    total_credits: Decimal = field(default_factory=Decimal)
    transaction_count: int = 0

    @property
    def net_amount(self) -> Decimal:
        return self.total_credits - self.total_debits
