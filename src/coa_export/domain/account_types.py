"""Account-type mapping tables for each export target.

Every target has a table keyed by detail type and a fallback table keyed by
the coarse account type. The fallback tables cover every ``AccountType``, so
``map_account_type`` is total.
"""

from coa_export.domain.entities import AccountType, DetailType, ExportFormat

D = DetailType

QBO_TYPE_MAPPING: dict[DetailType, str] = {
    D.CASH: "Bank",
    D.BANK: "Bank",
    D.ACCOUNTS_RECEIVABLE: "Accounts Receivable",
    D.INVENTORY: "Other Current Asset",
    D.OTHER_CURRENT_ASSET: "Other Current Asset",
    D.FIXED_ASSET: "Fixed Asset",
    D.ACCOUNTS_PAYABLE: "Accounts Payable",
    D.CREDIT_CARD: "Credit Card",
    D.OTHER_CURRENT_LIABILITY: "Other Current Liability",
    D.LONG_TERM_LIABILITY: "Long Term Liability",
    D.OWNERS_EQUITY: "Equity",
    D.RETAINED_EARNINGS: "Equity",
    D.PARTNERS_EQUITY: "Equity",
    D.SALES: "Income",
    D.SERVICE: "Income",
    D.OTHER_INCOME: "Other Income",
    D.DISCOUNT: "Income",
    D.COST_OF_GOODS_SOLD: "Cost of Goods Sold",
    D.PAYROLL: "Expense",
    D.RENT_OR_LEASE: "Expense",
    D.UTILITIES: "Expense",
    D.INSURANCE: "Expense",
    D.ADVERTISING: "Expense",
    D.BANK_CHARGES: "Expense",
    D.DEPRECIATION: "Expense",
    D.INTEREST: "Expense",
    D.LEGAL_AND_PROFESSIONAL: "Expense",
    D.OFFICE_GENERAL_ADMINISTRATIVE: "Expense",
    D.REPAIR_AND_MAINTENANCE: "Expense",
    D.SUPPLIES: "Expense",
    D.TAXES_PAID: "Expense",
    D.TRAVEL: "Expense",
    D.TRAVEL_MEALS: "Expense",
    D.AUTO: "Expense",
    D.DUES_AND_SUBSCRIPTIONS: "Expense",
    D.TRAINING: "Expense",
    D.SHIPPING: "Expense",
    D.OTHER_MISCELLANEOUS: "Expense",
}

QBO_FALLBACK_TYPE: dict[AccountType, str] = {
    AccountType.ASSET: "Other Current Asset",
    AccountType.LIABILITY: "Other Current Liability",
    AccountType.EQUITY: "Equity",
    AccountType.INCOME: "Income",
    AccountType.EXPENSE: "Expense",
}

# QuickBooks Desktop IIF ACCNTTYPE codes
QBD_TYPE_MAPPING: dict[DetailType, str] = {
    D.CASH: "BANK",
    D.BANK: "BANK",
    D.ACCOUNTS_RECEIVABLE: "AR",
    D.INVENTORY: "OCASSET",
    D.OTHER_CURRENT_ASSET: "OCASSET",
    D.FIXED_ASSET: "FIXASSET",
    D.ACCOUNTS_PAYABLE: "AP",
    D.CREDIT_CARD: "CCARD",
    D.OTHER_CURRENT_LIABILITY: "OCLIAB",
    D.LONG_TERM_LIABILITY: "LTLIAB",
    D.OWNERS_EQUITY: "EQUITY",
    D.RETAINED_EARNINGS: "EQUITY",
    D.PARTNERS_EQUITY: "EQUITY",
    D.SALES: "INC",
    D.SERVICE: "INC",
    D.OTHER_INCOME: "EXINC",
    D.DISCOUNT: "INC",
    D.COST_OF_GOODS_SOLD: "COGS",
    D.PAYROLL: "EXP",
    D.RENT_OR_LEASE: "EXP",
    D.UTILITIES: "EXP",
    D.INSURANCE: "EXP",
    D.ADVERTISING: "EXP",
    D.BANK_CHARGES: "EXP",
    D.DEPRECIATION: "EXP",
    D.INTEREST: "EXP",
    D.LEGAL_AND_PROFESSIONAL: "EXP",
    D.OFFICE_GENERAL_ADMINISTRATIVE: "EXP",
    D.REPAIR_AND_MAINTENANCE: "EXP",
    D.SUPPLIES: "EXP",
    D.TAXES_PAID: "EXP",
    D.TRAVEL: "EXP",
    D.TRAVEL_MEALS: "EXP",
    D.AUTO: "EXP",
    D.DUES_AND_SUBSCRIPTIONS: "EXP",
    D.TRAINING: "EXP",
    D.SHIPPING: "EXP",
    D.OTHER_MISCELLANEOUS: "EXP",
}

QBD_FALLBACK_TYPE: dict[AccountType, str] = {
    AccountType.ASSET: "OCASSET",
    AccountType.LIABILITY: "OCLIAB",
    AccountType.EQUITY: "EQUITY",
    AccountType.INCOME: "INC",
    AccountType.EXPENSE: "EXP",
}

XERO_TYPE_MAPPING: dict[DetailType, str] = {
    D.CASH: "BANK",
    D.BANK: "BANK",
    D.ACCOUNTS_RECEIVABLE: "CURRENT",
    D.INVENTORY: "INVENTORY",
    D.OTHER_CURRENT_ASSET: "CURRENT",
    D.FIXED_ASSET: "FIXED",
    D.ACCOUNTS_PAYABLE: "CURRLIAB",
    D.CREDIT_CARD: "CURRLIAB",
    D.OTHER_CURRENT_LIABILITY: "CURRLIAB",
    D.LONG_TERM_LIABILITY: "TERMLIAB",
    D.OWNERS_EQUITY: "EQUITY",
    D.RETAINED_EARNINGS: "EQUITY",
    D.PARTNERS_EQUITY: "EQUITY",
    D.SALES: "REVENUE",
    D.SERVICE: "REVENUE",
    D.OTHER_INCOME: "OTHERINCOME",
    D.DISCOUNT: "REVENUE",
    D.COST_OF_GOODS_SOLD: "DIRECTCOSTS",
    D.PAYROLL: "EXPENSE",
    D.RENT_OR_LEASE: "OVERHEADS",
    D.UTILITIES: "OVERHEADS",
    D.INSURANCE: "OVERHEADS",
    D.ADVERTISING: "EXPENSE",
    D.BANK_CHARGES: "EXPENSE",
    D.DEPRECIATION: "EXPENSE",
    D.INTEREST: "EXPENSE",
    D.LEGAL_AND_PROFESSIONAL: "EXPENSE",
    D.OFFICE_GENERAL_ADMINISTRATIVE: "OVERHEADS",
    D.REPAIR_AND_MAINTENANCE: "EXPENSE",
    D.SUPPLIES: "EXPENSE",
    D.TAXES_PAID: "EXPENSE",
    D.TRAVEL: "EXPENSE",
    D.TRAVEL_MEALS: "EXPENSE",
    D.AUTO: "EXPENSE",
    D.DUES_AND_SUBSCRIPTIONS: "EXPENSE",
    D.TRAINING: "EXPENSE",
    D.SHIPPING: "DIRECTCOSTS",
    D.OTHER_MISCELLANEOUS: "EXPENSE",
}

XERO_FALLBACK_TYPE: dict[AccountType, str] = {
    AccountType.ASSET: "CURRENT",
    AccountType.LIABILITY: "CURRLIAB",
    AccountType.EQUITY: "EQUITY",
    AccountType.INCOME: "REVENUE",
    AccountType.EXPENSE: "EXPENSE",
}

# US defaults: output tax on revenue, input tax on costs
XERO_OUTPUT_TAX = "TAX001"
XERO_INPUT_TAX = "TAX002"

XERO_TAX_CODES: dict[str, str] = {
    "REVENUE": XERO_OUTPUT_TAX,
    "OTHERINCOME": XERO_OUTPUT_TAX,
    "DIRECTCOSTS": XERO_INPUT_TAX,
    "EXPENSE": XERO_INPUT_TAX,
    "OVERHEADS": XERO_INPUT_TAX,
}

TYPE_MAPPINGS: dict[ExportFormat, tuple[dict[DetailType, str], dict[AccountType, str]]] = {
    ExportFormat.QBO: (QBO_TYPE_MAPPING, QBO_FALLBACK_TYPE),
    ExportFormat.QBD: (QBD_TYPE_MAPPING, QBD_FALLBACK_TYPE),
    ExportFormat.XERO: (XERO_TYPE_MAPPING, XERO_FALLBACK_TYPE),
}


def map_account_type(
    detail_type: DetailType | str,
    account_type: AccountType | str,
    target: ExportFormat | str,
) -> str:
    """Map an account's detail type to the target's native account type.

    Args:
        detail_type: Fine-grained detail type; unknown values use the fallback
        account_type: Coarse account type used when the detail type is unmapped
        target: Export target

    Returns:
        Target account type code
    """
    detail_table, fallback_table = TYPE_MAPPINGS[ExportFormat(target)]
    try:
        return detail_table[DetailType(detail_type)]
    except (ValueError, KeyError):
        return fallback_table[AccountType(account_type)]


def xero_tax_code(xero_type: str) -> str:
    """Return the default Xero tax code for an account type code, or ''."""
    return XERO_TAX_CODES.get(xero_type, "")
