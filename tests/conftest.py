"""Shared pytest fixtures for coa_export tests."""

from datetime import date
from decimal import Decimal
import logging
from pathlib import Path

import pytest

from coa_export import logging_setup
from coa_export.domain.entities import (
    Account,
    AccountType,
    DetailType,
    Transaction,
    TransactionType,
)
from coa_export.domain.export import ExportService

EXPORT_DATE = date(2024, 4, 1)


@pytest.fixture(autouse=True)
def reset_logging():
    """Drop handlers installed by the CLI so each test configures afresh."""
    yield
    logger = logging.getLogger("coa_export")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logging_setup._CONFIGURED = False


@pytest.fixture
def export_service():
    """Create an ExportService pinned to a fixed export date."""
    return ExportService(clock=lambda: EXPORT_DATE)


@pytest.fixture
def office_supplies_account():
    """The single-account Chart of Accounts used in end-to-end checks."""
    return Account(
        number="6100",
        name="Office Supplies",
        type=AccountType.EXPENSE,
        detail_type=DetailType.SUPPLIES,
        description="Misc, supplies",
    )


@pytest.fixture
def sample_accounts(office_supplies_account):
    """A small Chart of Accounts, sorted by number."""
    return [
        Account(
            number="1000",
            name="Business Checking",
            type=AccountType.ASSET,
            detail_type=DetailType.BANK,
            description="Primary operating account",
        ),
        Account(
            number="4000",
            name="Sales Revenue",
            type=AccountType.INCOME,
            detail_type=DetailType.SALES,
            description="Product sales",
        ),
        office_supplies_account,
    ]


@pytest.fixture
def debit_transaction():
    """A suggested-only debit of 125.50."""
    return Transaction(
        id="txn-0000-abcdef12",
        date="2024-03-05",
        description="Staples order",
        amount=Decimal("125.50"),
        type=TransactionType.DEBIT,
        vendor="Staples",
        suggested_account_number="6100",
        suggested_account_name="Office Supplies",
        confidence=0.92,
    )


@pytest.fixture
def credit_transaction():
    """A reviewed credit of 400.00 with no vendor."""
    return Transaction(
        id="txn-0000-99887766",
        date="2024-03-07",
        description="Customer payment",
        amount=Decimal("400"),
        type=TransactionType.CREDIT,
        suggested_account_number="4900",
        suggested_account_name="Other Income",
        reviewed_account_number="4000",
        reviewed_account_name="Sales Revenue",
        confidence=0.81,
        is_reviewed=True,
    )


@pytest.fixture
def sample_transactions(debit_transaction, credit_transaction):
    """One debit and one credit."""
    return [debit_transaction, credit_transaction]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"
