"""Tests for record to entity mappers."""

from decimal import Decimal

import pytest

from coa_export.domain.entities import (
    Account,
    AccountType,
    DetailType,
    Transaction,
    TransactionType,
)
from coa_export.domain.errors import ValidationError
from coa_export.domain.mappers import account_from_dict, transaction_from_dict


class TestAccountMapper:
    """Tests for account records."""

    def test_camel_case_record(self):
        account = account_from_dict(
            {
                "id": "acc-1",
                "number": "1200",
                "name": "Accounts Receivable",
                "type": "Asset",
                "detailType": "Accounts Receivable",
                "description": "Customer balances",
                "isCustom": True,
                "parentAccountNumber": "1000",
            }
        )

        assert isinstance(account, Account)
        assert account.type == AccountType.ASSET
        assert account.detail_type == DetailType.ACCOUNTS_RECEIVABLE
        assert account.is_custom is True
        assert account.parent_account_number == "1000"
        assert account.id == "acc-1"

    def test_snake_case_record(self):
        account = account_from_dict(
            {"number": 2000, "name": "AP", "type": "Liability", "detail_type": "Accounts Payable"}
        )

        assert account.number == "2000"
        assert account.description == ""
        assert account.detail_type == DetailType.ACCOUNTS_PAYABLE

    def test_unknown_detail_type_is_kept(self):
        account = account_from_dict(
            {"number": "1500", "name": "Crypto", "type": "Asset", "detailType": "Crypto Wallet"}
        )

        assert account.detail_type == "Crypto Wallet"

    def test_invalid_type(self):
        with pytest.raises(ValidationError, match="Invalid account type"):
            account_from_dict(
                {"number": "1", "name": "X", "type": "Revenue", "detailType": "Sales"}
            )

    def test_missing_field(self):
        with pytest.raises(ValidationError, match="detailType"):
            account_from_dict({"number": "1", "name": "X", "type": "Asset"})


class TestTransactionMapper:
    """Tests for transaction records."""

    def test_camel_case_record(self):
        txn = transaction_from_dict(
            {
                "id": "t-1",
                "date": "2024-03-05",
                "description": "Staples order",
                "amount": 125.5,
                "type": "debit",
                "vendor": "Staples",
                "suggestedAccountNumber": "6100",
                "suggestedAccountName": "Office Supplies",
                "reviewedAccountNumber": None,
                "confidence": 0.9,
                "isReviewed": False,
                "documentName": "statement.pdf",
            }
        )

        assert isinstance(txn, Transaction)
        assert txn.amount == Decimal("125.5")
        assert txn.type == TransactionType.DEBIT
        assert txn.suggested_account_number == "6100"
        assert txn.reviewed_account_number is None
        assert txn.document_name == "statement.pdf"

    def test_string_amount(self):
        txn = transaction_from_dict(
            {"id": "t", "date": "2024-01-01", "amount": "$1,234.56", "type": "credit"}
        )

        assert txn.amount == Decimal("1234.56")
        assert txn.description == ""

    @pytest.mark.parametrize("bad_date", ["01/02/2024", "2024-13-01", "yesterday"])
    def test_malformed_date(self, bad_date):
        with pytest.raises(ValidationError, match="Invalid transaction date"):
            transaction_from_dict(
                {"id": "t", "date": bad_date, "amount": 1, "type": "debit"}
            )

    def test_invalid_type(self):
        with pytest.raises(ValidationError, match="Invalid transaction type"):
            transaction_from_dict(
                {"id": "t", "date": "2024-01-01", "amount": 1, "type": "withdrawal"}
            )

    def test_negative_amount(self):
        with pytest.raises(ValidationError, match="negative amount"):
            transaction_from_dict(
                {"id": "t", "date": "2024-01-01", "amount": -1, "type": "debit"}
            )

    def test_unparseable_amount(self):
        with pytest.raises(ValidationError, match="Could not parse amount"):
            transaction_from_dict(
                {"id": "t", "date": "2024-01-01", "amount": "abc", "type": "debit"}
            )

    @pytest.mark.parametrize("amount", [float("nan"), float("inf"), "Infinity"])
    def test_non_finite_amount(self, amount):
        with pytest.raises(ValidationError, match="Could not parse amount"):
            transaction_from_dict(
                {"id": "t", "date": "2024-01-01", "amount": amount, "type": "debit"}
            )

    def test_amount_too_large(self):
        with pytest.raises(ValidationError, match="too large to export"):
            transaction_from_dict(
                {"id": "t", "date": "2024-01-01", "amount": 1e27, "type": "debit"}
            )

    def test_numeric_string_confidence(self):
        txn = transaction_from_dict(
            {"id": "t", "date": "2024-01-01", "amount": 5, "type": "debit", "confidence": "0.9"}
        )

        assert txn.confidence == 0.9

    def test_non_numeric_confidence(self):
        with pytest.raises(ValidationError, match="invalid confidence 'high'"):
            transaction_from_dict(
                {"id": "t", "date": "2024-01-01", "amount": 5, "type": "debit", "confidence": "high"}
            )
