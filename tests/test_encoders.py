"""Tests for the QBO, QBD and Xero encoders."""

from dataclasses import replace
from decimal import Decimal

import pytest

from coa_export.domain.encoders import (
    encode_accounts,
    encode_ledger,
    encode_transactions,
    get_target,
)
from coa_export.domain.entities import (
    Account,
    AccountType,
    ExportFormat,
    Transaction,
    TransactionType,
)
from coa_export.domain.errors import ValidationError


def _lines(text):
    return text.split("\r\n")


class TestQBOEncoder:
    """Tests for QuickBooks Online CSV output."""

    def test_accounts_csv(self, office_supplies_account):
        result = encode_accounts([office_supplies_account], ExportFormat.QBO)

        assert result == (
            "Account Name,Type,Detail Type,Description,Account Number\r\n"
            'Office Supplies,Expense,Supplies,"Misc, supplies",6100'
        )

    def test_accounts_keep_given_order(self, sample_accounts):
        reordered = list(reversed(sample_accounts))
        lines = _lines(encode_accounts(reordered, ExportFormat.QBO))

        assert [line.split(",")[-1] for line in lines[1:]] == ["6100", "4000", "1000"]

    def test_transactions_csv(self, sample_transactions):
        result = encode_transactions(sample_transactions, ExportFormat.QBO)

        assert _lines(result) == [
            "Date,Description,Amount,Account,Payee/Vendor,Type",
            "2024-03-05,Staples order,-125.50,6100 - Office Supplies,Staples,Expense",
            "2024-03-07,Customer payment,400.00,4000 - Sales Revenue,,Deposit",
        ]

    def test_unresolved_account_is_empty(self):
        txn = Transaction(
            id="t1",
            date="2024-01-02",
            description="Unknown",
            amount=Decimal("5"),
            type=TransactionType.DEBIT,
        )
        row = _lines(encode_transactions([txn], "qbo"))[1]

        assert row == "2024-01-02,Unknown,-5.00,,,Expense"

    def test_account_without_name_uses_number(self):
        txn = Transaction(
            id="t1",
            date="2024-01-02",
            description="Fee",
            amount=Decimal("1.5"),
            type=TransactionType.CREDIT,
            suggested_account_number="7000",
        )
        row = _lines(encode_transactions([txn], "qbo"))[1]

        assert row == "2024-01-02,Fee,1.50,7000,,Deposit"

    def test_date_is_passed_through(self):
        txn = Transaction(
            id="t1",
            date="2024-3-5",
            description="As given",
            amount=Decimal("1"),
            type=TransactionType.CREDIT,
        )
        row = _lines(encode_transactions([txn], "qbo"))[1]

        assert row.startswith("2024-3-5,")


class TestQBDEncoder:
    """Tests for QuickBooks Desktop IIF output."""

    def test_accounts_iif(self, office_supplies_account):
        result = encode_accounts([office_supplies_account], ExportFormat.QBD)

        assert result == (
            "!ACCNT\tNAME\tACCNTTYPE\tDESC\tACCNUM\r\n"
            "ACCNT\tOffice Supplies\tEXP\tMisc, supplies\t6100"
        )

    def test_accounts_strip_tabs_and_newlines(self):
        account = Account(
            number="1010",
            name="Petty\tCash",
            type=AccountType.ASSET,
            detail_type="Cash",
            description="Drawer\nfloat ",
        )
        lines = _lines(encode_accounts([account], "qbd"))

        assert lines[1] == "ACCNT\tPetty Cash\tBANK\tDrawer float\t1010"

    def test_transaction_triad(self, debit_transaction):
        lines = _lines(encode_transactions([debit_transaction], ExportFormat.QBD))

        assert lines == [
            "!TRNS\tTRNSTYPE\tDATE\tACCNT\tNAME\tAMOUNT\tMEMO",
            "!SPL\tTRNSTYPE\tDATE\tACCNT\tNAME\tAMOUNT\tMEMO",
            "!ENDTRNS",
            "TRNS\tGENERAL JOURNAL\t03/05/2024\tOffice Supplies\tStaples\t125.50\tStaples order",
            "SPL\tGENERAL JOURNAL\t03/05/2024\tOpening Balance Equity\t\t-125.50\tStaples order",
            "ENDTRNS",
        ]

    def test_credit_is_negative(self, credit_transaction):
        lines = _lines(encode_transactions([credit_transaction], ExportFormat.QBD))
        trns = lines[3].split("\t")
        spl = lines[4].split("\t")

        assert trns[3] == "Sales Revenue"
        assert trns[4] == ""
        assert trns[5] == "-400.00"
        assert spl[5] == "400.00"

    def test_every_entry_nets_to_zero(self, sample_transactions):
        lines = _lines(encode_transactions(sample_transactions, ExportFormat.QBD))
        body = lines[3:]

        assert len(body) == 3 * len(sample_transactions)
        for i in range(0, len(body), 3):
            trns, spl, end = body[i : i + 3]
            assert Decimal(trns.split("\t")[5]) + Decimal(spl.split("\t")[5]) == 0
            assert end == "ENDTRNS"

    def test_unresolved_account_is_uncategorized(self):
        txn = Transaction(
            id="t1",
            date="2024-12-31",
            description="Mystery",
            amount=Decimal("10"),
            type=TransactionType.DEBIT,
        )
        trns = _lines(encode_transactions([txn], "qbd"))[3]

        assert trns.split("\t")[3] == "Uncategorized"

    @pytest.mark.parametrize("bad_date", ["2024/03/05", "03-05-2024", "2024-02-30", ""])
    def test_malformed_date_fails(self, bad_date):
        txn = Transaction(
            id="t1",
            date=bad_date,
            description="Bad",
            amount=Decimal("1"),
            type=TransactionType.DEBIT,
        )
        with pytest.raises(ValidationError):
            encode_transactions([txn], ExportFormat.QBD)


class TestXeroEncoder:
    """Tests for Xero CSV output."""

    def test_accounts_csv(self, office_supplies_account):
        result = encode_accounts([office_supplies_account], ExportFormat.XERO)

        assert result == (
            "*Code,*Name,*Type,Description,Tax Code\r\n"
            '6100,Office Supplies,EXPENSE,"Misc, supplies",TAX002'
        )

    def test_accounts_tax_codes(self, sample_accounts):
        lines = _lines(encode_accounts(sample_accounts, "xero"))

        assert lines[1] == "1000,Business Checking,BANK,Primary operating account,"
        assert lines[2] == "4000,Sales Revenue,REVENUE,Product sales,TAX001"

    def test_transactions_csv(self, sample_transactions):
        result = encode_transactions(sample_transactions, ExportFormat.XERO)

        assert _lines(result) == [
            "*Date,*Amount,Payee,Description,Reference,Account Code",
            "05/03/2024,-125.50,Staples,Staples order,abcdef12,6100",
            "07/03/2024,400.00,,Customer payment,99887766,4000",
        ]

    def test_short_id_reference(self):
        txn = Transaction(
            id="abc",
            date="2024-01-09",
            description="Short",
            amount=Decimal("2"),
            type=TransactionType.CREDIT,
        )
        row = _lines(encode_transactions([txn], "xero"))[1]

        assert row == "09/01/2024,2.00,,Short,abc,"

    def test_malformed_date_fails(self):
        txn = Transaction(
            id="t1",
            date="5 March 2024",
            description="Bad",
            amount=Decimal("1"),
            type=TransactionType.CREDIT,
        )
        with pytest.raises(ValidationError):
            encode_transactions([txn], ExportFormat.XERO)


class TestGenericEncoding:
    """Tests shared by all targets."""

    @pytest.mark.parametrize("fmt", list(ExportFormat))
    def test_deterministic(self, fmt, sample_accounts, sample_transactions):
        first = (
            encode_accounts(sample_accounts, fmt),
            encode_transactions(sample_transactions, fmt),
        )
        second = (
            encode_accounts(sample_accounts, fmt),
            encode_transactions(sample_transactions, fmt),
        )
        assert first == second

    @pytest.mark.parametrize("fmt", list(ExportFormat))
    def test_no_trailing_line_terminator(self, fmt, sample_accounts):
        assert not encode_accounts(sample_accounts, fmt).endswith("\r\n")

    @pytest.mark.parametrize("fmt", list(ExportFormat))
    def test_empty_accounts_emit_header_only(self, fmt):
        header = get_target(fmt).accounts_header[0]
        assert encode_accounts([], fmt) == get_target(fmt).delimiter.join(header)

    def test_unknown_format(self, sample_accounts):
        with pytest.raises(ValidationError, match="Unknown export format"):
            encode_accounts(sample_accounts, "sage")

    def test_amount_rounding(self):
        txn = Transaction(
            id="t1",
            date="2024-01-02",
            description="Rounding",
            amount=Decimal("0.005"),
            type=TransactionType.CREDIT,
        )
        row = _lines(encode_transactions([txn], "qbo"))[1]

        assert ",0.01," in row


class TestLedgerEncoder:
    """Tests for the target-agnostic transactions listing."""

    def test_ledger_csv(self, debit_transaction):
        txn = replace(
            debit_transaction,
            description="Paper, toner",
            document_name="march_statement.pdf",
            category="bank_statement",
        )
        result = encode_ledger([txn])

        assert _lines(result) == [
            "Date,Description,Vendor,Amount,Type,Account Number,Account Name,Source Document,Category",
            '2024-03-05,"Paper, toner",Staples,125.50,debit,6100,Office Supplies,march_statement.pdf,bank_statement',
        ]
