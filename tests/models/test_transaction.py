import json
from datetime import datetime
from decimal import Decimal

from models.account import AccountBalance
from models.transaction import Transaction, TransactionType, parse_transaction_type
from models.turnover_filter import TurnoverFilter, filter_to_payload


class TestParseTransactionType:
    """Tests for parse_transaction_type function."""

    def test_known_codes(self):
        assert parse_transaction_type("POS") is TransactionType.POS
        assert parse_transaction_type("ExchBuy") is TransactionType.EXCH_BUY
        assert parse_transaction_type("ExchSell") is TransactionType.EXCH_SELL
        assert parse_transaction_type("Income") is TransactionType.INCOME
        assert parse_transaction_type("IncomeCash") is TransactionType.INCOME_CASH
        assert parse_transaction_type("Other") is TransactionType.OTHER

    def test_unknown_code_is_kept(self):
        assert parse_transaction_type("Standing Order") == "Standing Order"

    def test_codes_are_case_sensitive(self):
        assert parse_transaction_type("pos") == "pos"
        assert not isinstance(parse_transaction_type("pos"), TransactionType)


class TestToDict:
    """Tests for JSON conversion of records."""

    def test_transaction_to_dict(self):
        transaction = Transaction(
            currency_code_numeric="941",
            currency_code="RSD",
            place="Shop A",
            reference="REF1",
            description="Groceries",
            id="TX123",
            type=TransactionType.POS,
            date=datetime(2024, 1, 15, 10, 0, 0),
            amount=Decimal("-100.00"),
        )

        data = json.loads(json.dumps(transaction.to_dict()))

        assert data["type"] == "POS"
        assert data["amount"] == "-100.00"
        assert data["date"] == "2024-01-15T10:00:00"

    def test_account_balance_to_dict_without_date(self):
        account = AccountBalance(
            number="1",
            description="Current",
            currency_code="EUR",
            currency_code_numeric="978",
            product_core_id="PC-2",
        )

        data = account.to_dict()

        assert data["last_transaction_date"] is None
        assert data["total_amount"] == "0"


class TestTurnoverFilter:
    """Tests for TurnoverFilter serialization."""

    def test_field_names(self):
        data = TurnoverFilter(from_date="01.01.2024").to_dict()

        assert set(data) == {
            "CurrencyCodeNumeric",
            "FromDate",
            "ToDate",
            "ItemType",
            "ItemCount",
            "FromAmount",
            "ToAmount",
            "PaymentPurpose",
        }
        assert data["FromDate"] == "01.01.2024"

    def test_missing_filter_is_null(self):
        assert filter_to_payload(None) is None
