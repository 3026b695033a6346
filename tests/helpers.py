"""Helper utilities for tests."""

import codecs
import json


def to_body(payload, bom: bool = False) -> bytes:
    """Encode a payload the way the portal sends it.

    Args:
        payload: JSON-serializable response payload.
        bom: Prefix the body with a UTF-8 byte-order mark.
    """
    body = json.dumps(payload).encode("utf-8")
    return codecs.BOM_UTF8 + body if bom else body


def dashboard_row(
    number="265000000012345678",
    reserved="1500.00",
    available="98500.00",
    currency_numeric="941",
    currency="RSD",
    total="100000.00",
):
    """Build a RetailUserDashboardPreview row with 18 columns."""
    row = [""] * 18
    row[4] = reserved
    row[5] = number
    row[6] = available
    row[10] = currency_numeric
    row[11] = currency
    row[17] = total
    return row


def balance_row(
    number="265000000012345678",
    description="Tekući račun",
    currency="RSD",
    total="100000.00",
    available="98500.00",
    last_amount="-1500.00",
    last_date="14.01.2024 18:30:00",
    product_core_id="PC-1",
    currency_numeric="941",
):
    """Build a RetailAccountBalancePreviewFlat-L row with 15 columns."""
    row = [""] * 15
    row[1] = number
    row[2] = description
    row[3] = currency
    row[4] = total
    row[5] = available
    row[6] = last_amount
    row[7] = last_date
    row[13] = product_core_id
    row[14] = currency_numeric
    return row


def turnover_row(
    currency_numeric="941",
    currency="RSD",
    date="15.01.2024 10:00:00",
    place="Shop A",
    reference="REF1",
    credit="0.00",
    debit="100.00",
    description="Groceries",
    transaction_id="TX123",
    type="POS",
):
    """Build a turnover detail row; unused columns hold non-string values."""
    return [
        1,
        currency_numeric,
        currency,
        date,
        None,
        0,
        place,
        reference,
        credit,
        debit,
        None,
        description,
        transaction_id,
        type,
    ]


def turnover_payload(rows):
    """Wrap turnover rows the way the master/detail grid does."""
    return [[{"AccountNumber": "265000000012345678"}, rows]]


def reserved_row(
    date="16.01.2024 12:15:00",
    place="CAFE BAR",
    amount="42.00",
    currency="RSD",
    currency_numeric="941",
):
    """Build a RetailAccountReservedFundsPreviewFlat row with 6 columns."""
    return ["R1", date, place, amount, currency, currency_numeric]
