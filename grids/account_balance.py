"""RetailAccountBalancePreviewFlat-L: balances of every account the user holds."""

import logging
from typing import List

from grids.fields import RowReader
from grids.response import collect, decode_body, flat_rows
from models.account import AccountBalance

GRID_NAME = "RetailAccountBalancePreviewFlat-L"
SERVICE_METHOD = "GetAllAccountBalance"

# Column layout of one balance row
COLUMNS = {
    "number": 1,
    "description": 2,
    "currency_code": 3,
    "total_amount": 4,
    "available_amount": 5,
    "last_transaction_amount": 6,
    "last_transaction_date": 7,
    "product_core_id": 13,
    "currency_code_numeric": 14,
}


def build_request() -> dict:
    return {"gridName": GRID_NAME}


def row_to_record(
    row: list, row_index: int, logger: logging.Logger, errors=None
) -> AccountBalance:
    """Convert one balance row to an AccountBalance.

    Raises:
        ResponseStructureError: If the row is too short or a text column is
            not a string.
    """
    reader = RowReader(row, COLUMNS, GRID_NAME, row_index, logger, errors)
    return AccountBalance(
        number=reader.text("number"),
        description=reader.text("description"),
        currency_code=reader.text("currency_code"),
        currency_code_numeric=reader.text("currency_code_numeric"),
        product_core_id=reader.text("product_core_id"),
        total_amount=reader.amount("total_amount"),
        available_amount=reader.amount("available_amount"),
        last_transaction_amount=reader.amount("last_transaction_amount"),
        last_transaction_date=reader.timestamp("last_transaction_date"),
    )


def parse(body: bytes, logger: logging.Logger) -> List[AccountBalance]:
    rows = flat_rows(decode_body(body), GRID_NAME)
    return collect(rows, row_to_record, GRID_NAME, logger)
