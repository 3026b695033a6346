"""RetailAccountReservedFundsPreviewFlat: authorized but unsettled holds."""

import logging
from typing import List

from grids.fields import RowReader
from grids.response import collect, decode_body, flat_rows
from models.transaction import ReservedTransaction
from normalization import reserved_amount

GRID_NAME = "RetailAccountReservedFundsPreviewFlat"
SERVICE_METHOD = "GetTransactionalAccountReservedFunds"

# Column layout of one reserved funds row; the amount is an unsigned magnitude
COLUMNS = {
    "date": 1,
    "place": 2,
    "amount": 3,
    "currency_code": 4,
    "currency_code_numeric": 5,
}


def build_request(account_number: str) -> dict:
    return {"accountNumber": account_number, "gridName": GRID_NAME}


def row_to_record(
    row: list, row_index: int, logger: logging.Logger, errors=None
) -> ReservedTransaction:
    """Convert one reserved funds row to a ReservedTransaction (negative amount).

    Raises:
        ResponseStructureError: If the row is too short or a text column is
            not a string.
    """
    reader = RowReader(row, COLUMNS, GRID_NAME, row_index, logger, errors)
    return ReservedTransaction(
        place=reader.text("place"),
        currency_code=reader.text("currency_code"),
        currency_code_numeric=reader.text("currency_code_numeric"),
        date=reader.timestamp("date"),
        amount=reserved_amount(reader.amount("amount")),
    )


def parse(body: bytes, logger: logging.Logger) -> List[ReservedTransaction]:
    rows = flat_rows(decode_body(body), GRID_NAME)
    return collect(rows, row_to_record, GRID_NAME, logger)
