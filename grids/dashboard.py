"""RetailUserDashboardPreview: per-account summary on the portal dashboard."""

import logging
from typing import List

from grids.fields import RowReader
from grids.response import collect, decode_body, flat_rows
from models.account import DashboardAccount

GRID_NAME = "RetailUserDashboardPreview"
SERVICE_METHOD = "GetDashboardsPreview"

# Column layout of one dashboard row
COLUMNS = {
    "reserved_amount": 4,
    "number": 5,
    "available_amount": 6,
    "currency_code_numeric": 10,
    "currency_code": 11,
    "total_amount": 17,
}


def build_request() -> dict:
    return {"gridName": GRID_NAME}


def row_to_record(
    row: list, row_index: int, logger: logging.Logger, errors=None
) -> DashboardAccount:
    """Convert one dashboard row to a DashboardAccount.

    Raises:
        ResponseStructureError: If the row is too short or a text column is
            not a string.
    """
    reader = RowReader(row, COLUMNS, GRID_NAME, row_index, logger, errors)
    return DashboardAccount(
        number=reader.text("number"),
        currency_code=reader.text("currency_code"),
        currency_code_numeric=reader.text("currency_code_numeric"),
        total_amount=reader.amount("total_amount"),
        available_amount=reader.amount("available_amount"),
        reserved_amount=reader.amount("reserved_amount"),
    )


def parse(body: bytes, logger: logging.Logger) -> List[DashboardAccount]:
    rows = flat_rows(decode_body(body), GRID_NAME)
    return collect(rows, row_to_record, GRID_NAME, logger)
