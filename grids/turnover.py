"""RetailAccountTurnoverTransactionPreviewMasterDetail-S: settled transactions.

The response is master/detail shaped and the transaction rows live at
``response[0][1]``. Rows mix strings with other JSON values; only the columns
listed below are read.

The domestic-only variant of this grid
(RetailAccountTurnoverTransactionDomesticPreviewMasterDetail-S) lacks the
card number and does not work for foreign currency accounts.
"""

import logging
from typing import List, Optional

from grids.fields import RowReader
from grids.response import collect, decode_body, nested_rows
from models.transaction import Transaction, parse_transaction_type
from models.turnover_filter import TurnoverFilter, filter_to_payload
from normalization import net_turnover_amount

GRID_NAME = "RetailAccountTurnoverTransactionPreviewMasterDetail-S"
SERVICE_METHOD = "GetTransactionalAccountTurnover"

# Column layout of one transaction row
COLUMNS = {
    "currency_code_numeric": 1,
    "currency_code": 2,
    "date": 3,
    "place": 6,
    "reference": 7,
    "credit_amount": 8,
    "debit_amount": 9,
    "description": 11,
    "id": 12,
    "type": 13,
}


def build_request(
    product_core_id: str,
    account_number: str,
    turnover_filter: Optional[TurnoverFilter] = None,
) -> dict:
    return {
        "accountNumber": account_number,
        "filterParam": filter_to_payload(turnover_filter),
        "gridName": GRID_NAME,
        "productCoreID": product_core_id,
    }


def row_to_record(
    row: list, row_index: int, logger: logging.Logger, errors=None
) -> Transaction:
    """Convert one turnover row to a Transaction with a signed amount.

    Raises:
        ResponseStructureError: If the row is too short or a text column is
            not a string.
    """
    reader = RowReader(row, COLUMNS, GRID_NAME, row_index, logger, errors)
    return Transaction(
        currency_code_numeric=reader.text("currency_code_numeric"),
        currency_code=reader.text("currency_code"),
        place=reader.text("place"),
        reference=reader.text("reference"),
        description=reader.text("description"),
        id=reader.text("id"),
        type=parse_transaction_type(reader.text("type")),
        date=reader.timestamp("date"),
        amount=net_turnover_amount(
            reader.amount("credit_amount"), reader.amount("debit_amount"), logger
        ),
    )


def parse(body: bytes, logger: logging.Logger) -> List[Transaction]:
    rows = nested_rows(decode_body(body), GRID_NAME)
    return collect(rows, row_to_record, GRID_NAME, logger)
