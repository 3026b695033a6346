"""Structural decoding of grid responses.

Bodies are JSON, sometimes prefixed with a UTF-8 byte-order mark. Flat grids
return a list of rows; the turnover grid wraps its rows as
``response[0][1]``. Any shape mismatch fails the whole call.
"""

import codecs
import json
import logging
from typing import Callable, List, TypeVar

from models.exceptions import FieldDecodeError, ResponseStructureError

T = TypeVar("T")

RowMapper = Callable[[list, int, logging.Logger, List[FieldDecodeError]], T]


def decode_body(body: bytes):
    """Parse a response body, dropping a leading byte-order mark.

    Raises:
        ResponseStructureError: If the body is not valid JSON.
    """
    if body.startswith(codecs.BOM_UTF8):
        body = body[len(codecs.BOM_UTF8):]
    try:
        return json.loads(body)
    except ValueError as e:
        raise ResponseStructureError(f"Response is not valid JSON: {e}") from e


def flat_rows(payload, grid_name: str) -> list:
    """Return the rows of a flat grid response (a list of rows).

    A null payload is treated as an empty grid.
    """
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ResponseStructureError(
            f"{grid_name}: expected a list of rows, got {type(payload).__name__}"
        )
    return payload


def nested_rows(payload, grid_name: str) -> list:
    """Return the rows of a master/detail response, found at ``payload[0][1]``.

    A null or empty payload, or a null detail list, is treated as an empty grid.
    """
    if payload is None:
        return []
    if not isinstance(payload, list):
        raise ResponseStructureError(
            f"{grid_name}: expected a list, got {type(payload).__name__}"
        )
    if not payload:
        return []

    master = payload[0]
    if not isinstance(master, list) or len(master) < 2:
        raise ResponseStructureError(
            f"{grid_name}: expected a [header, rows] pair as the first element"
        )

    rows = master[1]
    if rows is None:
        return []
    if not isinstance(rows, list):
        raise ResponseStructureError(
            f"{grid_name}: expected a list of rows, got {type(rows).__name__}"
        )
    return rows


def collect(
    rows: list, mapper: RowMapper, grid_name: str, logger: logging.Logger
) -> List[T]:
    """Map every row to a record, preserving row order.

    Field-level failures are defaulted inside the mapper and gathered into
    one list so the response logs how many fields were left empty.
    Structural failures propagate and abort the whole collection.
    """
    errors: List[FieldDecodeError] = []
    records = [mapper(row, index, logger, errors) for index, row in enumerate(rows)]
    if errors:
        logger.warning(
            f"{grid_name}: defaulted {len(errors)} field(s) across {len(records)} row(s)"
        )
    logger.debug(f"Decoded {len(records)} rows from {grid_name}")
    return records
