"""Typed column decoding for untyped grid rows.

Grid responses carry no field names, only column positions. ``RowReader``
reads one row against a grid's column table: text columns are copied as-is
and a missing or non-string text column is a structural failure, while
amount and timestamp columns are decoded one at a time. A decode failure is
logged, collected on ``errors`` and replaced by the field's zero value, so
the record is always built.
"""

import logging
import re
from datetime import datetime
from decimal import Decimal
from typing import Dict, List, Optional, Sequence

from models.exceptions import FieldDecodeError, ResponseStructureError

TIMESTAMP_FORMAT = "%d.%m.%Y %H:%M:%S"
_TIMESTAMP_PATTERN = re.compile(r"\d{2}\.\d{2}\.\d{4} \d{2}:\d{2}:\d{2}", re.ASCII)
_AMOUNT_PATTERN = re.compile(r"[-+]?\d+(\.\d+)?", re.ASCII)


def parse_amount(field: str, raw) -> Decimal:
    """Parse a fixed-point amount such as "1234.56" into an exact Decimal.

    Only plain ASCII digits with an optional sign and fraction are accepted;
    whitespace, digit separators and exponents are decode failures.

    Raises:
        FieldDecodeError: If the value is not a fixed-point number string.
    """
    if not isinstance(raw, str):
        raise FieldDecodeError(field, raw, "expected a string")
    if not _AMOUNT_PATTERN.fullmatch(raw):
        raise FieldDecodeError(field, raw, "not a fixed-point number")
    return Decimal(raw)


def parse_timestamp(field: str, raw) -> datetime:
    """Parse a "DD.MM.YYYY hh:mm:ss" timestamp.

    Anything that deviates from the pattern is rejected rather than guessed.

    Raises:
        FieldDecodeError: If the value does not match the pattern exactly.
    """
    if not isinstance(raw, str) or not _TIMESTAMP_PATTERN.fullmatch(raw):
        raise FieldDecodeError(field, raw, f"expected {TIMESTAMP_FORMAT}")
    try:
        return datetime.strptime(raw, TIMESTAMP_FORMAT)
    except ValueError as e:
        raise FieldDecodeError(field, raw, str(e)) from None


class RowReader:
    """Reads named fields from one positional row.

    Args:
        row: The untyped row as decoded from JSON.
        columns: Field name to column index table of the row's grid.
        grid_name: Grid the row belongs to, used in log and error messages.
        row_index: Position of the row in the response.
        logger: Logger receiving field-level decode failures.
        errors: Optional list shared across rows that failed fields are
            appended to; a fresh list is used when omitted.

    Raises:
        ResponseStructureError: If the row is not a list or is too short for
            the column table.
    """

    def __init__(
        self,
        row,
        columns: Dict[str, int],
        grid_name: str,
        row_index: int,
        logger: logging.Logger,
        errors: Optional[List[FieldDecodeError]] = None,
    ):
        if not isinstance(row, list):
            raise ResponseStructureError(
                f"{grid_name} row {row_index}: expected a list, got {type(row).__name__}"
            )
        width = max(columns.values()) + 1
        if len(row) < width:
            raise ResponseStructureError(
                f"{grid_name} row {row_index}: expected at least {width} columns, got {len(row)}"
            )
        self.row: Sequence = row
        self.columns = columns
        self.grid_name = grid_name
        self.row_index = row_index
        self.logger = logger
        self.errors: List[FieldDecodeError] = errors if errors is not None else []

    def text(self, field: str) -> str:
        value = self.row[self.columns[field]]
        if not isinstance(value, str):
            raise ResponseStructureError(
                f"{self.grid_name} row {self.row_index}: {field} is not a string: {value!r}"
            )
        return value

    def amount(self, field: str) -> Decimal:
        """Decode an amount column, falling back to zero on failure."""
        try:
            return parse_amount(field, self.row[self.columns[field]])
        except FieldDecodeError as e:
            self._record(e)
            return Decimal(0)

    def timestamp(self, field: str) -> Optional[datetime]:
        """Decode a timestamp column, falling back to None on failure."""
        try:
            return parse_timestamp(field, self.row[self.columns[field]])
        except FieldDecodeError as e:
            self._record(e)
            return None

    def _record(self, error: FieldDecodeError) -> None:
        self.errors.append(error)
        self.logger.warning(
            f"{self.grid_name} row {self.row_index}: cannot parse {error.field} "
            f"from {error.raw!r}, leaving it empty"
        )
