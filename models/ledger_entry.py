"""Unified ledger entry consumed by the external budgeting ledger.

Turnover transactions and reserved funds both convert to this shape; it is
the only record that crosses the export boundary.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Iterable, List, Optional

_MINOR_UNITS_PER_UNIT = Decimal(100)


def to_minor_units(amount: Decimal) -> int:
    """Convert a decimal amount to integer minor units (cents).

    Sub-cent precision is truncated toward zero, never rounded:
    Decimal("12.345") becomes 1234 and Decimal("-12.345") becomes -1234.
    """
    return int(amount * _MINOR_UNITS_PER_UNIT)


@dataclass(frozen=True)
class LedgerEntry:
    date: Optional[datetime]
    amount: int  # minor units, negative = money leaving the account
    payee_name: str
    imported_payee: str
    notes: str = ""
    imported_id: str = ""
    cleared: bool = False

    def to_dict(self) -> dict:
        """Convert entry to the ledger's JSON import format.

        The portal reports local (Europe/Belgrade) wall-clock time without an
        offset, so ``date`` is written as a naive ISO-8601 string such as
        "2024-01-15T10:00:00" with no "Z" or offset suffix. JavaScript's
        ``Date.parse`` reads such a string as local time, which matches the
        portal's clock only when the importing machine uses the same zone.
        """
        data = {
            "date": self.date.isoformat() if self.date else None,
            "amount": self.amount,
            "payee_name": self.payee_name,
            "imported_payee": self.imported_payee,
        }
        if self.notes:
            data["notes"] = self.notes
        if self.imported_id:
            data["imported_id"] = self.imported_id
        data["cleared"] = self.cleared
        return data


def to_ledger_entries(records: Iterable) -> List[LedgerEntry]:
    """Convert transactions or reserved transactions, preserving order."""
    return [record.to_ledger_entry() for record in records]
