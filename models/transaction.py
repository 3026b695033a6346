from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

from models.ledger_entry import LedgerEntry, to_minor_units


class TransactionType(str, Enum):
    """Bank-assigned transaction type codes."""

    # Point-of-sale card payment, credit or debit
    POS = "POS"
    # Anything not covered below, credit or debit
    OTHER = "Other"
    # Currency exchange, buying side
    EXCH_BUY = "ExchBuy"
    # Currency exchange, selling side
    EXCH_SELL = "ExchSell"
    INCOME = "Income"
    INCOME_CASH = "IncomeCash"


def parse_transaction_type(raw: str) -> Union[TransactionType, str]:
    """Map a bank code to a TransactionType.

    Unknown codes are returned unchanged so new codes never break decoding.
    """
    try:
        return TransactionType(raw)
    except ValueError:
        return raw


@dataclass(frozen=True)
class Transaction:
    """A settled (turnover) transaction."""

    currency_code_numeric: str
    currency_code: str
    place: str
    reference: str
    description: str
    id: str  # bank-assigned identifier
    type: Union[TransactionType, str]
    date: Optional[datetime] = None
    amount: Decimal = field(default_factory=Decimal)  # negative = outgoing

    def to_ledger_entry(self) -> LedgerEntry:
        return LedgerEntry(
            date=self.date,
            amount=to_minor_units(self.amount),
            payee_name=self.place,
            imported_payee=self.place,
            notes=self.description,
            imported_id=self.id,
            cleared=True,
        )

    def to_dict(self) -> dict:
        """Convert transaction to a JSON-friendly dictionary."""
        return {
            "currency_code_numeric": self.currency_code_numeric,
            "currency_code": self.currency_code,
            "date": self.date.isoformat() if self.date else None,
            "place": self.place,
            "reference": self.reference,
            "amount": str(self.amount),
            "description": self.description,
            "id": self.id,
            "type": getattr(self.type, "value", self.type),
        }


@dataclass(frozen=True)
class ReservedTransaction:
    """Funds held against the account but not yet settled."""

    place: str
    currency_code: str
    currency_code_numeric: str
    date: Optional[datetime] = None
    amount: Decimal = field(default_factory=Decimal)  # always a debit

    def to_ledger_entry(self) -> LedgerEntry:
        # The reserved funds grid has no description or identifier columns
        return LedgerEntry(
            date=self.date,
            amount=to_minor_units(self.amount),
            payee_name=self.place,
            imported_payee=self.place,
            cleared=False,
        )

    def to_dict(self) -> dict:
        """Convert reserved transaction to a JSON-friendly dictionary."""
        return {
            "date": self.date.isoformat() if self.date else None,
            "place": self.place,
            "amount": str(self.amount),
            "currency_code_numeric": self.currency_code_numeric,
            "currency_code": self.currency_code,
        }
