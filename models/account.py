from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class AccountBalance:
    number: str
    description: str
    currency_code: str  # ISO alpha, e.g. "RSD"
    currency_code_numeric: str  # ISO numeric, e.g. "941"
    product_core_id: str  # opaque key required by the turnover query
    total_amount: Decimal = field(default_factory=Decimal)
    available_amount: Decimal = field(default_factory=Decimal)
    last_transaction_amount: Decimal = field(default_factory=Decimal)
    last_transaction_date: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert account balance to a JSON-friendly dictionary."""
        return {
            "number": self.number,
            "description": self.description,
            "currency_code": self.currency_code,
            "currency_code_numeric": self.currency_code_numeric,
            "total_amount": str(self.total_amount),
            "available_amount": str(self.available_amount),
            "last_transaction_amount": str(self.last_transaction_amount),
            "last_transaction_date": (
                self.last_transaction_date.isoformat()
                if self.last_transaction_date
                else None
            ),
            "product_core_id": self.product_core_id,
        }


@dataclass(frozen=True)
class DashboardAccount:
    number: str
    currency_code: str
    currency_code_numeric: str
    total_amount: Decimal = field(default_factory=Decimal)
    available_amount: Decimal = field(default_factory=Decimal)
    reserved_amount: Decimal = field(default_factory=Decimal)

    def to_dict(self) -> dict:
        """Convert dashboard account to a JSON-friendly dictionary."""
        return {
            "number": self.number,
            "currency_code": self.currency_code,
            "currency_code_numeric": self.currency_code_numeric,
            "total_amount": str(self.total_amount),
            "available_amount": str(self.available_amount),
            "reserved_amount": str(self.reserved_amount),
        }
