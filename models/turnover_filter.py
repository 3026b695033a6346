from dataclasses import dataclass
from typing import Optional


@dataclass
class TurnoverFilter:
    """Filter parameters accepted by the turnover query.

    Every value is sent as a string; dates use the portal's DD.MM.YYYY
    format. Empty strings mean "no constraint".
    """

    currency_code_numeric: str = ""
    from_date: str = ""
    to_date: str = ""
    item_type: str = ""
    item_count: str = ""
    from_amount: str = ""
    to_amount: str = ""
    payment_purpose: str = ""

    def to_dict(self) -> dict:
        """Convert filter to the portal's filterParam payload."""
        return {
            "CurrencyCodeNumeric": self.currency_code_numeric,
            "FromDate": self.from_date,
            "ToDate": self.to_date,
            "ItemType": self.item_type,
            "ItemCount": self.item_count,
            "FromAmount": self.from_amount,
            "ToAmount": self.to_amount,
            "PaymentPurpose": self.payment_purpose,
        }


def filter_to_payload(turnover_filter: Optional[TurnoverFilter]) -> Optional[dict]:
    """Serialize an optional filter; a missing filter is sent as null."""
    if turnover_filter is None:
        return None
    return turnover_filter.to_dict()
