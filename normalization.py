"""Sign rules that unify turnover and reserved funds into one ledger.

Negative amounts are money leaving the account, positive amounts money
arriving.
"""

import logging
from decimal import Decimal


def net_turnover_amount(
    credit: Decimal, debit: Decimal, logger: logging.Logger
) -> Decimal:
    """Combine the credit and debit columns of a turnover row.

    Exactly one of the two is expected to be non-zero. A non-zero credit is
    negated, a non-zero debit is kept as-is, and two zeros give zero. If both
    are non-zero the debit wins and the anomaly is logged.
    """
    if credit and debit:
        logger.warning(
            f"Turnover row has both credit {credit} and debit {debit}, using debit"
        )
        return debit
    if debit:
        return debit
    if credit:
        return -credit
    return Decimal(0)


def reserved_amount(magnitude: Decimal) -> Decimal:
    """Reserved funds are always outstanding debits from the holder's side."""
    return Decimal(0) - magnitude
