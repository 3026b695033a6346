"""Transaction queries against the portal."""

import logging
from typing import List, Optional

import grids.reserved_funds as reserved_funds
import grids.turnover as turnover
from models.account import AccountBalance
from models.exceptions import ResponseStructureError
from models.ledger_entry import LedgerEntry, to_ledger_entries
from models.transaction import ReservedTransaction, Transaction
from models.turnover_filter import TurnoverFilter


class TransactionService:
    """Service for settled transactions and reserved funds."""

    def __init__(self, portal, logger: logging.Logger):
        """Initialize the transaction service.

        Args:
            portal: Portal session used to query grids.
            logger: Logger for decode diagnostics.
        """
        self.portal = portal
        self.logger = logger

    def turnover(
        self,
        product_core_id: str,
        account_number: str,
        turnover_filter: Optional[TurnoverFilter] = None,
    ) -> List[Transaction]:
        """Get settled transactions of an account.

        Args:
            product_core_id: Product core ID from the account balance listing.
            account_number: Account number.
            turnover_filter: Optional currency, date and amount constraints.

        Returns:
            List of Transaction objects in portal order.

        Raises:
            TransportError: If the request fails.
            ResponseStructureError: If the response does not match the grid.
        """
        request = turnover.build_request(product_core_id, account_number, turnover_filter)
        body = self.portal.post_grid(turnover.SERVICE_METHOD, request)
        try:
            return turnover.parse(body, self.logger)
        except ResponseStructureError as e:
            self.logger.error(f"Cannot decode turnover of {account_number}: {e}")
            raise

    def reserved_funds(self, account_number: str) -> List[ReservedTransaction]:
        """Get funds currently held against an account.

        Raises:
            TransportError: If the request fails.
            ResponseStructureError: If the response does not match the grid.
        """
        request = reserved_funds.build_request(account_number)
        body = self.portal.post_grid(reserved_funds.SERVICE_METHOD, request)
        try:
            return reserved_funds.parse(body, self.logger)
        except ResponseStructureError as e:
            self.logger.error(f"Cannot decode reserved funds of {account_number}: {e}")
            raise

    def ledger_entries(
        self, account: AccountBalance, turnover_filter: Optional[TurnoverFilter] = None
    ) -> List[LedgerEntry]:
        """Get reserved funds followed by settled transactions as ledger entries."""
        settled = self.turnover(account.product_core_id, account.number, turnover_filter)
        reserved = self.reserved_funds(account.number)
        return to_ledger_entries(reserved) + to_ledger_entries(settled)
