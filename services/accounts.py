"""Account queries against the portal."""

import logging
from typing import List

import grids.account_balance as account_balance
import grids.dashboard as dashboard
from models.account import AccountBalance, DashboardAccount
from models.exceptions import ResponseStructureError


class AccountService:
    """Service for listing the user's accounts."""

    def __init__(self, portal, logger: logging.Logger):
        """Initialize the account service.

        Args:
            portal: Portal session used to query grids.
            logger: Logger for decode diagnostics.
        """
        self.portal = portal
        self.logger = logger

    def dashboard_preview(self) -> List[DashboardAccount]:
        """Get the dashboard summary of every account.

        Returns:
            List of DashboardAccount objects in portal order.

        Raises:
            TransportError: If the request fails.
            ResponseStructureError: If the response does not match the grid.
        """
        body = self.portal.post_grid(dashboard.SERVICE_METHOD, dashboard.build_request())
        try:
            return dashboard.parse(body, self.logger)
        except ResponseStructureError as e:
            self.logger.error(f"Cannot decode dashboard preview: {e}")
            raise

    def all_account_balance(self) -> List[AccountBalance]:
        """Get balances of all accounts.

        Returns:
            List of AccountBalance objects in portal order.

        Raises:
            TransportError: If the request fails.
            ResponseStructureError: If the response does not match the grid.
        """
        body = self.portal.post_grid(
            account_balance.SERVICE_METHOD, account_balance.build_request()
        )
        try:
            return account_balance.parse(body, self.logger)
        except ResponseStructureError as e:
            self.logger.error(f"Cannot decode account balances: {e}")
            raise
