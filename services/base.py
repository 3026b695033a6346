"""Base services container for dependency injection."""

from config import Config
from logger import get_logger
from services.portal import PortalSession


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject a fake portal session for testing.

    Args:
        config: Application configuration object.
        portal: Optional portal session for testing. If None, one is created
            from config.
        logger: Optional logger. If None, the application logger is used.
    """

    def __init__(self, config: Config, portal=None, logger=None):
        self.config = config
        self.logger = logger or get_logger()
        self.portal = portal or PortalSession(config, self.logger)

        # Lazy import to avoid circular dependencies
        from services.accounts import AccountService
        from services.transactions import TransactionService

        self.accounts = AccountService(self.portal, self.logger)
        self.transactions = TransactionService(self.portal, self.logger)
