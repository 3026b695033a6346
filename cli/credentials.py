import getpass
import os
import sys
from typing import Optional

PASSWORD_ENV_VAR = "ROLKA_PASSWORD"


def login(services, username: Optional[str] = None) -> None:
    """Log the portal session in, asking for whatever credentials are missing.

    Args:
        services: Services container holding the portal session.
        username: Username from the command line; falls back to config, then a prompt.
    """
    username = username or services.config.username
    if not username:
        username = input("Username: ").strip()
    if not username:
        services.logger.error("Username cannot be empty.")
        sys.exit(1)

    password = os.environ.get(PASSWORD_ENV_VAR) or getpass.getpass("Password: ")
    services.portal.login(username, password)
