"""HTTP session against the retail portal.

The portal has no public API: it is driven through the same session-based
JSON endpoints its web front end uses. Cookies live on the underlying
``requests.Session``.
"""

import logging
from typing import Optional

import requests
from argon2.low_level import Type, hash_secret_raw

from config import Config
from models.exceptions import LoginError, TransportError

LOGIN_PAGE_PATH = "/Retail/Home/Login"
LOGIN_PATH = "/Retail/Protected/Services/RetailLoginService.svc/LoginFont"
DATA_SERVICE_PATH = "/Retail/Protected/Services/DataService.svc"

_MIN_SALT_LENGTH = 8


def hash_password(username: str, password: str) -> str:
    """Hash a password the way the portal's login form does.

    Argon2i keyed on the username, NUL-padded to at least 8 bytes, returned
    as lowercase hex.
    """
    salt = username.encode("utf-8").ljust(_MIN_SALT_LENGTH, b"\0")
    digest = hash_secret_raw(
        secret=password.encode("utf-8"),
        salt=salt,
        time_cost=3,
        memory_cost=4096,
        parallelism=1,
        hash_len=32,
        type=Type.I,
    )
    return digest.hex()


class PortalSession:
    """Authenticated session with the portal.

    Args:
        config: Application configuration with portal settings.
        logger: Logger for transport failures.
        session: Optional requests session for dependency injection (testing).
    """

    def __init__(
        self,
        config: Config,
        logger: logging.Logger,
        session: Optional[requests.Session] = None,
    ):
        self.config = config
        self.logger = logger
        self.session = session or requests.Session()
        self.session.headers["User-Agent"] = config.user_agent

    def open_login_page(self) -> None:
        """Load the login page so the portal sets its session cookies."""
        self._request("GET", LOGIN_PAGE_PATH)

    def login(self, username: str, password: str) -> None:
        """Log in with username and password.

        Raises:
            LoginError: If the portal rejects the login request.
        """
        self.open_login_page()
        payload = {
            "username": username,
            "password": hash_password(username, password),
            "sessionID": 1,
        }
        try:
            self._request("POST", LOGIN_PATH, json=payload)
        except TransportError as e:
            raise LoginError(f"Login failed: {e}", e.status_code) from e
        self.logger.info(f"Logged in as {username}")

    def post_grid(self, method: str, payload: dict) -> bytes:
        """Query a data service method and return the raw response body.

        Raises:
            TransportError: On a network error or a non-2xx status.
        """
        return self._request("POST", f"{DATA_SERVICE_PATH}/{method}", json=payload).content

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = f"{self.config.base_url}{path}"
        try:
            response = self.session.request(
                method, url, timeout=self.config.timeout, **kwargs
            )
        except requests.RequestException as e:
            self.logger.error(f"Request to {path} failed: {e}")
            raise TransportError(f"Request to {path} failed: {e}") from e

        if not 200 <= response.status_code < 300:
            self.logger.error(
                f"Request to {path} returned status {response.status_code}"
            )
            raise TransportError(
                f"Unexpected status code: {response.status_code}",
                response.status_code,
            )
        return response
