"""Exceptions raised while talking to the retail portal."""

from typing import Optional


class PortalError(Exception):
    """Base exception for all portal-related errors."""

    pass


class TransportError(PortalError):
    """Raised on a network failure or a non-2xx response status."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class LoginError(TransportError):
    """Raised when the login handshake is rejected."""

    pass


class ResponseStructureError(PortalError):
    """Raised when a response does not match the expected grid shape."""

    pass


class FieldDecodeError(PortalError, ValueError):
    """Raised when a single column cannot be converted to its typed value."""

    def __init__(self, field: str, raw, reason: str = ""):
        message = f"Cannot decode {field} from {raw!r}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
        self.field = field
        self.raw = raw
