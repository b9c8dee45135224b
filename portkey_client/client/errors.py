"""Error taxonomy surfaced by every client operation.

Callers can tell configuration mistakes (fix before retrying) apart from
transport failures (safe to retry) and API-level rejections (inspect
``status_code`` and ``message``).
"""

from typing import Any


class PortkeyError(Exception):
    """Base class for all client errors."""

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message or self.__class__.__name__


class ConfigurationError(PortkeyError):
    """Invalid client configuration. Raised before any network call."""


class URLError(PortkeyError):
    """Base URL or assembled request URL could not be parsed."""


class SerializationError(PortkeyError):
    """Request body failed to encode, or response body failed to decode."""


class TransportError(PortkeyError):
    """Network, DNS, connection or timeout failure from the HTTP transport."""

    def __init__(self, message: str, *, timed_out: bool = False):
        super().__init__(message)
        self.timed_out = timed_out


class APIError(PortkeyError):
    """The gateway answered with an HTTP status >= 400."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        body: Any = None,
        response_headers: dict[str, str] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.body = body
        self.response_headers = dict(response_headers or {})

    def __str__(self) -> str:
        return f"{self.message} [status={self.status_code}]"

    @property
    def is_client_error(self) -> bool:
        return 400 <= self.status_code < 500

    @property
    def is_server_error(self) -> bool:
        return self.status_code >= 500
