"""Exception hierarchy for the Supercast client.

Every error raised by the library derives from :class:`SupercastError`.
Caller mistakes raise :class:`UsageError`; anything the HTTP layer surfaces
raises a :class:`RequestError` subclass carrying the response details.
"""

from __future__ import annotations

from typing import Any


class SupercastError(Exception):
    """Base class for all Supercast client errors."""

    pass


class UsageError(SupercastError, ValueError):
    """Raised when the library is used incorrectly by the caller."""

    pass


class RequestError(SupercastError):
    """Raised when a request to the Supercast API fails."""

    def __init__(
        self,
        message: str | None = None,
        http_body: str | None = None,
        http_status: int | None = None,
        json_body: Any | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.http_body = http_body
        self.http_status = http_status
        self.json_body = json_body
        self.code = code

    def __str__(self) -> str:
        message = self.message or "<empty message>"
        if self.http_status is not None:
            return f"({self.http_status}) {message}"
        return message

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(message={self.message!r}, "
            f"http_status={self.http_status!r}, code={self.code!r})"
        )


class APIError(RequestError):
    """Raised for server-side failures and unreadable responses."""

    pass


class APIConnectionError(RequestError):
    """Raised when the API cannot be reached (DNS, TLS, timeout, ...)."""

    pass


class AuthenticationError(RequestError):
    """Raised when no API key is available or the API rejects it."""

    pass


class PermissionDeniedError(RequestError):
    pass


class RateLimitError(RequestError):
    pass


class InvalidRequestError(RequestError):
    """Raised when a request is invalid, either locally or per the API.

    ``param`` names the offending field when it is known.
    """

    def __init__(
        self,
        message: str | None,
        param: str | None = None,
        http_body: str | None = None,
        http_status: int | None = None,
        json_body: Any | None = None,
        code: str | None = None,
    ) -> None:
        super().__init__(message, http_body, http_status, json_body, code)
        self.param = param
