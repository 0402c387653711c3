"""Errors raised or returned by the Oura client."""

from typing import Optional


class OuraError(Exception):
    """Base class for all Oura client errors."""
    pass


class HttpError(OuraError):
    """The server answered with a non-200 status.

    Returned inside a FetchResult rather than raised.
    """

    def __init__(self, status_code: int, message: str, url: Optional[str] = None):
        super().__init__(f"HTTP {status_code}: {message}")
        self.status_code = status_code
        self.message = message
        self.url = url


class AuthError(HttpError):
    """The access token was rejected (401 or 403)."""
    pass


class TransportError(OuraError):
    """The request never completed (connection, DNS or timeout failure)."""

    def __init__(self, cause: Exception):
        super().__init__(f"Request failed: {cause}")
        self.cause = cause


class DecodeError(OuraError):
    """A 200 response body did not match the expected shape."""

    def __init__(self, cause: Exception):
        super().__init__(f"Failed to decode response: {cause}")
        self.cause = cause
