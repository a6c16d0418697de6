"""Error hierarchy for the Figma REST client."""
from __future__ import annotations

from typing import Any


class TransportError(Exception):
    """Base error for everything raised while talking to the Figma API."""

    def __init__(
        self,
        message: str,
        *,
        retryable: bool = False,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.retryable = retryable
        self.cause = cause


class APIError(TransportError):
    """The API answered with a non-2xx status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int | None = None,
        retryable: bool = False,
        retry_after: float | None = None,
        raw: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message, retryable=retryable, cause=cause)
        self.status_code = status_code
        self.retry_after = retry_after
        self.raw = raw


# ---------------------------------------------------------------------------
# Status specific errors
# ---------------------------------------------------------------------------


class InvalidRequestError(APIError):
    """The request was malformed (bad file key, bad node ids)."""


class AuthenticationError(APIError):
    """The access token is missing or invalid."""


class AccessDeniedError(APIError):
    """The token has no access to the requested file."""


class NotFoundError(APIError):
    """The file or resource does not exist."""


class RateLimitError(APIError):
    """Too many requests."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)


class ServerError(APIError):
    """Figma returned a 5xx."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        kwargs.setdefault("retryable", True)
        super().__init__(message, **kwargs)


# ---------------------------------------------------------------------------
# Transport level errors
# ---------------------------------------------------------------------------


class RequestTimeoutError(TransportError):
    """A request timed out."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message, retryable=True, cause=cause)


class NetworkError(TransportError):
    """The connection could not be established."""

    def __init__(self, message: str, *, cause: Exception | None = None) -> None:
        super().__init__(message, retryable=True, cause=cause)


class ResponseFormatError(TransportError):
    """The response body did not have the expected shape."""


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------


def error_from_status_code(
    status_code: int,
    message: str,
    *,
    raw: dict[str, Any] | None = None,
    retry_after: float | None = None,
) -> APIError:
    """Map an HTTP status code to the matching error type."""
    common = dict(status_code=status_code, raw=raw, retry_after=retry_after)

    if status_code == 400:
        return InvalidRequestError(message, **common)
    if status_code == 401:
        return AuthenticationError(message, **common)
    if status_code == 403:
        # Figma answers 403 "Invalid token" for a bad personal access token
        if "token" in message.lower():
            return AuthenticationError(message, **common)
        return AccessDeniedError(message, **common)
    if status_code == 404:
        return NotFoundError(message, **common)
    if status_code == 429:
        return RateLimitError(message, **common)
    if 500 <= status_code <= 599:
        return ServerError(message, **common)

    return APIError(message, retryable=False, **common)
