"""Custom exception hierarchy."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..models.api_error import ApiError


class TradingError(Exception):
    """Base exception for all library errors."""

    pass


class TransportTimeout(TradingError):
    """Remote gateway did not answer in time (HTTP 504).

    Carries no code/message payload; the response body is never inspected.
    """

    def __init__(self, message: str = "Api Request Timeout.") -> None:
        super().__init__(message)
        self.status_code = 504


class RemoteApiError(TradingError):
    """Remote service answered with a non-success status.

    The decoded error body is available as ``error``; ``code`` and ``message``
    fall back to ``0`` and ``""`` when the body could not be decoded.
    """

    def __init__(self, error: ApiError, status_code: int | None = None) -> None:
        super().__init__(f"Api Error Code: {error.code} Message: {error.msg}")
        self.error = error
        self.status_code = status_code

    @property
    def code(self) -> int:
        return self.error.code

    @property
    def message(self) -> str:
        return self.error.msg


class DecodeError(TradingError):
    """Response body or stream frame could not be decoded into the expected shape."""

    def __init__(self, message: str, raw: Any = None) -> None:
        super().__init__(message)
        self.raw = raw


class ReconnectExhausted(TradingError):
    """A streaming session used up its reconnect attempts and was torn down."""

    def __init__(self, url: str, attempts: int) -> None:
        super().__init__(f"Gave up reconnecting to {url} after {attempts} attempts")
        self.url = url
        self.attempts = attempts
