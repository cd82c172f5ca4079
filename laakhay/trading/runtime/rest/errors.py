"""Decoding of non-success REST responses."""

from __future__ import annotations

import json
import logging
from typing import Any

from ...core.config import GATEWAY_TIMEOUT_STATUS
from ...core.exceptions import RemoteApiError, TradingError, TransportTimeout
from ...models.api_error import ApiError

logger = logging.getLogger(__name__)


def decode_error_body(body: str | bytes | None) -> ApiError:
    """Best-effort parse of an error body into an ApiError.

    Never raises: anything that is not a JSON object, or fields of the wrong
    type, fall back to ``code=0`` / ``msg=""``.
    """
    if not body:
        return ApiError()
    try:
        payload = json.loads(body)
    except (ValueError, TypeError, RecursionError):
        logger.debug("Error body is not JSON, using empty ApiError")
        return ApiError()
    if not isinstance(payload, dict):
        return ApiError()
    return ApiError(code=_as_int(payload.get("code")), msg=_as_str(payload.get("msg")))


def _as_int(value: Any) -> int:
    if value is None or isinstance(value, bool):
        return 0
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return 0


def _as_str(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)):
        return str(value)
    return ""


class ErrorDecoder:
    """Maps a non-success status and body onto the library's exceptions."""

    def __init__(self, timeout_status: int = GATEWAY_TIMEOUT_STATUS) -> None:
        self.timeout_status = timeout_status

    def decode(self, status: int, body: str | bytes | None) -> TradingError:
        if status == self.timeout_status:
            return TransportTimeout()
        return RemoteApiError(decode_error_body(body), status_code=status)
