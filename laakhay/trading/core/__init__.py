"""Core components."""

from .config import (
    DEFAULT_API_URL,
    DEFAULT_WS_ENDPOINT,
    ClientConfig,
    ReconnectConfig,
    TransportConfig,
)
from .enums import ApiMethod, ConnectionState, ReconnectState
from .exceptions import (
    DecodeError,
    ReconnectExhausted,
    RemoteApiError,
    TradingError,
    TransportTimeout,
)

__all__ = [
    "ApiMethod",
    "ClientConfig",
    "ConnectionState",
    "DEFAULT_API_URL",
    "DEFAULT_WS_ENDPOINT",
    "DecodeError",
    "ReconnectConfig",
    "ReconnectExhausted",
    "ReconnectState",
    "RemoteApiError",
    "TradingError",
    "TransportConfig",
    "TransportTimeout",
]
