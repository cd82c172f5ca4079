"""Laakhay Trading - async REST and WebSocket client for a spot trading venue."""

from .clients import ApiClient
from .core import (
    DEFAULT_API_URL,
    DEFAULT_WS_ENDPOINT,
    ApiMethod,
    ClientConfig,
    ConnectionState,
    DecodeError,
    ReconnectConfig,
    ReconnectExhausted,
    ReconnectState,
    RemoteApiError,
    TradingError,
    TransportConfig,
    TransportTimeout,
)
from .models import (
    AccountSnapshot,
    AccountUpdatedMessage,
    ApiError,
    Balance,
    DepthMessage,
    OrderBookOffer,
    OrderOrTradeUpdatedMessage,
    OrderUpdate,
    TradeUpdate,
    UserDataEvent,
)
from .runtime import (
    ErrorDecoder,
    HTTPClient,
    ReconnectPolicy,
    RequestInvoker,
    RequestSigner,
    SessionRegistry,
    SocketSession,
    UserDataRouter,
)

__version__ = "0.1.0"

__all__ = [
    "AccountSnapshot",
    "AccountUpdatedMessage",
    "ApiClient",
    "ApiError",
    "ApiMethod",
    "Balance",
    "ClientConfig",
    "ConnectionState",
    "DEFAULT_API_URL",
    "DEFAULT_WS_ENDPOINT",
    "DecodeError",
    "DepthMessage",
    "ErrorDecoder",
    "HTTPClient",
    "OrderBookOffer",
    "OrderOrTradeUpdatedMessage",
    "OrderUpdate",
    "ReconnectConfig",
    "ReconnectExhausted",
    "ReconnectPolicy",
    "ReconnectState",
    "RemoteApiError",
    "RequestInvoker",
    "RequestSigner",
    "SessionRegistry",
    "SocketSession",
    "TradeUpdate",
    "TradingError",
    "TransportConfig",
    "TransportTimeout",
    "UserDataEvent",
    "UserDataRouter",
]
