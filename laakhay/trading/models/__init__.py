"""Data models for REST errors and streaming messages.

All pydantic models are frozen. Stream models accept the venue's
single-letter field names as aliases and also populate by attribute name.
"""

from .account import AccountUpdatedMessage, Balance
from .api_error import ApiError
from .depth import DepthMessage, OrderBookOffer
from .events import AccountSnapshot, OrderUpdate, TradeUpdate, UserDataEvent
from .order import OrderOrTradeUpdatedMessage

__all__ = [
    "AccountSnapshot",
    "AccountUpdatedMessage",
    "ApiError",
    "Balance",
    "DepthMessage",
    "OrderBookOffer",
    "OrderOrTradeUpdatedMessage",
    "OrderUpdate",
    "TradeUpdate",
    "UserDataEvent",
]
