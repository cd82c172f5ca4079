"""Typed user-data events.

The user-data stream multiplexes three event families over one connection.
Each decoded frame becomes exactly one variant of ``UserDataEvent``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .account import AccountUpdatedMessage
from .order import OrderOrTradeUpdatedMessage


@dataclass(frozen=True)
class AccountSnapshot:
    """Account balances and permissions (``outboundAccountInfo``)."""

    message: AccountUpdatedMessage


@dataclass(frozen=True)
class TradeUpdate:
    """Execution report whose execution type is ``TRADE``."""

    message: OrderOrTradeUpdatedMessage


@dataclass(frozen=True)
class OrderUpdate:
    """Any other execution report (new, canceled, rejected, expired, ...)."""

    message: OrderOrTradeUpdatedMessage


UserDataEvent = Union[AccountSnapshot, TradeUpdate, OrderUpdate]
