"""Fan-out of the multiplexed user-data stream.

One connection carries account snapshots, order updates and trade fills. Each
frame is decoded in two phases: the generic JSON is inspected for the event
type ``e``, then validated into the model that value selects. Unknown event
types are skipped so new server-side events do not break old clients.
"""

from __future__ import annotations

import logging
from typing import Any

from ...core.exceptions import DecodeError
from ...models.account import AccountUpdatedMessage
from ...models.events import AccountSnapshot, OrderUpdate, TradeUpdate, UserDataEvent
from ...models.order import OrderOrTradeUpdatedMessage
from ..codec import validate_as
from .callbacks import MessageHandler, invoke_handler

logger = logging.getLogger(__name__)

ACCOUNT_EVENT = "outboundAccountInfo"
EXECUTION_EVENT = "executionReport"
TRADE_EXECUTION_TYPE = "trade"


class UserDataRouter:
    """Routes user-data events to account, trade and order handlers.

    Plug into a SocketSession with ``parser=router.decode`` and
    ``on_message=router.dispatch``.
    """

    def __init__(
        self,
        account_handler: MessageHandler,
        trade_handler: MessageHandler,
        order_handler: MessageHandler,
    ) -> None:
        self.account_handler = account_handler
        self.trade_handler = trade_handler
        self.order_handler = order_handler

    def decode(self, payload: Any) -> UserDataEvent | None:
        """Turn a generic JSON frame into a typed event, or None to skip it."""
        if not isinstance(payload, dict):
            raise DecodeError("User-data frame must be a JSON object", raw=payload)

        event_type = payload.get("e")
        if event_type == ACCOUNT_EVENT:
            return AccountSnapshot(validate_as(payload, AccountUpdatedMessage))
        if event_type == EXECUTION_EVENT:
            message = validate_as(payload, OrderOrTradeUpdatedMessage)
            # Anything that is not a fill counts as an order update
            if str(payload.get("x", "")).lower() == TRADE_EXECUTION_TYPE:
                return TradeUpdate(message)
            return OrderUpdate(message)

        logger.debug(f"Ignoring user-data event {event_type!r}")
        return None

    async def dispatch(self, event: UserDataEvent) -> None:
        """Invoke the one handler matching ``event``'s variant."""
        if isinstance(event, AccountSnapshot):
            handler = self.account_handler
        elif isinstance(event, TradeUpdate):
            handler = self.trade_handler
        elif isinstance(event, OrderUpdate):
            handler = self.order_handler
        else:
            raise TypeError(f"Unsupported user-data event: {type(event).__name__}")
        await invoke_handler(handler, event.message)
