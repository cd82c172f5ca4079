"""Order-book depth diff pushed on ``<symbol>@depth`` streams."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class OrderBookOffer(BaseModel):
    """One price level of a depth diff. A zero quantity removes the level."""

    price: Decimal
    quantity: Decimal = Field(..., ge=0)

    model_config = ConfigDict(frozen=True)


class DepthMessage(BaseModel):
    """``depthUpdate`` event."""

    event_type: str
    event_time: int
    symbol: str = Field(..., min_length=1)
    first_update_id: int | None = None
    update_id: int
    bids: list[OrderBookOffer] = Field(default_factory=list)
    asks: list[OrderBookOffer] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    @property
    def best_bid(self) -> OrderBookOffer | None:
        live = [b for b in self.bids if b.quantity > 0]
        return max(live, key=lambda b: b.price) if live else None

    @property
    def best_ask(self) -> OrderBookOffer | None:
        live = [a for a in self.asks if a.quantity > 0]
        return min(live, key=lambda a: a.price) if live else None
