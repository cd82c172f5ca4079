"""Order and trade updates pushed on the user-data stream.

Both order-state changes and fills arrive as ``executionReport`` events with
the same shape; the execution type (``x``) tells them apart.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class OrderOrTradeUpdatedMessage(BaseModel):
    """``executionReport`` event."""

    event_type: str = Field(..., alias="e")
    event_time: int = Field(..., alias="E")
    symbol: str = Field(..., alias="s")
    new_client_order_id: str = Field("", alias="c")
    side: str = Field("", alias="S")
    order_type: str = Field("", alias="o")
    time_in_force: str = Field("", alias="f")
    original_quantity: Decimal = Field(Decimal("0"), alias="q")
    price: Decimal = Field(Decimal("0"), alias="p")
    execution_type: str = Field(..., alias="x")
    order_status: str = Field(..., alias="X")
    reject_reason: str = Field("NONE", alias="r")
    order_id: int = Field(..., alias="i")
    last_filled_trade_quantity: Decimal = Field(Decimal("0"), alias="l")
    filled_trades_accumulated_quantity: Decimal = Field(Decimal("0"), alias="z")
    last_filled_trade_price: Decimal = Field(Decimal("0"), alias="L")
    commission: Decimal = Field(Decimal("0"), alias="n")
    asset_commissioned: str | None = Field(None, alias="N")
    trade_time: int = Field(0, alias="T")
    trade_id: int = Field(-1, alias="t")
    is_maker: bool = Field(False, alias="m")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def is_trade(self) -> bool:
        """True when this report describes a fill."""
        return self.execution_type.lower() == "trade"
