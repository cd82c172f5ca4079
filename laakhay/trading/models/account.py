"""Account snapshot pushed on the user-data stream."""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field


class Balance(BaseModel):
    """Free and locked amount of one asset."""

    asset: str = Field(..., alias="a")
    free: Decimal = Field(..., alias="f")
    locked: Decimal = Field(..., alias="l")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def total(self) -> Decimal:
        return self.free + self.locked


class AccountUpdatedMessage(BaseModel):
    """``outboundAccountInfo`` event."""

    event_type: str = Field(..., alias="e")
    event_time: int = Field(..., alias="E")
    maker_commission: int = Field(0, alias="m")
    taker_commission: int = Field(0, alias="t")
    buyer_commission: int = Field(0, alias="b")
    seller_commission: int = Field(0, alias="s")
    can_trade: bool = Field(True, alias="T")
    can_withdraw: bool = Field(True, alias="W")
    can_deposit: bool = Field(True, alias="D")
    balances: list[Balance] = Field(default_factory=list, alias="B")

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    def balance(self, asset: str) -> Balance | None:
        """Return the balance entry for ``asset`` (case-insensitive), if present."""
        wanted = asset.upper()
        for entry in self.balances:
            if entry.asset.upper() == wanted:
                return entry
        return None
