#!/usr/bin/env python3
"""Print account, order and trade events for one API key.

Reads BINANCE_API_KEY / BINANCE_API_SECRET from the environment.
"""

from __future__ import annotations

import asyncio
import logging
import os

from pydantic import BaseModel

from laakhay.trading import (
    AccountUpdatedMessage,
    ApiClient,
    ApiMethod,
    OrderOrTradeUpdatedMessage,
    RemoteApiError,
)


class ListenKey(BaseModel):
    listenKey: str


def on_account(msg: AccountUpdatedMessage) -> None:
    non_zero = [b for b in msg.balances if b.total > 0]
    print(f"[account] {len(non_zero)} non-zero balances, can_trade={msg.can_trade}")


def on_trade(msg: OrderOrTradeUpdatedMessage) -> None:
    print(f"[trade] {msg.symbol} {msg.side} {msg.last_filled_trade_quantity} @ {msg.last_filled_trade_price}")


def on_order(msg: OrderOrTradeUpdatedMessage) -> None:
    print(f"[order] {msg.symbol} #{msg.order_id} {msg.execution_type} -> {msg.order_status}")


async def main() -> None:
    logging.basicConfig(level=logging.INFO)
    api_key = os.environ["BINANCE_API_KEY"]
    api_secret = os.environ["BINANCE_API_SECRET"]

    async with ApiClient(api_key, api_secret, api_url="https://api.binance.com") as client:
        try:
            account = await client.call(ApiMethod.GET, "/api/v3/account", is_signed=True)
            print(f"Account can trade: {account.get('canTrade')}")
            key = await client.call(ApiMethod.POST, "/api/v3/userDataStream", result_type=ListenKey)
        except RemoteApiError as e:
            print(f"API error {e.code}: {e.message}")
            return

        await client.connect_to_user_data_websocket(key.listenKey, on_account, on_trade, on_order)
        print("Listening for user data events, Ctrl+C to stop")
        await asyncio.Event().wait()


if __name__ == "__main__":
    asyncio.run(main())
