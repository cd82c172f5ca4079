#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from laakhay.trading import ApiClient, DepthMessage


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Stream order book depth diffs via WebSocket")
    p.add_argument("symbol", nargs="?", default="BTCUSDT")
    p.add_argument("seconds", nargs="?", type=float, default=10.0)
    return p.parse_args()


def on_depth(msg: DepthMessage) -> None:
    bid = msg.best_bid
    ask = msg.best_ask
    print(
        f"{msg.symbol} U={msg.first_update_id} u={msg.update_id} "
        f"bids={len(msg.bids)} asks={len(msg.asks)} "
        f"best_bid={bid.price if bid else '-'} best_ask={ask.price if ask else '-'}"
    )


def on_close(reason: BaseException | None) -> None:
    print(f"Stream ended: {reason}")


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.INFO)
    print("=" * 60)
    print(f"Streaming depth diffs for {args.symbol} for {args.seconds:.0f}s")
    print("=" * 60)
    async with ApiClient("", "") as client:
        await client.connect_to_websocket(
            f"{args.symbol.lower()}@depth", on_depth, use_custom_parser=True, on_close=on_close
        )
        await asyncio.sleep(args.seconds)


if __name__ == "__main__":
    asyncio.run(main())
