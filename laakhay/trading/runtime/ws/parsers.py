"""Custom frame parsers.

Depth-diff frames carry price levels as positional ``[price, quantity, ...]``
rows, which do not map onto a model by field name, so they are parsed from
the generic JSON value instead.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from ...core.exceptions import DecodeError
from ...models.depth import DepthMessage, OrderBookOffer


def parse_depth_message(payload: Any) -> DepthMessage:
    """Convert a decoded ``depthUpdate`` frame into a DepthMessage.

    Combined-stream envelopes (``{"stream": ..., "data": {...}}``) are unwrapped.

    Raises:
        DecodeError: The frame is not a depth update
    """
    if not isinstance(payload, dict):
        raise DecodeError("Depth frame must be a JSON object", raw=payload)
    data = payload.get("data") if "stream" in payload else payload
    if not isinstance(data, dict):
        raise DecodeError("Depth frame must be a JSON object", raw=payload)

    try:
        return DepthMessage(
            event_type=data["e"],
            event_time=data["E"],
            symbol=data["s"],
            first_update_id=data.get("U"),
            update_id=data["u"],
            bids=_offers(data.get("b") or []),
            asks=_offers(data.get("a") or []),
        )
    except KeyError as e:
        raise DecodeError(f"Depth frame missing field {e}", raw=payload) from e
    except (IndexError, TypeError, ValidationError) as e:
        raise DecodeError(f"Malformed depth frame: {e}", raw=payload) from e


def _offers(rows: list[Any]) -> list[OrderBookOffer]:
    # Rows are [price, quantity] plus an ignored trailing element on older APIs
    return [OrderBookOffer(price=row[0], quantity=row[1]) for row in rows]
