"""Handler types for streaming sessions.

Handlers may be plain callables or coroutine functions; awaitable results are
awaited before the next frame is processed.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable
from typing import Any

MessageHandler = Callable[[Any], Any]
CloseHandler = Callable[[BaseException | None], Any]
ErrorHandler = Callable[[Exception], Any]
FrameParser = Callable[[Any], Any]


async def invoke_handler(handler: Callable[..., Any], *args: Any) -> None:
    result = handler(*args)
    if inspect.isawaitable(result):
        await result
