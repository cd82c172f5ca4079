"""Shared fixtures for unit tests."""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

import pytest

from laakhay.trading.core.config import ReconnectConfig, TransportConfig


class FakeWebSocket:
    """Stand-in for a websockets connection.

    Yields ``frames`` in order, then either raises ``error``, blocks until
    closed (``hold=True``), or ends like a clean server close.
    """

    def __init__(
        self,
        frames: Iterable[str] = (),
        *,
        error: BaseException | None = None,
        hold: bool = False,
    ) -> None:
        self._frames = list(frames)
        self._error = error
        self._hold = hold
        self._released = asyncio.Event()
        self.closed = False
        self.close_calls = 0

    def __aiter__(self):
        return self

    async def __anext__(self) -> str:
        if self._frames:
            return self._frames.pop(0)
        if self._error is not None:
            raise self._error
        if self._hold and not self.closed:
            await self._released.wait()
        raise StopAsyncIteration

    async def close(self) -> None:
        self.close_calls += 1
        self.closed = True
        self._released.set()


@pytest.fixture
def fake_ws():
    """Factory for FakeWebSocket instances."""
    return FakeWebSocket


@pytest.fixture
def fast_transport() -> TransportConfig:
    """Transport config with millisecond reconnect delays."""
    return TransportConfig(
        reconnect=ReconnectConfig(initial_delay=0.001, max_delay=0.004, max_attempts=2)
    )
