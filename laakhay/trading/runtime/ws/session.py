"""One streaming connection, owned for its whole lifetime.

A session connects, registers itself in its SessionRegistry, and runs a
receive loop as its own asyncio task. Dropped connections are re-established
transparently under a ReconnectPolicy; the caller only hears about a terminal
close. ``close()`` is the only way to cancel a session.
"""

from __future__ import annotations

import asyncio
import contextlib
import logging
from typing import Any

import websockets
from websockets.exceptions import ConnectionClosed

from ...core.config import TransportConfig
from ...core.enums import ConnectionState
from ...core.exceptions import DecodeError, ReconnectExhausted
from ..codec import decode_as, decode_json
from .callbacks import CloseHandler, ErrorHandler, FrameParser, MessageHandler, invoke_handler
from .reconnect import ReconnectPolicy
from .registry import SessionRegistry

logger = logging.getLogger(__name__)


class _SessionAbort(Exception):
    """Ends the receive loop without reconnecting; ``cause`` goes to on_close."""

    def __init__(self, cause: BaseException) -> None:
        super().__init__(str(cause))
        self.cause = cause


class SocketSession:
    """Streaming session with decode, reconnect and registry bookkeeping.

    Each frame is decoded before ``on_message`` sees it:

    - with ``parser``: generic JSON first, then ``parser(payload)``
    - with ``message_type``: validated straight into that shape
    - otherwise: the generic JSON value

    A parser returning ``None`` drops the frame. Decode failures and handler
    exceptions go to ``on_error`` when given; without it they end the session
    and ``on_close`` receives the error.

    ``on_close`` is called once with the error that ended the session
    (``ReconnectExhausted`` when the policy gave up). It is not called for an
    explicit ``close()``. At most one in-flight callback may still land while
    ``close()`` runs.
    """

    def __init__(
        self,
        url: str,
        on_message: MessageHandler,
        *,
        on_close: CloseHandler | None = None,
        on_error: ErrorHandler | None = None,
        message_type: Any = None,
        parser: FrameParser | None = None,
        registry: SessionRegistry | None = None,
        config: TransportConfig | None = None,
    ) -> None:
        self.url = url
        self.on_message = on_message
        self.on_close = on_close
        self.on_error = on_error
        self.message_type = message_type
        self.parser = parser
        self._registry = registry
        self._conf = config or TransportConfig()
        self._policy = ReconnectPolicy(self._conf.reconnect)

        self._state = ConnectionState.DISCONNECTED
        self._ws: Any = None
        self._task: asyncio.Task[None] | None = None
        self._closing = False
        self._finalized = False

    @property
    def state(self) -> ConnectionState:
        return self._state

    @property
    def is_connected(self) -> bool:
        return self._state is ConnectionState.CONNECTED

    @property
    def policy(self) -> ReconnectPolicy:
        return self._policy

    async def _connect(self) -> Any:
        return await websockets.connect(self.url, **self._conf.connect_kwargs())

    async def open(self) -> SocketSession:
        """Connect, register, and start the receive loop.

        Raises:
            ConnectionError: The first connection could not be established
            RuntimeError: The session was opened before
        """
        if self._state is not ConnectionState.DISCONNECTED:
            raise RuntimeError(f"Session for {self.url} was already opened")

        self._state = ConnectionState.CONNECTING
        try:
            self._ws = await self._connect()
        except asyncio.CancelledError:
            self._state = ConnectionState.CLOSED
            raise
        except Exception as e:
            self._state = ConnectionState.CLOSED
            raise ConnectionError(f"Failed to connect to {self.url}: {e}") from e
        if self._closing:
            await self._release_transport()
            raise ConnectionError(f"Session for {self.url} was closed while connecting")

        self._state = ConnectionState.CONNECTED
        self._policy.record_connected()
        if self._registry is not None:
            self._registry.add(self)
        self._task = asyncio.create_task(self._run(), name=f"ws-session:{self.url}")
        logger.debug(f"WebSocket connected: {self.url}")
        return self

    async def close(self) -> None:
        """Shut the session down; no-op when already closed or closing."""
        if self._closing or self._state is ConnectionState.CLOSED:
            return
        self._closing = True
        logger.debug(f"Closing WebSocket {self.url}")

        task = self._task
        if task is None:
            await self._finalize(None, notify=False)
            return
        if task is asyncio.current_task():
            # Called from a handler: the loop stops after the handler returns
            return
        if not task.done():
            if not self._finalized:
                task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
        await self._finalize(None, notify=False)

    async def wait_closed(self) -> None:
        """Block until the receive loop has finished."""
        if self._task is not None:
            await asyncio.wait({self._task})

    async def _run(self) -> None:
        reason: BaseException | None = None
        try:
            while not self._closing:
                try:
                    await self._receive_loop()
                    if self._closing:
                        break
                    logger.warning(f"WebSocket {self.url} closed by server, reconnecting")
                except _SessionAbort as e:
                    reason = e.cause
                    logger.error(f"WebSocket {self.url} stopped: {e.cause}")
                    break
                except ConnectionClosed as e:
                    if self._closing:
                        break
                    logger.warning(f"WebSocket {self.url} connection closed ({e}), reconnecting")
                except asyncio.CancelledError:
                    raise
                except Exception as e:
                    if self._closing:
                        break
                    logger.error(f"WebSocket {self.url} error: {e}")

                if not await self._reconnect():
                    if not self._closing:
                        reason = ReconnectExhausted(self.url, self._policy.config.max_attempts)
                        logger.error(str(reason))
                    break
        finally:
            await self._finalize(reason, notify=not self._closing)

    async def _receive_loop(self) -> None:
        async for raw in self._ws:
            if self._closing:
                return
            try:
                value = self._decode(raw)
            except DecodeError as e:
                await self._report(e)
                if self._closing:
                    return
                continue
            if value is None:
                continue
            try:
                await invoke_handler(self.on_message, value)
            except asyncio.CancelledError:
                raise
            except Exception as e:
                await self._report(e)
            if self._closing:
                return

    def _decode(self, raw: str | bytes) -> Any:
        if self.parser is not None:
            payload = decode_json(raw)
            try:
                return self.parser(payload)
            except DecodeError:
                raise
            except Exception as e:
                raise DecodeError(f"Could not parse frame: {e}", raw=raw) from e
        if self.message_type is not None:
            return decode_as(raw, self.message_type)
        return decode_json(raw)

    async def _report(self, error: Exception) -> None:
        if self.on_error is None:
            raise _SessionAbort(error)
        try:
            await invoke_handler(self.on_error, error)
        except asyncio.CancelledError:
            raise
        except Exception as e:
            raise _SessionAbort(e) from error

    async def _reconnect(self) -> bool:
        self._state = ConnectionState.RECONNECTING
        await self._release_transport()
        max_attempts = self._policy.config.max_attempts
        while not self._closing:
            delay = self._policy.next_delay()
            if delay is None:
                return False
            logger.warning(
                f"Reconnecting to {self.url} in {delay:.1f}s "
                f"(attempt {self._policy.attempt}/{max_attempts})"
            )
            await asyncio.sleep(delay)
            if self._closing:
                return False
            try:
                self._ws = await self._connect()
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.warning(f"Reconnect attempt {self._policy.attempt} to {self.url} failed: {e}")
                continue
            self._policy.record_connected()
            self._state = ConnectionState.CONNECTED
            logger.debug(f"WebSocket reconnected: {self.url}")
            return True
        return False

    async def _release_transport(self) -> None:
        ws, self._ws = self._ws, None
        if ws is None:
            return
        try:
            await ws.close()
        except Exception as e:  # noqa: BLE001
            logger.debug(f"Ignoring error while closing {self.url}: {e}")

    async def _finalize(self, reason: BaseException | None, *, notify: bool) -> None:
        if self._finalized:
            return
        self._finalized = True
        self._state = ConnectionState.CLOSED
        if self._registry is not None:
            self._registry.discard(self)
        await self._release_transport()
        logger.debug(f"WebSocket closed: {self.url}")
        if notify and self.on_close is not None:
            try:
                await invoke_handler(self.on_close, reason)
            except Exception:
                logger.exception(f"on_close handler for {self.url} failed")

    def __repr__(self) -> str:
        return f"SocketSession(url={self.url!r}, state={self._state.value})"
