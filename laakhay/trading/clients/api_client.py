"""High-level client tying the REST pipeline and streaming sessions together.

Each client owns its own HTTP session and SessionRegistry, so independent
clients in one process never share sockets.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from ..core.config import (
    API_KEY_HEADER,
    DEFAULT_API_URL,
    DEFAULT_WS_ENDPOINT,
    ClientConfig,
)
from ..core.enums import ApiMethod
from ..runtime.rest import HTTPClient, RequestInvoker
from ..runtime.ws import (
    CloseHandler,
    ErrorHandler,
    MessageHandler,
    SessionRegistry,
    SocketSession,
    UserDataRouter,
    parse_depth_message,
)

logger = logging.getLogger(__name__)


class ApiClient:
    """REST and WebSocket access for one API key/secret pair."""

    def __init__(
        self,
        api_key: str,
        api_secret: str,
        api_url: str = DEFAULT_API_URL,
        web_socket_endpoint: str = DEFAULT_WS_ENDPOINT,
        add_default_headers: bool = True,
        *,
        config: ClientConfig | None = None,
        registry: SessionRegistry | None = None,
        clock: Callable[[], int] | None = None,
    ) -> None:
        """Initialize client.

        Args:
            api_key: Key sent as a header on every call
            api_secret: Secret used to sign calls; never transmitted
            api_url: REST base URL
            web_socket_endpoint: WebSocket base URL; stream parameters are appended
            add_default_headers: Also send ``Accept: application/json``
            config: Timeouts and transport settings
            registry: Session registry to use instead of a private one
            clock: Epoch-millisecond clock used for request timestamps
        """
        self.api_url = api_url
        self.web_socket_endpoint = web_socket_endpoint
        self.config = config or ClientConfig()
        self._api_key = api_key

        headers = {API_KEY_HEADER: api_key}
        if add_default_headers:
            headers["Accept"] = "application/json"
        self._http = HTTPClient(base_url=api_url, timeout=self.config.request_timeout, headers=headers)
        self._invoker = RequestInvoker(self._http, api_secret, clock=clock)
        self._registry = registry if registry is not None else SessionRegistry()

    @property
    def open_sockets(self) -> SessionRegistry:
        return self._registry

    @property
    def invoker(self) -> RequestInvoker:
        return self._invoker

    async def call(
        self,
        method: ApiMethod | str,
        endpoint: str,
        is_signed: bool = False,
        parameters: str | None = None,
        *,
        result_type: Any = Any,
    ) -> Any:
        """Call an API method and decode the response into ``result_type``.

        Args:
            method: HTTP verb
            endpoint: Path relative to ``api_url`` (e.g. ``/api/v3/account``)
            is_signed: Add timestamp and signature parameters
            parameters: Raw ``key=value&...`` query string
            result_type: Shape the success body is validated into
        """
        return await self._invoker.call(
            method, endpoint, signed=is_signed, parameters=parameters, result_type=result_type
        )

    def _session(self, parameters: str, on_message: MessageHandler, **kwargs: Any) -> SocketSession:
        return SocketSession(
            f"{self.web_socket_endpoint}{parameters}",
            on_message,
            registry=self._registry,
            config=self.config.transport,
            **kwargs,
        )

    async def connect_to_websocket(
        self,
        parameters: str,
        message_handler: MessageHandler,
        *,
        message_type: Any = None,
        use_custom_parser: bool = False,
        on_close: CloseHandler | None = None,
        on_error: ErrorHandler | None = None,
    ) -> SocketSession:
        """Open a stream and deliver decoded frames to ``message_handler``.

        Args:
            parameters: Stream name(s) appended to the WebSocket endpoint
            message_handler: Receives each decoded frame
            message_type: Shape frames are validated into
            use_custom_parser: Parse frames as depth diffs into DepthMessage
            on_close: Receives the reason when the session ends on its own
            on_error: Receives decode and handler errors; the session keeps running
        """
        session = self._session(
            parameters,
            message_handler,
            message_type=message_type,
            parser=parse_depth_message if use_custom_parser else None,
            on_close=on_close,
            on_error=on_error,
        )
        return await session.open()

    async def connect_to_user_data_websocket(
        self,
        parameters: str,
        account_handler: MessageHandler,
        trade_handler: MessageHandler,
        order_handler: MessageHandler,
        *,
        on_close: CloseHandler | None = None,
        on_error: ErrorHandler | None = None,
    ) -> SocketSession:
        """Open the user-data stream (``parameters`` is usually the listen key)."""
        router = UserDataRouter(account_handler, trade_handler, order_handler)
        session = self._session(
            parameters,
            router.dispatch,
            parser=router.decode,
            on_close=on_close,
            on_error=on_error,
        )
        return await session.open()

    async def close_all_sockets(self) -> None:
        await self._registry.close_all()

    async def close(self) -> None:
        """Close every socket and the HTTP session."""
        logger.debug(f"Closing client for {self.api_url} ({len(self._registry)} open sockets)")
        await self.close_all_sockets()
        await self._http.close()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
