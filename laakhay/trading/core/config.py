"""Constructor-time configuration.

Endpoint defaults match the public spot venue. Nothing here reads files or
environment variables; callers pass values explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, field

DEFAULT_API_URL = "https://www.binance.com"
DEFAULT_WS_ENDPOINT = "wss://stream.binance.com:9443/ws/"

API_KEY_HEADER = "X-MBX-APIKEY"

# Status the gateway returns when the matching engine did not answer in time
GATEWAY_TIMEOUT_STATUS = 504


@dataclass(frozen=True)
class ReconnectConfig:
    """Bounds for the streaming reconnect backoff."""

    initial_delay: float = 2.0
    max_delay: float = 4.0
    max_attempts: int = 20
    backoff_factor: float = 2.0

    def __post_init__(self) -> None:
        if self.initial_delay <= 0:
            raise ValueError("initial_delay must be positive")
        if self.max_delay < self.initial_delay:
            raise ValueError("max_delay must be >= initial_delay")
        if self.max_attempts < 0:
            raise ValueError("max_attempts must be >= 0")
        if self.backoff_factor < 1:
            raise ValueError("backoff_factor must be >= 1")


@dataclass(frozen=True)
class TransportConfig:
    """websockets.connect settings shared by every session of a client."""

    ping_interval: float | None = 20.0
    ping_timeout: float | None = 20.0
    close_timeout: float = 10.0
    max_size: int | None = None  # bytes; None = websockets default
    max_queue: int | None = 1024
    reconnect: ReconnectConfig = field(default_factory=ReconnectConfig)

    def connect_kwargs(self) -> dict[str, object]:
        kwargs: dict[str, object] = {
            "ping_interval": self.ping_interval,
            "ping_timeout": self.ping_timeout,
            "close_timeout": self.close_timeout,
        }
        # Only include size/queue if set to keep library defaults
        if self.max_size is not None:
            kwargs["max_size"] = self.max_size
        if self.max_queue is not None:
            kwargs["max_queue"] = self.max_queue
        return kwargs


@dataclass(frozen=True)
class ClientConfig:
    """Settings for one ApiClient instance."""

    request_timeout: float = 30.0
    transport: TransportConfig = field(default_factory=TransportConfig)
