"""Core enumerations."""

from enum import Enum


class ApiMethod(str, Enum):
    """HTTP verbs accepted by the REST API."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"

    @classmethod
    def from_str(cls, value: "str | ApiMethod") -> "ApiMethod":
        """Normalize a verb given as text (case-insensitive) or enum member."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value.upper())
        except ValueError:
            raise ValueError(f"Unsupported HTTP method: {value}") from None


class ConnectionState(str, Enum):
    """Lifecycle states of a streaming session."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    RECONNECTING = "reconnecting"
    CLOSED = "closed"


class ReconnectState(str, Enum):
    """States of the reconnect state machine."""

    CONNECTED = "connected"
    RECONNECTING = "reconnecting"
    EXHAUSTED = "exhausted"
