"""Runtime WebSocket helpers."""

from .callbacks import CloseHandler, ErrorHandler, FrameParser, MessageHandler
from .parsers import parse_depth_message
from .reconnect import ReconnectPolicy
from .registry import SessionRegistry
from .router import UserDataRouter
from .session import SocketSession

__all__ = [
    "CloseHandler",
    "ErrorHandler",
    "FrameParser",
    "MessageHandler",
    "ReconnectPolicy",
    "SessionRegistry",
    "SocketSession",
    "UserDataRouter",
    "parse_depth_message",
]
