"""Runtime components: REST request pipeline and streaming sessions."""

from .rest import ErrorDecoder, HTTPClient, RequestInvoker, RequestSigner
from .ws import ReconnectPolicy, SessionRegistry, SocketSession, UserDataRouter

__all__ = [
    "ErrorDecoder",
    "HTTPClient",
    "ReconnectPolicy",
    "RequestInvoker",
    "RequestSigner",
    "SessionRegistry",
    "SocketSession",
    "UserDataRouter",
]
