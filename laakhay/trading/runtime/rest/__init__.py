"""REST runtime abstractions."""

from .errors import ErrorDecoder, decode_error_body
from .http_client import HTTPClient, HTTPResponse
from .invoker import RequestInvoker
from .signer import RequestSigner, generate_signature, timestamp_ms

__all__ = [
    "ErrorDecoder",
    "HTTPClient",
    "HTTPResponse",
    "RequestInvoker",
    "RequestSigner",
    "decode_error_body",
    "generate_signature",
    "timestamp_ms",
]
