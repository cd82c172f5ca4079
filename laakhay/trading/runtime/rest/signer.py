"""HMAC request signing.

Signed calls carry ``timestamp`` and ``signature`` as their last two query
parameters. The signature is the hex HMAC-SHA256 of every parameter before it,
``timestamp`` included, keyed with the API secret.
"""

from __future__ import annotations

import hashlib
import hmac
import time


def generate_signature(secret: str, parameters: str) -> str:
    """Sign the literal UTF-8 bytes of ``parameters`` with ``secret``."""
    return hmac.new(
        secret.encode("utf-8"), parameters.encode("utf-8"), hashlib.sha256
    ).hexdigest()


def timestamp_ms() -> int:
    """Current UTC time in milliseconds since the epoch."""
    return int(time.time() * 1000)


class RequestSigner:
    """Appends ``timestamp``/``signature`` to a query string."""

    def __init__(self, secret: str) -> None:
        self._secret = secret

    def sign(self, parameters: str) -> str:
        if not self._secret:
            raise ValueError("API secret is required for signed requests")
        return generate_signature(self._secret, parameters)

    def append_signature(self, parameters: str | None, timestamp: int) -> str:
        """Return ``parameters`` with timestamp and signature appended.

        Args:
            parameters: Raw ``key=value&...`` string, may be empty
            timestamp: Epoch milliseconds to embed

        Returns:
            ``<parameters>&timestamp=<t>&signature=<sig>`` (no leading ``&``
            when ``parameters`` is empty)
        """
        params = parameters if parameters and parameters.strip() else ""
        params += ("&timestamp=" if params else "timestamp=") + str(timestamp)
        return f"{params}&signature={self.sign(params)}"
