"""Bounded reconnect backoff for streaming sessions.

State machine::

    CONNECTED --drop--> RECONNECTING(1) --fail--> RECONNECTING(2) ...
        ^                     |                          |
        +------ success ------+                          +--> EXHAUSTED

Delays grow geometrically from ``initial_delay`` and are capped at
``max_delay``, so they never decrease as the attempt number grows. Once the
attempt number exceeds ``max_attempts`` the policy is exhausted for good.
"""

from __future__ import annotations

import logging

from ...core.config import ReconnectConfig
from ...core.enums import ReconnectState

logger = logging.getLogger(__name__)


class ReconnectPolicy:
    """Per-session reconnect state; the config is shared between sessions."""

    def __init__(self, config: ReconnectConfig | None = None) -> None:
        self.config = config or ReconnectConfig()
        self._attempt = 0
        self._state = ReconnectState.CONNECTED

    @property
    def attempt(self) -> int:
        return self._attempt

    @property
    def state(self) -> ReconnectState:
        return self._state

    @property
    def exhausted(self) -> bool:
        return self._state is ReconnectState.EXHAUSTED

    def delay_for(self, attempt: int) -> float:
        """Delay before reconnect attempt number ``attempt`` (1-based)."""
        conf = self.config
        if attempt <= 1:
            return conf.initial_delay
        # Cap the exponent so huge attempt counts do not overflow
        exponent = min(attempt - 1, 64)
        delay = conf.initial_delay * conf.backoff_factor**exponent
        return max(conf.initial_delay, min(delay, conf.max_delay))

    def next_delay(self) -> float | None:
        """Advance to the next attempt and return its delay.

        Returns ``None`` when the attempt ceiling has been passed; the policy
        then stays exhausted.
        """
        if self.exhausted:
            return None
        self._attempt += 1
        if self._attempt > self.config.max_attempts:
            self._state = ReconnectState.EXHAUSTED
            logger.debug(f"Reconnect attempts exhausted after {self.config.max_attempts}")
            return None
        self._state = ReconnectState.RECONNECTING
        return self.delay_for(self._attempt)

    def record_connected(self) -> None:
        """A connection succeeded: back to CONNECTED with the counter at zero."""
        if self.exhausted:
            return
        self._attempt = 0
        self._state = ReconnectState.CONNECTED
