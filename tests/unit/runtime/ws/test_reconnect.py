"""Unit tests for the reconnect state machine."""

from __future__ import annotations

import pytest

from laakhay.trading.core import ReconnectConfig, ReconnectState
from laakhay.trading.runtime.ws import ReconnectPolicy


class TestReconnectPolicy:
    """Test ReconnectPolicy transitions and delay bounds."""

    def test_starts_connected(self):
        policy = ReconnectPolicy()
        assert policy.state is ReconnectState.CONNECTED
        assert policy.attempt == 0

    @pytest.mark.parametrize(
        "conf",
        [
            ReconnectConfig(),
            ReconnectConfig(initial_delay=0.5, max_delay=30.0, max_attempts=50),
            ReconnectConfig(initial_delay=1.0, max_delay=1.0, max_attempts=5),
            ReconnectConfig(initial_delay=1.0, max_delay=10.0, max_attempts=8, backoff_factor=1.0),
        ],
    )
    def test_delays_bounded_and_non_decreasing(self, conf):
        policy = ReconnectPolicy(conf)
        delays = []
        while (delay := policy.next_delay()) is not None:
            delays.append(delay)

        assert len(delays) == conf.max_attempts
        assert all(conf.initial_delay <= d <= conf.max_delay for d in delays)
        assert delays == sorted(delays)

    def test_default_curve(self):
        policy = ReconnectPolicy()
        assert [policy.next_delay() for _ in range(3)] == [2.0, 4.0, 4.0]

    def test_reconnecting_state_tracks_attempt(self):
        policy = ReconnectPolicy(ReconnectConfig(max_attempts=3))
        policy.next_delay()
        policy.next_delay()
        assert policy.state is ReconnectState.RECONNECTING
        assert policy.attempt == 2

    def test_exhausted_after_max_attempts(self):
        """Test attempt max+1 exhausts the policy permanently."""
        policy = ReconnectPolicy(ReconnectConfig(max_attempts=2))
        assert policy.next_delay() is not None
        assert policy.next_delay() is not None
        assert policy.next_delay() is None
        assert policy.exhausted
        assert policy.state is ReconnectState.EXHAUSTED
        assert policy.next_delay() is None

    def test_exhausted_ignores_record_connected(self):
        policy = ReconnectPolicy(ReconnectConfig(max_attempts=0))
        assert policy.next_delay() is None
        policy.record_connected()
        assert policy.exhausted

    def test_success_resets_counter(self):
        policy = ReconnectPolicy(ReconnectConfig(max_attempts=3))
        policy.next_delay()
        policy.next_delay()
        policy.record_connected()

        assert policy.attempt == 0
        assert policy.state is ReconnectState.CONNECTED
        # Full budget is available again
        assert [policy.next_delay() is not None for _ in range(4)] == [True, True, True, False]

    def test_huge_attempt_number_capped(self):
        policy = ReconnectPolicy(ReconnectConfig(initial_delay=1.0, max_delay=8.0))
        assert policy.delay_for(10_000) == 8.0
