"""Unit tests for SessionRegistry."""

from __future__ import annotations

import threading
from unittest.mock import AsyncMock, MagicMock

import pytest

from laakhay.trading.runtime.ws import SessionRegistry


def _session() -> MagicMock:
    session = MagicMock()
    session.close = AsyncMock()
    return session


class TestSessionRegistry:
    """Test membership bookkeeping."""

    def test_add_and_discard(self):
        registry = SessionRegistry()
        session = _session()

        assert registry.add(session) is True
        assert session in registry
        assert len(registry) == 1

        assert registry.discard(session) is True
        assert session not in registry
        assert len(registry) == 0

    def test_add_twice_keeps_one_entry(self):
        registry = SessionRegistry()
        session = _session()
        registry.add(session)
        assert registry.add(session) is False
        assert len(registry) == 1

    def test_discard_twice_reports_once(self):
        registry = SessionRegistry()
        session = _session()
        registry.add(session)
        assert registry.discard(session) is True
        assert registry.discard(session) is False

    def test_registries_are_independent(self):
        first, second = SessionRegistry(), SessionRegistry()
        session = _session()
        first.add(session)
        assert session not in second

    def test_snapshot_is_a_copy(self):
        registry = SessionRegistry()
        registry.add(_session())
        snapshot = registry.snapshot()
        snapshot.clear()
        assert len(registry) == 1

    def test_concurrent_threads(self):
        """Test add/discard from many threads leaves exact membership."""
        registry = SessionRegistry()
        keep = [_session() for _ in range(100)]
        drop = [_session() for _ in range(100)]

        def worker(kept, dropped):
            registry.add(kept)
            registry.add(dropped)
            registry.discard(dropped)

        threads = [threading.Thread(target=worker, args=pair) for pair in zip(keep, drop)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(registry) == 100
        assert all(s in registry for s in keep)
        assert not any(s in registry for s in drop)

    @pytest.mark.asyncio
    async def test_close_all(self):
        registry = SessionRegistry()
        sessions = [_session() for _ in range(3)]
        for s in sessions:
            registry.add(s)
            s.close.side_effect = lambda s=s: registry.discard(s)

        await registry.close_all()

        for s in sessions:
            s.close.assert_awaited_once()
        assert len(registry) == 0

    @pytest.mark.asyncio
    async def test_close_all_continues_past_failures(self):
        registry = SessionRegistry()
        failing, healthy = _session(), _session()
        failing.close.side_effect = RuntimeError("boom")
        registry.add(failing)
        registry.add(healthy)

        await registry.close_all()

        healthy.close.assert_awaited_once()
