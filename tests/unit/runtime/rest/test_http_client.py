"""Precise unit tests for HTTPClient.

Tests focus on session management and URL handling.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest
from yarl import URL

from laakhay.trading.runtime.rest import HTTPClient, HTTPResponse


def _mock_session(status: int = 200, body: str = "{}") -> MagicMock:
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.text = AsyncMock(return_value=body)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)

    mock_session = MagicMock()
    mock_session.closed = False  # session property checks this
    mock_session.request = MagicMock(return_value=mock_response)
    return mock_session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        client = HTTPClient(timeout=10.0, headers={"X-MBX-APIKEY": "key"})
        assert client.timeout.total == 10.0
        assert client.headers == {"X-MBX-APIKEY": "key"}
        assert client._session is None

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        client = HTTPClient()
        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        client = HTTPClient()
        await client.close()
        await client.close()  # Should not raise

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with HTTPClient() as client:
            assert client.session is not None
        assert client._session is None or client._session.closed


class TestHTTPClientRequest:
    """Test HTTPClient.request."""

    @pytest.mark.asyncio
    async def test_returns_status_and_body(self):
        client = HTTPClient()
        client._session = _mock_session(status=418, body='{"code":-1003}')

        response = await client.request("GET", "https://api.example.com/api/v3/ping")

        assert response == HTTPResponse(status=418, body='{"code":-1003}')
        assert not response.ok

    @pytest.mark.asyncio
    async def test_combines_base_url(self):
        client = HTTPClient(base_url="https://api.example.com")
        client._session = session = _mock_session()

        await client.request("GET", "/api/v3/time")

        method, target = session.request.call_args[0]
        assert method == "GET"
        assert str(target) == "https://api.example.com/api/v3/time"

    @pytest.mark.asyncio
    async def test_absolute_url_kept(self):
        client = HTTPClient(base_url="https://api.example.com")
        client._session = session = _mock_session()

        await client.request("GET", "https://other.com/test")

        target = session.request.call_args[0][1]
        assert str(target) == "https://other.com/test"

    @pytest.mark.asyncio
    async def test_query_not_reencoded(self):
        """Test the signed query reaches the wire byte-for-byte."""
        client = HTTPClient(base_url="https://api.example.com")
        client._session = session = _mock_session()
        query = "symbol=BTCUSDT&newClientOrderId=a%2Fb&timestamp=1&signature=ff"

        await client.request("POST", f"/api/v3/order?{query}")

        target = session.request.call_args[0][1]
        assert isinstance(target, URL)
        assert target.raw_query_string == query

    def test_ok_range(self):
        assert HTTPResponse(200, "").ok
        assert HTTPResponse(204, "").ok
        assert not HTTPResponse(301, "").ok
        assert not HTTPResponse(504, "").ok
