"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from laakhay.trading.core import (
    DecodeError,
    ReconnectExhausted,
    RemoteApiError,
    TradingError,
    TransportTimeout,
)
from laakhay.trading.models import ApiError


def test_remote_api_error_exposes_code_and_message():
    """Test RemoteApiError carries the decoded error body."""
    error = RemoteApiError(ApiError(code=-1021, msg="Timestamp outside recv window"), status_code=400)
    assert error.code == -1021
    assert error.message == "Timestamp outside recv window"
    assert error.status_code == 400
    assert str(error) == "Api Error Code: -1021 Message: Timestamp outside recv window"
    assert isinstance(error, TradingError)


def test_transport_timeout_has_no_payload():
    """Test TransportTimeout is distinct from RemoteApiError."""
    error = TransportTimeout()
    assert error.status_code == 504
    assert not isinstance(error, RemoteApiError)
    assert isinstance(error, TradingError)


def test_decode_error_keeps_raw_payload():
    """Test DecodeError keeps the offending payload."""
    error = DecodeError("bad frame", raw="not json")
    assert error.raw == "not json"
    assert isinstance(error, TradingError)


def test_reconnect_exhausted_context():
    """Test ReconnectExhausted records url and attempts."""
    error = ReconnectExhausted("wss://example.com/ws/btcusdt@trade", 20)
    assert error.url == "wss://example.com/ws/btcusdt@trade"
    assert error.attempts == 20
    assert "20" in str(error)
