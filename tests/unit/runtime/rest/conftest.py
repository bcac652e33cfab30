"""Shared fixtures for pipeline tests."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from krakenspot.runtime.rest import RestPipeline, Transport


def _make_response(status: int = 200, content_type: str | None = "application/json", body: bytes = b""):
    """Build a mock aiohttp response."""
    response = MagicMock()
    response.status = status
    response.headers = {"Content-Type": content_type} if content_type else {}
    response.read = AsyncMock(return_value=body)
    response.close = MagicMock()
    return response


@pytest.fixture
def make_response():
    """Factory for mock aiohttp responses."""
    return _make_response


@pytest.fixture
def mock_transport():
    """Create mock transport returning a JSON server time reply."""
    transport = MagicMock(spec=Transport)
    transport.send = AsyncMock(
        return_value=_make_response(body=b'{"error": [], "result": {"unixtime": 1688669448}}')
    )
    transport.close = AsyncMock()
    return transport


@pytest.fixture
def pipeline(mock_transport):
    """Create pipeline without authorizer."""
    return RestPipeline(mock_transport, base_url="https://api.kraken.com/0", user_agent="test-agent")
