"""Shared fixtures for connector tests."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, MagicMock

import pytest

from krakenspot.runtime.rest import Transport

# Any valid 64-byte secret works; signature values are covered by the authorizer tests.
API_SECRET = "kQH5HW/8p1uGOVjbgWA7FunAmGO8lsSUXNsu3eow76sz84Q18fWxnyRzBHCd3pd5nE9qa99HAZtuZuj6F1huXg=="


def _json_response(payload: dict, status: int = 200):
    response = MagicMock()
    response.status = status
    response.headers = {"Content-Type": "application/json"}
    response.read = AsyncMock(return_value=json.dumps(payload).encode())
    response.close = MagicMock()
    return response


@pytest.fixture
def transport():
    """Mock transport. Set ``transport.send.return_value`` per test."""
    mock = MagicMock(spec=Transport)
    mock.send = AsyncMock(return_value=_json_response({"error": []}))
    mock.close = AsyncMock()
    return mock


@pytest.fixture
def sent(transport):
    """Return the last request handed to the transport."""

    def last():
        return transport.send.call_args.args[0]

    return last


@pytest.fixture
def json_response():
    """Factory for mock JSON replies."""
    return _json_response


@pytest.fixture
def api_secret():
    return API_SECRET
