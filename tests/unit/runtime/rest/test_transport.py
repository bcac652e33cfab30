"""Unit tests for AiohttpTransport.

Tests focus on session management and request delegation.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from krakenspot.runtime.rest import AiohttpTransport, Request, Transport


class TestAiohttpTransportSessionManagement:
    """Test AiohttpTransport session management."""

    def test_init(self):
        transport = AiohttpTransport(timeout=10.0)
        assert transport.timeout.total == 10.0
        assert transport._session is None

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        transport = AiohttpTransport()
        session = transport.session
        assert isinstance(session, aiohttp.ClientSession)
        assert transport._session is session
        await transport.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        transport = AiohttpTransport()
        session1 = transport.session
        await session1.close()

        session2 = transport.session
        assert session1 is not session2
        assert not session2.closed
        await transport.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        transport = AiohttpTransport()
        await transport.close()
        await transport.close()

    @pytest.mark.asyncio
    async def test_context_manager(self):
        async with AiohttpTransport() as transport:
            session = transport.session
        assert session.closed

    @pytest.mark.asyncio
    async def test_borrowed_session_is_not_closed(self):
        session = MagicMock(spec=aiohttp.ClientSession)
        session.closed = False
        session.close = AsyncMock()
        transport = AiohttpTransport(session=session)

        await transport.close()

        session.close.assert_not_called()

    def test_satisfies_protocol(self):
        assert isinstance(AiohttpTransport(), Transport)


class TestAiohttpTransportSend:
    """Test request delegation to aiohttp."""

    @pytest.mark.asyncio
    async def test_send_delegates_request(self):
        response = MagicMock()
        session = MagicMock(spec=aiohttp.ClientSession)
        session.closed = False
        session.request = AsyncMock(return_value=response)
        transport = AiohttpTransport(session=session)
        request = Request(
            method="POST",
            url="https://api.kraken.com/0/private/Balance",
            headers={"User-Agent": "a"},
            body=b"nonce=1",
        )

        result = await transport.send(request, timeout=5.0)

        assert result is response
        args, kwargs = session.request.call_args
        assert args == ("POST", "https://api.kraken.com/0/private/Balance")
        assert kwargs["headers"] == {"User-Agent": "a"}
        assert kwargs["data"] == b"nonce=1"
        assert kwargs["timeout"].total == 5.0

    @pytest.mark.asyncio
    async def test_send_without_timeout_uses_session_default(self):
        session = MagicMock(spec=aiohttp.ClientSession)
        session.closed = False
        session.request = AsyncMock(return_value=MagicMock())
        transport = AiohttpTransport(session=session)

        await transport.send(Request(method="GET", url="https://api.kraken.com/0/public/Time"))

        assert "timeout" not in session.request.call_args.kwargs
