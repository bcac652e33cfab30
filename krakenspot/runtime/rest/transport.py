"""HTTP transport abstraction and the default aiohttp implementation."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

import aiohttp

from .request import Request


@runtime_checkable
class TransportResponse(Protocol):
    """Subset of ``aiohttp.ClientResponse`` the pipeline relies on."""

    status: int
    headers: Mapping[str, str]

    async def read(self) -> bytes: ...

    def close(self) -> None: ...


@runtime_checkable
class Transport(Protocol):
    """Sends a request and returns the response with its body unread."""

    async def send(self, request: Request, *, timeout: float | None = None) -> Any: ...

    async def close(self) -> None: ...


class AiohttpTransport:
    """Async HTTP transport backed by a lazily created ``aiohttp.ClientSession``."""

    def __init__(self, timeout: float = 30.0, session: aiohttp.ClientSession | None = None) -> None:
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session = session
        self._owns_session = session is None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
            self._owns_session = True
        return self._session

    async def send(
        self, request: Request, *, timeout: float | None = None
    ) -> aiohttp.ClientResponse:
        kwargs: dict[str, Any] = {}
        if timeout is not None:
            kwargs["timeout"] = aiohttp.ClientTimeout(total=timeout)
        return await self.session.request(
            request.method,
            request.url,
            headers=dict(request.headers),
            data=request.body,
            **kwargs,
        )

    async def close(self) -> None:
        """Close session."""
        if self._owns_session and self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> AiohttpTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
