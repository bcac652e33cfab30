"""Request pipeline: forge then execute.

Architecture:
    ``forge`` builds an immutable ``Request`` and hands it to the configured
    authorizer. ``execute`` sends it through the transport and dispatches on the
    response media type. Every failure mode maps onto its own ``PipelineError``
    subclass and nothing is retried.

Design Decisions:
    - Only status 200 is decoded. Other statuses raise ``StatusError`` with the
      raw response and the body left unread.
    - JSON numbers are decoded as ``Decimal`` so amounts keep their wire text.
    - ``application/octet-stream`` and ``application/zip`` bodies are left open.
      The caller owns the response and must close it.
    - Pipeline success says nothing about the envelope ``error`` list, which the
      caller inspects separately.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Generic, TypeVar
from urllib.parse import urlencode, urlsplit

from pydantic import BaseModel, ValidationError

from ...core.context import RequestContext
from ...core.enums import MediaType
from ...core.exceptions import (
    CancellationError,
    DecodeError,
    ForgeError,
    StatusError,
    TransportError,
    UnsupportedContentTypeError,
)
from .auth import Authorizer
from .request import Request, parse_media_type
from .transport import Transport

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

QueryParams = Mapping[str, str] | Sequence[tuple[str, str]]


@dataclass(frozen=True)
class RestReply(Generic[M]):
    """Decoded result together with the raw transport response.

    ``result`` is ``None`` for streamed media types. Use the reply as an async
    context manager to release the response of a streamed download.
    """

    result: M | None
    response: Any
    media_type: MediaType

    @property
    def is_stream(self) -> bool:
        return self.media_type.is_stream

    @property
    def stream(self) -> Any:
        """Readable body of a streamed response (``aiohttp.StreamReader``)."""
        return self.response.content

    def close(self) -> None:
        self.response.close()

    async def __aenter__(self) -> RestReply[M]:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def decode_json(body: bytes, receiver: type[M]) -> M:
    """Decode a JSON body into ``receiver`` keeping numeric text intact."""
    try:
        payload = json.loads(body, parse_float=Decimal)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise DecodeError(f"invalid JSON payload: {exc}") from exc
    try:
        return receiver.model_validate(payload)
    except ValidationError as exc:
        raise DecodeError(f"payload does not match {receiver.__name__}: {exc}") from exc


def _check_header(name: str, value: str) -> None:
    if any(c in value for c in "\r\n\0") or any(c in name for c in "\r\n\0: "):
        raise ForgeError(f"invalid header {name!r}")


class RestPipeline:
    """Builds, authorizes, sends and decodes REST requests."""

    def __init__(
        self,
        transport: Transport,
        *,
        base_url: str,
        user_agent: str,
        authorizer: Authorizer | None = None,
    ) -> None:
        self._transport = transport
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._authorizer = authorizer

    @property
    def transport(self) -> Transport:
        return self._transport

    @property
    def authorizer(self) -> Authorizer | None:
        return self._authorizer

    async def forge(
        self,
        path: str,
        method: str,
        *,
        content_type: str | None = None,
        query: QueryParams | None = None,
        body: bytes | str | None = None,
        ctx: RequestContext | None = None,
        operation: str | None = None,
    ) -> Request:
        """Build the request and run it through the authorizer.

        Raises:
            ForgeError: malformed URL or header, or the authorizer failed
        """
        if ctx is None:
            ctx = RequestContext()
        url = f"{self._base_url}{path}"
        if query:
            url = f"{url}?{urlencode(query)}"
        parts = urlsplit(url)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ForgeError(f"invalid request URL {url!r}", operation=operation)

        headers = {"User-Agent": self._user_agent}
        if content_type:
            headers["Content-Type"] = content_type
        try:
            for name, value in headers.items():
                _check_header(name, value)
        except ForgeError as exc:
            exc.operation = operation
            raise

        if isinstance(body, str):
            body = body.encode()
        request = Request(method=method.upper(), url=url, headers=headers, body=body)
        logger.debug(
            "Request forged",
            extra={"operation": operation, "method": request.method, "path": request.path},
        )
        if self._authorizer is None:
            return request
        try:
            return await self._authorizer.authorize(ctx, request)
        except Exception as exc:
            raise ForgeError(f"failed to authorize request: {exc}", operation=operation) from exc

    async def execute(
        self,
        request: Request,
        receiver: type[M],
        *,
        ctx: RequestContext | None = None,
        operation: str | None = None,
    ) -> RestReply[M]:
        """Send the request and decode the response into ``receiver``.

        Raises:
            CancellationError: ``ctx`` was already done, nothing was sent
            TransportError: no response was received
            StatusError: status other than 200, body unread
            UnsupportedContentTypeError: unknown media type, body closed
            DecodeError: JSON body could not be decoded into ``receiver``
        """
        if ctx is None:
            ctx = RequestContext()
        if ctx.done():
            raise CancellationError(ctx.reason() or "context done", operation=operation)

        try:
            response = await self._transport.send(request, timeout=ctx.remaining())
        except Exception as exc:
            raise TransportError(f"request failed: {exc}", operation=operation) from exc

        content_type = response.headers.get("Content-Type")
        logger.debug(
            "Response received",
            extra={"operation": operation, "status": response.status, "content_type": content_type},
        )
        if response.status != 200:
            raise StatusError(
                f"unexpected HTTP status {response.status}",
                response.status,
                operation=operation,
                response=response,
            )

        media_type = parse_media_type(content_type)
        if media_type is MediaType.JSON:
            try:
                body = await response.read()
            except Exception as exc:
                raise TransportError(
                    f"failed to read response body: {exc}", operation=operation, response=response
                ) from exc
            finally:
                response.close()
            try:
                result = decode_json(body, receiver)
            except DecodeError as exc:
                exc.operation = operation
                exc.response = response
                raise
            return RestReply(result=result, response=response, media_type=media_type)

        if media_type is not None and media_type.is_stream:
            return RestReply(result=None, response=response, media_type=media_type)

        response.close()
        raise UnsupportedContentTypeError(
            content_type or "", operation=operation, response=response
        )
