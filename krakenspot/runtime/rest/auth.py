"""Request authorization.

Architecture:
    The pipeline calls ``Authorizer.authorize`` exactly once per forged request
    and sends whatever request it returns. Implementations sign, proxy or
    otherwise post-process requests. ``InstrumentedAuthorizer`` wraps another
    authorizer to log each call without changing its result.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
import hmac
import logging
from time import perf_counter
from typing import Protocol, runtime_checkable

from ...core.context import RequestContext
from .request import Request

logger = logging.getLogger(__name__)


@runtime_checkable
class Authorizer(Protocol):
    async def authorize(self, ctx: RequestContext, request: Request) -> Request: ...


class KrakenSignatureAuthorizer:
    """Signs private requests with ``API-Key`` and ``API-Sign`` headers.

    ``API-Sign`` is ``HMAC-SHA512(secret, path + SHA256(nonce + form body))``
    encoded in base64. Requests to public endpoints are returned unchanged.
    """

    def __init__(self, key: str, b64_secret: str) -> None:
        if not key:
            raise ValueError("API key must not be empty")
        try:
            self._secret = base64.b64decode(b64_secret, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ValueError("API secret is not valid base64") from exc
        self._key = key

    def sign(self, path: str, nonce: str, body: bytes) -> str:
        digest = hashlib.sha256(nonce.encode() + body).digest()
        mac = hmac.new(self._secret, path.encode() + digest, hashlib.sha512)
        return base64.b64encode(mac.digest()).decode()

    async def authorize(self, ctx: RequestContext, request: Request) -> Request:
        if "/public" in request.path:
            return request
        nonce = request.form().get("nonce")
        if not nonce:
            raise ValueError(f"missing nonce in request body for {request.path}")
        signature = self.sign(request.path, nonce, request.body or b"")
        return request.with_headers({"API-Key": self._key, "API-Sign": signature})


class InstrumentedAuthorizer:
    """Logs calls to a wrapped authorizer.

    Logged fields are the request path and nonce. One-time passwords, keys and
    signatures are never logged.
    """

    def __init__(self, decorated: Authorizer | None, log: logging.Logger | None = None) -> None:
        if decorated is None:
            raise ValueError("InstrumentedAuthorizer requires an authorizer to decorate")
        self.decorated = decorated
        self._log = log or logger

    async def authorize(self, ctx: RequestContext, request: Request) -> Request:
        extra = {"path": request.path, "nonce": request.form().get("nonce")}
        self._log.debug("Authorizing request", extra=extra)
        start = perf_counter()
        try:
            authorized = await self.decorated.authorize(ctx, request)
        except Exception:
            self._log.warning("Request authorization failed", extra=extra, exc_info=True)
            raise
        latency_ms = (perf_counter() - start) * 1000.0
        self._log.debug("Request authorized", extra={**extra, "latency_ms": latency_ms})
        return authorized
