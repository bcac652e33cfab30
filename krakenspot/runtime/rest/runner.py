"""REST request runner using endpoint specs."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel

from ...core.context import RequestContext
from .forms import encode_form, encode_private_form
from .pipeline import RestPipeline, RestReply

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str  # operation name, e.g. "GetOHLCData"
    method: str  # "GET" | "POST"
    path: str
    response_model: type[BaseModel]
    build_query: Callable[[dict[str, Any]], list[tuple[str, str]]] | None = None
    build_form: Callable[[dict[str, Any]], list[tuple[str, str]]] | None = None
    private: bool = False


class RestRunner:
    """Runs endpoint specs through the pipeline.

    Private endpoints get a form body starting with ``nonce`` and, when a
    second factor is supplied, ``otp``.
    """

    def __init__(self, pipeline: RestPipeline) -> None:
        self._p = pipeline

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        params: dict[str, Any],
        nonce: int | None = None,
        otp: str | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[Any]:
        query = spec.build_query(params) if spec.build_query else None
        body: str | None = None
        content_type: str | None = None
        if spec.private:
            if nonce is None:
                raise ValueError(f"{spec.id} requires a nonce")
            fields = spec.build_form(params) if spec.build_form else []
            body = encode_private_form(nonce, otp, fields)
            content_type = FORM_CONTENT_TYPE
        elif spec.build_form:
            body = encode_form(spec.build_form(params))
            content_type = FORM_CONTENT_TYPE

        request = await self._p.forge(
            spec.path,
            spec.method,
            content_type=content_type,
            query=query,
            body=body,
            ctx=ctx,
            operation=spec.id,
        )
        return await self._p.execute(request, spec.response_model, ctx=ctx, operation=spec.id)
