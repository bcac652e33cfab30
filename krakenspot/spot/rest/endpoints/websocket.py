"""Websocket API token endpoint definition."""

from __future__ import annotations

from krakenspot.models.websocket import GetWebSocketsTokenResponse
from krakenspot.runtime.rest import RestEndpointSpec

WEBSOCKETS_TOKEN = RestEndpointSpec(
    id="GetWebSocketsToken",
    method="POST",
    path="/private/GetWebSocketsToken",
    response_model=GetWebSocketsTokenResponse,
    private=True,
)

ENDPOINTS = [WEBSOCKETS_TOKEN]
