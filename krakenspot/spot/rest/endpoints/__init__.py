"""Kraken spot REST endpoint registry.

Each module groups the endpoint specifications of one API section.
"""

from __future__ import annotations

from krakenspot.runtime.rest import RestEndpointSpec

from . import account, earn, funding, market, trading, websocket

_ENDPOINT_REGISTRY: dict[str, RestEndpointSpec] = {
    spec.id: spec
    for module in (market, account, trading, funding, earn, websocket)
    for spec in module.ENDPOINTS
}


def get_endpoint_spec(endpoint_id: str) -> RestEndpointSpec | None:
    """Get endpoint specification by ID.

    Args:
        endpoint_id: Operation name (e.g., "GetOHLCData", "AddOrder")

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    return _ENDPOINT_REGISTRY.get(endpoint_id)


def list_endpoints() -> list[str]:
    """List all available endpoint IDs."""
    return list(_ENDPOINT_REGISTRY.keys())
