"""Kraken spot REST connector."""

from .nonce import NonceGenerator
from .provider import KrakenSpotRESTConnector

__all__ = ["KrakenSpotRESTConnector", "NonceGenerator"]
