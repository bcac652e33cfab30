"""Data models.

Endpoint payload models live in one module per API section (``market``,
``account``, ``trading``, ``funding``, ``earn``, ``websocket``).
"""

from .common import DecimalString, Envelope, SecurityOptions, Timestamp, WireModel
from .market_data import (
    OHLC,
    OHLCData,
    OrderBook,
    OrderBookEntry,
    RecentTrades,
    Spread,
    SpreadData,
    Trade,
)
from .trading import CloseOrder, Order
from .websocket import parse_message

__all__ = [
    "DecimalString",
    "Envelope",
    "SecurityOptions",
    "Timestamp",
    "WireModel",
    "OHLC",
    "OHLCData",
    "OrderBook",
    "OrderBookEntry",
    "RecentTrades",
    "Spread",
    "SpreadData",
    "Trade",
    "CloseOrder",
    "Order",
    "parse_message",
]
