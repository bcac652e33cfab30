"""Public market data endpoint definitions."""

from __future__ import annotations

from krakenspot.models.market import (
    GetAssetInfoResponse,
    GetOHLCDataResponse,
    GetOrderBookResponse,
    GetRecentSpreadsResponse,
    GetRecentTradesResponse,
    GetServerTimeResponse,
    GetSystemStatusResponse,
    GetTickerInformationResponse,
    GetTradableAssetPairsResponse,
)
from krakenspot.runtime.rest import RestEndpointSpec
from krakenspot.runtime.rest.forms import fields_of

SERVER_TIME = RestEndpointSpec(
    id="GetServerTime",
    method="GET",
    path="/public/Time",
    response_model=GetServerTimeResponse,
)

SYSTEM_STATUS = RestEndpointSpec(
    id="GetSystemStatus",
    method="GET",
    path="/public/SystemStatus",
    response_model=GetSystemStatusResponse,
)

ASSET_INFO = RestEndpointSpec(
    id="GetAssetInfo",
    method="GET",
    path="/public/Assets",
    response_model=GetAssetInfoResponse,
    build_query=fields_of("asset", "aclass"),
)

TRADABLE_ASSET_PAIRS = RestEndpointSpec(
    id="GetTradableAssetPairs",
    method="GET",
    path="/public/AssetPairs",
    response_model=GetTradableAssetPairsResponse,
    build_query=fields_of("pair", "info"),
)

TICKER_INFORMATION = RestEndpointSpec(
    id="GetTickerInformation",
    method="GET",
    path="/public/Ticker",
    response_model=GetTickerInformationResponse,
    build_query=fields_of("pair"),
)

# Kraken returns at most 720 candles per call regardless of `since`
OHLC_DATA = RestEndpointSpec(
    id="GetOHLCData",
    method="GET",
    path="/public/OHLC",
    response_model=GetOHLCDataResponse,
    build_query=fields_of("pair", "interval", "since"),
)

ORDER_BOOK = RestEndpointSpec(
    id="GetOrderBook",
    method="GET",
    path="/public/Depth",
    response_model=GetOrderBookResponse,
    build_query=fields_of("pair", "count"),
)

RECENT_TRADES = RestEndpointSpec(
    id="GetRecentTrades",
    method="GET",
    path="/public/Trades",
    response_model=GetRecentTradesResponse,
    build_query=fields_of("pair", "since", "count"),
)

RECENT_SPREADS = RestEndpointSpec(
    id="GetRecentSpreads",
    method="GET",
    path="/public/Spread",
    response_model=GetRecentSpreadsResponse,
    build_query=fields_of("pair", "since"),
)

ENDPOINTS = [
    SERVER_TIME,
    SYSTEM_STATUS,
    ASSET_INFO,
    TRADABLE_ASSET_PAIRS,
    TICKER_INFORMATION,
    OHLC_DATA,
    ORDER_BOOK,
    RECENT_TRADES,
    RECENT_SPREADS,
]
