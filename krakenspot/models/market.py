"""Public market endpoint payloads."""

from __future__ import annotations

from pydantic import Field

from .common import DecimalString, Envelope, WireModel
from .market_data import OHLCData, OrderBook, RecentTrades, SpreadData


class ServerTime(WireModel):
    unixtime: int
    rfc1123: str | None = None


class SystemStatus(WireModel):
    status: str
    timestamp: str


class AssetInfo(WireModel):
    aclass: str
    altname: str
    decimals: int
    display_decimals: int
    collateral_value: DecimalString | None = None
    status: str | None = None


class AssetPairInfo(WireModel):
    altname: str | None = None
    wsname: str | None = None
    aclass_base: str | None = None
    base: str | None = None
    aclass_quote: str | None = None
    quote: str | None = None
    cost_decimals: int | None = None
    pair_decimals: int | None = None
    lot_decimals: int | None = None
    lot_multiplier: int | None = None
    leverage_buy: list[int] = Field(default_factory=list)
    leverage_sell: list[int] = Field(default_factory=list)
    fees: list[list[DecimalString]] = Field(default_factory=list)
    fees_maker: list[list[DecimalString]] = Field(default_factory=list)
    fee_volume_currency: str | None = None
    margin_call: int | None = None
    margin_stop: int | None = None
    ordermin: DecimalString | None = None
    costmin: DecimalString | None = None
    tick_size: DecimalString | None = None
    status: str | None = None
    long_position_limit: int | None = None
    short_position_limit: int | None = None


class AssetTickerInfo(WireModel):
    """Ticker arrays: ask/bid ``[price, whole lot volume, lot volume]``, others ``[today, last 24h]``."""

    ask: list[DecimalString] = Field(alias="a")
    bid: list[DecimalString] = Field(alias="b")
    close: list[DecimalString] = Field(alias="c")
    volume: list[DecimalString] = Field(alias="v")
    vwap: list[DecimalString] = Field(alias="p")
    trades: list[int] = Field(alias="t")
    low: list[DecimalString] = Field(alias="l")
    high: list[DecimalString] = Field(alias="h")
    opening_price: DecimalString = Field(alias="o")

    @property
    def ask_price(self) -> str:
        return self.ask[0]

    @property
    def bid_price(self) -> str:
        return self.bid[0]

    @property
    def last_trade_price(self) -> str:
        return self.close[0]


class GetServerTimeResponse(Envelope[ServerTime]):
    pass


class GetSystemStatusResponse(Envelope[SystemStatus]):
    pass


class GetAssetInfoResponse(Envelope[dict[str, AssetInfo]]):
    pass


class GetTradableAssetPairsResponse(Envelope[dict[str, AssetPairInfo]]):
    pass


class GetTickerInformationResponse(Envelope[dict[str, AssetTickerInfo]]):
    pass


class GetOHLCDataResponse(Envelope[OHLCData]):
    pass


class GetOrderBookResponse(Envelope[OrderBook]):
    pass


class GetRecentTradesResponse(Envelope[RecentTrades]):
    pass


class GetRecentSpreadsResponse(Envelope[SpreadData]):
    pass
