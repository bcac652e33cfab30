"""Private account endpoint payloads."""

from __future__ import annotations

from typing import Any

from pydantic import Field

from .common import DecimalString, Envelope, Timestamp, WireModel


class ExtendedBalance(WireModel):
    balance: DecimalString
    credit: DecimalString | None = None
    credit_used: DecimalString | None = None
    hold_trade: DecimalString | None = None


class TradeBalance(WireModel):
    equivalent_balance: DecimalString = Field(alias="eb")
    trade_balance: DecimalString = Field(alias="tb")
    margin: DecimalString | None = Field(default=None, alias="m")
    unrealized_net_pnl: DecimalString | None = Field(default=None, alias="n")
    cost_basis: DecimalString | None = Field(default=None, alias="c")
    floating_valuation: DecimalString | None = Field(default=None, alias="v")
    equity: DecimalString | None = Field(default=None, alias="e")
    free_margin: DecimalString | None = Field(default=None, alias="mf")
    margin_level: DecimalString | None = Field(default=None, alias="ml")
    unexecuted_value: DecimalString | None = Field(default=None, alias="uv")


class OrderDescription(WireModel):
    pair: str
    type: str
    ordertype: str
    price: DecimalString
    price2: DecimalString
    leverage: str
    order: str
    close: str | None = None


class OrderInfo(WireModel):
    """Open or closed order. Fields absent from the payload decode as ``None``."""

    refid: str | None = None
    userref: int | None = None
    status: str
    reason: str | None = None
    opentm: Timestamp
    starttm: Timestamp | None = None
    expiretm: Timestamp | None = None
    closetm: Timestamp | None = None
    descr: OrderDescription
    vol: DecimalString
    vol_exec: DecimalString
    cost: DecimalString
    fee: DecimalString
    price: DecimalString
    stopprice: DecimalString | None = None
    limitprice: DecimalString | None = None
    trigger: str | None = None
    misc: str = ""
    oflags: str = ""
    trades: list[str] | None = None


class OpenOrders(WireModel):
    open: dict[str, OrderInfo] = Field(default_factory=dict)


class ClosedOrders(WireModel):
    closed: dict[str, OrderInfo] = Field(default_factory=dict)
    count: int


class TradeInfo(WireModel):
    ordertxid: str
    postxid: str | None = None
    pair: str
    time: Timestamp
    type: str
    ordertype: str
    price: DecimalString
    cost: DecimalString
    fee: DecimalString
    vol: DecimalString
    margin: DecimalString | None = None
    leverage: DecimalString | None = None
    misc: str = ""
    trade_id: int | None = None
    maker: bool | None = None
    posstatus: str | None = None
    cprice: DecimalString | None = None
    ccost: DecimalString | None = None
    cfee: DecimalString | None = None
    cvol: DecimalString | None = None
    cmargin: DecimalString | None = None
    net: DecimalString | None = None
    trades: list[str] | None = None


class TradesHistory(WireModel):
    trades: dict[str, TradeInfo] = Field(default_factory=dict)
    count: int


class PositionInfo(WireModel):
    ordertxid: str
    posstatus: str
    pair: str
    time: Timestamp
    type: str
    ordertype: str
    cost: DecimalString
    fee: DecimalString
    vol: DecimalString
    vol_closed: DecimalString
    margin: DecimalString
    value: DecimalString | None = None
    net: DecimalString | None = None
    terms: str | None = None
    rollovertm: str | None = None
    misc: str = ""
    oflags: str = ""


class LedgerEntry(WireModel):
    refid: str
    time: Timestamp
    type: str
    subtype: str = ""
    aclass: str
    asset: str
    amount: DecimalString
    fee: DecimalString
    balance: DecimalString


class Ledgers(WireModel):
    ledger: dict[str, LedgerEntry] = Field(default_factory=dict)
    count: int | None = None


class FeeTierInfo(WireModel):
    fee: DecimalString
    minfee: DecimalString | None = None
    maxfee: DecimalString | None = None
    nextfee: DecimalString | None = None
    tiervolume: DecimalString | None = None
    nextvolume: DecimalString | None = None


class TradeVolume(WireModel):
    currency: str
    volume: DecimalString
    fees: dict[str, FeeTierInfo] | None = None
    fees_maker: dict[str, FeeTierInfo] | None = None


class ExportReportId(WireModel):
    id: str


class ExportReportStatus(WireModel):
    id: str
    descr: str
    format: str
    report: str
    subtype: str | None = None
    status: str
    fields: str | None = None
    createdtm: str
    starttm: str | None = None
    completedtm: str | None = None
    datastarttm: str | None = None
    dataendtm: str | None = None
    asset: str | None = None


class DeleteExportReport(WireModel):
    delete: bool | None = None
    cancel: bool | None = None


class GetAccountBalanceResponse(Envelope[dict[str, DecimalString]]):
    pass


class GetExtendedBalanceResponse(Envelope[dict[str, ExtendedBalance]]):
    pass


class GetTradeBalanceResponse(Envelope[TradeBalance]):
    pass


class GetOpenOrdersResponse(Envelope[OpenOrders]):
    pass


class GetClosedOrdersResponse(Envelope[ClosedOrders]):
    pass


class QueryOrdersInfoResponse(Envelope[dict[str, OrderInfo]]):
    pass


class GetTradesHistoryResponse(Envelope[TradesHistory]):
    pass


class QueryTradesInfoResponse(Envelope[dict[str, TradeInfo]]):
    pass


class GetOpenPositionsResponse(Envelope[dict[str, PositionInfo]]):
    pass


class GetLedgersInfoResponse(Envelope[Ledgers]):
    pass


class QueryLedgersResponse(Envelope[dict[str, LedgerEntry]]):
    pass


class GetTradeVolumeResponse(Envelope[TradeVolume]):
    pass


class RequestExportReportResponse(Envelope[ExportReportId]):
    pass


class GetExportReportStatusResponse(Envelope[list[ExportReportStatus]]):
    pass


class DeleteExportReportResponse(Envelope[DeleteExportReport]):
    pass


class RetrieveDataExportResponse(Envelope[dict[str, Any]]):
    """Error envelope returned instead of the archive when retrieval fails."""

    pass
