"""Private account endpoint definitions."""

from __future__ import annotations

from krakenspot.models import account as m
from krakenspot.runtime.rest import RestEndpointSpec
from krakenspot.runtime.rest.forms import fields_of

ACCOUNT_BALANCE = RestEndpointSpec(
    id="GetAccountBalance",
    method="POST",
    path="/private/Balance",
    response_model=m.GetAccountBalanceResponse,
    private=True,
)

EXTENDED_BALANCE = RestEndpointSpec(
    id="GetExtendedBalance",
    method="POST",
    path="/private/BalanceEx",
    response_model=m.GetExtendedBalanceResponse,
    private=True,
)

TRADE_BALANCE = RestEndpointSpec(
    id="GetTradeBalance",
    method="POST",
    path="/private/TradeBalance",
    response_model=m.GetTradeBalanceResponse,
    build_form=fields_of("asset"),
    private=True,
)

OPEN_ORDERS = RestEndpointSpec(
    id="GetOpenOrders",
    method="POST",
    path="/private/OpenOrders",
    response_model=m.GetOpenOrdersResponse,
    build_form=fields_of("trades", "userref"),
    private=True,
)

CLOSED_ORDERS = RestEndpointSpec(
    id="GetClosedOrders",
    method="POST",
    path="/private/ClosedOrders",
    response_model=m.GetClosedOrdersResponse,
    build_form=fields_of(
        "trades", "userref", "start", "end", "ofs", "closetime", "consolidate_taker"
    ),
    private=True,
)

QUERY_ORDERS = RestEndpointSpec(
    id="QueryOrdersInfo",
    method="POST",
    path="/private/QueryOrders",
    response_model=m.QueryOrdersInfoResponse,
    build_form=fields_of("txid", "trades", "userref", "consolidate_taker"),
    private=True,
)

TRADES_HISTORY = RestEndpointSpec(
    id="GetTradesHistory",
    method="POST",
    path="/private/TradesHistory",
    response_model=m.GetTradesHistoryResponse,
    build_form=fields_of("trades", "type", "start", "end", "ofs", "consolidate_taker"),
    private=True,
)

QUERY_TRADES = RestEndpointSpec(
    id="QueryTradesInfo",
    method="POST",
    path="/private/QueryTrades",
    response_model=m.QueryTradesInfoResponse,
    build_form=fields_of("txid", "trades"),
    private=True,
)

OPEN_POSITIONS = RestEndpointSpec(
    id="GetOpenPositions",
    method="POST",
    path="/private/OpenPositions",
    response_model=m.GetOpenPositionsResponse,
    build_form=fields_of("txid", "docalcs"),
    private=True,
)

LEDGERS = RestEndpointSpec(
    id="GetLedgersInfo",
    method="POST",
    path="/private/Ledgers",
    response_model=m.GetLedgersInfoResponse,
    build_form=fields_of("asset", "aclass", "type", "start", "end", "ofs", "without_count"),
    private=True,
)

QUERY_LEDGERS = RestEndpointSpec(
    id="QueryLedgers",
    method="POST",
    path="/private/QueryLedgers",
    response_model=m.QueryLedgersResponse,
    build_form=fields_of("id", "trades"),
    private=True,
)

TRADE_VOLUME = RestEndpointSpec(
    id="GetTradeVolume",
    method="POST",
    path="/private/TradeVolume",
    response_model=m.GetTradeVolumeResponse,
    build_form=fields_of("pair"),
    private=True,
)

REQUEST_EXPORT_REPORT = RestEndpointSpec(
    id="RequestExportReport",
    method="POST",
    path="/private/AddExport",
    response_model=m.RequestExportReportResponse,
    build_form=fields_of("report", "description", "format", "fields", "starttm", "endtm"),
    private=True,
)

EXPORT_REPORT_STATUS = RestEndpointSpec(
    id="GetExportReportStatus",
    method="POST",
    path="/private/ExportStatus",
    response_model=m.GetExportReportStatusResponse,
    build_form=fields_of("report"),
    private=True,
)

# Replies with a zip archive; the JSON model only covers error replies
RETRIEVE_DATA_EXPORT = RestEndpointSpec(
    id="RetrieveDataExport",
    method="POST",
    path="/private/RetrieveExport",
    response_model=m.RetrieveDataExportResponse,
    build_form=fields_of("id"),
    private=True,
)

DELETE_EXPORT_REPORT = RestEndpointSpec(
    id="DeleteExportReport",
    method="POST",
    path="/private/RemoveExport",
    response_model=m.DeleteExportReportResponse,
    build_form=fields_of("id", "type"),
    private=True,
)

ENDPOINTS = [
    ACCOUNT_BALANCE,
    EXTENDED_BALANCE,
    TRADE_BALANCE,
    OPEN_ORDERS,
    CLOSED_ORDERS,
    QUERY_ORDERS,
    TRADES_HISTORY,
    QUERY_TRADES,
    OPEN_POSITIONS,
    LEDGERS,
    QUERY_LEDGERS,
    TRADE_VOLUME,
    REQUEST_EXPORT_REPORT,
    EXPORT_REPORT_STATUS,
    RETRIEVE_DATA_EXPORT,
    DELETE_EXPORT_REPORT,
]
