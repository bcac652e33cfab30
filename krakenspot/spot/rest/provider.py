"""Kraken spot REST connector.

One coroutine per REST endpoint. Each returns a ``RestReply`` whose ``result``
is the decoded envelope and whose ``response`` is the raw aiohttp response.

Architecture:
    Endpoint specs live in the endpoint registry. ``RestRunner`` encodes their
    parameters and drives ``RestPipeline`` (forge, authorize, execute).
    Pipeline errors are raised; venue errors stay in ``reply.result.error``.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from datetime import datetime
from time import perf_counter
from typing import Any

from krakenspot.core.context import RequestContext
from krakenspot.core.enums import OHLCInterval
from krakenspot.models import account as acc
from krakenspot.models import earn as ern
from krakenspot.models import funding as fnd
from krakenspot.models import market as mkt
from krakenspot.models import trading as trd
from krakenspot.models.common import SecurityOptions
from krakenspot.models.trading import Order
from krakenspot.models.websocket import GetWebSocketsTokenResponse
from krakenspot.runtime.rest import (
    AiohttpTransport,
    Authorizer,
    InstrumentedAuthorizer,
    KrakenSignatureAuthorizer,
    RestEndpointSpec,
    RestPipeline,
    RestReply,
    RestRunner,
    Transport,
)

from ..config import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, DEFAULT_USER_AGENT
from .endpoints import account, earn, funding, get_endpoint_spec, market, trading, websocket
from .nonce import NonceGenerator


class KrakenSpotRESTConnector:
    """Typed client for the Kraken spot REST API.

    Credentials build a ``KrakenSignatureAuthorizer`` wrapped in an
    ``InstrumentedAuthorizer``. An explicit ``authorizer`` takes precedence.
    Without either, only public endpoints succeed.
    """

    def __init__(
        self,
        api_key: str | None = None,
        api_secret: str | None = None,
        *,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        authorizer: Authorizer | None = None,
        transport: Transport | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        nonce_factory: Callable[[], int] | None = None,
    ) -> None:
        if authorizer is None and api_key and api_secret:
            authorizer = InstrumentedAuthorizer(KrakenSignatureAuthorizer(api_key, api_secret))
        self._transport = transport or AiohttpTransport(timeout=timeout)
        self._pipeline = RestPipeline(
            self._transport,
            base_url=base_url,
            user_agent=user_agent,
            authorizer=authorizer,
        )
        self._runner = RestRunner(self._pipeline)
        self._nonce = nonce_factory or NonceGenerator()

    @property
    def pipeline(self) -> RestPipeline:
        return self._pipeline

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> KrakenSpotRESTConnector:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    async def fetch(
        self,
        endpoint_id: str,
        params: dict[str, Any] | None = None,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[Any]:
        """Run any registered endpoint by operation name."""
        spec = get_endpoint_spec(endpoint_id)
        if spec is None:
            raise ValueError(f"Unknown endpoint: {endpoint_id}")
        return await self._run(spec, params or {}, nonce=nonce, secopts=secopts, ctx=ctx)

    async def _run(
        self,
        spec: RestEndpointSpec,
        params: dict[str, Any],
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[Any]:
        if spec.private and nonce is None:
            nonce = self._nonce()
        otp = secopts.second_factor if secopts else None
        return await self._runner.run(spec=spec, params=params, nonce=nonce, otp=otp, ctx=ctx)

    async def fetch_health(self) -> dict[str, object]:
        """Query system status and report round-trip latency."""
        start = perf_counter()
        reply = await self.get_system_status()
        latency_ms = (perf_counter() - start) * 1000.0
        status = reply.result.result.status if reply.result and reply.result.result else None
        return {
            "exchange": "kraken",
            "status": status,
            "errors": reply.result.error if reply.result else [],
            "latency_ms": latency_ms,
            "endpoint": market.SYSTEM_STATUS.path,
        }

    # --- market data -------------------------------------------------------------

    async def get_server_time(
        self, *, ctx: RequestContext | None = None
    ) -> RestReply[mkt.GetServerTimeResponse]:
        return await self._run(market.SERVER_TIME, {}, ctx=ctx)

    async def get_system_status(
        self, *, ctx: RequestContext | None = None
    ) -> RestReply[mkt.GetSystemStatusResponse]:
        return await self._run(market.SYSTEM_STATUS, {}, ctx=ctx)

    async def get_asset_info(
        self,
        assets: Sequence[str] | None = None,
        *,
        aclass: str | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[mkt.GetAssetInfoResponse]:
        params = {"asset": list(assets) if assets else None, "aclass": aclass}
        return await self._run(market.ASSET_INFO, params, ctx=ctx)

    async def get_tradable_asset_pairs(
        self,
        pairs: Sequence[str] | None = None,
        *,
        info: str | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[mkt.GetTradableAssetPairsResponse]:
        params = {"pair": list(pairs) if pairs else None, "info": info}
        return await self._run(market.TRADABLE_ASSET_PAIRS, params, ctx=ctx)

    async def get_ticker_information(
        self, pairs: Sequence[str] | None = None, *, ctx: RequestContext | None = None
    ) -> RestReply[mkt.GetTickerInformationResponse]:
        params = {"pair": list(pairs) if pairs else None}
        return await self._run(market.TICKER_INFORMATION, params, ctx=ctx)

    async def get_ohlc_data(
        self,
        pair: str,
        *,
        interval: OHLCInterval | int | None = None,
        since: int | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[mkt.GetOHLCDataResponse]:
        params = {"pair": pair, "interval": interval, "since": since}
        return await self._run(market.OHLC_DATA, params, ctx=ctx)

    async def get_order_book(
        self, pair: str, *, count: int | None = None, ctx: RequestContext | None = None
    ) -> RestReply[mkt.GetOrderBookResponse]:
        return await self._run(market.ORDER_BOOK, {"pair": pair, "count": count}, ctx=ctx)

    async def get_recent_trades(
        self,
        pair: str,
        *,
        since: int | str | None = None,
        count: int | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[mkt.GetRecentTradesResponse]:
        params = {"pair": pair, "since": since, "count": count}
        return await self._run(market.RECENT_TRADES, params, ctx=ctx)

    async def get_recent_spreads(
        self, pair: str, *, since: int | None = None, ctx: RequestContext | None = None
    ) -> RestReply[mkt.GetRecentSpreadsResponse]:
        return await self._run(market.RECENT_SPREADS, {"pair": pair, "since": since}, ctx=ctx)

    # --- account data ------------------------------------------------------------

    async def get_account_balance(
        self,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.GetAccountBalanceResponse]:
        return await self._run(account.ACCOUNT_BALANCE, {}, nonce=nonce, secopts=secopts, ctx=ctx)

    async def get_extended_balance(
        self,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.GetExtendedBalanceResponse]:
        return await self._run(
            account.EXTENDED_BALANCE, {}, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def get_trade_balance(
        self,
        *,
        asset: str | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.GetTradeBalanceResponse]:
        return await self._run(
            account.TRADE_BALANCE, {"asset": asset}, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def get_open_orders(
        self,
        *,
        trades: bool | None = None,
        userref: int | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.GetOpenOrdersResponse]:
        params = {"trades": trades, "userref": userref}
        return await self._run(account.OPEN_ORDERS, params, nonce=nonce, secopts=secopts, ctx=ctx)

    async def get_closed_orders(
        self,
        *,
        trades: bool | None = None,
        userref: int | None = None,
        start: str | int | None = None,
        end: str | int | None = None,
        ofs: int | None = None,
        closetime: str | None = None,
        consolidate_taker: bool | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.GetClosedOrdersResponse]:
        params = {
            "trades": trades,
            "userref": userref,
            "start": start,
            "end": end,
            "ofs": ofs,
            "closetime": closetime,
            "consolidate_taker": consolidate_taker,
        }
        return await self._run(
            account.CLOSED_ORDERS, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def query_orders_info(
        self,
        txid: Sequence[str],
        *,
        trades: bool | None = None,
        userref: int | None = None,
        consolidate_taker: bool | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.QueryOrdersInfoResponse]:
        params = {
            "txid": list(txid),
            "trades": trades,
            "userref": userref,
            "consolidate_taker": consolidate_taker,
        }
        return await self._run(account.QUERY_ORDERS, params, nonce=nonce, secopts=secopts, ctx=ctx)

    async def get_trades_history(
        self,
        *,
        trades: bool | None = None,
        type: str | None = None,
        start: str | int | None = None,
        end: str | int | None = None,
        ofs: int | None = None,
        consolidate_taker: bool | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.GetTradesHistoryResponse]:
        params = {
            "trades": trades,
            "type": type,
            "start": start,
            "end": end,
            "ofs": ofs,
            "consolidate_taker": consolidate_taker,
        }
        return await self._run(
            account.TRADES_HISTORY, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def query_trades_info(
        self,
        txid: Sequence[str],
        *,
        trades: bool | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.QueryTradesInfoResponse]:
        params = {"txid": list(txid), "trades": trades}
        return await self._run(account.QUERY_TRADES, params, nonce=nonce, secopts=secopts, ctx=ctx)

    async def get_open_positions(
        self,
        *,
        txid: Sequence[str] | None = None,
        docalcs: bool | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.GetOpenPositionsResponse]:
        params = {"txid": list(txid) if txid else None, "docalcs": docalcs}
        return await self._run(
            account.OPEN_POSITIONS, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def get_ledgers_info(
        self,
        *,
        assets: Sequence[str] | None = None,
        aclass: str | None = None,
        type: str | None = None,
        start: str | int | None = None,
        end: str | int | None = None,
        ofs: int | None = None,
        without_count: bool | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.GetLedgersInfoResponse]:
        params = {
            "asset": list(assets) if assets else None,
            "aclass": aclass,
            "type": type,
            "start": start,
            "end": end,
            "ofs": ofs,
            "without_count": without_count,
        }
        return await self._run(account.LEDGERS, params, nonce=nonce, secopts=secopts, ctx=ctx)

    async def query_ledgers(
        self,
        ids: Sequence[str],
        *,
        trades: bool | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.QueryLedgersResponse]:
        params = {"id": list(ids), "trades": trades}
        return await self._run(
            account.QUERY_LEDGERS, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def get_trade_volume(
        self,
        *,
        pairs: Sequence[str] | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.GetTradeVolumeResponse]:
        params = {"pair": list(pairs) if pairs else None}
        return await self._run(account.TRADE_VOLUME, params, nonce=nonce, secopts=secopts, ctx=ctx)

    async def request_export_report(
        self,
        report: str,
        description: str,
        *,
        format: str | None = None,
        fields: Sequence[str] | None = None,
        starttm: int | None = None,
        endtm: int | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.RequestExportReportResponse]:
        params = {
            "report": report,
            "description": description,
            "format": format,
            "fields": list(fields) if fields else None,
            "starttm": starttm,
            "endtm": endtm,
        }
        return await self._run(
            account.REQUEST_EXPORT_REPORT, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def get_export_report_status(
        self,
        report: str,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.GetExportReportStatusResponse]:
        return await self._run(
            account.EXPORT_REPORT_STATUS,
            {"report": report},
            nonce=nonce,
            secopts=secopts,
            ctx=ctx,
        )

    async def retrieve_data_export(
        self,
        id: str,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.RetrieveDataExportResponse]:
        """Download an export archive.

        On success ``reply.is_stream`` is true and ``reply.stream`` is the open
        body. The caller must release it, e.g. ``async with reply: ...``.
        """
        return await self._run(
            account.RETRIEVE_DATA_EXPORT, {"id": id}, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def delete_export_report(
        self,
        id: str,
        type: str,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[acc.DeleteExportReportResponse]:
        return await self._run(
            account.DELETE_EXPORT_REPORT,
            {"id": id, "type": type},
            nonce=nonce,
            secopts=secopts,
            ctx=ctx,
        )

    # --- trading -----------------------------------------------------------------

    async def add_order(
        self,
        pair: str,
        order: Order,
        *,
        deadline: datetime | None = None,
        validate: bool | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[trd.AddOrderResponse]:
        params = {"pair": pair, "order": order, "deadline": deadline, "validate": validate}
        return await self._run(trading.ADD_ORDER, params, nonce=nonce, secopts=secopts, ctx=ctx)

    async def add_order_batch(
        self,
        pair: str,
        orders: Sequence[Order],
        *,
        deadline: datetime | None = None,
        validate: bool | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[trd.AddOrderBatchResponse]:
        params = {
            "pair": pair,
            "orders": list(orders),
            "deadline": deadline,
            "validate": validate,
        }
        return await self._run(
            trading.ADD_ORDER_BATCH, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def edit_order(
        self,
        txid: str,
        pair: str,
        *,
        userref: int | None = None,
        volume: str | None = None,
        displayvol: str | None = None,
        price: str | None = None,
        price2: str | None = None,
        oflags: Sequence[str] | None = None,
        deadline: datetime | None = None,
        cancel_response: bool | None = None,
        validate: bool | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[trd.EditOrderResponse]:
        params = {
            "txid": txid,
            "pair": pair,
            "userref": userref,
            "volume": volume,
            "displayvol": displayvol,
            "price": price,
            "price2": price2,
            "oflags": list(oflags) if oflags else None,
            "deadline": deadline,
            "cancel_response": cancel_response,
            "validate": validate,
        }
        return await self._run(trading.EDIT_ORDER, params, nonce=nonce, secopts=secopts, ctx=ctx)

    async def cancel_order(
        self,
        txid: str,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[trd.CancelOrderResponse]:
        return await self._run(
            trading.CANCEL_ORDER, {"txid": txid}, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def cancel_all_orders(
        self,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[trd.CancelAllOrdersResponse]:
        return await self._run(
            trading.CANCEL_ALL_ORDERS, {}, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def cancel_all_orders_after(
        self,
        timeout: int,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[trd.CancelAllOrdersAfterResponse]:
        return await self._run(
            trading.CANCEL_ALL_ORDERS_AFTER,
            {"timeout": timeout},
            nonce=nonce,
            secopts=secopts,
            ctx=ctx,
        )

    async def cancel_order_batch(
        self,
        orders: Sequence[str],
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[trd.CancelOrderBatchResponse]:
        return await self._run(
            trading.CANCEL_ORDER_BATCH,
            {"orders": list(orders)},
            nonce=nonce,
            secopts=secopts,
            ctx=ctx,
        )

    # --- funding -----------------------------------------------------------------

    async def get_deposit_methods(
        self,
        asset: str,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[fnd.GetDepositMethodsResponse]:
        return await self._run(
            funding.DEPOSIT_METHODS, {"asset": asset}, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def get_deposit_addresses(
        self,
        asset: str,
        method: str,
        *,
        new: bool | None = None,
        amount: str | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[fnd.GetDepositAddressesResponse]:
        params = {"asset": asset, "method": method, "new": new, "amount": amount}
        return await self._run(
            funding.DEPOSIT_ADDRESSES, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def get_status_of_recent_deposits(
        self,
        *,
        asset: str | None = None,
        method: str | None = None,
        start: str | None = None,
        end: str | None = None,
        cursor: str | None = None,
        limit: int | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[fnd.GetStatusOfRecentDepositsResponse]:
        params = {
            "asset": asset,
            "method": method,
            "start": start,
            "end": end,
            "cursor": cursor,
            "limit": limit,
        }
        return await self._run(
            funding.DEPOSIT_STATUS, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def get_withdrawal_methods(
        self,
        *,
        asset: str | None = None,
        network: str | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[fnd.GetWithdrawalMethodsResponse]:
        params = {"asset": asset, "network": network}
        return await self._run(
            funding.WITHDRAWAL_METHODS, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def get_withdrawal_addresses(
        self,
        *,
        asset: str | None = None,
        method: str | None = None,
        key: str | None = None,
        verified: bool | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[fnd.GetWithdrawalAddressesResponse]:
        params = {"asset": asset, "method": method, "key": key, "verified": verified}
        return await self._run(
            funding.WITHDRAWAL_ADDRESSES, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def get_withdrawal_information(
        self,
        asset: str,
        key: str,
        amount: str,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[fnd.GetWithdrawalInformationResponse]:
        params = {"asset": asset, "key": key, "amount": amount}
        return await self._run(
            funding.WITHDRAWAL_INFORMATION, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def withdraw_funds(
        self,
        asset: str,
        key: str,
        amount: str,
        *,
        address: str | None = None,
        max_fee: str | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[fnd.WithdrawFundsResponse]:
        params = {
            "asset": asset,
            "key": key,
            "amount": amount,
            "address": address,
            "max_fee": max_fee,
        }
        return await self._run(
            funding.WITHDRAW_FUNDS, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def get_status_of_recent_withdrawals(
        self,
        *,
        asset: str | None = None,
        method: str | None = None,
        start: str | None = None,
        end: str | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[fnd.GetStatusOfRecentWithdrawalsResponse]:
        params = {"asset": asset, "method": method, "start": start, "end": end}
        return await self._run(
            funding.WITHDRAWAL_STATUS, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def request_withdrawal_cancellation(
        self,
        asset: str,
        refid: str,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[fnd.RequestWithdrawalCancellationResponse]:
        return await self._run(
            funding.WITHDRAWAL_CANCELLATION,
            {"asset": asset, "refid": refid},
            nonce=nonce,
            secopts=secopts,
            ctx=ctx,
        )

    async def request_wallet_transfer(
        self,
        asset: str,
        from_: str,
        to: str,
        amount: str,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[fnd.RequestWalletTransferResponse]:
        params = {"asset": asset, "from_": from_, "to": to, "amount": amount}
        return await self._run(
            funding.WALLET_TRANSFER, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    # --- earn --------------------------------------------------------------------

    async def allocate_earn_funds(
        self,
        strategy_id: str,
        amount: str,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[ern.AllocateEarnFundsResponse]:
        params = {"strategy_id": strategy_id, "amount": amount}
        return await self._run(earn.ALLOCATE, params, nonce=nonce, secopts=secopts, ctx=ctx)

    async def deallocate_earn_funds(
        self,
        strategy_id: str,
        amount: str,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[ern.DeallocateEarnFundsResponse]:
        params = {"strategy_id": strategy_id, "amount": amount}
        return await self._run(earn.DEALLOCATE, params, nonce=nonce, secopts=secopts, ctx=ctx)

    async def get_allocation_status(
        self,
        strategy_id: str,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[ern.GetAllocationStatusResponse]:
        return await self._run(
            earn.ALLOCATION_STATUS,
            {"strategy_id": strategy_id},
            nonce=nonce,
            secopts=secopts,
            ctx=ctx,
        )

    async def get_deallocation_status(
        self,
        strategy_id: str,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[ern.GetDeallocationStatusResponse]:
        return await self._run(
            earn.DEALLOCATION_STATUS,
            {"strategy_id": strategy_id},
            nonce=nonce,
            secopts=secopts,
            ctx=ctx,
        )

    async def list_earn_strategies(
        self,
        *,
        ascending: bool | None = None,
        asset: str | None = None,
        cursor: str | None = None,
        limit: int | None = None,
        lock_type: Sequence[str] | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[ern.ListEarnStrategiesResponse]:
        params = {
            "ascending": ascending,
            "asset": asset,
            "cursor": cursor,
            "limit": limit,
            "lock_type": list(lock_type) if lock_type else None,
        }
        return await self._run(
            earn.LIST_STRATEGIES, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    async def list_earn_allocations(
        self,
        *,
        ascending: bool | None = None,
        converted_asset: str | None = None,
        hide_zero_allocations: bool | None = None,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[ern.ListEarnAllocationsResponse]:
        params = {
            "ascending": ascending,
            "converted_asset": converted_asset,
            "hide_zero_allocations": hide_zero_allocations,
        }
        return await self._run(
            earn.LIST_ALLOCATIONS, params, nonce=nonce, secopts=secopts, ctx=ctx
        )

    # --- websocket ---------------------------------------------------------------

    async def get_websockets_token(
        self,
        *,
        nonce: int | None = None,
        secopts: SecurityOptions | None = None,
        ctx: RequestContext | None = None,
    ) -> RestReply[GetWebSocketsTokenResponse]:
        return await self._run(
            websocket.WEBSOCKETS_TOKEN, {}, nonce=nonce, secopts=secopts, ctx=ctx
        )
