"""Websocket token payload and decoding of websocket API messages.

Connection handling belongs to the websocket engine. This module only turns
received frames into typed messages. Every acknowledgement exposes ``errors``
with the same meaning as the REST envelope ``error`` list: empty on success.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ..core.exceptions import DecodeError, TypeMismatchError
from .common import Envelope, WireModel


class WebSocketsToken(WireModel):
    token: str
    expires: int


class GetWebSocketsTokenResponse(Envelope[WebSocketsToken]):
    pass


class EventMessage(WireModel):
    event: str
    reqid: int | None = None


class Acknowledgement(EventMessage):
    """Reply to a request sent over the websocket."""

    status: str
    error_message: str | None = Field(default=None, alias="errorMessage")

    @property
    def errors(self) -> list[str]:
        if self.status == "error":
            return [self.error_message or "unknown error"]
        return []


class ErrorMessage(EventMessage):
    error_message: str = Field(alias="errorMessage")

    @property
    def errors(self) -> list[str]:
        return [self.error_message]


class SubscriptionDetails(WireModel):
    name: str
    depth: int | None = None
    interval: int | None = None
    maxratecount: int | None = None
    token: str | None = None


class SubscriptionStatus(Acknowledgement):
    channel_name: str | None = Field(default=None, alias="channelName")
    pair: str | None = None
    subscription: SubscriptionDetails | None = None


class AddOrderStatus(Acknowledgement):
    txid: str | None = None
    descr: str | None = None


class EditOrderStatus(Acknowledgement):
    txid: str | None = None
    originaltxid: str | None = None
    descr: str | None = None


class CancelOrderStatus(Acknowledgement):
    pass


class CancelAllStatus(Acknowledgement):
    count: int | None = None


class CancelAllOrdersAfterStatus(Acknowledgement):
    current_time: str | None = Field(default=None, alias="currentTime")
    trigger_time: str | None = Field(default=None, alias="triggerTime")


class Heartbeat(EventMessage):
    pass


class Pong(EventMessage):
    pass


class SystemStatusMessage(EventMessage):
    connection_id: int | None = Field(default=None, alias="connectionID")
    status: str
    version: str | None = None


_EVENTS: dict[str, type[EventMessage]] = {
    "error": ErrorMessage,
    "subscriptionStatus": SubscriptionStatus,
    "addOrderStatus": AddOrderStatus,
    "editOrderStatus": EditOrderStatus,
    "cancelOrderStatus": CancelOrderStatus,
    "cancelAllStatus": CancelAllStatus,
    "cancelAllOrdersAfterStatus": CancelAllOrdersAfterStatus,
    "heartbeat": Heartbeat,
    "pong": Pong,
    "systemStatus": SystemStatusMessage,
}


def _strings(struct: str, row: Any, length: int) -> list[str]:
    if not isinstance(row, list) or len(row) != length:
        raise TypeMismatchError(struct, None, row, f"array of {length} elements")
    for index, value in enumerate(row):
        if not isinstance(value, str):
            raise TypeMismatchError(struct, index, value, "string")
    return row


class _ChannelMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    channel_id: int
    channel_name: str
    pair: str

    @staticmethod
    def _frame(struct: str, data: Any) -> list[Any]:
        if not isinstance(data, list) or len(data) != 4:
            raise TypeMismatchError(struct, None, data, "array of 4 elements")
        channel_id, _, name, pair = data
        if isinstance(channel_id, bool) or not isinstance(channel_id, int):
            raise TypeMismatchError(struct, 0, channel_id, "integer")
        if not isinstance(name, str):
            raise TypeMismatchError(struct, 2, name, "string")
        if not isinstance(pair, str):
            raise TypeMismatchError(struct, 3, pair, "string")
        return data


class OHLCUpdate(_ChannelMessage):
    """``[channelID, [time, etime, open, high, low, close, vwap, volume, count], "ohlc-N", pair]``."""

    time: str
    etime: str
    open: str
    high: str
    low: str
    close: str
    vwap: str
    volume: str
    count: int

    @model_validator(mode="before")
    @classmethod
    def _from_frame(cls, data: Any) -> Any:
        if isinstance(data, (dict, OHLCUpdate)):
            return data
        channel_id, payload, name, pair = cls._frame("OHLCUpdate", data)
        if not isinstance(payload, list) or len(payload) != 9:
            raise TypeMismatchError("OHLCUpdate", 1, payload, "array of 9 elements")
        values = _strings("OHLCUpdate", payload[:8], 8)
        count = payload[8]
        if isinstance(count, bool) or not isinstance(count, int):
            raise TypeMismatchError("OHLCUpdate", 8, count, "integer")
        fields = ("time", "etime", "open", "high", "low", "close", "vwap", "volume")
        return {
            "channel_id": channel_id,
            "channel_name": name,
            "pair": pair,
            "count": count,
            **dict(zip(fields, values)),
        }

    @property
    def interval(self) -> int:
        return int(self.channel_name.partition("-")[2])


class TradeUpdateItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    price: str
    volume: str
    time: str
    side: str
    order_type: str
    misc: str


class TradeUpdate(_ChannelMessage):
    """``[channelID, [[price, volume, time, side, orderType, misc], ...], "trade", pair]``."""

    trades: list[TradeUpdateItem]

    @model_validator(mode="before")
    @classmethod
    def _from_frame(cls, data: Any) -> Any:
        if isinstance(data, (dict, TradeUpdate)):
            return data
        channel_id, payload, name, pair = cls._frame("TradeUpdate", data)
        if not isinstance(payload, list):
            raise TypeMismatchError("TradeUpdate", 1, payload, "array of trades")
        fields = ("price", "volume", "time", "side", "order_type", "misc")
        trades = [dict(zip(fields, _strings("TradeUpdate", row, 6))) for row in payload]
        return {"channel_id": channel_id, "channel_name": name, "pair": pair, "trades": trades}


def parse_message(raw: str | bytes | dict[str, Any] | list[Any]) -> BaseModel:
    """Decode one websocket frame into its typed message.

    Raises:
        DecodeError: the frame is not JSON, carries an unknown event or channel,
            or does not match the expected shape
    """
    data = raw
    if isinstance(raw, (str, bytes)):
        try:
            data = json.loads(raw, parse_float=Decimal)
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise DecodeError(f"invalid websocket frame: {exc}") from exc

    try:
        if isinstance(data, dict):
            event = data.get("event")
            model = _EVENTS.get(event) if isinstance(event, str) else None
            if model is None:
                raise DecodeError(f"unknown websocket event: {event!r}")
            return model.model_validate(data)
        if isinstance(data, list) and len(data) == 4 and isinstance(data[2], str):
            if data[2].startswith("ohlc-"):
                return OHLCUpdate.model_validate(data)
            if data[2] == "trade":
                return TradeUpdate.model_validate(data)
            raise DecodeError(f"unsupported websocket channel: {data[2]!r}")
    except ValidationError as exc:
        raise DecodeError(f"invalid websocket message: {exc}") from exc
    raise DecodeError("websocket frame is neither an event nor a channel message")
