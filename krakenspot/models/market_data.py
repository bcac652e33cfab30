"""Positional-array codec for market data rows.

The venue ships repeated market data rows as fixed-order JSON arrays and wraps
them in ``{"<pair>": [...], "last": ...}`` objects. The models below accept the
wire shape on validation and emit it again on serialization, so
``Model.model_validate(payload).model_dump_json()`` reproduces the compact payload.

Design Decisions:
    - Price and volume fields keep their wire text. Only timestamps and counters
      are converted to numbers.
    - OHLC timestamps and counts are truncated toward zero when converted to int.
    - Trade timestamps are a float count of seconds. They are formatted with nine
      fractional digits and split into seconds and nanoseconds, which carries the
      precision ceiling of a 64-bit float for current Unix times.
    - Wrong row lengths or element kinds raise TypeMismatchError, unexpected
      container keys raise StructureError. Both propagate through pydantic
      unchanged because they are not ValueError subclasses.
"""

from __future__ import annotations

import math
from datetime import UTC, datetime
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, model_serializer, model_validator

from ..core.exceptions import StructureError, TypeMismatchError

_NS_PER_SECOND = 1_000_000_000


def _row(struct: str, value: Any, length: int) -> list[Any]:
    if not isinstance(value, (list, tuple)):
        raise TypeMismatchError(struct, None, value, f"array of {length} elements")
    if len(value) != length:
        raise TypeMismatchError(struct, None, value, f"array of {length} elements")
    return list(value)


def _string(struct: str, row: list[Any], index: int) -> str:
    value = row[index]
    if not isinstance(value, str):
        raise TypeMismatchError(struct, index, value, "string")
    return value


def _number(struct: str, row: list[Any], index: int) -> int | float | Decimal:
    value = row[index]
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeMismatchError(struct, index, value, "number")
    if isinstance(value, Decimal) and not value.is_finite():
        raise TypeMismatchError(struct, index, value, "finite number")
    if isinstance(value, float) and not math.isfinite(value):
        raise TypeMismatchError(struct, index, value, "finite number")
    return value


def _truncated(struct: str, row: list[Any], index: int) -> int:
    return int(_number(struct, row, index))


def _integer(struct: str, row: list[Any], index: int) -> int:
    value = _number(struct, row, index)
    if value != int(value):
        raise TypeMismatchError(struct, index, value, "integer")
    return int(value)


def _last(struct: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise TypeMismatchError(struct, None, value, "integer 'last'")
    finite = value.is_finite() if isinstance(value, Decimal) else math.isfinite(value)
    if not finite:
        raise TypeMismatchError(struct, None, value, "finite 'last'")
    return int(value)


def split_seconds(seconds: float) -> tuple[int, int]:
    """Split a float count of seconds into whole seconds and nanoseconds."""
    whole, _, fraction = f"{seconds:.9f}".partition(".")
    sec = int(whole)
    nsec = int(fraction) if fraction else 0
    if sec < 0 or whole.startswith("-"):
        nsec = -nsec
    return sec, nsec


def _container(
    struct: str, data: dict[str, Any], sentinel: str | None
) -> tuple[str, Any]:
    keys = list(data)
    expected_len = 2 if sentinel else 1
    pairs = [k for k in keys if k != sentinel]
    if len(keys) != expected_len or len(pairs) != 1 or (sentinel and sentinel not in data):
        expected = f"one pair key and {sentinel!r}" if sentinel else "exactly one pair key"
        raise StructureError(struct, keys, expected)
    pair = pairs[0]
    return pair, data[pair]


def _rows(struct: str, value: Any) -> list[Any]:
    if not isinstance(value, list):
        raise TypeMismatchError(struct, None, value, "array of rows")
    return value


class _Row(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_row(self) -> list[Any]:
        raise NotImplementedError

    @model_serializer
    def _serialize(self) -> list[Any]:
        return self.to_row()


class OHLC(_Row):
    """One candle: ``[time, open, high, low, close, vwap, volume, count]``."""

    timestamp: int
    open: str
    high: str
    low: str
    close: str
    vwap: str
    volume: str
    count: int

    @model_validator(mode="before")
    @classmethod
    def _from_row(cls, data: Any) -> Any:
        if isinstance(data, (dict, OHLC)):
            return data
        row = _row("OHLC", data, 8)
        return {
            "timestamp": _truncated("OHLC", row, 0),
            "open": _string("OHLC", row, 1),
            "high": _string("OHLC", row, 2),
            "low": _string("OHLC", row, 3),
            "close": _string("OHLC", row, 4),
            "vwap": _string("OHLC", row, 5),
            "volume": _string("OHLC", row, 6),
            "count": _truncated("OHLC", row, 7),
        }

    @property
    def time(self) -> datetime:
        return datetime.fromtimestamp(self.timestamp, tz=UTC)

    def to_row(self) -> list[Any]:
        return [
            self.timestamp,
            self.open,
            self.high,
            self.low,
            self.close,
            self.vwap,
            self.volume,
            self.count,
        ]


class OrderBookEntry(_Row):
    """One price level: ``[price, volume, timestamp]``."""

    price: str
    volume: str
    timestamp: int

    @model_validator(mode="before")
    @classmethod
    def _from_row(cls, data: Any) -> Any:
        if isinstance(data, (dict, OrderBookEntry)):
            return data
        row = _row("OrderBookEntry", data, 3)
        return {
            "price": _string("OrderBookEntry", row, 0),
            "volume": _string("OrderBookEntry", row, 1),
            "timestamp": _integer("OrderBookEntry", row, 2),
        }

    def to_row(self) -> list[Any]:
        return [self.price, self.volume, self.timestamp]


class Trade(_Row):
    """One trade tick: ``[price, volume, time, side, order type, misc, trade id]``.

    ``time_ns`` holds the reconstructed Unix time in nanoseconds. Values beyond
    the resolution of a 64-bit float are not meaningful.
    """

    price: str
    volume: str
    time_ns: int
    side: str
    order_type: str
    miscellaneous: str
    trade_id: int

    @model_validator(mode="before")
    @classmethod
    def _from_row(cls, data: Any) -> Any:
        if isinstance(data, (dict, Trade)):
            return data
        row = _row("Trade", data, 7)
        sec, nsec = split_seconds(float(_number("Trade", row, 2)))
        return {
            "price": _string("Trade", row, 0),
            "volume": _string("Trade", row, 1),
            "time_ns": sec * _NS_PER_SECOND + nsec,
            "side": _string("Trade", row, 3),
            "order_type": _string("Trade", row, 4),
            "miscellaneous": _string("Trade", row, 5),
            "trade_id": _integer("Trade", row, 6),
        }

    @property
    def time(self) -> datetime:
        sec, nsec = divmod(self.time_ns, _NS_PER_SECOND)
        return datetime.fromtimestamp(sec, tz=UTC).replace(microsecond=nsec // 1000)

    @property
    def seconds(self) -> float:
        sign = "-" if self.time_ns < 0 else ""
        sec, nsec = divmod(abs(self.time_ns), _NS_PER_SECOND)
        return float(f"{sign}{sec}.{nsec:09d}")

    def to_row(self) -> list[Any]:
        return [
            self.price,
            self.volume,
            self.seconds,
            self.side,
            self.order_type,
            self.miscellaneous,
            self.trade_id,
        ]


class Spread(_Row):
    """One spread sample: ``[time, bid, ask]``."""

    timestamp: int
    bid: str
    ask: str

    @model_validator(mode="before")
    @classmethod
    def _from_row(cls, data: Any) -> Any:
        if isinstance(data, (dict, Spread)):
            return data
        row = _row("Spread", data, 3)
        return {
            "timestamp": _truncated("Spread", row, 0),
            "bid": _string("Spread", row, 1),
            "ask": _string("Spread", row, 2),
        }

    def to_row(self) -> list[Any]:
        return [self.timestamp, self.bid, self.ask]


def _is_keyword_form(model: type[BaseModel], data: Any) -> bool:
    # Keyword construction uses only field names and a string "pair"; on the wire the
    # pair key maps to rows.
    return (
        isinstance(data, dict)
        and set(data) <= set(model.model_fields)
        and isinstance(data.get("pair"), str)
    )


class OHLCData(BaseModel):
    """``{"<pair>": [ohlc, ...], "last": <int>}``."""

    model_config = ConfigDict(frozen=True)

    pair: str
    data: list[OHLC]
    last: int

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any) -> Any:
        if isinstance(data, OHLCData) or _is_keyword_form(cls, data):
            return data
        if not isinstance(data, dict):
            raise TypeMismatchError("OHLCData", None, data, "object")
        pair, rows = _container("OHLCData", data, "last")
        last = _last("OHLCData", data["last"])
        return {"pair": pair, "data": _rows("OHLCData", rows), "last": last}

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {self.pair: [row.to_row() for row in self.data], "last": self.last}


class OrderBook(BaseModel):
    """``{"<pair>": {"asks": [...], "bids": [...]}}``.

    Levels keep the order they were received in.
    """

    model_config = ConfigDict(frozen=True)

    pair: str
    asks: list[OrderBookEntry]
    bids: list[OrderBookEntry]

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any) -> Any:
        if isinstance(data, OrderBook) or _is_keyword_form(cls, data):
            return data
        if not isinstance(data, dict):
            raise TypeMismatchError("OrderBook", None, data, "object")
        pair, book = _container("OrderBook", data, None)
        if not isinstance(book, dict):
            raise TypeMismatchError("OrderBook", None, book, "object with asks and bids")
        if set(book) != {"asks", "bids"}:
            raise StructureError("OrderBook", list(book), "'asks' and 'bids'")
        return {
            "pair": pair,
            "asks": _rows("OrderBook", book["asks"]),
            "bids": _rows("OrderBook", book["bids"]),
        }

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {
            self.pair: {
                "asks": [level.to_row() for level in self.asks],
                "bids": [level.to_row() for level in self.bids],
            }
        }


class RecentTrades(BaseModel):
    """``{"<pair>": [trade, ...], "last": "<nanosecond id>"}``."""

    model_config = ConfigDict(frozen=True)

    pair: str
    trades: list[Trade]
    last: str

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any) -> Any:
        if isinstance(data, RecentTrades) or _is_keyword_form(cls, data):
            return data
        if not isinstance(data, dict):
            raise TypeMismatchError("RecentTrades", None, data, "object")
        pair, rows = _container("RecentTrades", data, "last")
        last = data["last"]
        if not isinstance(last, str):
            raise TypeMismatchError("RecentTrades", None, last, "string 'last'")
        return {"pair": pair, "trades": _rows("RecentTrades", rows), "last": last}

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {self.pair: [trade.to_row() for trade in self.trades], "last": self.last}


class SpreadData(BaseModel):
    """``{"<pair>": [spread, ...], "last": <int>}``."""

    model_config = ConfigDict(frozen=True)

    pair: str
    spreads: list[Spread]
    last: int

    @model_validator(mode="before")
    @classmethod
    def _from_wire(cls, data: Any) -> Any:
        if isinstance(data, SpreadData) or _is_keyword_form(cls, data):
            return data
        if not isinstance(data, dict):
            raise TypeMismatchError("SpreadData", None, data, "object")
        pair, rows = _container("SpreadData", data, "last")
        last = _last("SpreadData", data["last"])
        return {"pair": pair, "spreads": _rows("SpreadData", rows), "last": last}

    @model_serializer
    def _serialize(self) -> dict[str, Any]:
        return {self.pair: [spread.to_row() for spread in self.spreads], "last": self.last}
