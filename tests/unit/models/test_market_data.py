"""Unit tests for the positional-array market data codec.

Tests focus on wire compatibility: exact decimal text, timestamp conversion,
container key validation and compact re-encoding.
"""

from __future__ import annotations

import json
from decimal import Decimal

import pytest

from krakenspot.core.exceptions import DecodeError, StructureError, TypeMismatchError
from krakenspot.models.market import (
    GetOHLCDataResponse,
    GetOrderBookResponse,
    GetRecentSpreadsResponse,
    GetRecentTradesResponse,
)
from krakenspot.models.market_data import (
    OHLC,
    OHLCData,
    OrderBook,
    OrderBookEntry,
    RecentTrades,
    Spread,
    SpreadData,
    Trade,
    split_seconds,
)
from krakenspot.runtime.rest.pipeline import decode_json

OHLC_PAYLOAD = """{
    "error": [],
    "result": {
        "XXBTZUSD": [
            [1688671200, "30306.14242424242", "30306.2", "30305.7", "30305.7", "30306.1", "3.39243896", 23],
            [1688671260, "30304.5", "30304.5", "30300.0", "30300.0", "30300.0", "4.42996871", 18]
        ],
        "last": 1688672160
    }
}"""

TRADES_PAYLOAD = """{
    "error": [],
    "result": {
        "XXBTZUSD": [
            ["30243.40000", "0.34507674", 1688669597.827736900, "b", "m", "", 61044952],
            ["30243.30000", "0.00376960", 1688669598.2804112, "s", "l", "", 61044953]
        ],
        "last": "1688671969993150842"
    }
}"""

BOOK_PAYLOAD = """{
    "error": [],
    "result": {
        "XXBTZUSD": {
            "asks": [["30384.10000", "2.059", 1688671659], ["30387.90000", "1.500", 1688671380]],
            "bids": [["30297.00000", "1.115", 1688671636], ["30296.70000", "2.002", 1688671674]]
        }
    }
}"""

SPREAD_PAYLOAD = """{
    "error": [],
    "result": {
        "XXBTZUSD": [[1688671834, "30292.10000", "30297.50000"], [1688671834, "30292.10000", "30296.70000"]],
        "last": 1688671834
    }
}"""


def compact(payload: str) -> str:
    return json.dumps(json.loads(payload), separators=(",", ":"))


class TestOHLC:
    """Test OHLC rows and containers."""

    def test_decode_keeps_decimal_text(self):
        """Prices and volume keep their exact wire text."""
        response = decode_json(OHLC_PAYLOAD.encode(), GetOHLCDataResponse)
        data = response.result
        assert data.pair == "XXBTZUSD"
        assert data.last == 1688672160
        first = data.data[0]
        assert first.timestamp == 1688671200
        assert first.open == "30306.14242424242"
        assert first.close == "30305.7"
        assert first.volume == "3.39243896"
        assert first.count == 23

    def test_round_trip_is_byte_identical(self):
        """Encoding a decoded payload reproduces the compact payload."""
        response = decode_json(OHLC_PAYLOAD.encode(), GetOHLCDataResponse)
        assert response.model_dump_json() == compact(OHLC_PAYLOAD)

    def test_row_round_trip(self):
        """A single row re-encodes to the same array."""
        row = [1688671200, "30306.1", "30306.2", "30305.7", "30305.7", "30306.1", "3.39243896", 23]
        assert json.loads(OHLC.model_validate(row).model_dump_json()) == row

    def test_fractional_timestamp_and_count_truncate(self):
        """Float timestamp and count are truncated toward zero."""
        row = [Decimal("1688671200.9"), "1", "2", "0.5", "1.5", "1.2", "10", Decimal("23.7")]
        ohlc = OHLC.model_validate(row)
        assert ohlc.timestamp == 1688671200
        assert ohlc.count == 23

    def test_wrong_length_raises_type_mismatch(self):
        """A 7-element row is rejected with the struct name."""
        with pytest.raises(TypeMismatchError) as exc_info:
            OHLC.model_validate([1688671200, "1", "2", "3", "4", "5", "6"])
        assert exc_info.value.struct_name == "OHLC"
        assert exc_info.value.index is None

    def test_wrong_element_kind_names_index(self):
        """A number where a string is expected names the index."""
        with pytest.raises(TypeMismatchError) as exc_info:
            OHLC.model_validate([1688671200, 30306.1, "2", "3", "4", "5", "6", 23])
        assert exc_info.value.struct_name == "OHLC"
        assert exc_info.value.index == 1

    def test_bool_is_not_a_number(self):
        """Booleans are rejected for numeric positions."""
        with pytest.raises(TypeMismatchError) as exc_info:
            OHLC.model_validate([True, "1", "2", "3", "4", "5", "6", 23])
        assert exc_info.value.index == 0

    def test_type_mismatch_is_a_decode_error(self):
        """Codec errors belong to the decode family."""
        with pytest.raises(DecodeError):
            OHLC.model_validate("not a row")

    @pytest.mark.parametrize("token", ["NaN", "Infinity", "-Infinity"])
    def test_non_finite_number_names_index(self, token):
        """Non-standard JSON constants are rejected at their position."""
        row = f'[{token}, "1", "2", "3", "4", "5", "6", 1]'
        payload = f'{{"error": [], "result": {{"XXBTZUSD": [{row}], "last": 1}}}}'
        with pytest.raises(TypeMismatchError) as exc_info:
            decode_json(payload.encode(), GetOHLCDataResponse)
        assert exc_info.value.struct_name == "OHLC"
        assert exc_info.value.index == 0

    def test_non_finite_last_rejected(self):
        payload = b'{"error": [], "result": {"XXBTZUSD": [], "last": NaN}}'
        with pytest.raises(TypeMismatchError) as exc_info:
            decode_json(payload, GetOHLCDataResponse)
        assert exc_info.value.struct_name == "OHLCData"

    def test_container_with_two_keys(self):
        """Exactly one pair key plus 'last' decodes."""
        data = OHLCData.model_validate({"XXBTZUSD": [], "last": 1})
        assert data.pair == "XXBTZUSD"
        assert data.data == []

    def test_container_with_three_keys_raises_structure_error(self):
        """A third top-level key is reported with every observed key."""
        with pytest.raises(StructureError) as exc_info:
            OHLCData.model_validate({"XXBTZUSD": [], "XETHZUSD": [], "last": 1})
        assert sorted(exc_info.value.keys) == ["XETHZUSD", "XXBTZUSD", "last"]
        assert "XETHZUSD" in str(exc_info.value)

    def test_container_without_last_raises_structure_error(self):
        """Two pair keys without 'last' are rejected."""
        with pytest.raises(StructureError):
            OHLCData.model_validate({"XXBTZUSD": [], "XETHZUSD": []})

    def test_extra_pair_field_raises_structure_error(self):
        """A stray string "pair" key on the wire is not mistaken for keyword input."""
        payload = (
            b'{"error": [], "result": {"XXBTZUSD": [[1688671200, "1", "2", "3", "4", "5", "6", 1]],'
            b' "last": 1688671200, "pair": "XXBTZUSD"}}'
        )
        with pytest.raises(StructureError) as exc_info:
            decode_json(payload, GetOHLCDataResponse)
        assert sorted(exc_info.value.keys) == ["XXBTZUSD", "last", "pair"]

    def test_extra_pair_field_on_other_containers(self):
        with pytest.raises(StructureError):
            SpreadData.model_validate({"XXBTZUSD": [], "last": 1, "pair": "XXBTZUSD"})
        with pytest.raises(StructureError):
            RecentTrades.model_validate({"XXBTZUSD": [], "last": "1", "pair": "XXBTZUSD"})
        with pytest.raises(StructureError):
            OrderBook.model_validate(
                {"XXBTZUSD": {"asks": [], "bids": []}, "pair": "XXBTZUSD"}
            )

    def test_keyword_construction(self):
        """Models can be built from field values as well as wire data."""
        data = OHLCData(pair="XXBTZUSD", data=[], last=5)
        assert data.model_dump() == {"XXBTZUSD": [], "last": 5}


class TestTrades:
    """Test trade rows and the recent trades container."""

    def test_timestamp_within_one_microsecond(self):
        """Sub-second precision is reconstructed at nanosecond granularity."""
        response = decode_json(TRADES_PAYLOAD.encode(), GetRecentTradesResponse)
        trade = response.result.trades[0]
        assert abs(trade.time_ns - 1688669597827736900) <= 1000
        assert trade.price == "30243.40000"
        assert trade.volume == "0.34507674"
        assert trade.side == "b"
        assert trade.order_type == "m"
        assert trade.miscellaneous == ""
        assert trade.trade_id == 61044952

    def test_float_timestamp_literal(self):
        """The documented float literal decodes within one microsecond."""
        trade = Trade.model_validate(["1", "1", 1688669597.8277369, "b", "m", "", 1])
        assert abs(trade.time_ns - 1688669597827736900) <= 1000

    def test_last_is_kept_as_text(self):
        response = decode_json(TRADES_PAYLOAD.encode(), GetRecentTradesResponse)
        assert response.result.last == "1688671969993150842"
        assert response.result.pair == "XXBTZUSD"

    def test_encode_keeps_leading_zero_nanoseconds(self):
        """Nanoseconds below 100ms are zero padded on encode."""
        trade = Trade(
            price="1",
            volume="1",
            time_ns=1688669597_050000000,
            side="s",
            order_type="l",
            miscellaneous="",
            trade_id=7,
        )
        assert trade.to_row()[2] == pytest.approx(1688669597.05)

    @pytest.mark.parametrize(
        ("time_ns", "seconds"),
        [(-500_000_000, -0.5), (-1_500_000_000, -1.5), (-50_000_000, -0.05)],
    )
    def test_encode_negative_timestamp(self, time_ns, seconds):
        """Pre-epoch times keep their sign on the fractional part."""
        trade = Trade(
            price="1",
            volume="1",
            time_ns=time_ns,
            side="b",
            order_type="m",
            miscellaneous="",
            trade_id=1,
        )
        assert trade.seconds == pytest.approx(seconds)
        decoded = Trade.model_validate(trade.to_row())
        assert decoded.time_ns == time_ns

    def test_encode_emits_pair_then_last(self):
        response = decode_json(TRADES_PAYLOAD.encode(), GetRecentTradesResponse)
        encoded = json.loads(response.result.model_dump_json())
        assert list(encoded) == ["XXBTZUSD", "last"]
        assert encoded["XXBTZUSD"][1][0] == "30243.30000"

    def test_wrong_trade_id_kind(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            Trade.model_validate(["1", "1", 1.5, "b", "m", "", "61044952"])
        assert exc_info.value.struct_name == "Trade"
        assert exc_info.value.index == 6

    def test_non_string_last_rejected(self):
        with pytest.raises(TypeMismatchError):
            RecentTrades.model_validate({"XXBTZUSD": [], "last": 1688671969993150842})

    def test_split_seconds(self):
        assert split_seconds(1.5) == (1, 500000000)
        assert split_seconds(-1.5) == (-1, -500000000)
        assert split_seconds(2.0) == (2, 0)


class TestOrderBook:
    """Test order book levels and container."""

    def test_levels_keep_received_order(self):
        response = decode_json(BOOK_PAYLOAD.encode(), GetOrderBookResponse)
        book = response.result
        assert book.pair == "XXBTZUSD"
        assert [a.price for a in book.asks] == ["30384.10000", "30387.90000"]
        assert [b.timestamp for b in book.bids] == [1688671636, 1688671674]
        assert book.asks[1].volume == "1.500"

    def test_round_trip(self):
        response = decode_json(BOOK_PAYLOAD.encode(), GetOrderBookResponse)
        assert response.model_dump_json() == compact(BOOK_PAYLOAD)

    def test_two_pairs_raise_structure_error(self):
        with pytest.raises(StructureError) as exc_info:
            OrderBook.model_validate(
                {
                    "XXBTZUSD": {"asks": [], "bids": []},
                    "XETHZUSD": {"asks": [], "bids": []},
                }
            )
        assert exc_info.value.keys == ["XXBTZUSD", "XETHZUSD"]

    def test_missing_side_raises_structure_error(self):
        with pytest.raises(StructureError):
            OrderBook.model_validate({"XXBTZUSD": {"asks": []}})

    def test_level_timestamp_must_be_integer(self):
        with pytest.raises(TypeMismatchError) as exc_info:
            OrderBookEntry.model_validate(["30384.1", "2.059", "1688671659"])
        assert exc_info.value.index == 2


class TestSpreads:
    def test_decode_and_round_trip(self):
        response = decode_json(SPREAD_PAYLOAD.encode(), GetRecentSpreadsResponse)
        spreads = response.result
        assert spreads.last == 1688671834
        assert spreads.spreads[0].bid == "30292.10000"
        assert spreads.spreads[1].ask == "30296.70000"
        assert response.model_dump_json() == compact(SPREAD_PAYLOAD)

    def test_short_row(self):
        with pytest.raises(TypeMismatchError):
            Spread.model_validate([1688671834, "30292.10000"])
