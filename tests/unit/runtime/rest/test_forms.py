"""Unit tests for query and form encoding."""

from __future__ import annotations

from datetime import UTC, datetime

from krakenspot.core.enums import OHLCInterval, OrderType
from krakenspot.runtime.rest.forms import collect, encode_private_form, fields_of, form_value


class TestFormValue:
    def test_booleans(self):
        assert form_value(True) == "true"
        assert form_value(False) == "false"

    def test_enums_and_sequences(self):
        assert form_value(OHLCInterval.M5) == "5"
        assert form_value(OrderType.STOP_LOSS_LIMIT) == "stop-loss-limit"
        assert form_value(["XXBTZUSD", "XETHZUSD"]) == "XXBTZUSD,XETHZUSD"

    def test_datetime_is_rfc3339(self):
        assert form_value(datetime(2023, 7, 6, 18, 50, 48, tzinfo=UTC)) == "2023-07-06T18:50:48Z"


class TestCollect:
    def test_none_is_skipped_but_zero_is_sent(self):
        """Zero and False are values, None is absence."""
        fields = collect({"userref": 0, "trades": False, "ofs": None}, ["trades", "userref", "ofs"])
        assert fields == [("trades", "false"), ("userref", "0")]

    def test_wire_name_mapping(self):
        assert collect({"from_": "Spot Wallet"}, [("from_", "from")]) == [("from", "Spot Wallet")]

    def test_fields_of_keeps_order(self):
        build = fields_of("pair", "interval", "since")
        assert build({"since": 1, "pair": "XXBTZUSD", "interval": 60}) == [
            ("pair", "XXBTZUSD"),
            ("interval", "60"),
            ("since", "1"),
        ]


class TestPrivateForm:
    def test_nonce_first(self):
        assert encode_private_form(42, None, [("asset", "ZUSD")]) == "nonce=42&asset=ZUSD"

    def test_otp_after_nonce(self):
        assert encode_private_form(42, "123456", []) == "nonce=42&otp=123456"

    def test_values_are_urlencoded(self):
        assert encode_private_form(1, None, [("close[ordertype]", "limit")]) == (
            "nonce=1&close%5Bordertype%5D=limit"
        )
