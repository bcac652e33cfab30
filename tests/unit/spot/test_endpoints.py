"""Unit tests for the endpoint registry and form builders."""

from __future__ import annotations

import pytest

from krakenspot.core import OrderType, SelfTradePrevention, Side, TimeInForce, Trigger
from krakenspot.models import CloseOrder, Order
from krakenspot.spot.rest.endpoints import get_endpoint_spec, list_endpoints
from krakenspot.spot.rest.endpoints.earn import LIST_STRATEGIES
from krakenspot.spot.rest.endpoints.funding import DEPOSIT_STATUS, WITHDRAWAL_STATUS
from krakenspot.spot.rest.endpoints.trading import order_fields


class TestRegistry:
    """Test endpoint lookup."""

    def test_ids_are_unique_and_resolvable(self):
        ids = list_endpoints()
        assert len(ids) == len(set(ids))
        for endpoint_id in ids:
            assert get_endpoint_spec(endpoint_id).id == endpoint_id

    def test_unknown_endpoint(self):
        assert get_endpoint_spec("GetNothing") is None

    @pytest.mark.parametrize(
        ("endpoint_id", "method", "path", "private"),
        [
            ("GetServerTime", "GET", "/public/Time", False),
            ("GetOHLCData", "GET", "/public/OHLC", False),
            ("GetRecentSpreads", "GET", "/public/Spread", False),
            ("GetAccountBalance", "POST", "/private/Balance", True),
            ("AddOrderBatch", "POST", "/private/AddOrderBatch", True),
            ("RetrieveDataExport", "POST", "/private/RetrieveExport", True),
            ("ListEarnStrategies", "POST", "/private/Earn/Strategies", True),
            ("GetDeallocationStatus", "POST", "/private/Earn/DeallocateStatus", True),
            ("GetWebSocketsToken", "POST", "/private/GetWebSocketsToken", True),
        ],
    )
    def test_endpoint_routes(self, endpoint_id, method, path, private):
        spec = get_endpoint_spec(endpoint_id)
        assert (spec.method, spec.path, spec.private) == (method, path, private)

    def test_public_endpoints_use_query(self):
        for endpoint_id in list_endpoints():
            spec = get_endpoint_spec(endpoint_id)
            if not spec.private:
                assert spec.method == "GET"
                assert spec.build_form is None


class TestOrderFields:
    """Test order encoding."""

    def test_userref_zero_is_sent(self):
        fields = order_fields(Order(ordertype="market", type="sell", volume="0.1", userref=0))
        assert ("userref", "0") in fields

    def test_unset_fields_are_omitted(self):
        fields = dict(order_fields(Order(ordertype="market", type="sell", volume="0.1")))
        assert fields == {"ordertype": "market", "type": "sell", "volume": "0.1"}

    def test_reduce_only_false_is_sent(self):
        fields = dict(
            order_fields(Order(ordertype="market", type="sell", volume="1", reduce_only=False))
        )
        assert fields["reduce_only"] == "false"

    def test_prefixed_close(self):
        order = Order(
            ordertype="limit",
            type="buy",
            volume="1",
            price="100",
            close=CloseOrder(ordertype="stop-loss-limit", price="90", price2="89"),
        )
        fields = dict(order_fields(order, "orders[2]"))
        assert fields["orders[2][price]"] == "100"
        assert fields["orders[2][close][ordertype]"] == "stop-loss-limit"
        assert fields["orders[2][close][price2]"] == "89"

    def test_enum_values_are_sent_by_value(self):
        order = Order(
            ordertype=OrderType.STOP_LOSS_LIMIT,
            type=Side.SELL,
            volume="2",
            price="100",
            price2="99",
            trigger=Trigger.INDEX,
            timeinforce=TimeInForce.IOC,
            stptype=SelfTradePrevention.CANCEL_BOTH,
        )
        fields = dict(order_fields(order))
        assert fields["ordertype"] == "stop-loss-limit"
        assert fields["type"] == "sell"
        assert fields["trigger"] == "index"
        assert fields["timeinforce"] == "IOC"
        assert fields["stptype"] == "cancel-both"


class TestPaginationForms:
    def test_deposit_status_defaults_to_cursor(self):
        assert DEPOSIT_STATUS.build_form({"asset": "XBT"}) == [("cursor", "true"), ("asset", "XBT")]

    def test_deposit_status_resumes_cursor(self):
        fields = DEPOSIT_STATUS.build_form({"cursor": "abc"})
        assert fields == [("cursor", "abc")]

    def test_withdrawal_status_disables_cursor(self):
        assert WITHDRAWAL_STATUS.build_form({}) == [("cursor", "false")]

    def test_strategies_form(self):
        fields = LIST_STRATEGIES.build_form({"ascending": True, "limit": 10, "lock_type": ["instant"]})
        assert fields == [
            ("ascending", "true"),
            ("cursor", "true"),
            ("limit", "10"),
            ("lock_type[0]", "instant"),
        ]
