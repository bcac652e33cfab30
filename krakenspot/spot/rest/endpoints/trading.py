"""Order management endpoint definitions."""

from __future__ import annotations

from typing import Any

from krakenspot.models import trading as m
from krakenspot.models.trading import Order
from krakenspot.runtime.rest import RestEndpointSpec
from krakenspot.runtime.rest.forms import Fields, collect, fields_of

_ORDER_FIELDS = (
    "userref",
    "ordertype",
    "type",
    "volume",
    "displayvol",
    "price",
    "price2",
    "trigger",
    "leverage",
    "stptype",
    "reduce_only",
    "oflags",
    "timeinforce",
    "starttm",
    "expiretm",
)


def order_fields(order: Order, prefix: str = "") -> Fields:
    """Encode an order, nesting every key under ``prefix`` when given.

    ``order_fields(order, "orders[0]")`` yields ``orders[0][volume]`` and
    ``orders[0][close][price]``.
    """

    def key(name: str) -> str:
        return f"{prefix}[{name}]" if prefix else name

    values = order.model_dump(exclude={"close"})
    fields = [(key(k), v) for k, v in collect(values, _ORDER_FIELDS)]
    if order.close is not None:
        close = order.close.model_dump()
        close_prefix = key("close")
        fields += [
            (f"{close_prefix}[{k}]", v)
            for k, v in collect(close, ("ordertype", "price", "price2"))
        ]
    return fields


def _add_order_form(params: dict[str, Any]) -> Fields:
    fields = collect(params, ("pair",))
    fields += order_fields(params["order"])
    return fields + collect(params, ("deadline", "validate"))


def _add_order_batch_form(params: dict[str, Any]) -> Fields:
    fields = collect(params, ("pair",))
    for index, order in enumerate(params["orders"]):
        fields += order_fields(order, f"orders[{index}]")
    return fields + collect(params, ("deadline", "validate"))


ADD_ORDER = RestEndpointSpec(
    id="AddOrder",
    method="POST",
    path="/private/AddOrder",
    response_model=m.AddOrderResponse,
    build_form=_add_order_form,
    private=True,
)

ADD_ORDER_BATCH = RestEndpointSpec(
    id="AddOrderBatch",
    method="POST",
    path="/private/AddOrderBatch",
    response_model=m.AddOrderBatchResponse,
    build_form=_add_order_batch_form,
    private=True,
)

EDIT_ORDER = RestEndpointSpec(
    id="EditOrder",
    method="POST",
    path="/private/EditOrder",
    response_model=m.EditOrderResponse,
    build_form=fields_of(
        "txid",
        "pair",
        "userref",
        "volume",
        "displayvol",
        "price",
        "price2",
        "oflags",
        "deadline",
        "cancel_response",
        "validate",
    ),
    private=True,
)

CANCEL_ORDER = RestEndpointSpec(
    id="CancelOrder",
    method="POST",
    path="/private/CancelOrder",
    response_model=m.CancelOrderResponse,
    build_form=fields_of("txid"),
    private=True,
)

CANCEL_ALL_ORDERS = RestEndpointSpec(
    id="CancelAllOrders",
    method="POST",
    path="/private/CancelAll",
    response_model=m.CancelAllOrdersResponse,
    private=True,
)

CANCEL_ALL_ORDERS_AFTER = RestEndpointSpec(
    id="CancelAllOrdersAfterX",
    method="POST",
    path="/private/CancelAllOrdersAfter",
    response_model=m.CancelAllOrdersAfterResponse,
    build_form=fields_of("timeout"),
    private=True,
)

CANCEL_ORDER_BATCH = RestEndpointSpec(
    id="CancelOrderBatch",
    method="POST",
    path="/private/CancelOrderBatch",
    response_model=m.CancelOrderBatchResponse,
    build_form=fields_of("orders"),
    private=True,
)

ENDPOINTS = [
    ADD_ORDER,
    ADD_ORDER_BATCH,
    EDIT_ORDER,
    CANCEL_ORDER,
    CANCEL_ALL_ORDERS,
    CANCEL_ALL_ORDERS_AFTER,
    CANCEL_ORDER_BATCH,
]
