"""Order management payloads, including the order definitions sent to the venue."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .common import DecimalString, Envelope, WireModel


class CloseOrder(BaseModel):
    """Conditional close attached to an order."""

    model_config = ConfigDict(frozen=True)

    ordertype: str
    price: str
    price2: str | None = None


class Order(BaseModel):
    """Order definition used by AddOrder and AddOrderBatch.

    ``userref`` is sent whenever it is not ``None``, including ``0``.
    """

    model_config = ConfigDict(frozen=True)

    ordertype: str
    type: str
    volume: str
    userref: int | None = None
    displayvol: str | None = None
    price: str | None = None
    price2: str | None = None
    trigger: str | None = None
    leverage: str | None = None
    reduce_only: bool | None = None
    stptype: str | None = None
    oflags: str | None = None
    timeinforce: str | None = None
    starttm: str | None = None
    expiretm: str | None = None
    close: CloseOrder | None = None


class AddOrderDescription(WireModel):
    order: str
    close: str | None = None


class AddOrderResult(WireModel):
    descr: AddOrderDescription
    txid: list[str] = Field(default_factory=list)


class AddOrderBatchEntry(WireModel):
    descr: AddOrderDescription | None = None
    txid: str | None = None
    error: str | None = None


class AddOrderBatchResult(WireModel):
    orders: list[AddOrderBatchEntry] = Field(default_factory=list)


class EditOrderResult(WireModel):
    descr: AddOrderDescription | None = None
    txid: str | None = None
    newuserref: int | None = None
    olduserref: int | None = None
    orders_cancelled: int | None = None
    originaltxid: str | None = None
    status: str | None = None
    volume: DecimalString | None = None
    price: DecimalString | None = None
    price2: DecimalString | None = None
    error_message: str | None = None


class CancelOrderResult(WireModel):
    count: int
    pending: bool | None = None


class CancelAllOrdersAfterResult(WireModel):
    current_time: str = Field(alias="currentTime")
    trigger_time: str = Field(alias="triggerTime")


class AddOrderResponse(Envelope[AddOrderResult]):
    pass


class AddOrderBatchResponse(Envelope[AddOrderBatchResult]):
    pass


class EditOrderResponse(Envelope[EditOrderResult]):
    pass


class CancelOrderResponse(Envelope[CancelOrderResult]):
    pass


class CancelAllOrdersResponse(Envelope[CancelOrderResult]):
    pass


class CancelAllOrdersAfterResponse(Envelope[CancelAllOrdersAfterResult]):
    pass


class CancelOrderBatchResponse(Envelope[CancelOrderResult]):
    pass
