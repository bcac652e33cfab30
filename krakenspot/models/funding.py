"""Deposit, withdrawal and transfer payloads."""

from __future__ import annotations

from pydantic import Field

from .common import DecimalString, Envelope, Timestamp, WireModel


class DepositMethod(WireModel):
    method: str
    limit: DecimalString | bool | None = None
    fee: DecimalString | None = None
    address_setup_fee: DecimalString | None = Field(default=None, alias="address-setup-fee")
    gen_address: bool | None = Field(default=None, alias="gen-address")
    minimum: DecimalString | None = None


class DepositAddress(WireModel):
    address: str
    expiretm: str | None = None
    new: bool | None = None
    memo: str | None = None
    tag: str | None = None


class TransactionDetails(WireModel):
    method: str
    aclass: str | None = None
    asset: str
    refid: str
    txid: str | None = None
    info: str | None = None
    amount: DecimalString
    fee: DecimalString | None = None
    time: Timestamp
    status: str
    status_prop: str | None = Field(default=None, alias="status-prop")


class DepositStatusPage(WireModel):
    deposit: list[TransactionDetails] = Field(default_factory=list)
    next_cursor: str | None = None


class WithdrawalMethod(WireModel):
    asset: str
    method: str
    network: str | None = None
    minimum: DecimalString | None = None


class WithdrawalAddress(WireModel):
    address: str
    asset: str
    method: str
    key: str
    memo: str | None = None
    verified: bool | None = None


class WithdrawalInformation(WireModel):
    method: str
    limit: DecimalString
    amount: DecimalString
    fee: DecimalString


class ReferenceId(WireModel):
    refid: str


class GetDepositMethodsResponse(Envelope[list[DepositMethod]]):
    pass


class GetDepositAddressesResponse(Envelope[list[DepositAddress]]):
    pass


class GetStatusOfRecentDepositsResponse(Envelope[DepositStatusPage | list[TransactionDetails]]):
    """Paginated (object) or legacy (array) deposit status listing."""

    pass


class GetWithdrawalMethodsResponse(Envelope[list[WithdrawalMethod]]):
    pass


class GetWithdrawalAddressesResponse(Envelope[list[WithdrawalAddress]]):
    pass


class GetWithdrawalInformationResponse(Envelope[WithdrawalInformation]):
    pass


class WithdrawFundsResponse(Envelope[ReferenceId]):
    pass


class GetStatusOfRecentWithdrawalsResponse(Envelope[list[TransactionDetails]]):
    pass


class RequestWithdrawalCancellationResponse(Envelope[bool]):
    pass


class RequestWalletTransferResponse(Envelope[ReferenceId]):
    pass
