"""Funding endpoint definitions: deposits, withdrawals and transfers."""

from __future__ import annotations

from typing import Any

from krakenspot.models import funding as m
from krakenspot.runtime.rest import RestEndpointSpec
from krakenspot.runtime.rest.forms import Fields, collect, fields_of


def _deposit_status_form(params: dict[str, Any]) -> Fields:
    # cursor=true asks for the paginated listing; a string resumes from that cursor
    cursor = params.get("cursor")
    fields = [("cursor", cursor if isinstance(cursor, str) else "true")]
    return fields + collect(params, ("asset", "method", "start", "end", "limit"))


def _withdrawal_status_form(params: dict[str, Any]) -> Fields:
    fields = [("cursor", "false")]
    return fields + collect(params, ("asset", "method", "start", "end"))


DEPOSIT_METHODS = RestEndpointSpec(
    id="GetDepositMethods",
    method="POST",
    path="/private/DepositMethods",
    response_model=m.GetDepositMethodsResponse,
    build_form=fields_of("asset"),
    private=True,
)

DEPOSIT_ADDRESSES = RestEndpointSpec(
    id="GetDepositAddresses",
    method="POST",
    path="/private/DepositAddresses",
    response_model=m.GetDepositAddressesResponse,
    build_form=fields_of("asset", "method", "new", "amount"),
    private=True,
)

DEPOSIT_STATUS = RestEndpointSpec(
    id="GetStatusOfRecentDeposits",
    method="POST",
    path="/private/DepositStatus",
    response_model=m.GetStatusOfRecentDepositsResponse,
    build_form=_deposit_status_form,
    private=True,
)

WITHDRAWAL_METHODS = RestEndpointSpec(
    id="GetWithdrawalMethods",
    method="POST",
    path="/private/WithdrawMethods",
    response_model=m.GetWithdrawalMethodsResponse,
    build_form=fields_of("asset", "network"),
    private=True,
)

WITHDRAWAL_ADDRESSES = RestEndpointSpec(
    id="GetWithdrawalAddresses",
    method="POST",
    path="/private/WithdrawAddresses",
    response_model=m.GetWithdrawalAddressesResponse,
    build_form=fields_of("asset", "method", "key", "verified"),
    private=True,
)

WITHDRAWAL_INFORMATION = RestEndpointSpec(
    id="GetWithdrawalInformation",
    method="POST",
    path="/private/WithdrawInfo",
    response_model=m.GetWithdrawalInformationResponse,
    build_form=fields_of("asset", "key", "amount"),
    private=True,
)

WITHDRAW_FUNDS = RestEndpointSpec(
    id="WithdrawFunds",
    method="POST",
    path="/private/Withdraw",
    response_model=m.WithdrawFundsResponse,
    build_form=fields_of("asset", "key", "amount", "address", "max_fee"),
    private=True,
)

WITHDRAWAL_STATUS = RestEndpointSpec(
    id="GetStatusOfRecentWithdrawals",
    method="POST",
    path="/private/WithdrawStatus",
    response_model=m.GetStatusOfRecentWithdrawalsResponse,
    build_form=_withdrawal_status_form,
    private=True,
)

WITHDRAWAL_CANCELLATION = RestEndpointSpec(
    id="RequestWithdrawalCancellation",
    method="POST",
    path="/private/WithdrawCancel",
    response_model=m.RequestWithdrawalCancellationResponse,
    build_form=fields_of("asset", "refid"),
    private=True,
)

WALLET_TRANSFER = RestEndpointSpec(
    id="RequestWalletTransfer",
    method="POST",
    path="/private/WalletTransfer",
    response_model=m.RequestWalletTransferResponse,
    build_form=fields_of("asset", ("from_", "from"), "to", "amount"),
    private=True,
)

ENDPOINTS = [
    DEPOSIT_METHODS,
    DEPOSIT_ADDRESSES,
    DEPOSIT_STATUS,
    WITHDRAWAL_METHODS,
    WITHDRAWAL_ADDRESSES,
    WITHDRAWAL_INFORMATION,
    WITHDRAW_FUNDS,
    WITHDRAWAL_STATUS,
    WITHDRAWAL_CANCELLATION,
    WALLET_TRANSFER,
]
