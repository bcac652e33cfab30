"""Earn endpoint definitions."""

from __future__ import annotations

from typing import Any

from krakenspot.models import earn as m
from krakenspot.runtime.rest import RestEndpointSpec
from krakenspot.runtime.rest.forms import Fields, collect, fields_of, form_value


def _strategies_form(params: dict[str, Any]) -> Fields:
    fields = collect(params, ("ascending", "asset"))
    cursor = params.get("cursor")
    fields.append(("cursor", cursor if cursor else "true"))
    fields += collect(params, ("limit",))
    for index, lock_type in enumerate(params.get("lock_type") or []):
        fields.append((f"lock_type[{index}]", form_value(lock_type)))
    return fields


ALLOCATE = RestEndpointSpec(
    id="AllocateEarnFunds",
    method="POST",
    path="/private/Earn/Allocate",
    response_model=m.AllocateEarnFundsResponse,
    build_form=fields_of("strategy_id", "amount"),
    private=True,
)

DEALLOCATE = RestEndpointSpec(
    id="DeallocateEarnFunds",
    method="POST",
    path="/private/Earn/Deallocate",
    response_model=m.DeallocateEarnFundsResponse,
    build_form=fields_of("strategy_id", "amount"),
    private=True,
)

ALLOCATION_STATUS = RestEndpointSpec(
    id="GetAllocationStatus",
    method="POST",
    path="/private/Earn/AllocateStatus",
    response_model=m.GetAllocationStatusResponse,
    build_form=fields_of("strategy_id"),
    private=True,
)

DEALLOCATION_STATUS = RestEndpointSpec(
    id="GetDeallocationStatus",
    method="POST",
    path="/private/Earn/DeallocateStatus",
    response_model=m.GetDeallocationStatusResponse,
    build_form=fields_of("strategy_id"),
    private=True,
)

LIST_STRATEGIES = RestEndpointSpec(
    id="ListEarnStrategies",
    method="POST",
    path="/private/Earn/Strategies",
    response_model=m.ListEarnStrategiesResponse,
    build_form=_strategies_form,
    private=True,
)

LIST_ALLOCATIONS = RestEndpointSpec(
    id="ListEarnAllocations",
    method="POST",
    path="/private/Earn/Allocations",
    response_model=m.ListEarnAllocationsResponse,
    build_form=fields_of("ascending", "converted_asset", "hide_zero_allocations"),
    private=True,
)

ENDPOINTS = [
    ALLOCATE,
    DEALLOCATE,
    ALLOCATION_STATUS,
    DEALLOCATION_STATUS,
    LIST_STRATEGIES,
    LIST_ALLOCATIONS,
]
