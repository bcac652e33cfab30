"""Earn (staking and yield) payloads."""

from __future__ import annotations

from pydantic import Field

from .common import DecimalString, Envelope, WireModel


class AutoCompound(WireModel):
    type: str
    default: bool | None = None


class YieldSource(WireModel):
    type: str


class LockType(WireModel):
    """Lock terms. Bonded and timed variants carry their own optional fields."""

    type: str
    payout_frequency: int | None = None
    bonding_period: int | None = None
    bonding_period_variable: bool | None = None
    bonding_rewards: bool | None = None
    exit_queue_period: int | None = None
    unbonding_period: int | None = None
    unbonding_period_variable: bool | None = None
    unbonding_rewards: bool | None = None
    duration: int | None = None


class APREstimate(WireModel):
    high: DecimalString
    low: DecimalString


class EarnStrategy(WireModel):
    id: str
    asset: str
    allocation_fee: DecimalString | None = None
    allocation_restriction_info: list[str] = Field(default_factory=list)
    apr_estimate: APREstimate | None = None
    auto_compound: AutoCompound | None = None
    can_allocate: bool = False
    can_deallocate: bool = False
    deallocation_fee: DecimalString | None = None
    lock_type: LockType | None = None
    user_cap: DecimalString | None = None
    user_min_allocation: DecimalString | None = None
    yield_source: YieldSource | None = None


class EarnStrategies(WireModel):
    items: list[EarnStrategy] = Field(default_factory=list)
    next_cursor: str | None = None


class Reward(WireModel):
    converted: DecimalString
    native: DecimalString


class Payout(WireModel):
    accumulated_reward: Reward
    estimated_reward: Reward
    period_start: str
    period_end: str


class AllocationDetails(WireModel):
    created_at: str
    expires: str | None = None
    converted: DecimalString | None = None
    native: DecimalString | None = None


class AllocatedAmount(WireModel):
    allocation_count: int
    allocations: list[AllocationDetails] = Field(default_factory=list)
    converted: DecimalString | None = None
    native: DecimalString | None = None


class Allocations(WireModel):
    bonding: AllocatedAmount | None = None
    exit_queue: AllocatedAmount | None = None
    pending: Reward | None = None
    unbonding: AllocatedAmount | None = None
    total: Reward


class EarnAllocation(WireModel):
    amount_allocated: Allocations
    native_asset: str
    payout: Payout | None = None
    strategy_id: str
    total_rewarded: Reward


class EarnAllocations(WireModel):
    converted_asset: str
    items: list[EarnAllocation] = Field(default_factory=list)
    total_allocated: DecimalString
    total_rewarded: DecimalString


class OperationStatus(WireModel):
    pending: bool


class AllocateEarnFundsResponse(Envelope[bool]):
    pass


class DeallocateEarnFundsResponse(Envelope[bool]):
    pass


class GetAllocationStatusResponse(Envelope[OperationStatus]):
    pass


class GetDeallocationStatusResponse(Envelope[OperationStatus]):
    pass


class ListEarnStrategiesResponse(Envelope[EarnStrategies]):
    pass


class ListEarnAllocationsResponse(Envelope[EarnAllocations]):
    pass
