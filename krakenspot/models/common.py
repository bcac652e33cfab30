"""Shared model building blocks: the response envelope and decimal strings."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any, Generic, TypeVar

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field


def _decimal_text(value: Any) -> Any:
    # JSON numbers arrive as Decimal (parse_float) or int; keep their text as-is.
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, Decimal)):
        return str(value)
    return value


DecimalString = Annotated[str, BeforeValidator(_decimal_text)]
"""Arbitrary-precision amount carried as its wire text, never as a float."""


class WireModel(BaseModel):
    """Base for every decoded payload.

    Unknown keys are ignored so that new venue fields do not break decoding.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


T = TypeVar("T")


class Envelope(WireModel, Generic[T]):
    """``{"error": [...], "result": ...}`` wrapper present on every REST reply.

    A non-empty ``error`` list means the venue rejected the operation even though
    the HTTP exchange and decoding succeeded.
    """

    error: list[str] = Field(default_factory=list)
    result: T | None = None

    @property
    def ok(self) -> bool:
        return not self.error


class SecurityOptions(BaseModel):
    """Per-call security options for private endpoints."""

    model_config = ConfigDict(frozen=True)

    second_factor: str | None = None


def _float_seconds(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    return value


Timestamp = Annotated[float, BeforeValidator(_float_seconds)]
"""Unix time in seconds, possibly fractional."""
