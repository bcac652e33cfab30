"""Query string and form body encoding.

Values are rendered the way the venue expects them: booleans as ``true`` or
``false``, sequences joined with commas, enums by value and datetimes as
RFC 3339. ``None`` means the parameter is not sent. ``0``, ``False`` and empty
strings are sent.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from datetime import UTC, datetime
from enum import Enum
from typing import Any
from urllib.parse import urlencode

Fields = list[tuple[str, str]]


def form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return form_value(value.value)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return value.isoformat(timespec="seconds").replace("+00:00", "Z")
    if isinstance(value, (list, tuple)):
        return ",".join(form_value(v) for v in value)
    return str(value)


def collect(params: Mapping[str, Any], names: Iterable[str | tuple[str, str]]) -> Fields:
    """Pick ``names`` out of ``params`` in order, skipping ``None`` values.

    A name may be a ``(param, wire_name)`` pair when the two differ.
    """
    fields: Fields = []
    for name in names:
        param, wire = name if isinstance(name, tuple) else (name, name)
        value = params.get(param)
        if value is not None:
            fields.append((wire, form_value(value)))
    return fields


def encode_form(fields: Fields) -> str:
    return urlencode(fields)


def encode_private_form(nonce: int, otp: str | None, fields: Fields) -> str:
    """Form body for private endpoints: ``nonce`` first, then ``otp`` if set."""
    head: Fields = [("nonce", str(nonce))]
    if otp:
        head.append(("otp", otp))
    return urlencode(head + fields)


def fields_of(*names: str | tuple[str, str]) -> Callable[[dict[str, Any]], Fields]:
    """Build a ``RestEndpointSpec`` query or form builder that picks ``names``."""

    def build(params: dict[str, Any]) -> Fields:
        return collect(params, names)

    return build
