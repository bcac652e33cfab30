"""Immutable request descriptor and response media type parsing."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from urllib.parse import parse_qsl, urlsplit

from ...core.enums import MediaType


@dataclass(frozen=True)
class Request:
    """Outgoing HTTP request.

    Authorizers return a new instance through ``with_headers`` instead of
    modifying the one they received.
    """

    method: str
    url: str
    headers: Mapping[str, str] = field(default_factory=dict)
    body: bytes | None = None

    @property
    def path(self) -> str:
        return urlsplit(self.url).path

    @property
    def content_type(self) -> str | None:
        return self.headers.get("Content-Type")

    def form(self) -> dict[str, str]:
        """Decode an ``application/x-www-form-urlencoded`` body."""
        if not self.body:
            return {}
        return dict(parse_qsl(self.body.decode(), keep_blank_values=True))

    def with_headers(self, headers: Mapping[str, str]) -> Request:
        return replace(self, headers={**self.headers, **headers})


def parse_media_type(content_type: str | None) -> MediaType | None:
    """Map a ``Content-Type`` header onto a known media type, ignoring parameters."""
    if not content_type:
        return None
    value = content_type.split(";", 1)[0].strip().lower()
    try:
        return MediaType(value)
    except ValueError:
        return None
