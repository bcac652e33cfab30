"""Custom exception hierarchy.

Pipeline errors describe failures to talk to, or to understand, the venue. They
are orthogonal to the envelope ``error`` list, which carries business failures
reported by the venue itself.
"""

from __future__ import annotations

from typing import Any


class KrakenSpotError(Exception):
    """Base exception for all library errors."""

    pass


class PipelineError(KrakenSpotError):
    """Failure raised while forging or executing a request.

    Attributes:
        operation: Name of the operation that failed (e.g. ``GetOHLCData``)
        response: Raw transport response when one was received, else ``None``
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str | None = None,
        response: Any | None = None,
    ) -> None:
        super().__init__(message)
        self.operation = operation
        self.response = response

    def __str__(self) -> str:
        message = super().__str__()
        if self.operation:
            return f"{self.operation}: {message}"
        return message


class ForgeError(PipelineError):
    """Request could not be built or authorized. Nothing was sent."""

    pass


class CancellationError(PipelineError):
    """Request context was already done before sending."""

    pass


class TransportError(PipelineError):
    """Network or connection level failure. No response was received."""

    pass


class StatusError(PipelineError):
    """Venue replied with a non-success HTTP status."""

    def __init__(
        self,
        message: str,
        status_code: int,
        *,
        operation: str | None = None,
        response: Any | None = None,
    ) -> None:
        super().__init__(message, operation=operation, response=response)
        self.status_code = status_code


class UnsupportedContentTypeError(PipelineError):
    """Response media type is neither JSON nor a binary stream."""

    def __init__(
        self,
        media_type: str,
        *,
        operation: str | None = None,
        response: Any | None = None,
    ) -> None:
        super().__init__(
            f"unsupported response content type: {media_type!r}",
            operation=operation,
            response=response,
        )
        self.media_type = media_type


class DecodeError(PipelineError):
    """Response payload could not be decoded."""

    pass


class TypeMismatchError(DecodeError):
    """A positional-array element or row has the wrong JSON kind or length."""

    def __init__(self, struct_name: str, index: int | None, value: Any, expected: str) -> None:
        where = f"index {index}" if index is not None else "row"
        super().__init__(
            f"{struct_name}: {where} expected {expected}, got {type(value).__name__} {value!r}"
        )
        self.struct_name = struct_name
        self.index = index
        self.value = value
        self.expected = expected


class StructureError(DecodeError):
    """A container object has an unexpected set of top-level keys."""

    def __init__(self, struct_name: str, keys: list[str], expected: str) -> None:
        super().__init__(f"{struct_name}: expected {expected}, got keys {keys}")
        self.struct_name = struct_name
        self.keys = keys
