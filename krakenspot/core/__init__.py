"""Core types: errors, context and enums."""

from .context import RequestContext
from .enums import (
    DeleteReportType,
    MediaType,
    OHLCInterval,
    OrderType,
    ReportFormat,
    ReportType,
    SelfTradePrevention,
    Side,
    TimeInForce,
    Trigger,
)
from .exceptions import (
    CancellationError,
    DecodeError,
    ForgeError,
    KrakenSpotError,
    PipelineError,
    StatusError,
    StructureError,
    TransportError,
    TypeMismatchError,
    UnsupportedContentTypeError,
)

__all__ = [
    "RequestContext",
    "DeleteReportType",
    "MediaType",
    "OHLCInterval",
    "OrderType",
    "ReportFormat",
    "ReportType",
    "SelfTradePrevention",
    "Side",
    "TimeInForce",
    "Trigger",
    "CancellationError",
    "DecodeError",
    "ForgeError",
    "KrakenSpotError",
    "PipelineError",
    "StatusError",
    "StructureError",
    "TransportError",
    "TypeMismatchError",
    "UnsupportedContentTypeError",
]
