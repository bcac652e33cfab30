"""Typed async client for the Kraken spot REST and websocket APIs."""

from .core import (
    CancellationError,
    DecodeError,
    ForgeError,
    KrakenSpotError,
    OHLCInterval,
    PipelineError,
    RequestContext,
    StatusError,
    StructureError,
    TransportError,
    TypeMismatchError,
    UnsupportedContentTypeError,
)
from .models import CloseOrder, Order, SecurityOptions, parse_message
from .runtime.rest import (
    AiohttpTransport,
    Authorizer,
    InstrumentedAuthorizer,
    KrakenSignatureAuthorizer,
    RestPipeline,
    RestReply,
)
from .spot.rest import KrakenSpotRESTConnector

__version__ = "0.1.0"

__all__ = [
    "CancellationError",
    "DecodeError",
    "ForgeError",
    "KrakenSpotError",
    "OHLCInterval",
    "PipelineError",
    "RequestContext",
    "StatusError",
    "StructureError",
    "TransportError",
    "TypeMismatchError",
    "UnsupportedContentTypeError",
    "CloseOrder",
    "Order",
    "SecurityOptions",
    "parse_message",
    "AiohttpTransport",
    "Authorizer",
    "InstrumentedAuthorizer",
    "KrakenSignatureAuthorizer",
    "RestPipeline",
    "RestReply",
    "KrakenSpotRESTConnector",
]
