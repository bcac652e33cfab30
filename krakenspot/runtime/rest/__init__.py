"""REST runtime: request pipeline, transport and authorization."""

from .auth import Authorizer, InstrumentedAuthorizer, KrakenSignatureAuthorizer
from .pipeline import RestPipeline, RestReply, decode_json
from .request import Request, parse_media_type
from .runner import FORM_CONTENT_TYPE, RestEndpointSpec, RestRunner
from .transport import AiohttpTransport, Transport, TransportResponse

__all__ = [
    "Authorizer",
    "InstrumentedAuthorizer",
    "KrakenSignatureAuthorizer",
    "RestPipeline",
    "RestReply",
    "decode_json",
    "Request",
    "parse_media_type",
    "FORM_CONTENT_TYPE",
    "RestEndpointSpec",
    "RestRunner",
    "AiohttpTransport",
    "Transport",
    "TransportResponse",
]
