"""
HTTP layer: request construction, transport and response interpretation.

Flow per call: RequestBuilder -> TransportProtocol.send -> response_interpreter.
"""

from typesense_client.http.fakes import FakeTransport
from typesense_client.http.request_builder import API_KEY_HEADER, RequestBuilder
from typesense_client.http.search_encoding import encode_search_params, encode_search_query
from typesense_client.http.transport import HTTPXTransport, TransportProtocol

__all__ = [
    "API_KEY_HEADER",
    "FakeTransport",
    "HTTPXTransport",
    "RequestBuilder",
    "TransportProtocol",
    "encode_search_params",
    "encode_search_query",
]
