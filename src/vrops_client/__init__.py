"""
vROps Python Client - Resource Queries

This package builds and issues resource listing requests against the
vRealize Operations suite-api: filter collection, query string construction,
request assembly and a requests-based transport.
"""

from .config import ClientConfig, ResponseFormat
from .query import (
    KeyValuePair,
    RelationKind,
    ResourceFilter,
    collect_params,
    append_query,
    build_url,
)
from .request import RequestDescriptor, assemble_request
from .transport import Transport, RequestsTransport
from .resources import get_resources
from .auth import acquire_token
from .runtime.errors import (
    ErrorCode,
    VropsError,
    ConfigurationError,
    AuthenticationError,
    TransportError,
)

__version__ = "1.0.0"
__all__ = [
    # Configuration
    "ClientConfig",
    "ResponseFormat",

    # Query construction
    "KeyValuePair",
    "RelationKind",
    "ResourceFilter",
    "collect_params",
    "append_query",
    "build_url",

    # Requests
    "RequestDescriptor",
    "assemble_request",
    "Transport",
    "RequestsTransport",

    # Operations
    "get_resources",
    "acquire_token",

    # Errors
    "ErrorCode",
    "VropsError",
    "ConfigurationError",
    "AuthenticationError",
    "TransportError",
]
