"""
Resource listing.

``get_resources`` resolves filter criteria into a GET against the resource
listing endpoint and returns the ``resourceList`` field of the response.
"""

from __future__ import annotations
import logging
from dataclasses import replace
from typing import Any, Dict, List, Optional, Sequence, Union
from pydantic import ValidationError

from .config import ClientConfig, ResponseFormat
from .query.params import RelationKind, ResourceFilter, Scalar
from .query.query_string import build_url
from .request import RequestDescriptor, assemble_request
from .runtime.errors import AuthenticationError, ConfigurationError, ErrorCode
from .transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)

RESOURCES_PATH = "/suite-api/api/resources"
RESOURCE_LIST_FIELD = "resourceList"

FilterArg = Union[None, Scalar, Sequence[Scalar]]


def build_headers(config: ClientConfig, token: Optional[str]) -> Dict[str, str]:
    """Accept header for the configured format plus the token header when a token is set."""
    headers = {"Accept": config.response_format.media_type}
    if token:
        headers["Authorization"] = f"{config.token_scheme} {token}"
    return headers


def build_paging_body(page: Optional[int] = None, page_size: Optional[int] = None) -> Optional[Dict[str, int]]:
    """
    Paging body for the listing request.

    None means unset; 0 is a valid page index and is sent.
    """
    body: Dict[str, int] = {}
    if page is not None:
        body["page"] = page
    if page_size is not None:
        body["pageSize"] = page_size
    return body or None


def build_resources_request(
    config: ClientConfig,
    token: str,
    filters: ResourceFilter,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
    output_file: Optional[str] = None,
    encode: bool = False,
) -> RequestDescriptor:
    """Assemble the listing request without issuing it."""
    url = build_url(config.base_url(), RESOURCES_PATH, filters.to_pairs(), encode=encode)
    return assemble_request(
        "GET",
        url,
        headers=build_headers(config, token),
        body=build_paging_body(page, page_size),
        output_target=output_file,
    )


def get_resources(
    server: Optional[str] = None,
    token: Optional[str] = None,
    *,
    response_format: Union[str, ResponseFormat, None] = None,
    output_file: Optional[str] = None,
    page: Optional[int] = None,
    page_size: Optional[int] = None,
    name: FilterArg = None,
    regex: FilterArg = None,
    resource_kind: FilterArg = None,
    adapter_kind: FilterArg = None,
    include_related: Union[None, str, RelationKind] = None,
    resource_id: FilterArg = None,
    encode: bool = False,
    transport: Optional[Transport] = None,
    config: Optional[ClientConfig] = None,
) -> Union[List[Any], Any]:
    """
    List resources matching the given filters.

    Args:
        server: Server hostname (falls back to ``config.server``)
        token: Authentication token (falls back to ``config.token``)
        response_format: ``json`` (default) or ``xml``
        output_file: Also write the raw response to this path
        page: Page index, sent only when not None
        page_size: Page size, sent only when not None
        name: Resource name(s)
        regex: Name regular expression(s)
        resource_kind: Resource kind key(s)
        adapter_kind: Adapter kind key(s)
        include_related: ``PARENT`` or ``CHILD``
        resource_id: Resource identifier(s)
        encode: Percent-encode query values
        transport: Execution collaborator; a RequestsTransport is created when omitted
        config: Shared client configuration

    Returns:
        The ``resourceList`` field for JSON responses, the raw text for XML

    Raises:
        AuthenticationError: If no token is available
        ConfigurationError: If the server is missing or the request is malformed
        TransportError: Propagated from the transport
    """
    token = token or (config.token if config else None)
    if not token:
        raise AuthenticationError("missing authentication token", ErrorCode.MISSING_TOKEN)

    config = config or ClientConfig()
    overrides: Dict[str, Any] = {}
    if server:
        overrides["server"] = server
    if response_format:
        overrides["response_format"] = response_format
    if overrides:
        config = replace(config, **overrides)

    try:
        filters = ResourceFilter(
            name=name,
            regex=regex,
            resource_kind=resource_kind,
            adapter_kind=adapter_kind,
            include_related=include_related,
            resource_id=resource_id,
        )
    except ValidationError as e:
        raise ConfigurationError(
            f"invalid resource filter: {e.error_count()} error(s)",
            ErrorCode.INVALID_CONFIG,
            details={"errors": [err["msg"] for err in e.errors()]},
            cause=e,
        )
    descriptor = build_resources_request(config, token, filters, page, page_size, output_file, encode)

    owned = transport is None
    if owned:
        transport = RequestsTransport(config)
    try:
        payload = transport.execute(descriptor)
    finally:
        if owned:
            transport.close()

    if config.response_format is ResponseFormat.XML:
        return payload
    if isinstance(payload, dict):
        resources = payload.get(RESOURCE_LIST_FIELD) or []
        logger.debug("Received %d resources", len(resources))
        return resources
    return payload


__all__ = [
    "RESOURCES_PATH",
    "build_headers",
    "build_paging_body",
    "build_resources_request",
    "get_resources",
]
