"""
Request assembly.

Builds the immutable description of an HTTP request from a sparse set of
optional parts. Nothing here performs I/O or logs; header and body values may
hold tokens or passwords.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlparse

from .runtime.errors import ConfigurationError, ErrorCode


HTTP_METHODS = frozenset({"GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"})


@dataclass(frozen=True)
class RequestDescriptor:
    """A ready-to-execute HTTP request.

    Optional parts that were not supplied are None.
    """

    method: str
    url: str
    headers: Optional[Dict[str, str]] = None
    credential: Any = None
    body: Any = None
    output_target: Optional[str] = None

    def __repr__(self) -> str:
        # headers, credential and body may carry secrets
        return (f"RequestDescriptor(method={self.method!r}, url={self.url!r}, "
                f"output_target={self.output_target!r})")


def _present(value: Any) -> bool:
    if value is None:
        return False
    try:
        return len(value) > 0
    except TypeError:
        return True


def assemble_request(
    method: Optional[str],
    url: Optional[str],
    headers: Optional[Mapping[str, str]] = None,
    credential: Any = None,
    body: Any = None,
    output_target: Optional[str] = None,
) -> RequestDescriptor:
    """
    Assemble a request descriptor.

    Args:
        method: HTTP verb (required)
        url: Absolute http(s) URL (required)
        headers: Request headers
        credential: Opaque credential handed to the transport
        body: Structured payload
        output_target: Path the raw response is written to

    Returns:
        RequestDescriptor

    Raises:
        ConfigurationError: If method or url is missing or invalid
    """
    if not method:
        raise ConfigurationError("missing method", ErrorCode.MISSING_METHOD)
    if not url:
        raise ConfigurationError("missing URL", ErrorCode.MISSING_URL)

    verb = method.upper()
    if verb not in HTTP_METHODS:
        raise ConfigurationError(
            f"unsupported method: {method}", ErrorCode.INVALID_METHOD,
            details={"allowed": sorted(HTTP_METHODS)},
        )

    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        raise ConfigurationError("URL must be absolute", ErrorCode.INVALID_URL, details={"url": url})

    return RequestDescriptor(
        method=verb,
        url=url,
        headers=dict(headers) if _present(headers) else None,
        credential=credential if _present(credential) else None,
        body=body if _present(body) else None,
        output_target=str(output_target) if output_target else None,
    )
