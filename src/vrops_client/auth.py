"""Token acquisition against the suite-api auth endpoint."""

from __future__ import annotations
from dataclasses import replace
from typing import Any, Dict, Optional

from .config import ClientConfig, ResponseFormat
from .request import assemble_request
from .runtime.errors import AuthenticationError, ErrorCode
from .transport import RequestsTransport, Transport

TOKEN_ACQUIRE_PATH = "/suite-api/api/auth/token/acquire"


def acquire_token(
    server: Optional[str],
    username: Optional[str],
    password: Optional[str],
    *,
    auth_source: Optional[str] = None,
    transport: Optional[Transport] = None,
    config: Optional[ClientConfig] = None,
) -> str:
    """
    Exchange a username and password for an API token.

    Args:
        server: Server hostname (falls back to ``config.server``)
        username: Account name
        password: Account password
        auth_source: Optional authentication source, e.g. an LDAP source name
        transport: Execution collaborator; a RequestsTransport is created when omitted
        config: Shared client configuration

    Returns:
        The token string

    Raises:
        AuthenticationError: If credentials are missing or no token comes back
    """
    if not username or not password:
        raise AuthenticationError("missing username or password", ErrorCode.MISSING_CREDENTIALS)

    config = config or ClientConfig()
    if server:
        config = replace(config, server=server)

    body: Dict[str, Any] = {"username": username, "password": password}
    if auth_source:
        body["authSource"] = auth_source

    descriptor = assemble_request(
        "POST",
        config.base_url() + TOKEN_ACQUIRE_PATH,
        headers={"Accept": ResponseFormat.JSON.media_type},
        body=body,
    )

    owned = transport is None
    if owned:
        transport = RequestsTransport(config)
    try:
        payload = transport.execute(descriptor)
    finally:
        if owned:
            transport.close()

    token = payload.get("token") if isinstance(payload, dict) else None
    if not token:
        raise AuthenticationError("token missing from response", ErrorCode.UNAUTHENTICATED)
    return token
