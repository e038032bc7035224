"""
Request execution.

``RequestsTransport`` issues a RequestDescriptor through a
``requests.Session`` and maps every failure onto TransportError. Any object
with an ``execute(descriptor)`` method can stand in for it.
"""

from __future__ import annotations
import logging
import time
from pathlib import Path
from typing import Any, Optional, Protocol

import requests

from .config import ClientConfig
from .request import RequestDescriptor
from .runtime.errors import ErrorCode, TransportError

logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Anything able to execute a RequestDescriptor."""

    def execute(self, descriptor: RequestDescriptor) -> Any:
        ...


class RequestsTransport:
    """
    Transport backed by the requests library.

    Example:
        ```python
        with RequestsTransport(ClientConfig(verify_ssl=False)) as transport:
            payload = transport.execute(descriptor)
        ```
    """

    def __init__(self, config: Optional[ClientConfig] = None, session: Optional[requests.Session] = None):
        """
        Initialize the transport.

        Args:
            config: Timeout, TLS verification and user agent settings
            session: Optional requests.Session to reuse; it is not closed by close()
        """
        self._config = config or ClientConfig()
        self._session = session or requests.Session()
        self._owns_session = session is None

    def close(self) -> None:
        """Close the HTTP session if owned by this transport."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> RequestsTransport:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def execute(self, descriptor: RequestDescriptor) -> Any:
        """
        Issue the request and return the parsed response body.

        JSON responses are decoded; anything else is returned as text. When
        the descriptor names an output target the raw body is also written
        there.

        Raises:
            TransportError: On connection failure, non-2xx status or a
                malformed JSON body
        """
        headers = {"User-Agent": self._config.user_agent}
        if descriptor.headers:
            headers.update(descriptor.headers)

        kwargs = {
            "headers": headers,
            "timeout": self._config.timeout,
            "verify": self._config.verify_ssl,
        }
        if descriptor.body is not None:
            kwargs["json"] = descriptor.body
        if descriptor.credential is not None:
            kwargs["auth"] = descriptor.credential

        logger.debug("%s %s", descriptor.method, descriptor.url)
        started = time.monotonic()
        try:
            response = self._session.request(descriptor.method, descriptor.url, **kwargs)
        except requests.exceptions.Timeout as e:
            raise TransportError(f"Request timed out: {e}", ErrorCode.TIMEOUT, cause=e)
        except requests.exceptions.ConnectionError as e:
            raise TransportError(f"Connection failed: {e}", ErrorCode.CONNECTION_FAILED, cause=e)
        except requests.exceptions.RequestException as e:
            raise TransportError(f"HTTP request failed: {e}", cause=e)

        logger.debug("%s %s -> %s in %.3fs", descriptor.method, descriptor.url,
                     response.status_code, time.monotonic() - started)

        if not 200 <= response.status_code < 300:
            raise TransportError(
                f"HTTP {response.status_code}: {response.reason}",
                ErrorCode.HTTP_STATUS,
                details={"url": descriptor.url},
                status_code=response.status_code,
            )

        if descriptor.output_target:
            self._write_output(descriptor.output_target, response.content)

        return self._parse(response, headers.get("Accept", ""))

    @staticmethod
    def _write_output(target: str, content: bytes) -> None:
        try:
            with open(Path(target), "wb") as f:
                f.write(content)
        except OSError as e:
            raise TransportError(
                f"Could not write response to {target}: {e}",
                ErrorCode.OUTPUT_WRITE_FAILED, cause=e,
            )

    @staticmethod
    def _parse(response: requests.Response, accept: str) -> Any:
        if accept:
            wants_json = "json" in accept
        else:
            wants_json = "json" in response.headers.get("Content-Type", "")
        if not wants_json:
            return response.text
        try:
            return response.json()
        except ValueError as e:
            raise TransportError(
                f"Invalid JSON response: {e}", ErrorCode.MALFORMED_RESPONSE,
                status_code=response.status_code, cause=e,
            )


__all__ = ["Transport", "RequestsTransport"]
