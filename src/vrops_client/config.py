"""
Client configuration.

Holds the connection settings shared by every request: server, token,
response format, timeout and TLS verification. Values can be given directly
or read from ``VROPS_*`` environment variables.
"""

from __future__ import annotations
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional

from .runtime.errors import ConfigurationError, ErrorCode


ENV_SERVER = "VROPS_SERVER"
ENV_TOKEN = "VROPS_TOKEN"
ENV_VERIFY_SSL = "VROPS_VERIFY_SSL"
ENV_TIMEOUT = "VROPS_TIMEOUT"

DEFAULT_TOKEN_SCHEME = "vRealizeOpsToken"


class ResponseFormat(str, Enum):
    """Media type requested through the Accept header."""

    JSON = "json"
    XML = "xml"

    @property
    def media_type(self) -> str:
        return f"application/{self.value}"


def _parse_bool(value: str) -> bool:
    return value.strip().lower() not in ("0", "false", "no", "off", "")


@dataclass
class ClientConfig:
    """Configuration for the vROps resource query client."""

    server: Optional[str] = None
    token: Optional[str] = None
    token_scheme: str = DEFAULT_TOKEN_SCHEME
    response_format: ResponseFormat = ResponseFormat.JSON
    timeout: float = 30.0
    verify_ssl: bool = True
    user_agent: str = "vrops-client-python/1.0.0"

    def __post_init__(self):
        if not isinstance(self.response_format, ResponseFormat):
            try:
                self.response_format = ResponseFormat(str(self.response_format).lower())
            except ValueError:
                raise ConfigurationError(
                    f"Unsupported response format: {self.response_format!r}",
                    ErrorCode.INVALID_CONFIG,
                    details={"allowed": [f.value for f in ResponseFormat]},
                )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "ClientConfig":
        """
        Build a configuration from environment variables.

        Explicit keyword overrides win over the environment; overrides set to
        None are ignored.

        Args:
            environ: Mapping to read from (defaults to ``os.environ``)
            **overrides: Field values that take precedence

        Returns:
            A new ClientConfig
        """
        env = os.environ if environ is None else environ
        values = {}
        if env.get(ENV_SERVER):
            values["server"] = env[ENV_SERVER]
        if env.get(ENV_TOKEN):
            values["token"] = env[ENV_TOKEN]
        if ENV_VERIFY_SSL in env:
            values["verify_ssl"] = _parse_bool(env[ENV_VERIFY_SSL])
        if env.get(ENV_TIMEOUT):
            try:
                values["timeout"] = float(env[ENV_TIMEOUT])
            except ValueError as e:
                raise ConfigurationError(
                    f"{ENV_TIMEOUT} must be a number", ErrorCode.INVALID_CONFIG, cause=e
                )
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def validate(self) -> "ClientConfig":
        """Check the settings needed to reach a server."""
        if not self.server:
            raise ConfigurationError("missing server", ErrorCode.INVALID_CONFIG)
        if self.timeout <= 0:
            raise ConfigurationError(
                "timeout must be positive", ErrorCode.INVALID_CONFIG,
                details={"timeout": self.timeout},
            )
        return self

    def base_url(self) -> str:
        """HTTPS origin of the configured server."""
        self.validate()
        server = self.server.rstrip("/")
        if "://" in server:
            return server
        return f"https://{server}"
