"""Runtime helpers for the vROps resource query client"""

from .errors import (
    ErrorCode,
    VropsError,
    ConfigurationError,
    AuthenticationError,
    TransportError,
)

__all__ = [
    "ErrorCode",
    "VropsError",
    "ConfigurationError",
    "AuthenticationError",
    "TransportError",
]
