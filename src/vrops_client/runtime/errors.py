"""
vROps Client Error Model

This module provides the error handling framework for the vROps resource
query client. Every error carries a stable code, a message, optional details
and the underlying cause, and all of them share a single base class so that
callers can catch the whole family at once.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes raised by the client."""

    UNKNOWN = 1

    # Configuration errors (100-199)
    CONFIGURATION_ERROR = 100
    MISSING_METHOD = 101
    MISSING_URL = 102
    INVALID_METHOD = 103
    INVALID_URL = 104
    INVALID_CONFIG = 105

    # Transport errors (200-299)
    TRANSPORT_ERROR = 200
    CONNECTION_FAILED = 201
    TIMEOUT = 202
    HTTP_STATUS = 203
    MALFORMED_RESPONSE = 204
    OUTPUT_WRITE_FAILED = 205

    # Authentication errors (300-399)
    UNAUTHENTICATED = 300
    MISSING_TOKEN = 301
    MISSING_CREDENTIALS = 302


class VropsError(Exception):
    """
    Base class for all client errors.

    Provides structured error information: a code, a message, free-form
    details and the exception that caused it, if any.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        """
        Initialize a client error.

        Args:
            message: Error message
            code: Error code
            details: Additional error details
            cause: Underlying exception that caused this error
        """
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details or {}
        self.cause = cause

    def __str__(self) -> str:
        text = f"{self.message} ({self.code.name})"
        if self.details:
            text += " " + ", ".join(f"{key}={value}" for key, value in self.details.items())
        if self.cause is not None:
            text += f"; caused by {type(self.cause).__name__}: {self.cause}"
        return text

    def to_dict(self) -> Dict[str, Any]:
        """Error as a JSON-serialisable mapping, e.g. for CLI output."""
        return {
            "error": type(self).__name__,
            "code": self.code.name,
            "message": self.message,
            "details": dict(self.details),
        }


class ConfigurationError(VropsError):
    """A mandatory request component or configuration value is missing or invalid."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.CONFIGURATION_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class AuthenticationError(VropsError):
    """No token or credentials were supplied where one is required."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNAUTHENTICATED,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, code, details, cause)


class TransportError(VropsError):
    """
    Raised by the execution layer.

    Covers connection failures, non-success HTTP status codes and response
    bodies that cannot be parsed. ``status_code`` is set when the server
    answered.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.TRANSPORT_ERROR,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None,
                 status_code: Optional[int] = None):
        super().__init__(message, code, details, cause)
        self.status_code = status_code


__all__ = [
    "ErrorCode",
    "VropsError",
    "ConfigurationError",
    "AuthenticationError",
    "TransportError",
]
