"""
Mock implementations for testing.

Provides a recording transport with configurable responses and failures.
"""

from __future__ import annotations
from typing import Any, List, Optional

from vrops_client.request import RequestDescriptor
from vrops_client.runtime.errors import ErrorCode, TransportError


class MockTransport:
    """
    Transport that records every descriptor it receives.
    """

    def __init__(self, response: Any = None):
        """
        Initialize mock transport.

        Args:
            response: Payload returned by every execute() call
        """
        self.response = response if response is not None else {"resourceList": []}
        self.requests: List[RequestDescriptor] = []
        self.error: Optional[Exception] = None

    @property
    def call_count(self) -> int:
        return len(self.requests)

    @property
    def last_request(self) -> RequestDescriptor:
        return self.requests[-1]

    def set_response(self, response: Any):
        """Set the payload returned by execute()."""
        self.response = response

    def set_failure(self, error: Optional[Exception] = None):
        """Make execute() raise ``error`` (a TransportError by default)."""
        self.error = error or TransportError("Mock network error", ErrorCode.CONNECTION_FAILED)

    def execute(self, descriptor: RequestDescriptor) -> Any:
        self.requests.append(descriptor)
        if self.error is not None:
            raise self.error
        return self.response
