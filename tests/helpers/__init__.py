from .mocks import MockTransport

__all__ = [
    "MockTransport",
]
