"""
Transport Adapter

Performs one HTTP request and returns one HTTP response. Nothing else:
no retries, no status handling, no decoding.

Patterns Applied:
- Repository Pattern: Protocol for duck typing, so tests inject a FakeTransport
- Connection pooling: one httpx.Client per transport, reused across calls
"""

from __future__ import annotations

from typing import Final, Protocol

import httpx

DEFAULT_TIMEOUT: Final[float] = 2.0


class TransportProtocol(Protocol):
    """Protocol for anything that can send a prepared httpx.Request.

    httpx.Client satisfies it as-is.
    """

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send the request and return the fully read response."""
        ...

    def close(self) -> None:
        """Release pooled connections."""
        ...


class HTTPXTransport:
    """Default transport backed by a pooled httpx.Client.

    Attributes:
        timeout: Per-request timeout in seconds, fixed at construction
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        """Initialize the transport.

        Args:
            timeout: Request timeout in seconds
        """
        self.timeout = timeout
        self._client = httpx.Client(timeout=httpx.Timeout(timeout))

    def send(self, request: httpx.Request) -> httpx.Response:
        """Send the request through the pooled client.

        Raises:
            httpx.TransportError: When no response was received
        """
        return self._client.send(request)

    def close(self) -> None:
        """Close the HTTP client connection pool."""
        self._client.close()
