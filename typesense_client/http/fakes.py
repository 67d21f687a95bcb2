"""
Fake Transport for Testing

A scripted responder implementing TransportProtocol. Each test builds its
own instance, queues the responses it needs and inspects the requests that
were sent.

Example:
    >>> transport = FakeTransport()
    >>> transport.queue(200, json={"ok": True})
    >>> client = TypesenseClient(node, transport=transport)
    >>> client.health()
    True
    >>> transport.last_request.url.path
    '/health'
"""

from __future__ import annotations

from collections import deque
from typing import Any

import httpx


class FakeTransport:
    """Scripted transport that never touches the network.

    Queued items are returned in order. An exception instance in the queue
    is raised instead of returned, which simulates a transport failure.
    """

    def __init__(self, responses: list[httpx.Response | Exception] | None = None) -> None:
        """Initialize fake transport with optional preset responses.

        Args:
            responses: Responses (or exceptions) to hand out in order
        """
        self._responses: deque[httpx.Response | Exception] = deque(responses or [])
        self.requests: list[httpx.Request] = []
        self.closed = False

    def queue(
        self,
        status_code: int,
        *,
        json: Any = None,
        content: bytes | str | None = None,
    ) -> FakeTransport:
        """Queue a response.

        Args:
            status_code: HTTP status to return
            json: Body to JSON-encode
            content: Raw body, used when json is None

        Returns:
            self, so calls can be chained
        """
        if json is not None:
            response = httpx.Response(status_code, json=json)
        else:
            response = httpx.Response(status_code, content=content or b"")
        self._responses.append(response)
        return self

    def fail(self, error: Exception) -> FakeTransport:
        """Queue a transport failure."""
        self._responses.append(error)
        return self

    @property
    def last_request(self) -> httpx.Request:
        """The most recently sent request."""
        if not self.requests:
            raise AssertionError("no request was sent")
        return self.requests[-1]

    def send(self, request: httpx.Request) -> httpx.Response:
        """Record the request and return the next scripted response."""
        self.requests.append(request)
        if not self._responses:
            raise AssertionError(f"unexpected request: {request.method} {request.url}")
        item = self._responses.popleft()
        if isinstance(item, Exception):
            raise item
        item.request = request
        return item

    def close(self) -> None:
        self.closed = True
