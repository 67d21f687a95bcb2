"""Shared fixtures: one node, one scripted transport and one client per test."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from typesense_client.clients import TypesenseClient
from typesense_client.core.logging import reset_logging
from typesense_client.http.fakes import FakeTransport
from typesense_client.models import Node

TEST_API_KEY = "test-api-key"


@pytest.fixture(autouse=True)
def _unconfigured_logging() -> Iterator[None]:
    """structlog configuration is process-wide; no test inherits another's."""
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def node() -> Node:
    """Master node used by every client under test."""
    return Node(host="localhost", port=8108, protocol="http", api_key=TEST_API_KEY)


@pytest.fixture
def transport() -> FakeTransport:
    """Fresh scripted transport; nothing is shared between tests."""
    return FakeTransport()


@pytest.fixture
def client(node: Node, transport: FakeTransport) -> TypesenseClient:
    """Client wired to the scripted transport, no health probe performed."""
    return TypesenseClient(node, 2.0, transport=transport)
