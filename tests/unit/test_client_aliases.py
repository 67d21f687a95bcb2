"""Client alias operation tests."""

from __future__ import annotations

import json

import pytest

from typesense_client.clients import TypesenseClient
from typesense_client.core.exceptions import NotFoundError, UnauthorizedError
from typesense_client.http.fakes import FakeTransport
from typesense_client.models import Alias

ALIAS_JSON = {"name": "alias", "collection_name": "test"}


class TestCreateAlias:
    """PUT /aliases/{name}."""

    def test_upsert(self, client: TypesenseClient, transport: FakeTransport) -> None:
        transport.queue(200, json=ALIAS_JSON)

        alias = client.create_alias("alias", "test")

        request = transport.last_request
        assert request.method == "PUT"
        assert request.url.path == "/aliases/alias"
        assert json.loads(request.content) == {"collection_name": "test"}
        assert alias == Alias(name="alias", collection_name="test")

    def test_unauthorized(self, client: TypesenseClient, transport: FakeTransport) -> None:
        transport.queue(401, json={"message": "Forbidden"})

        with pytest.raises(UnauthorizedError):
            client.create_alias("alias", "test")


class TestRetrieveAlias:
    """GET /aliases/{name} and GET /aliases."""

    def test_get(self, client: TypesenseClient, transport: FakeTransport) -> None:
        transport.queue(200, json=ALIAS_JSON)

        assert client.retrieve_alias("alias").collection_name == "test"

    def test_get_missing(self, client: TypesenseClient, transport: FakeTransport) -> None:
        """404 on alias lookup -> NotFoundError."""
        transport.queue(404, json={"message": "Not Found"})

        with pytest.raises(NotFoundError):
            client.retrieve_alias("alias")

    def test_list(self, client: TypesenseClient, transport: FakeTransport) -> None:
        transport.queue(200, json={"aliases": [ALIAS_JSON]})

        assert client.retrieve_aliases() == [Alias(**ALIAS_JSON)]


class TestDeleteAlias:
    """DELETE /aliases/{name}."""

    def test_returns_deleted_alias(self, client: TypesenseClient, transport: FakeTransport) -> None:
        transport.queue(200, json=ALIAS_JSON)

        assert client.delete_alias("alias").name == "alias"

    def test_missing(self, client: TypesenseClient, transport: FakeTransport) -> None:
        transport.queue(404, json={"message": "Not Found"})

        with pytest.raises(NotFoundError):
            client.delete_alias("alias")
