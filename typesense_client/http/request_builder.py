"""
Request Builder

Builds exactly one httpx.Request per client operation: method, URL,
credential header and JSON body. Nothing is sent from here.

URL layout: ``{protocol}://{host}:{port}/{path}``. Identifiers (collection
names, document ids, alias names) are interpolated as given; callers must
pass URL-safe identifiers.
"""

from __future__ import annotations

from typing import Any, Final

import httpx
import pydantic_core
from pydantic import BaseModel

from typesense_client.core.exceptions import (
    CollectionFieldsRequiredError,
    CollectionNameRequiredError,
)
from typesense_client.http.search_encoding import encode_search_params
from typesense_client.models.alias import Alias
from typesense_client.models.api_key import APIKey
from typesense_client.models.collection import CollectionSchema
from typesense_client.models.node import Node
from typesense_client.models.search import SearchOptions

# =============================================================================
# Module Constants
# =============================================================================

API_KEY_HEADER: Final[str] = "X-TYPESENSE-API-KEY"
JSON_CONTENT_TYPE: Final[str] = "application/json"

ENDPOINT_COLLECTIONS: Final[str] = "collections"
ENDPOINT_KEYS: Final[str] = "keys"
ENDPOINT_ALIASES: Final[str] = "aliases"
ENDPOINT_HEALTH: Final[str] = "health"
ENDPOINT_DEBUG: Final[str] = "debug"


def encode_json(payload: Any) -> bytes:
    """Serialize a request payload.

    Pydantic models drop unset optional fields; anything else (dicts,
    dataclasses, documents of any caller type) is serialized as-is.
    A serialization failure is a programming error and propagates.
    """
    if isinstance(payload, BaseModel):
        return payload.model_dump_json(exclude_none=True).encode()
    return pydantic_core.to_json(payload)


class RequestBuilder:
    """Builds requests addressed to one node.

    Holds only the immutable node, so a single builder is safe to share
    between threads.
    """

    def __init__(self, node: Node) -> None:
        self.node = node

    def build(
        self,
        method: str,
        path: str,
        *,
        params: list[tuple[str, str]] | None = None,
        payload: Any = None,
    ) -> httpx.Request:
        """Build a request against the node.

        Args:
            method: HTTP method
            path: Path relative to the node root, without leading slash
            params: Query parameters, kept in the given order
            payload: Body to JSON-encode, None for no body

        Returns:
            The prepared request
        """
        headers = {API_KEY_HEADER: self.node.api_key.get_secret_value()}
        content: bytes | None = None
        if payload is not None:
            content = encode_json(payload)
            headers["Content-Type"] = JSON_CONTENT_TYPE
        return httpx.Request(
            method,
            f"{self.node.base_url}/{path}",
            params=params,
            headers=headers,
            content=content,
        )

    # -------------------------------------------------------------------------
    # Collections
    # -------------------------------------------------------------------------

    def create_collection(self, schema: CollectionSchema) -> httpx.Request:
        """POST /collections.

        Raises:
            CollectionNameRequiredError: If the schema has no name
            CollectionFieldsRequiredError: If the schema has no fields
        """
        if not schema.name:
            raise CollectionNameRequiredError()
        if not schema.fields:
            raise CollectionFieldsRequiredError()
        return self.build("POST", ENDPOINT_COLLECTIONS, payload=schema)

    def retrieve_collections(self) -> httpx.Request:
        return self.build("GET", ENDPOINT_COLLECTIONS)

    def retrieve_collection(self, name: str) -> httpx.Request:
        return self.build("GET", f"{ENDPOINT_COLLECTIONS}/{name}")

    def delete_collection(self, name: str) -> httpx.Request:
        return self.build("DELETE", f"{ENDPOINT_COLLECTIONS}/{name}")

    # -------------------------------------------------------------------------
    # Documents
    # -------------------------------------------------------------------------

    def index_document(self, collection_name: str, document: Any) -> httpx.Request:
        return self.build(
            "POST",
            f"{ENDPOINT_COLLECTIONS}/{collection_name}/documents",
            payload=document,
        )

    def retrieve_document(self, collection_name: str, document_id: str) -> httpx.Request:
        return self.build(
            "GET", f"{ENDPOINT_COLLECTIONS}/{collection_name}/documents/{document_id}"
        )

    def delete_document(self, collection_name: str, document_id: str) -> httpx.Request:
        return self.build(
            "DELETE", f"{ENDPOINT_COLLECTIONS}/{collection_name}/documents/{document_id}"
        )

    def search(self, collection_name: str, options: SearchOptions) -> httpx.Request:
        """GET /collections/{name}/documents/search?{encoded query}.

        Raises:
            QueryRequiredError: If the query text is empty
            QueryByRequiredError: If no query-by field is given
        """
        return self.build(
            "GET",
            f"{ENDPOINT_COLLECTIONS}/{collection_name}/documents/search",
            params=encode_search_params(options),
        )

    # -------------------------------------------------------------------------
    # API keys
    # -------------------------------------------------------------------------

    def create_api_key(self, key: APIKey) -> httpx.Request:
        return self.build("POST", ENDPOINT_KEYS, payload=key)

    def get_api_key(self, key_id: int) -> httpx.Request:
        return self.build("GET", f"{ENDPOINT_KEYS}/{key_id}")

    def get_api_keys(self) -> httpx.Request:
        return self.build("GET", ENDPOINT_KEYS)

    def delete_api_key(self, key_id: int) -> httpx.Request:
        return self.build("DELETE", f"{ENDPOINT_KEYS}/{key_id}")

    # -------------------------------------------------------------------------
    # Aliases
    # -------------------------------------------------------------------------

    def create_alias(self, alias_name: str, collection_name: str) -> httpx.Request:
        """PUT /aliases/{name}, creating or repointing the alias."""
        return self.build(
            "PUT",
            f"{ENDPOINT_ALIASES}/{alias_name}",
            payload=Alias(collection_name=collection_name),
        )

    def retrieve_alias(self, alias_name: str) -> httpx.Request:
        return self.build("GET", f"{ENDPOINT_ALIASES}/{alias_name}")

    def retrieve_aliases(self) -> httpx.Request:
        return self.build("GET", ENDPOINT_ALIASES)

    def delete_alias(self, alias_name: str) -> httpx.Request:
        return self.build("DELETE", f"{ENDPOINT_ALIASES}/{alias_name}")

    # -------------------------------------------------------------------------
    # Probes
    # -------------------------------------------------------------------------

    def health(self) -> httpx.Request:
        return self.build("GET", ENDPOINT_HEALTH)

    def debug(self) -> httpx.Request:
        return self.build("GET", ENDPOINT_DEBUG)
