"""
Typesense Client Facade

One method per remote capability. Every method is the same composition:
RequestBuilder -> TransportProtocol.send -> response_interpreter.

Patterns Applied:
- Connection pooling: one transport per client, reused by every call
- Repository Pattern: TransportProtocol lets tests inject a FakeTransport
- Custom namespaced exceptions (typesense_client.core.exceptions)

The client keeps no per-call state, so one instance can serve many threads.
There are no retries: a failed call is reported immediately.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any

import httpx

from typesense_client.core.config import TypesenseSettings, get_settings
from typesense_client.core.exceptions import ConnNotReadyError
from typesense_client.core.logging import configure_logging, get_logger
from typesense_client.http import response_interpreter as interpret
from typesense_client.http.request_builder import RequestBuilder
from typesense_client.http.transport import DEFAULT_TIMEOUT, HTTPXTransport, TransportProtocol
from typesense_client.models.alias import Alias
from typesense_client.models.api_key import APIKey
from typesense_client.models.collection import Collection, CollectionSchema
from typesense_client.models.document import DocumentResponse
from typesense_client.models.health import DebugInfo
from typesense_client.models.node import Node
from typesense_client.models.search import SearchOptions, SearchResult

logger = get_logger(__name__)


class TypesenseClient:
    """Client for the Typesense HTTP API.

    Requests go to the master node. Replica nodes are kept as configuration
    only; no read routing is done.

    Attributes:
        master_node: Read/write node every request is sent to
        replica_nodes: Declared read replicas
        timeout_seconds: Per-request timeout of the default transport
    """

    def __init__(
        self,
        master_node: Node,
        timeout_seconds: float = DEFAULT_TIMEOUT,
        *replica_nodes: Node,
        transport: TransportProtocol | None = None,
    ) -> None:
        """Initialize the client without contacting the service.

        Use new_client() to also verify the node is ready.

        Args:
            master_node: Node to send requests to
            timeout_seconds: Request timeout in seconds
            replica_nodes: Read replicas, declared only
            transport: Transport to use instead of a pooled httpx client
        """
        self.master_node = master_node
        self.replica_nodes: tuple[Node, ...] = tuple(replica_nodes)
        self.timeout_seconds = timeout_seconds
        self._owns_transport = transport is None
        self._transport: TransportProtocol = (
            transport if transport is not None else HTTPXTransport(timeout=timeout_seconds)
        )
        self._requests = RequestBuilder(master_node)

    @classmethod
    def from_settings(
        cls,
        settings: TypesenseSettings | None = None,
        *replica_nodes: Node,
        transport: TransportProtocol | None = None,
    ) -> TypesenseClient:
        """Build a client from environment-backed settings.

        Also configures structlog from settings.log_level and
        settings.log_json, unless logging was already configured.
        """
        settings = settings or get_settings()
        configure_logging(settings.log_level, settings.log_json)
        return cls(
            settings.master_node(),
            settings.timeout_seconds,
            *replica_nodes,
            transport=transport,
        )

    def __enter__(self) -> TypesenseClient:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()

    def _send(self, request: httpx.Request) -> httpx.Response:
        response = self._transport.send(request)
        logger.debug(
            "typesense_request",
            method=request.method,
            path=request.url.path,
            status_code=response.status_code,
        )
        return response

    # =========================================================================
    # Probes
    # =========================================================================

    def health(self) -> bool:
        """Report whether the node is ready.

        Never raises: transport and decode failures read as not ready.
        """
        try:
            response = self._send(self._requests.health())
        except httpx.HTTPError as e:
            logger.warning("typesense_health_failed", host=self.master_node.host, error=str(e))
            return False
        return interpret.health_status(response)

    def ping(self) -> None:
        """Raise ConnNotReadyError unless the node reports ready."""
        if not self.health():
            raise ConnNotReadyError()

    def debug_info(self) -> str:
        """Return the version reported by GET /debug."""
        response = self._send(self._requests.debug())
        info: DebugInfo = interpret.decode(response, DebugInfo, interpret.DEBUG_INFO)
        return info.version

    # =========================================================================
    # Collections
    # =========================================================================

    def create_collection(self, schema: CollectionSchema) -> Collection:
        """Create a collection.

        Raises:
            CollectionNameRequiredError: Empty name, detected before sending
            CollectionFieldsRequiredError: No fields, detected before sending
            CollectionDuplicateError: A collection with this name exists
        """
        response = self._send(self._requests.create_collection(schema))
        return interpret.decode(response, Collection, interpret.CREATE_COLLECTION)

    def retrieve_collections(self) -> list[Collection]:
        response = self._send(self._requests.retrieve_collections())
        return interpret.decode(response, list[Collection], interpret.RETRIEVE_COLLECTIONS)

    def retrieve_collection(self, name: str) -> Collection:
        """Get one collection.

        Raises:
            CollectionNotFoundError: No such collection
        """
        response = self._send(self._requests.retrieve_collection(name))
        return interpret.decode(response, Collection, interpret.RETRIEVE_COLLECTION)

    def delete_collection(self, name: str) -> Collection:
        """Delete a collection and return what was deleted.

        Raises:
            CollectionNotFoundError: No such collection, including one
                that was already deleted
        """
        response = self._send(self._requests.delete_collection(name))
        return interpret.decode(response, Collection, interpret.DELETE_COLLECTION)

    # =========================================================================
    # Documents
    # =========================================================================

    def _document_call(
        self, request: httpx.Request, policy: interpret.OperationPolicy
    ) -> DocumentResponse:
        try:
            response = self._send(request)
        except httpx.HTTPError as e:
            return DocumentResponse(error=e)
        return interpret.document_response(response, policy)

    def index_document(self, collection_name: str, document: Any) -> DocumentResponse:
        """Index a document.

        Errors are not raised; they are stored on the returned
        DocumentResponse and surface when it is decoded.
        """
        return self._document_call(
            self._requests.index_document(collection_name, document),
            interpret.INDEX_DOCUMENT,
        )

    def retrieve_document(self, collection_name: str, document_id: str) -> DocumentResponse:
        return self._document_call(
            self._requests.retrieve_document(collection_name, document_id),
            interpret.RETRIEVE_DOCUMENT,
        )

    def delete_document(self, collection_name: str, document_id: str) -> DocumentResponse:
        return self._document_call(
            self._requests.delete_document(collection_name, document_id),
            interpret.DELETE_DOCUMENT,
        )

    def search(
        self,
        collection_name: str,
        query: str,
        query_by: list[str],
        options: SearchOptions | None = None,
    ) -> SearchResult:
        """Search documents of a collection.

        Args:
            collection_name: Collection to search
            query: Text to search for
            query_by: Fields to search in
            options: Further search parameters; its own query and
                query_by are overridden by the arguments

        Returns:
            SearchResult with hits and facet counts

        Raises:
            QueryRequiredError: Empty query, detected before sending
            QueryByRequiredError: Empty query_by, detected before sending
            CollectionNotFoundError: No such collection
            APIMessageError: The service rejected the search parameters
        """
        if options is None:
            options = SearchOptions(query=query, query_by=query_by)
        else:
            options = replace(options, query=query, query_by=query_by)
        response = self._send(self._requests.search(collection_name, options))
        return interpret.decode(response, SearchResult, interpret.SEARCH)

    # =========================================================================
    # API keys
    # =========================================================================

    def create_api_key(self, key: APIKey) -> APIKey:
        """Create an API key. The returned key carries its secret value."""
        response = self._send(self._requests.create_api_key(key))
        return interpret.decode(response, APIKey, interpret.CREATE_API_KEY)

    def get_api_key(self, key_id: int) -> APIKey:
        """Get an API key by id.

        Raises:
            NotFoundError: No key with this id
        """
        response = self._send(self._requests.get_api_key(key_id))
        return interpret.decode(response, APIKey, interpret.GET_API_KEY)

    def get_api_keys(self) -> list[APIKey]:
        response = self._send(self._requests.get_api_keys())
        return interpret.decode_list(response, "keys", list[APIKey], interpret.GET_API_KEYS)

    def delete_api_key(self, key_id: int) -> None:
        """Delete an API key.

        Raises:
            NotFoundError: No key with this id
        """
        response = self._send(self._requests.delete_api_key(key_id))
        interpret.raise_for_status(response, interpret.DELETE_API_KEY)

    # =========================================================================
    # Aliases
    # =========================================================================

    def create_alias(self, alias_name: str, collection_name: str) -> Alias:
        """Create the alias, or repoint it if it already exists."""
        response = self._send(self._requests.create_alias(alias_name, collection_name))
        return interpret.decode(response, Alias, interpret.CREATE_ALIAS)

    def retrieve_alias(self, alias_name: str) -> Alias:
        """Get an alias.

        Raises:
            NotFoundError: No such alias
        """
        response = self._send(self._requests.retrieve_alias(alias_name))
        return interpret.decode(response, Alias, interpret.RETRIEVE_ALIAS)

    def retrieve_aliases(self) -> list[Alias]:
        response = self._send(self._requests.retrieve_aliases())
        return interpret.decode_list(response, "aliases", list[Alias], interpret.RETRIEVE_ALIASES)

    def delete_alias(self, alias_name: str) -> Alias:
        response = self._send(self._requests.delete_alias(alias_name))
        return interpret.decode(response, Alias, interpret.DELETE_ALIAS)


def new_client(
    master_node: Node,
    timeout_seconds: float = DEFAULT_TIMEOUT,
    *replica_nodes: Node,
    transport: TransportProtocol | None = None,
) -> TypesenseClient:
    """Build a client and check the master node is ready.

    Args:
        master_node: Node to send requests to
        timeout_seconds: Request timeout in seconds
        replica_nodes: Read replicas, declared only
        transport: Transport to use instead of a pooled httpx client

    Returns:
        A client whose node answered the health probe with ok

    Raises:
        ConnNotReadyError: The health probe did not report ready
    """
    client = TypesenseClient(master_node, timeout_seconds, *replica_nodes, transport=transport)
    try:
        client.ping()
    except ConnNotReadyError:
        client.close()
        raise
    return client
