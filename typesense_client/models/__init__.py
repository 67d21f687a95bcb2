"""Domain models exchanged with the Typesense API."""

from typesense_client.models.alias import Alias
from typesense_client.models.api_key import (
    ACTION_ALL,
    ACTION_COLLECTIONS_ALL,
    ACTION_COLLECTIONS_CREATE,
    ACTION_COLLECTIONS_DELETE,
    ACTION_DOCUMENTS_GET,
    ACTION_DOCUMENTS_SEARCH,
    APIKey,
)
from typesense_client.models.collection import Collection, CollectionSchema, Field
from typesense_client.models.document import DocumentResponse
from typesense_client.models.health import DebugInfo, HealthStatus
from typesense_client.models.node import Node
from typesense_client.models.search import (
    FacetCount,
    FacetValueCount,
    SearchHighlight,
    SearchHit,
    SearchOptions,
    SearchResult,
)

__all__ = [
    "ACTION_ALL",
    "ACTION_COLLECTIONS_ALL",
    "ACTION_COLLECTIONS_CREATE",
    "ACTION_COLLECTIONS_DELETE",
    "ACTION_DOCUMENTS_GET",
    "ACTION_DOCUMENTS_SEARCH",
    "APIKey",
    "Alias",
    "Collection",
    "CollectionSchema",
    "DebugInfo",
    "DocumentResponse",
    "FacetCount",
    "FacetValueCount",
    "Field",
    "HealthStatus",
    "Node",
    "SearchHighlight",
    "SearchHit",
    "SearchOptions",
    "SearchResult",
]
