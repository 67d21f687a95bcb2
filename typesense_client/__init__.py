"""typesense-client: typed Python client for the Typesense search API.

This package translates typed method calls into HTTP requests against a
Typesense node and decodes its JSON responses into typed results:
- Collections, documents and search
- API keys and aliases
- Health and debug probes
"""

from typesense_client.clients import TypesenseClient, new_client
from typesense_client.core.exceptions import TypesenseClientError
from typesense_client.models import Node, SearchOptions

__version__ = "0.1.0"
__all__ = [
    "Node",
    "SearchOptions",
    "TypesenseClient",
    "TypesenseClientError",
    "__version__",
    "new_client",
]
