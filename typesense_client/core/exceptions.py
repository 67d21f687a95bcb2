"""
typesense-client - Custom Exceptions

The error taxonomy surfaced by every client operation.

Anti-Patterns Avoided:
- Exception Shadowing: every class ends with "Error" and none shadows a
  builtin such as ConnectionError or TimeoutError
- Stringly-typed errors: callers match on the class, never on the message

Transport failures (httpx.TransportError) are NOT wrapped; they propagate to
the caller unchanged.
"""

from __future__ import annotations


class TypesenseClientError(Exception):
    """Base exception for typesense-client.

    All custom exceptions inherit from this base class.

    Attributes:
        message: Human-readable error description.
        status_code: HTTP status that produced the error, when there was one.
    """

    default_message = "typesense request failed"

    def __init__(self, message: str | None = None, status_code: int | None = None) -> None:
        """
        Initialize the error.

        Args:
            message: Human-readable description, defaults to the class message.
            status_code: HTTP status code of the response, if any.
        """
        self.message = message or self.default_message
        self.status_code = status_code
        super().__init__(self.message)

    def __str__(self) -> str:
        """Return string representation of the error."""
        return self.message


# =============================================================================
# Sentinel errors
# =============================================================================


class ConnNotReadyError(TypesenseClientError):
    """Raised when the liveness probe fails while constructing a client."""

    default_message = "typesense connection is not ready"


class CollectionNotFoundError(TypesenseClientError):
    """Raised when a collection-scoped operation targets a missing collection."""

    default_message = "collection not found"


class CollectionDuplicateError(TypesenseClientError):
    """Raised when creating a collection whose name is already taken."""

    default_message = "collection already exists"


class CollectionNameRequiredError(TypesenseClientError):
    """Raised client-side when a collection schema has an empty name."""

    default_message = "collection name is required"


class CollectionFieldsRequiredError(TypesenseClientError):
    """Raised client-side when a collection schema declares no fields."""

    default_message = "collection fields are required"


class NotFoundError(TypesenseClientError):
    """Raised when a generic resource lookup (API key, alias) misses."""

    default_message = "resource not found"


class UnauthorizedError(TypesenseClientError):
    """Raised when the service rejects the configured credential."""

    default_message = "unauthorized: invalid or missing API key"


class DuplicateIDError(TypesenseClientError):
    """Raised when indexing a document whose id already exists."""

    default_message = "a document with this id already exists"


class QueryRequiredError(TypesenseClientError):
    """Raised when a search is attempted without query text."""

    default_message = "query is a required field"


class QueryByRequiredError(TypesenseClientError):
    """Raised when a search is attempted without query-by fields."""

    default_message = "query_by is a required field"


# =============================================================================
# Structured errors
# =============================================================================


class APIMessageError(TypesenseClientError):
    """Raised when the service reports a failure with a free-text message.

    Used for 400 responses that do not map onto a sentinel error.
    """


class TypesenseHTTPError(TypesenseClientError):
    """Raised for any status code the operation does not expect.

    Attributes:
        response_body: Raw body bytes of the unexpected response.
    """

    def __init__(self, status_code: int, response_body: bytes = b"") -> None:
        """
        Initialize TypesenseHTTPError with the raw response.

        Args:
            status_code: HTTP status code of the response.
            response_body: Raw response body.
        """
        self.response_body = response_body
        body = response_body.decode("utf-8", errors="replace")
        super().__init__(
            f"unexpected status code {status_code}: {body}",
            status_code=status_code,
        )


class DecodeError(TypesenseClientError):
    """Raised when a response body does not match the expected shape."""

    default_message = "could not decode response body"
