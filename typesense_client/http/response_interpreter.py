"""
Response Interpreter

Classifies an httpx.Response as success or a specific error, then decodes
the body into the operation's result type.

The same status code means different things for different operations
(409 on collection creation is CollectionDuplicateError, on document
indexing it is DuplicateIDError), so every classification takes an
OperationPolicy rather than consulting one global status table.

Shared rules, applied after the policy's own table:
- 401 -> UnauthorizedError
- 400 -> the policy's recognized message, else APIMessageError
- anything else unexpected -> TypesenseHTTPError with the raw body
"""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final, TypeVar

import httpx
from pydantic import TypeAdapter, ValidationError

from typesense_client.core.exceptions import (
    APIMessageError,
    CollectionDuplicateError,
    CollectionNotFoundError,
    DecodeError,
    DuplicateIDError,
    NotFoundError,
    QueryByRequiredError,
    QueryRequiredError,
    TypesenseClientError,
    TypesenseHTTPError,
    UnauthorizedError,
)
from typesense_client.models.document import DocumentResponse
from typesense_client.models.health import HealthStatus

T = TypeVar("T")

STATUS_BAD_REQUEST: Final[int] = 400
STATUS_UNAUTHORIZED: Final[int] = 401
STATUS_SERVICE_UNAVAILABLE: Final[int] = 503


# =============================================================================
# Operation policies
# =============================================================================


@dataclass(frozen=True, slots=True)
class OperationPolicy:
    """How one operation reads the status of its response.

    Attributes:
        name: Operation name, used in logs and error messages
        success: Status codes that mean the call succeeded
        status_errors: Operation-specific status -> error class table
        message_errors: Patterns matched against 400 messages, mapping a
            recognized message onto a sentinel error
    """

    name: str
    success: frozenset[int] = frozenset({200})
    status_errors: Mapping[int, type[TypesenseClientError]] = field(default_factory=dict)
    message_errors: tuple[tuple[re.Pattern[str], type[TypesenseClientError]], ...] = ()


_OK = frozenset({200})
_OK_OR_CREATED = frozenset({200, 201})
_CREATED = frozenset({201})

_COLLECTION_MISSING = {404: CollectionNotFoundError}
_RESOURCE_MISSING = {404: NotFoundError}

CREATE_COLLECTION = OperationPolicy(
    "create_collection",
    _OK_OR_CREATED,
    {404: CollectionNotFoundError, 409: CollectionDuplicateError},
)
RETRIEVE_COLLECTIONS = OperationPolicy("retrieve_collections", _OK)
RETRIEVE_COLLECTION = OperationPolicy("retrieve_collection", _OK, _COLLECTION_MISSING)
DELETE_COLLECTION = OperationPolicy("delete_collection", _OK, _COLLECTION_MISSING)

INDEX_DOCUMENT = OperationPolicy(
    "index_document",
    _OK_OR_CREATED,
    {404: CollectionNotFoundError, 409: DuplicateIDError},
)
RETRIEVE_DOCUMENT = OperationPolicy("retrieve_document", _OK, _COLLECTION_MISSING)
DELETE_DOCUMENT = OperationPolicy("delete_document", _OK, _COLLECTION_MISSING)

SEARCH = OperationPolicy(
    "search",
    _OK,
    _COLLECTION_MISSING,
    (
        (re.compile(r"`q`[^.]*required", re.IGNORECASE), QueryRequiredError),
        (re.compile(r"`query_by`[^.]*required", re.IGNORECASE), QueryByRequiredError),
    ),
)

CREATE_API_KEY = OperationPolicy("create_api_key", _CREATED)
GET_API_KEY = OperationPolicy("get_api_key", _OK, _RESOURCE_MISSING)
GET_API_KEYS = OperationPolicy("get_api_keys", _OK)
DELETE_API_KEY = OperationPolicy("delete_api_key", _OK, _RESOURCE_MISSING)

CREATE_ALIAS = OperationPolicy("create_alias", _OK, _RESOURCE_MISSING)
RETRIEVE_ALIAS = OperationPolicy("retrieve_alias", _OK, _RESOURCE_MISSING)
RETRIEVE_ALIASES = OperationPolicy("retrieve_aliases", _OK)
DELETE_ALIAS = OperationPolicy("delete_alias", _OK, _RESOURCE_MISSING)

DEBUG_INFO = OperationPolicy("debug_info", _OK)


# =============================================================================
# Classification
# =============================================================================


def api_message(response: httpx.Response) -> str:
    """Extract the ``message`` the service attaches to errors.

    Falls back to the raw body text when the body is not the usual
    ``{"message": ...}`` object.
    """
    try:
        body = json.loads(response.content)
    except ValueError:
        return response.text
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return response.text


def classify(response: httpx.Response, policy: OperationPolicy) -> TypesenseClientError | None:
    """Map a response onto an error, or None when it is a success.

    Args:
        response: Response to classify
        policy: Policy of the operation that produced it

    Returns:
        The error describing the failure, None on success
    """
    status = response.status_code
    if status in policy.success:
        return None

    error_class = policy.status_errors.get(status)
    if error_class is not None:
        return error_class(status_code=status)

    if status == STATUS_UNAUTHORIZED:
        return UnauthorizedError(status_code=status)

    if status == STATUS_BAD_REQUEST:
        message = api_message(response)
        for pattern, message_error in policy.message_errors:
            if pattern.search(message):
                return message_error(status_code=status)
        return APIMessageError(message, status_code=status)

    return TypesenseHTTPError(status, response.content)


def raise_for_status(response: httpx.Response, policy: OperationPolicy) -> None:
    """Raise the classified error, if any."""
    error = classify(response, policy)
    if error is not None:
        raise error


def decode(response: httpx.Response, target: Any, policy: OperationPolicy) -> Any:
    """Classify the response and decode its body into ``target``.

    Args:
        response: Response to interpret
        target: Any type pydantic can validate (model, list[model], ...)
        policy: Policy of the operation that produced the response

    Returns:
        The decoded body

    Raises:
        TypesenseClientError: The classified error, or DecodeError when the
            body does not match ``target``
    """
    raise_for_status(response, policy)
    try:
        return TypeAdapter(target).validate_json(response.content)
    except ValidationError as e:
        raise DecodeError(
            f"{policy.name}: could not decode response: {e}",
            status_code=response.status_code,
        ) from e


def decode_list(response: httpx.Response, key: str, target: Any, policy: OperationPolicy) -> Any:
    """Decode a list wrapped in an envelope, e.g. ``{"keys": [...]}``."""
    envelope = decode(response, dict[str, Any], policy)
    try:
        return TypeAdapter(target).validate_python(envelope.get(key, []))
    except ValidationError as e:
        raise DecodeError(
            f"{policy.name}: could not decode {key!r}: {e}",
            status_code=response.status_code,
        ) from e


def document_response(response: httpx.Response, policy: OperationPolicy) -> DocumentResponse:
    """Wrap a document operation's response without decoding it.

    Recognized failures are stored as the wrapper's error. Any other status
    keeps the body verbatim: the document shape belongs to the caller.
    """
    status = response.status_code
    if status in policy.status_errors or status in (STATUS_BAD_REQUEST, STATUS_UNAUTHORIZED):
        return DocumentResponse(error=classify(response, policy), status_code=status)
    return DocumentResponse(data=response.content, status_code=status)


def health_status(response: httpx.Response) -> bool:
    """Read readiness from a /health response, never raising."""
    if response.status_code == STATUS_SERVICE_UNAVAILABLE:
        return False
    try:
        return HealthStatus.model_validate_json(response.content).ok
    except ValidationError:
        return False
