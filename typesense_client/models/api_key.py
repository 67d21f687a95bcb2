"""
API key model and action scopes.

Keys are scoped credentials: a list of allowed actions and a list of
collections they may touch, optionally expiring at a Unix timestamp.
"""

from __future__ import annotations

from typing import Final

from pydantic import BaseModel, Field

# =============================================================================
# Actions
# =============================================================================

ACTION_DOCUMENTS_SEARCH: Final[str] = "documents:search"
ACTION_DOCUMENTS_GET: Final[str] = "documents:get"
ACTION_COLLECTIONS_DELETE: Final[str] = "collections:delete"
ACTION_COLLECTIONS_CREATE: Final[str] = "collections:create"
ACTION_COLLECTIONS_ALL: Final[str] = "collections:*"
ACTION_ALL: Final[str] = "*"


class APIKey(BaseModel):
    """A Typesense API key.

    ``value`` is only returned by the service when the key is created.
    ``expires_at`` is a Unix timestamp in seconds.
    """

    id: int | None = None
    value: str | None = None
    value_prefix: str | None = None
    description: str | None = None
    actions: list[str] = Field(default_factory=list)
    collections: list[str] = Field(default_factory=list)
    expires_at: int | None = None
