"""Collection alias model."""

from __future__ import annotations

from pydantic import BaseModel


class Alias(BaseModel):
    """A named pointer resolving to a collection."""

    name: str | None = None
    collection_name: str
