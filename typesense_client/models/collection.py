"""Collection schema and collection models."""

from __future__ import annotations

from pydantic import BaseModel, Field as PydanticField


class Field(BaseModel):
    """A single field of a collection schema.

    Attributes:
        name: Field name as it appears in documents
        type: Typesense type tag (string, int32, float, string[], ...)
        facet: Whether the field is aggregated in facet counts
        optional: Whether documents may omit the field
    """

    name: str
    type: str
    facet: bool = False
    optional: bool | None = None


class CollectionSchema(BaseModel):
    """Caller-defined schema used to create a collection."""

    name: str
    fields: list[Field] = PydanticField(default_factory=list)
    default_sorting_field: str | None = None


class Collection(CollectionSchema):
    """A collection as reported by the service."""

    num_documents: int = 0
    created_at: int = 0
