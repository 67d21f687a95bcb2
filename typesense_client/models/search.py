"""
Search options and search result models.

SearchOptions uses explicit presence: every optional field defaults to None
and only fields that are not None are sent. 0, "" and False are real values.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel, Field


@dataclass(slots=True)
class SearchOptions:
    """Parameters of a document search.

    Attributes:
        query: Text to search for (required)
        query_by: Fields to search in, in priority order (required)
        filter_by: Filter clauses, combined with ``&&``
        sort_by: Sort expressions such as ``ratings_count:desc``
        facet_by: Fields to facet on
        facet_query: Restrict facet values, e.g. ``authors:rowl``
        max_facet_values: Maximum facet values returned per field
        num_typos: Typo tolerance (0, 1 or 2)
        prefix: Whether the last query token is a prefix
        page: Result page, starting at 1
        per_page: Hits per page
        include_fields: Document fields to return
        exclude_fields: Document fields to omit
        highlight_full_fields: Fields highlighted in full
        highlight_affix_num_tokens: Tokens around a highlight snippet
        snippet_threshold: Field length under which the whole field is a snippet
        drop_tokens_threshold: Hit count under which tokens are dropped
        typo_tokens_threshold: Hit count under which typo corrections are tried
        pinned_hits: ``id:position`` entries pinned to fixed positions
        hidden_hits: Document ids removed from results
        limit_hits: Maximum number of hits reachable through pagination
    """

    query: str = ""
    query_by: list[str] | None = None
    filter_by: list[str] | None = None
    sort_by: list[str] | None = None
    facet_by: list[str] | None = None
    facet_query: str | None = None
    max_facet_values: int | None = None
    num_typos: int | None = None
    prefix: bool | None = None
    page: int | None = None
    per_page: int | None = None
    include_fields: list[str] | None = None
    exclude_fields: list[str] | None = None
    highlight_full_fields: list[str] | None = None
    highlight_affix_num_tokens: int | None = None
    snippet_threshold: int | None = None
    drop_tokens_threshold: int | None = None
    typo_tokens_threshold: int | None = None
    pinned_hits: list[str] | None = None
    hidden_hits: list[str] | None = None
    limit_hits: int | None = None


# =============================================================================
# Search results
# =============================================================================


class SearchHighlight(BaseModel):
    """Highlighted match inside one field of a hit."""

    field: str
    snippet: str | None = None
    snippets: list[str] = Field(default_factory=list)
    indices: list[int] = Field(default_factory=list)


class SearchHit(BaseModel):
    """One matching document with its highlights."""

    highlights: list[SearchHighlight] = Field(default_factory=list)
    document: dict[str, Any] = Field(default_factory=dict)
    text_match: int | None = None


class FacetValueCount(BaseModel):
    count: int
    value: str
    highlighted: str | None = None


class FacetCount(BaseModel):
    """Value counts for one faceted field."""

    field_name: str
    counts: list[FacetValueCount] = Field(default_factory=list)


class SearchResult(BaseModel):
    """Decoded body of a search response."""

    facet_counts: list[FacetCount] = Field(default_factory=list)
    found: int = 0
    hits: list[SearchHit] = Field(default_factory=list)
    out_of: int | None = None
    page: int | None = None
    search_time_ms: int | None = None
