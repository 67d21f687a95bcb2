"""
Search query encoding.

Turns SearchOptions into the query parameters of
GET /collections/{name}/documents/search.

Rules:
1. empty query text -> QueryRequiredError
2. empty query_by -> QueryByRequiredError
3. every other field that is set contributes exactly one parameter
4. unset fields contribute nothing; the service applies its own default

Parameters are emitted in a fixed order so the encoded string is
deterministic.
"""

from __future__ import annotations

from typing import Final

import httpx

from typesense_client.core.exceptions import QueryByRequiredError, QueryRequiredError
from typesense_client.models.search import SearchOptions

FILTER_SEPARATOR: Final[str] = " && "
LIST_SEPARATOR: Final[str] = ","

# (attribute on SearchOptions, query parameter name), in emission order
OPTIONAL_PARAMETERS: Final[tuple[tuple[str, str], ...]] = (
    ("filter_by", "filter_by"),
    ("sort_by", "sort_by"),
    ("facet_by", "facet_by"),
    ("facet_query", "facet_query"),
    ("max_facet_values", "max_facet_values"),
    ("num_typos", "num_typos"),
    ("prefix", "prefix"),
    ("page", "page"),
    ("per_page", "per_page"),
    ("include_fields", "include_fields"),
    ("exclude_fields", "exclude_fields"),
    ("highlight_full_fields", "highlight_full_fields"),
    ("highlight_affix_num_tokens", "highlight_affix_num_tokens"),
    ("snippet_threshold", "snippet_threshold"),
    ("drop_tokens_threshold", "drop_tokens_threshold"),
    ("typo_tokens_threshold", "typo_tokens_threshold"),
    ("pinned_hits", "pinned_hits"),
    ("hidden_hits", "hidden_hits"),
    ("limit_hits", "limit_hits"),
)


def _format_value(attribute: str, value: object) -> str | None:
    """Format one set option, or return None when it counts as unset."""
    # bool before int: bool is a subclass of int
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, str):
        return value or None
    if isinstance(value, (list, tuple)):
        if not value:
            return None
        separator = FILTER_SEPARATOR if attribute == "filter_by" else LIST_SEPARATOR
        return separator.join(str(item) for item in value)
    raise TypeError(f"unsupported value for search option {attribute!r}: {value!r}")


def encode_search_params(options: SearchOptions) -> list[tuple[str, str]]:
    """Encode search options into ordered query parameters.

    Args:
        options: Search options, query and query_by included

    Returns:
        List of (name, value) pairs, ``q`` and ``query_by`` first

    Raises:
        QueryRequiredError: If query is empty
        QueryByRequiredError: If query_by is empty
    """
    if not options.query:
        raise QueryRequiredError()
    if not options.query_by:
        raise QueryByRequiredError()

    params = [
        ("q", options.query),
        ("query_by", LIST_SEPARATOR.join(options.query_by)),
    ]
    for attribute, name in OPTIONAL_PARAMETERS:
        value = getattr(options, attribute)
        if value is None:
            continue
        formatted = _format_value(attribute, value)
        if formatted is not None:
            params.append((name, formatted))
    return params


def encode_search_query(options: SearchOptions) -> str:
    """Encode search options as a form-encoded query string."""
    return str(httpx.QueryParams(encode_search_params(options)))
