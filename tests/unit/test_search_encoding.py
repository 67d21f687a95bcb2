"""
Search query encoding tests.

Covers:
- q and query_by are always present for valid options
- unset optional fields never produce a parameter
- 0 / False are sent, None is not
- list joins, filter joins and deterministic ordering
- required-field errors
"""

from __future__ import annotations

from dataclasses import fields

import httpx
import pytest

from typesense_client.core.exceptions import QueryByRequiredError, QueryRequiredError
from typesense_client.http.search_encoding import (
    OPTIONAL_PARAMETERS,
    encode_search_params,
    encode_search_query,
)
from typesense_client.models.search import SearchOptions

# =============================================================================
# Required fields
# =============================================================================


class TestRequiredFields:
    """q and query_by are mandatory."""

    def test_empty_query_raises_query_required(self) -> None:
        """An empty query fails with QueryRequiredError."""
        with pytest.raises(QueryRequiredError):
            encode_search_params(SearchOptions(query="", query_by=["title"]))

    def test_missing_query_by_raises_query_by_required(self) -> None:
        """A None query_by fails with QueryByRequiredError."""
        with pytest.raises(QueryByRequiredError):
            encode_search_params(SearchOptions(query="harry potter"))

    def test_empty_query_by_raises_query_by_required(self) -> None:
        """An empty query_by list fails with QueryByRequiredError."""
        with pytest.raises(QueryByRequiredError):
            encode_search_params(SearchOptions(query="harry potter", query_by=[]))

    def test_query_checked_before_query_by(self) -> None:
        """With both missing, the query error wins."""
        with pytest.raises(QueryRequiredError):
            encode_search_params(SearchOptions())


# =============================================================================
# Presence semantics
# =============================================================================


class TestPresence:
    """Only set fields are encoded."""

    def test_minimal_options_encode_only_q_and_query_by(self) -> None:
        """No optional field set means exactly two parameters."""
        params = encode_search_params(SearchOptions(query="harry", query_by=["title"]))

        assert params == [("q", "harry"), ("query_by", "title")]

    def test_query_by_fields_joined_with_comma(self) -> None:
        """query_by lists are comma-joined."""
        params = dict(
            encode_search_params(SearchOptions(query="x", query_by=["title", "authors"]))
        )

        assert params["query_by"] == "title,authors"

    def test_zero_and_false_are_sent(self) -> None:
        """0 and False are values, not 'unset'."""
        options = SearchOptions(
            query="x",
            query_by=["title"],
            num_typos=0,
            prefix=False,
            drop_tokens_threshold=0,
        )

        params = dict(encode_search_params(options))

        assert params["num_typos"] == "0"
        assert params["prefix"] == "false"
        assert params["drop_tokens_threshold"] == "0"

    def test_true_encodes_lowercase(self) -> None:
        """Booleans are encoded as true/false."""
        params = dict(encode_search_params(SearchOptions(query="x", query_by=["t"], prefix=True)))

        assert params["prefix"] == "true"

    def test_empty_lists_are_omitted(self) -> None:
        """An empty list counts as unset."""
        params = dict(
            encode_search_params(SearchOptions(query="x", query_by=["t"], facet_by=[]))
        )

        assert "facet_by" not in params

    @pytest.mark.parametrize("attribute,name", OPTIONAL_PARAMETERS)
    def test_each_unset_field_is_absent(self, attribute: str, name: str) -> None:
        """No parameter key appears for an unset field."""
        params = dict(encode_search_params(SearchOptions(query="x", query_by=["t"])))

        assert name not in params

    def test_every_option_has_a_parameter(self) -> None:
        """Every SearchOptions field besides q/query_by is mapped."""
        mapped = {attribute for attribute, _ in OPTIONAL_PARAMETERS}
        declared = {f.name for f in fields(SearchOptions)} - {"query", "query_by"}

        assert mapped == declared


# =============================================================================
# Full encoding
# =============================================================================


@pytest.fixture
def full_options() -> SearchOptions:
    return SearchOptions(
        query="query",
        query_by=["name"],
        filter_by=["age:>3", "country:=FR"],
        sort_by=["age:desc", "name:asc"],
        facet_by=["tags"],
        max_facet_values=2,
        num_typos=2,
        prefix=True,
        page=1,
        per_page=5,
        include_fields=["name"],
        exclude_fields=["full_name"],
        drop_tokens_threshold=5,
        pinned_hits=["12:1", "34:2"],
        hidden_hits=["56"],
    )


class TestFullEncoding:
    """All options set at once."""

    def test_filters_joined_with_and(self, full_options: SearchOptions) -> None:
        """filter_by clauses are combined with ' && '."""
        params = dict(encode_search_params(full_options))

        assert params["filter_by"] == "age:>3 && country:=FR"

    def test_lists_joined_with_comma(self, full_options: SearchOptions) -> None:
        """Field lists and hit lists are comma-joined."""
        params = dict(encode_search_params(full_options))

        assert params["sort_by"] == "age:desc,name:asc"
        assert params["pinned_hits"] == "12:1,34:2"
        assert params["hidden_hits"] == "56"

    def test_integers_as_decimal(self, full_options: SearchOptions) -> None:
        """Numeric options are decimal strings."""
        params = dict(encode_search_params(full_options))

        assert params["max_facet_values"] == "2"
        assert params["per_page"] == "5"

    def test_each_key_appears_once(self, full_options: SearchOptions) -> None:
        """Every set field contributes exactly one pair."""
        names = [name for name, _ in encode_search_params(full_options)]

        assert len(names) == len(set(names))
        assert len(names) == 15

    def test_encoding_is_deterministic(self, full_options: SearchOptions) -> None:
        """Encoding the same options twice yields the same string."""
        assert encode_search_query(full_options) == encode_search_query(full_options)

    def test_query_string_is_form_encoded(self, full_options: SearchOptions) -> None:
        """The query string round-trips through a form decoder."""
        encoded = encode_search_query(full_options)

        decoded = httpx.QueryParams(encoded)
        assert encoded.startswith("q=query&query_by=name")
        assert decoded["filter_by"] == "age:>3 && country:=FR"

    def test_options_are_not_mutated(self, full_options: SearchOptions) -> None:
        """Encoding leaves the options untouched."""
        before = repr(full_options)

        encode_search_params(full_options)

        assert repr(full_options) == before
