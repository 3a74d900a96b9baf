"""Match query: full-text search on an analyzed field."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from searchdsl.query import Operator, Query, Rewrite, ZeroTerms

__all__ = ["FUZZINESS_AUTO", "MatchQuery", "match_query"]

FUZZINESS_AUTO = "AUTO"


def _value(option: Enum | str) -> str:
    return option.value if isinstance(option, Enum) else option


@dataclass(frozen=True)
class MatchQuery(Query):
    """Matches documents whose ``field`` matches the analyzed ``query`` text."""

    field: str
    query: str
    analyzer: str = ""
    auto_generate_synonyms_phrase_query: bool | None = None
    boost: float | None = None
    fuzziness: str = ""
    max_expansions: int | None = None
    prefix_length: int | None = None
    fuzzy_transpositions: bool | None = None
    fuzzy_rewrite: Rewrite | str | None = None
    lenient: bool | None = None
    operator: Operator | str | None = None
    minimum_should_match: str = ""
    zero_terms_query: ZeroTerms | str | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"query": self.query}
        if self.analyzer:
            body["analyzer"] = self.analyzer
        if self.auto_generate_synonyms_phrase_query is not None:
            body["auto_generate_synonyms_phrase_query"] = (
                self.auto_generate_synonyms_phrase_query
            )
        if self.boost is not None:
            body["boost"] = self.boost
        if self.fuzziness:
            body["fuzziness"] = self.fuzziness
        if self.max_expansions is not None:
            body["max_expansions"] = self.max_expansions
        if self.prefix_length is not None:
            body["prefix_length"] = self.prefix_length
        if self.fuzzy_transpositions is not None:
            body["fuzzy_transpositions"] = self.fuzzy_transpositions
        if self.fuzzy_rewrite:
            body["fuzzy_rewrite"] = _value(self.fuzzy_rewrite)
        if self.lenient is not None:
            body["lenient"] = self.lenient
        if self.operator:
            body["operator"] = _value(self.operator)
        if self.minimum_should_match:
            body["minimum_should_match"] = self.minimum_should_match
        if self.zero_terms_query:
            body["zero_terms_query"] = _value(self.zero_terms_query)
        return {"match": {self.field: body}}


def match_query(
    field: str,
    query: str,
    *,
    analyzer: str = "",
    auto_generate_synonyms_phrase_query: bool | None = None,
    boost: float | None = None,
    fuzziness: str = "",
    max_expansions: int | None = None,
    prefix_length: int | None = None,
    fuzzy_transpositions: bool | None = None,
    fuzzy_rewrite: Rewrite | str | None = None,
    lenient: bool | None = None,
    operator: Operator | str | None = None,
    minimum_should_match: str = "",
    zero_terms_query: ZeroTerms | str | None = None,
) -> MatchQuery:
    """Build a match query; options left unset are not written."""
    return MatchQuery(
        field=field,
        query=query,
        analyzer=analyzer,
        auto_generate_synonyms_phrase_query=auto_generate_synonyms_phrase_query,
        boost=boost,
        fuzziness=fuzziness,
        max_expansions=max_expansions,
        prefix_length=prefix_length,
        fuzzy_transpositions=fuzzy_transpositions,
        fuzzy_rewrite=fuzzy_rewrite,
        lenient=lenient,
        operator=operator,
        minimum_should_match=minimum_should_match,
        zero_terms_query=zero_terms_query,
    )