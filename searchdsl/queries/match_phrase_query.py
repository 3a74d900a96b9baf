"""Match phrase query: match the analyzed words of a phrase in order."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from searchdsl.clauses import _present
from searchdsl.query import Query, ZeroTerms

__all__ = ["MatchPhraseQuery", "match_phrase_query"]


@dataclass(frozen=True)
class MatchPhraseQuery(Query):
    """Matches documents containing the phrase ``query`` in ``field``."""

    field: str
    query: str
    analyzer: str = ""
    slop: int = 0
    zero_terms_query: ZeroTerms | str | None = None

    def to_dict(self) -> dict[str, Any]:
        settings = {
            "analyzer": self.analyzer,
            "slop": self.slop,
            "zero_terms_query": self.zero_terms_query,
        }
        return {"match_phrase": {self.field: {"query": self.query, **_present(settings)}}}


def match_phrase_query(
    field: str,
    query: str,
    *,
    analyzer: str = "",
    slop: int = 0,
    zero_terms_query: ZeroTerms | str | None = None,
) -> MatchPhraseQuery:
    """Build a match_phrase query; zero and empty options are left out."""
    return MatchPhraseQuery(
        field, query, analyzer=analyzer, slop=slop, zero_terms_query=zero_terms_query
    )