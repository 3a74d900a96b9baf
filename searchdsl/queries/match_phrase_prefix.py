"""Match phrase prefix query: a phrase whose last term is a prefix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from searchdsl.clauses import _present
from searchdsl.query import Query, ZeroTerms

__all__ = ["MatchPhrasePrefixQuery", "match_phrase_prefix_query"]


@dataclass(frozen=True)
class MatchPhrasePrefixQuery(Query):
    """Matches the words of ``query`` in order, the last one as a prefix."""

    field: str
    query: str
    analyzer: str = ""
    slop: int = 0
    max_expansions: int = 0
    zero_terms_query: ZeroTerms | str | None = None

    def to_dict(self) -> dict[str, Any]:
        extras = _present(
            {
                "analyzer": self.analyzer,
                "slop": self.slop,
                "max_expansions": self.max_expansions,
                "zero_terms_query": self.zero_terms_query,
            }
        )
        return {"match_phrase_prefix": {self.field: {"query": self.query, **extras}}}


def match_phrase_prefix_query(
    field: str,
    query: str,
    *,
    analyzer: str = "",
    slop: int = 0,
    max_expansions: int = 0,
    zero_terms_query: ZeroTerms | str | None = None,
) -> MatchPhrasePrefixQuery:
    """Build a match_phrase_prefix query; zero and empty options are left out."""
    return MatchPhrasePrefixQuery(
        field,
        query,
        analyzer=analyzer,
        slop=slop,
        max_expansions=max_expansions,
        zero_terms_query=zero_terms_query,
    )