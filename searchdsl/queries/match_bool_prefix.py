"""Match bool prefix query: terms as term queries, the last one as a prefix."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from searchdsl.clauses import _present
from searchdsl.query import Query

__all__ = ["MatchBoolPrefixQuery", "match_bool_prefix_query"]


@dataclass(frozen=True)
class MatchBoolPrefixQuery(Query):
    """Analyzes ``query`` and builds a bool query from its terms."""

    field: str
    query: str
    analyzer: str = ""

    def to_dict(self) -> dict[str, Any]:
        params = {"query": self.query, **_present({"analyzer": self.analyzer})}
        return {"match_bool_prefix": {self.field: params}}


def match_bool_prefix_query(
    field: str, query: str, *, analyzer: str = ""
) -> MatchBoolPrefixQuery:
    """Build a match_bool_prefix query on ``field``."""
    return MatchBoolPrefixQuery(field, query, analyzer)