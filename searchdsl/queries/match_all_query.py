"""Match all query: match every document."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from searchdsl.clauses import _present
from searchdsl.query import Query

__all__ = ["MatchAllQuery", "match_all_query"]


@dataclass(frozen=True)
class MatchAllQuery(Query):
    """Matches all documents, each scoring ``boost`` (1.0 when unset)."""

    boost: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {"match_all": _present({"boost": self.boost}, keep_zero=True)}


def match_all_query(*, boost: float | None = None) -> MatchAllQuery:
    """Build a match_all query; the boost is written whenever it is given."""
    return MatchAllQuery(boost)