"""Constant score query: wrap a filter and give every hit the same score."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from searchdsl.clauses import _present
from searchdsl.query import Query, QueryError

__all__ = ["ConstantScoreQuery", "constant_score_query"]


@dataclass(frozen=True)
class ConstantScoreQuery(Query):
    """Every document matching ``filter`` scores ``boost``."""

    filter: Query
    boost: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "constant_score": {
                "filter": self.filter.to_dict(),
                **_present({"boost": self.boost}),
            }
        }


def constant_score_query(filter: Query, boost: float) -> ConstantScoreQuery:
    """Build a constant score query; a zero boost is left out."""
    if isinstance(filter, Query):
        return ConstantScoreQuery(filter, boost)
    raise QueryError(f"error in filter query: {type(filter).__name__} is not a query")