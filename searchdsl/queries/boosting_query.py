"""Boosting query: demote documents that match a negative query."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from searchdsl.query import Query, QueryError

__all__ = ["BoostingQuery", "boosting_query"]


@dataclass(frozen=True)
class BoostingQuery(Query):
    """Returns documents matching ``positive``, scoring down those matching ``negative``."""

    positive: Query
    negative: Query
    negative_boost: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "boosting": {
                "positive": self.positive.to_dict(),
                "negative": self.negative.to_dict(),
                "negative_boost": self.negative_boost,
            }
        }


def boosting_query(positive: Query, negative: Query, negative_boost: float) -> BoostingQuery:
    """Build a boosting query from a positive and a negative query."""
    if not isinstance(positive, Query):
        raise QueryError(
            f"error in positive query: expected a query, got {type(positive).__name__}"
        )
    if not isinstance(negative, Query):
        raise QueryError(
            f"error in negative query: expected a query, got {type(negative).__name__}"
        )
    return BoostingQuery(positive, negative, negative_boost)