"""Disjunction max query: score by the best matching of several queries."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from searchdsl.query import Query, QueryError

__all__ = ["DisMaxQuery", "dis_max_query"]


@dataclass(frozen=True)
class DisMaxQuery(Query):
    """Matches documents matching any of ``queries``, scored by the best one."""

    queries: tuple[Query, ...] = ()
    tie_breaker: float | None = None

    def to_dict(self) -> dict[str, Any]:
        encoded = [query.to_dict() for query in self.queries]
        return {"dis_max": {"queries": encoded, "tie_breaker": self.tie_breaker}}


def dis_max_query(
    queries: Iterable[Query], *, tie_breaker: float | None = None
) -> DisMaxQuery:
    """Build a dis_max query; an unset tie breaker is written as null."""
    items = tuple(queries)
    bad = next(
        ((index, item) for index, item in enumerate(items) if not isinstance(item, Query)),
        None,
    )
    if bad is not None:
        index, item = bad
        raise QueryError(f"error in {index}th query: {type(item).__name__} is not a query")
    return DisMaxQuery(items, tie_breaker)