"""Boolean query: combine other queries with must, filter, should and must_not."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from searchdsl.query import Query, QueryError

__all__ = ["BoolQuery", "bool_query"]


@dataclass(frozen=True)
class BoolQuery(Query):
    """Matches documents matching boolean combinations of other queries."""

    must: tuple[Query, ...] = ()
    filter: tuple[Query, ...] = ()
    should: tuple[Query, ...] = ()
    must_not: tuple[Query, ...] = ()
    minimum_should_match: str = ""

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        for name in ("must", "filter", "should", "must_not"):
            clauses = getattr(self, name)
            if clauses:
                body[name] = [clause.to_dict() for clause in clauses]
        if self.minimum_should_match:
            body["minimum_should_match"] = self.minimum_should_match
        return {"bool": body}


def _clauses(name: str, queries: Iterable[Query] | None) -> tuple[Query, ...]:
    if queries is None:
        return ()
    items = tuple(queries)
    for index, item in enumerate(items):
        if not isinstance(item, Query):
            raise QueryError(
                f"{name} clause {index}: expected a query, got {type(item).__name__}"
            )
    return items


def bool_query(
    *,
    must: Iterable[Query] | None = None,
    filter: Iterable[Query] | None = None,
    should: Iterable[Query] | None = None,
    must_not: Iterable[Query] | None = None,
    minimum_should_match: str | None = None,
) -> BoolQuery:
    """Build a bool query; at least one clause or option must be given."""
    if all(
        option is None
        for option in (must, filter, should, must_not, minimum_should_match)
    ):
        raise QueryError(
            "boolean query needs at least one boolean clause(must, filter, ...)"
        )
    return BoolQuery(
        must=_clauses("must", must),
        filter=_clauses("filter", filter),
        should=_clauses("should", should),
        must_not=_clauses("must_not", must_not),
        minimum_should_match=minimum_should_match or "",
    )