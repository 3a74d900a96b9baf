"""The search request body and the function that assembles it."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from searchdsl.clauses import (
    Collapse,
    PointInTime,
    SearchAfter,
    SortClause,
    SourceFilter,
)
from searchdsl.query import Query, QueryError, to_json
from searchdsl.suggest import Suggest

__all__ = ["SearchBody", "define"]


@dataclass(frozen=True)
class SearchBody:
    """A complete search request body."""

    source: SourceFilter | None = None
    from_: int | None = None
    size: int | None = None
    query: Query | None = None
    sort: tuple[SortClause, ...] = ()
    search_after: SearchAfter | None = None
    collapse: Collapse | None = None
    pit: PointInTime | None = None
    suggest: Suggest | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return the body as plain data, leaving out sections that are unset."""
        body: dict[str, Any] = {}
        if self.source is not None:
            body["_source"] = self.source.to_dict()
        if self.from_ is not None:
            body["from"] = self.from_
        if self.size is not None:
            body["size"] = self.size
        if self.query is not None:
            body["query"] = self.query.to_dict()
        if self.sort:
            body["sort"] = [clause.to_dict() for clause in self.sort]
        if self.search_after is not None:
            body["search_after"] = self.search_after.to_dict()
        if self.collapse is not None:
            body["collapse"] = self.collapse.to_dict()
        if self.pit is not None:
            body["pit"] = self.pit.to_dict()
        if self.suggest is not None:
            body["suggest"] = self.suggest.to_dict()
        return body

    def to_json(self, indent: int | None = None) -> str:
        """Return the body encoded as JSON text."""
        return to_json(self, indent)


def _check(name: str, value: Any, kind: type) -> Any:
    if value is not None and not isinstance(value, kind):
        raise QueryError(
            f"{name}: expected {kind.__name__}, got {type(value).__name__}"
        )
    return value


def _count(name: str, value: int | None) -> int | None:
    if value is not None and value < 0:
        raise QueryError(f"{name} must not be negative, got {value}")
    return value


def define(
    *,
    source: SourceFilter | None = None,
    from_: int | None = None,
    size: int | None = None,
    query: Query | None = None,
    sort: Iterable[SortClause] = (),
    search_after: SearchAfter | Iterable[Any] | None = None,
    collapse: Collapse | str | None = None,
    pit: PointInTime | None = None,
    suggest: Suggest | None = None,
) -> SearchBody:
    """Assemble a search body.

    A ``from_`` of zero is left out, since it is the default offset.
    ``collapse`` may be given as a field name and ``search_after`` as a
    sequence of sort values.
    """
    clauses = tuple(sort)
    for index, clause in enumerate(clauses):
        if not isinstance(clause, SortClause):
            raise QueryError(
                f"sort clause {index}: expected SortClause, got {type(clause).__name__}"
            )
    if isinstance(collapse, str):
        collapse = Collapse(collapse)
    if search_after is not None and not isinstance(search_after, SearchAfter):
        if isinstance(search_after, (str, bytes)):
            raise QueryError("search_after expects a sequence of sort values")
        search_after = SearchAfter(tuple(search_after))
    offset = _count("from", from_)
    return SearchBody(
        source=_check("source", source, SourceFilter),
        from_=offset or None,
        size=_count("size", size),
        query=_check("query", query, Query),
        sort=clauses,
        search_after=search_after,
        collapse=_check("collapse", collapse, Collapse),
        pit=_check("pit", pit, PointInTime),
        suggest=_check("suggest", suggest, Suggest),
    )