"""Nested query: search nested objects as if they were separate documents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from searchdsl.query import Query, QueryError

__all__ = ["NestedQuery", "nested_query"]


@dataclass(frozen=True)
class NestedQuery(Query):
    """Runs ``query`` on the nested objects at ``path``."""

    path: str
    query: Query
    score_mode: str = ""
    ignore_unmapped: bool = False

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"path": self.path, "query": self.query.to_dict()}
        if self.score_mode:
            body["score_mode"] = self.score_mode
        if self.ignore_unmapped:
            body["ignore_unmapped"] = True
        return {"nested": body}


def nested_query(
    path: str,
    query: Query,
    *,
    score_mode: str = "",
    ignore_unmapped: bool = False,
) -> NestedQuery:
    """Wrap ``query`` to search the nested field at ``path``."""
    if not isinstance(query, Query):
        raise QueryError(
            f"nested `{path}`: expected a query, got {type(query).__name__}"
        )
    return NestedQuery(path, query, score_mode, ignore_unmapped)