"""Exists query: match documents with an indexed value for a field."""

from __future__ import annotations

from dataclasses import dataclass

from searchdsl.query import Query

__all__ = ["ExistsQuery", "exists_query"]


@dataclass(frozen=True)
class ExistsQuery(Query):
    """Matches documents that contain an indexed value for ``field``."""

    field: str

    def to_dict(self) -> dict[str, dict[str, str]]:
        return {"exists": {"field": self.field}}


def exists_query(field: str) -> ExistsQuery:
    """Build an exists query on ``field``."""
    return ExistsQuery(field)