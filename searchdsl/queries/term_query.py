"""Term query: match an exact term in a field."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from searchdsl.clauses import _present
from searchdsl.query import Query

__all__ = ["TermQuery", "term_query"]


@dataclass(frozen=True)
class TermQuery(Query):
    """Matches documents whose ``field`` holds exactly ``value``."""

    field: str
    value: str
    boost: float | None = None
    case_insensitive: bool | None = None

    def to_dict(self) -> dict[str, Any]:
        given = _present(
            {"boost": self.boost, "case_insensitive": self.case_insensitive},
            keep_zero=True,
        )
        return {"term": {self.field: {"value": self.value, **given}}}


def term_query(
    field: str,
    value: str,
    *,
    boost: float | None = None,
    case_insensitive: bool | None = None,
) -> TermQuery:
    """Build a term query; options are written whenever they are given."""
    return TermQuery(field, value, boost=boost, case_insensitive=case_insensitive)