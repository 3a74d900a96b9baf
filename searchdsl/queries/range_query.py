"""Range query: match terms within a range."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from searchdsl.query import Query, QueryError

__all__ = ["Relation", "RangeQuery", "range_query"]


class Relation(str, Enum):
    """How a range query matches values of range fields."""

    INTERSECTS = "INTERSECTS"
    CONTAINS = "CONTAINS"
    WITHIN = "WITHIN"


def _value(option: Enum | str) -> str:
    return option.value if isinstance(option, Enum) else option


@dataclass(frozen=True)
class RangeQuery(Query):
    """Matches documents whose ``field`` lies within the given bounds."""

    field: str
    gt: Any = None
    gte: Any = None
    lt: Any = None
    lte: Any = None
    format: str = ""
    relation: Relation | str | None = None
    time_zone: str = ""
    boost: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        for name in ("gt", "gte", "lt", "lte"):
            bound = getattr(self, name)
            if bound is not None:
                body[name] = bound
        if self.format:
            body["format"] = self.format
        if self.relation:
            body["relation"] = _value(self.relation)
        if self.time_zone:
            body["time_zone"] = self.time_zone
        if self.boost:
            body["boost"] = self.boost
        return {"range": {self.field: body}}


def range_query(
    field: str,
    *,
    gt: Any = None,
    gte: Any = None,
    lt: Any = None,
    lte: Any = None,
    format: str = "",
    relation: Relation | str | None = None,
    time_zone: str = "",
    boost: float = 0.0,
) -> RangeQuery:
    """Build a range query; at least one of the bounds must be given."""
    if gt is None and gte is None and lt is None and lte is None:
        raise QueryError(
            "one of gt, gte, lt, lte should be provided for range query"
        )
    return RangeQuery(field, gt, gte, lt, lte, format, relation, time_zone, boost)