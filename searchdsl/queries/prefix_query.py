"""Prefix query: match terms starting with a given prefix."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from searchdsl.query import Query, Rewrite

__all__ = ["PrefixQuery", "prefix_query"]


def _value(option: Enum | str) -> str:
    return option.value if isinstance(option, Enum) else option


@dataclass(frozen=True)
class PrefixQuery(Query):
    """Matches documents with a term in ``field`` starting with ``value``."""

    field: str
    value: str
    rewrite: Rewrite | str | None = None
    case_insensitive: bool = False

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"value": self.value}
        if self.rewrite:
            body["rewrite"] = _value(self.rewrite)
        if self.case_insensitive:
            body["case_insensitive"] = True
        return {"prefix": {self.field: body}}


def prefix_query(
    field: str,
    value: str,
    *,
    rewrite: Rewrite | str | None = None,
    case_insensitive: bool = False,
) -> PrefixQuery:
    """Build a prefix query on ``field``."""
    return PrefixQuery(field, value, rewrite, case_insensitive)