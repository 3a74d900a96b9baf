"""Wildcard query: match terms against a wildcard pattern."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from searchdsl.query import Query, Rewrite

__all__ = ["WildcardQuery", "wildcard_query"]


def _value(option: Enum | str) -> str:
    return option.value if isinstance(option, Enum) else option


@dataclass(frozen=True)
class WildcardQuery(Query):
    """Matches documents with a term in ``field`` matching the pattern ``value``."""

    field: str
    value: str
    boost: float = 0.0
    case_insensitive: bool = False
    rewrite: Rewrite | str | None = None
    wildcard: str = ""

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.boost:
            body["boost"] = self.boost
        if self.case_insensitive:
            body["case_insensitive"] = True
        if self.rewrite:
            body["rewrite"] = _value(self.rewrite)
        body["value"] = self.value
        if self.wildcard:
            body["wildcard"] = self.wildcard
        return {"wildcard": {self.field: body}}


def wildcard_query(
    field: str,
    value: str,
    *,
    boost: float = 0.0,
    case_insensitive: bool = False,
    rewrite: Rewrite | str | None = None,
) -> WildcardQuery:
    """Build a wildcard query; zero and empty options are left out."""
    return WildcardQuery(field, value, boost, case_insensitive, rewrite)