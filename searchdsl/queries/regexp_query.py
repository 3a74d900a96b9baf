"""Regexp query: match terms against a regular expression."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from searchdsl.clauses import _present
from searchdsl.query import Query, Rewrite

__all__ = ["RegexpQuery", "regexp_query"]


@dataclass(frozen=True)
class RegexpQuery(Query):
    """Matches documents with a term in ``field`` matching the pattern ``value``."""

    field: str
    value: str
    flags: str = ""
    case_insensitive: bool = False
    max_determinized_states: int = 0
    rewrite: Rewrite | str | None = None

    def to_dict(self) -> dict[str, Any]:
        pattern = {"value": self.value}
        pattern.update(
            _present(
                {
                    "flags": self.flags,
                    "case_insensitive": self.case_insensitive,
                    "max_determinized_states": self.max_determinized_states,
                    "rewrite": self.rewrite,
                }
            )
        )
        return {"regexp": {self.field: pattern}}


def regexp_query(
    field: str,
    value: str,
    *,
    flags: str = "",
    case_insensitive: bool = False,
    max_determinized_states: int = 0,
    rewrite: Rewrite | str | None = None,
) -> RegexpQuery:
    """Build a regexp query; zero and empty options are left out."""
    return RegexpQuery(
        field,
        value,
        flags=flags,
        case_insensitive=case_insensitive,
        max_determinized_states=max_determinized_states,
        rewrite=rewrite,
    )