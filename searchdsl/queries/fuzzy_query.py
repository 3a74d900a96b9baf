"""Fuzzy query: match terms within an edit distance of a given term."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from searchdsl.clauses import _present
from searchdsl.query import Query, Rewrite

__all__ = ["FuzzyQuery", "fuzzy_query"]


@dataclass(frozen=True)
class FuzzyQuery(Query):
    """Matches documents with terms similar to ``value`` in ``field``."""

    field: str
    value: str
    fuzziness: str = ""
    max_expansions: int = 0
    prefix_length: int = 0
    transpositions: bool = False
    rewrite: Rewrite | str | None = None

    def to_dict(self) -> dict[str, Any]:
        options = _present(
            {
                "fuzziness": self.fuzziness,
                "max_expansions": self.max_expansions,
                "prefix_length": self.prefix_length,
                "transpositions": self.transpositions,
                "rewrite": self.rewrite,
            }
        )
        return {"fuzzy": {self.field: {"value": self.value, **options}}}


def fuzzy_query(
    field: str,
    value: str,
    *,
    fuzziness: str = "",
    max_expansions: int = 0,
    prefix_length: int = 0,
    transpositions: bool = False,
    rewrite: Rewrite | str | None = None,
) -> FuzzyQuery:
    """Build a fuzzy query; zero and empty options are left out."""
    return FuzzyQuery(
        field,
        value,
        fuzziness=fuzziness,
        max_expansions=max_expansions,
        prefix_length=prefix_length,
        transpositions=transpositions,
        rewrite=rewrite,
    )