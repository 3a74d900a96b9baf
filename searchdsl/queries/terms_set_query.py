"""Terms set query: match a minimum number of exact terms in a field."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from searchdsl.query import Query

__all__ = ["TermsSetQuery", "terms_set_query"]


@dataclass(frozen=True)
class TermsSetQuery(Query):
    """Matches documents holding enough of ``terms`` in ``field``."""

    field: str
    terms: tuple[str, ...] = ()
    minimum_should_match_field: str = ""
    minimum_should_match_script: str = ""

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"terms": list(self.terms)}
        if self.minimum_should_match_field:
            body["minimum_should_match_field"] = self.minimum_should_match_field
        if self.minimum_should_match_script:
            body["minimum_should_match_script"] = self.minimum_should_match_script
        return {"terms_set": {self.field: body}}


def terms_set_query(
    field: str,
    terms: Iterable[str],
    *,
    minimum_should_match_field: str = "",
    minimum_should_match_script: str = "",
) -> TermsSetQuery:
    """Build a terms_set query on ``field``."""
    return TermsSetQuery(
        field, tuple(terms), minimum_should_match_field, minimum_should_match_script
    )