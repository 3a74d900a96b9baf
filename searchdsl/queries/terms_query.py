"""Terms query: match any of several exact terms in a field."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from searchdsl.query import Query

__all__ = ["TermsQuery", "terms_query"]


@dataclass(frozen=True)
class TermsQuery(Query):
    """Matches documents whose ``field`` holds one or more of ``values``."""

    field: str
    values: tuple[str, ...] = ()
    boost: float | None = None

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {}
        if self.boost is not None:
            body["boost"] = self.boost
        body[self.field] = list(self.values)
        return {"terms": {key: body[key] for key in sorted(body)}}


def terms_query(
    field: str, values: Iterable[str], *, boost: float | None = None
) -> TermsQuery:
    """Build a terms query on ``field``."""
    return TermsQuery(field, tuple(values), boost)