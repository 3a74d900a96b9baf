"""IDs query: match documents by their IDs."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from searchdsl.query import Query

__all__ = ["IdsQuery", "ids_query"]


@dataclass(frozen=True)
class IdsQuery(Query):
    """Matches documents whose ID is one of ``values``."""

    values: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"ids": {"values": list(self.values)}}


def ids_query(*args: str) -> IdsQuery:
    """Build an ids query from the given document IDs."""
    return IdsQuery(tuple(args))