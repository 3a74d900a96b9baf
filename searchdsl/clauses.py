"""Search body clauses: sorting, paging after, collapse, PIT and source filtering."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

__all__ = [
    "MISSING_FIRST",
    "MISSING_LAST",
    "SortOrder",
    "SortClause",
    "sort_clause",
    "SearchAfter",
    "search_after",
    "Collapse",
    "collapse",
    "PointInTime",
    "pit",
    "SourceFilter",
    "source_filter",
]

MISSING_FIRST = "_first"
MISSING_LAST = "_last"


def _present(options: Mapping[str, Any], *, keep_zero: bool = False) -> dict[str, Any]:
    """Return the options that are set, with enum members replaced by their values.

    By default empty and zero values count as unset; with ``keep_zero`` only
    ``None`` does.
    """
    return {
        key: value.value if isinstance(value, Enum) else value
        for key, value in options.items()
        if (value is not None if keep_zero else value)
    }


class SortOrder(str, Enum):
    """Direction of a sort clause."""

    DEFAULT = "default"
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortClause:
    """A sort on one field, optionally with an order and a missing-value rule."""

    field: str
    order: SortOrder | str = SortOrder.DEFAULT
    missing: str | None = None

    def to_dict(self) -> str | dict[str, Any]:
        """Return the bare field name, or a mapping of the field to its options."""
        is_default = self.order == SortOrder.DEFAULT
        if is_default and self.missing is None:
            return self.field
        params = _present(
            {"missing": self.missing, "order": None if is_default else self.order},
            keep_zero=True,
        )
        return {self.field: params}


def sort_clause(
    field: str,
    order: SortOrder | str = SortOrder.DEFAULT,
    *,
    missing: str | None = None,
) -> SortClause:
    """Sort on ``field``; ``missing`` may be ``_first``, ``_last`` or a custom value."""
    return SortClause(field, order, missing)


@dataclass(frozen=True)
class SearchAfter:
    """Sort values of the last hit of the previous page."""

    values: tuple[Any, ...] = ()

    def to_dict(self) -> list[Any]:
        return list(self.values)


def search_after(*args: Any) -> SearchAfter:
    """Page after the hit with the given sort values."""
    return SearchAfter(args)


@dataclass(frozen=True)
class Collapse:
    """Collapse search results on the values of one field."""

    field: str

    def to_dict(self) -> dict[str, Any]:
        return {"field": self.field}


def collapse(field: str) -> Collapse:
    """Collapse results by ``field``."""
    return Collapse(field)


@dataclass(frozen=True)
class PointInTime:
    """A point in time to run the search against."""

    id: str = ""
    keep_alive: str = ""

    def to_dict(self) -> dict[str, Any]:
        return _present({"id": self.id, "keep_alive": self.keep_alive})


def pit(pit_id: str, keep_alive: str) -> PointInTime:
    """Refer to an open point in time, kept alive for ``keep_alive``."""
    return PointInTime(pit_id, keep_alive)


@dataclass(frozen=True)
class SourceFilter:
    """Select which source fields are returned with each hit."""

    includes: tuple[str, ...] = field(default_factory=tuple)
    excludes: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return _present({"includes": list(self.includes), "excludes": list(self.excludes)})


def source_filter(
    *, includes: Iterable[str] = (), excludes: Iterable[str] = ()
) -> SourceFilter:
    """Filter returned source fields by inclusion and exclusion lists."""
    return SourceFilter(tuple(includes), tuple(excludes))