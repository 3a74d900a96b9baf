"""Core query abstractions and JSON encoding for search request bodies."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

__all__ = [
    "QueryError",
    "Rewrite",
    "ZeroTerms",
    "Operator",
    "Query",
    "MockQuery",
    "mock_query",
    "to_json",
]

# Largest magnitude a float may have and still be written without an exponent.
_EXPONENT_THRESHOLD = 1e21

_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}


class QueryError(ValueError):
    """Raised when a query or search body cannot be built or encoded."""


class Rewrite(str, Enum):
    """Method used to rewrite multi-term queries."""

    CONSTANT_SCORE_BLENDED = "constant_score_blended"
    CONSTANT_SCORE = "constant_score"
    CONSTANT_SCORE_BOOLEAN = "constant_score_boolean"
    SCORING_BOOLEAN = "scoring_boolean"
    TOP_TERMS_BLENDED_FREQS_N = "top_terms_blended_freqs_N"
    TOP_TERMS_BOOST_N = "top_terms_boost_N"
    TOP_TERMS_N = "top_terms_N"


class ZeroTerms(str, Enum):
    """What to do when analysis removes every term from the query text."""

    NONE = "none"
    ALL = "all"


class Operator(str, Enum):
    """Boolean logic used to combine the terms of a query text."""

    OR = "OR"
    AND = "AND"


def _plain(value: Any) -> Any:
    """Reduce a value to plain JSON-compatible Python data."""
    if hasattr(value, "to_dict"):
        return _plain(value.to_dict())
    if isinstance(value, Enum):
        return _plain(value.value)
    if isinstance(value, Mapping):
        return {str(key): _plain(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(item) for item in value]
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
            return int(value)
        return value
    raise QueryError(f"cannot encode value of type {type(value).__name__}")


def _escape_html(text: str) -> str:
    for char, escaped in _HTML_ESCAPES.items():
        text = text.replace(char, escaped)
    return text


def to_json(value: Any, indent: int | None = None) -> str:
    """Encode a query, clause or plain value as JSON text.

    The output is compact unless ``indent`` is given; ``<``, ``>`` and ``&``
    are written as unicode escapes, and integral floats are written without
    a fractional part.
    """
    data = _plain(value)
    try:
        if indent is None:
            text = json.dumps(
                data, separators=(",", ":"), ensure_ascii=False, allow_nan=False
            )
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False, allow_nan=False)
    except ValueError as exc:
        raise QueryError(str(exc)) from exc
    return _escape_html(text)


def _sorted_keys(value: Any) -> Any:
    """Copy nested mappings with their keys in sorted order."""
    if isinstance(value, Mapping):
        return {key: _sorted_keys(value[key]) for key in sorted(value)}
    if isinstance(value, (list, tuple)):
        return [_sorted_keys(item) for item in value]
    return value


class Query(ABC):
    """A query clause that can be placed in a search body."""

    @abstractmethod
    def to_dict(self) -> Any:
        """Return the query as plain JSON-compatible data."""

    def to_json(self, indent: int | None = None) -> str:
        """Return the query encoded as JSON text."""
        return to_json(self, indent)


@dataclass
class MockQuery(Query):
    """A query whose body is given verbatim."""

    body: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return _sorted_keys(self.body)


def mock_query(body: Mapping[str, Any]) -> MockQuery:
    """Build a query that encodes exactly the given mapping."""
    return MockQuery(dict(body))