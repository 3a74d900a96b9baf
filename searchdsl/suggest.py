"""Suggesters: term suggestions for a search body."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from searchdsl.clauses import _present
from searchdsl.query import to_json

__all__ = [
    "SuggestSort",
    "SuggestMode",
    "TermSuggestion",
    "term",
    "TermSuggester",
    "term_suggester",
    "Suggest",
    "suggesters",
]


class SuggestSort(str, Enum):
    """How suggestions are sorted per suggest text term."""

    SCORE = "score"
    FREQUENCY = "frequency"


class SuggestMode(str, Enum):
    """Which suggestions are included for the suggest text terms."""

    MISSING = "score"
    POPULAR = "popular"
    ALWAYS = "always"


@dataclass(frozen=True)
class TermSuggestion:
    """One named term suggestion."""

    name: str
    text: str
    field: str
    analyzer: str = ""
    size: int = 0
    sort: SuggestSort | str | None = None
    suggest_mode: SuggestMode | str | None = None

    def to_dict(self) -> dict[str, Any]:
        options = _present(
            {
                "analyzer": self.analyzer,
                "size": self.size,
                "sort": self.sort,
                "suggest_mode": self.suggest_mode,
            }
        )
        return {**_present({"text": self.text}), "term": {"field": self.field, **options}}


def term(
    name: str,
    text: str,
    field: str,
    *,
    analyzer: str = "",
    size: int = 0,
    sort: SuggestSort | str | None = None,
    suggest_mode: SuggestMode | str | None = None,
) -> TermSuggestion:
    """Suggest terms for ``text`` from the candidates in ``field``."""
    return TermSuggestion(
        name, text, field, analyzer=analyzer, size=size, sort=sort, suggest_mode=suggest_mode
    )


@dataclass(frozen=True)
class TermSuggester:
    """A set of term suggestions keyed by name."""

    suggestions: tuple[TermSuggestion, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        by_name = {suggestion.name: suggestion for suggestion in self.suggestions}
        return {name: by_name[name].to_dict() for name in sorted(by_name)}


def term_suggester(*args: TermSuggestion) -> TermSuggester:
    """Group term suggestions into one suggester."""
    return TermSuggester(args)


@dataclass(frozen=True)
class Suggest:
    """The suggest section of a search body."""

    global_text: str
    suggester: TermSuggester

    def to_dict(self) -> dict[str, Any]:
        # The suggester's own encoding stands for the whole section, so the
        # global text is not written.
        return {"suggest": self.suggester.to_dict()}

    def to_json(self, indent: int | None = None) -> str:
        """Return the suggest section encoded as JSON text."""
        return to_json(self, indent)


def suggesters(global_text: str, suggester: TermSuggester) -> Suggest:
    """Build a suggest section from a global text and a suggester."""
    return Suggest(global_text, suggester)