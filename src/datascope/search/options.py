"""SearchOptions and SearchMode for advanced tree search."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum, auto

from datascope.tree.nodes import ValueType

__all__ = ["SearchMode", "SearchOptions"]


class SearchMode(StrEnum):
    """How ``SearchOptions.search_term`` is interpreted.

    - TEXT:  Literal substring (or whole word) on key and value.
    - REGEX: Regular expression searched in key and value.
    - PATH:  Literal substring on the rendered dot path.
    """

    TEXT = auto()
    REGEX = auto()
    PATH = auto()


@dataclass(frozen=True, slots=True)
class SearchOptions:
    """Immutable options for ``advanced_search_nodes``.

    Attributes:
        search_term: Text, pattern or path fragment to look for. Empty means
            "match everything" (only the type filter applies).
        search_mode: See ``SearchMode``.
        case_sensitive: Defaults to False.
        whole_word: TEXT mode only: require word boundaries around the term.
        type_filter: Only nodes of these types match directly. ``None`` or
            empty disables the filter.
    """

    search_term: str = ""
    search_mode: SearchMode = SearchMode.TEXT
    case_sensitive: bool = False
    whole_word: bool = False
    type_filter: frozenset[ValueType] | None = None

    def __post_init__(self) -> None:
        if not isinstance(self.search_mode, SearchMode):
            try:
                mode = SearchMode(self.search_mode)
            except ValueError:
                valid = [m.value for m in SearchMode]
                msg = f"search_mode must be one of {valid}, got {self.search_mode!r}"
                raise ValueError(msg) from None
            object.__setattr__(self, "search_mode", mode)
        if self.type_filter is not None:
            object.__setattr__(
                self, "type_filter", frozenset(ValueType(t) for t in self.type_filter)
            )
