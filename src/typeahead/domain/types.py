"""Value types shared by the typeahead components."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

__all__ = ["Query", "SuggestionList", "QueryResult", "SelectionState", "Visibility"]

# A snapshot of the input field; equality is plain string equality
Query = str

# Ordered suggestions produced atomically by one fetch
SuggestionList = tuple[str, ...]


class Visibility(Enum):
    """States of the suggestion list."""

    HIDDEN = "hidden"
    SHOWING_RESULTS = "showing_results"


@dataclass(frozen=True)
class QueryResult:
    """Suggestions delivered for one dispatched query.

    Attributes:
        query: The query that produced the suggestions
        suggestions: The suggestions, in provider order
        epoch: Fetch epoch the query was dispatched under
    """

    query: Query
    suggestions: SuggestionList
    epoch: int


@dataclass(frozen=True)
class SelectionState:
    """Externally observable state of the suggestion list.

    ``active_index`` is always inside ``[0, len(results))`` while results are
    non-empty; it is None only when nothing can be highlighted.
    """

    visible: bool = False
    results: SuggestionList = field(default_factory=tuple)
    active_index: Optional[int] = 0
    committed_value: Optional[str] = None

    @property
    def visibility(self) -> Visibility:
        return Visibility.SHOWING_RESULTS if self.visible else Visibility.HIDDEN

    @property
    def active_suggestion(self) -> Optional[str]:
        """Suggestion under the cursor, or None when there is none."""
        if self.active_index is None or not self.results:
            return None
        return self.results[self.active_index]
