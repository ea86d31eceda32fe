"""Domain layer: key classification, cursor arithmetic, state and event types."""

from typeahead.domain.cyclic_index import CyclicIndex
from typeahead.domain.errors import FetchError, TypeaheadError
from typeahead.domain.keys import Action, Key, KeyChannel, classify, classify_key_down, classify_key_up
from typeahead.domain.types import Query, QueryResult, SelectionState, SuggestionList, Visibility

__all__ = [
    "Action",
    "Key",
    "KeyChannel",
    "classify",
    "classify_key_down",
    "classify_key_up",
    "CyclicIndex",
    "FetchError",
    "TypeaheadError",
    "Query",
    "QueryResult",
    "SelectionState",
    "SuggestionList",
    "Visibility",
]
