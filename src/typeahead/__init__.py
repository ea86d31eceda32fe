"""Input-driven suggestion controller.

As the user types, the controller debounces and de-duplicates queries,
fetches suggestions with latest-wins semantics and keeps a cyclic
selection cursor driven by the keyboard.
"""

from typeahead.application import QueryPipeline, SelectionController, TypeaheadController
from typeahead.config import TypeaheadConfig, load_config
from typeahead.domain import Action, CyclicIndex, FetchError, Key, KeyChannel, SelectionState, classify
from typeahead.domain.events import (
    ActiveIndexChanged,
    Committed,
    EventBus,
    FetchFailed,
    ResultsChanged,
    VisibilityChanged,
)

__version__ = "0.1.0"

__all__ = [
    "TypeaheadController",
    "QueryPipeline",
    "SelectionController",
    "TypeaheadConfig",
    "load_config",
    "Action",
    "CyclicIndex",
    "FetchError",
    "Key",
    "KeyChannel",
    "SelectionState",
    "classify",
    "EventBus",
    "VisibilityChanged",
    "ResultsChanged",
    "ActiveIndexChanged",
    "Committed",
    "FetchFailed",
]
