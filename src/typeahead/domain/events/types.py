"""Event types published by the typeahead controller.

These are the controller's observable outputs: a rendering layer subscribes
to them instead of polling controller state.
"""

import time
from dataclasses import dataclass, field

from typeahead.domain.types import SuggestionList


@dataclass
class Event:
    """Base class for all events.

    The timestamp field is automatically set when the event is created.
    """

    timestamp: float = field(default_factory=time.time, init=False)
    """Timestamp when the event was created (Unix timestamp)."""


@dataclass
class VisibilityChanged(Event):
    """Published when the suggestion list is shown or hidden."""

    visible: bool
    """New visibility of the suggestion list."""


@dataclass
class ResultsChanged(Event):
    """Published when a fresh suggestion list replaces the current one."""

    results: SuggestionList
    """The new suggestions, in provider order."""
    query: str = ""
    """Query the suggestions were fetched for."""


@dataclass
class ActiveIndexChanged(Event):
    """Published when the highlighted suggestion moves or is reset."""

    index: int
    """Index of the highlighted suggestion."""


@dataclass
class Committed(Event):
    """Published exactly once per successful commit."""

    value: str
    """The committed suggestion."""


@dataclass
class FetchFailed(Event):
    """Diagnostic event for a failed fetch of the latest query.

    Suggestions on screen are left as they were.
    """

    query: str
    """Query whose fetch failed."""
    error: str
    """Human readable failure reason."""
