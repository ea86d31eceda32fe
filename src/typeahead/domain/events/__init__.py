"""Event system for the controller's observable outputs."""

from .bus import EventBus, EventHandler
from .types import (
    ActiveIndexChanged,
    Committed,
    Event,
    FetchFailed,
    ResultsChanged,
    VisibilityChanged,
)

__all__ = [
    "EventBus",
    "EventHandler",
    "Event",
    "VisibilityChanged",
    "ResultsChanged",
    "ActiveIndexChanged",
    "Committed",
    "FetchFailed",
]
