"""Error types raised by typeahead components."""

__all__ = ["TypeaheadError", "FetchError"]


class TypeaheadError(Exception):
    """Base class for typeahead errors."""


class FetchError(TypeaheadError):
    """A suggestion provider failed to produce suggestions for a query."""

    def __init__(self, query: str, reason: str):
        super().__init__(f"Fetching suggestions for {query!r} failed: {reason}")
        self.query = query
        self.reason = reason
