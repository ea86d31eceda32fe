"""Suggestion fetcher protocol."""

from collections.abc import Sequence
from typing import Protocol

__all__ = ["SuggestionFetcher"]


class SuggestionFetcher(Protocol):
    """Protocol for suggestion providers.

    The controller is agnostic to transport: implementations encode the
    query, talk to whatever backend they wrap and return a flat ordered list
    of suggestion strings. Failures are reported by raising (preferably
    ``FetchError``); the controller never sends an abort signal.
    """

    async def fetch(self, query: str) -> Sequence[str]:
        """Fetch suggestions for a query.

        Args:
            query: The text currently in the input field

        Returns:
            Ordered suggestion strings

        Raises:
            FetchError: If the provider failed or timed out
        """
        ...
