"""
Offline suggestion provider over an in-memory vocabulary.
"""

from __future__ import annotations

import asyncio
from collections.abc import Iterable

from typeahead.logger import get_logger

logger = get_logger("suggest.static")

DEFAULT_VOCABULARY = (
    "cats",
    "catsup",
    "category",
    "cat videos",
    "cat memes",
    "caterpillar",
    "cathedral",
    "catalina wine mixer",
    "dogs",
    "dog training",
    "python tutorial",
    "python asyncio",
    "pycon talks",
    "typeahead search",
)


class StaticSuggestFetcher:
    """Suggests entries of a fixed vocabulary matching the query.

    Prefix matches come first, then substring matches, both in vocabulary
    order and compared case-insensitively. An optional latency simulates a
    slow backend.
    """

    def __init__(
        self,
        vocabulary: Iterable[str] = DEFAULT_VOCABULARY,
        max_results: int = 10,
        latency: float = 0.0,
    ) -> None:
        self._vocabulary = list(vocabulary)
        self._max_results = max_results
        self._latency = latency

    async def fetch(self, query: str) -> list[str]:
        if self._latency > 0:
            await asyncio.sleep(self._latency)

        needle = query.strip().lower()
        if not needle:
            return self._vocabulary[: self._max_results]

        prefixed = [entry for entry in self._vocabulary if entry.lower().startswith(needle)]
        contained = [
            entry for entry in self._vocabulary if needle in entry.lower() and entry not in prefixed
        ]
        matches = (prefixed + contained)[: self._max_results]
        logger.debug(f"Static suggestions for {query!r}: {len(matches)} match(es)")
        return matches
