"""YouTube query suggestions from Google's public suggest endpoint.

The endpoint answers either plain JSON or a JSONP wrapper such as
``window.google.ac.h([...])``. The payload is ``[query, entries, ...]`` where
each entry is either a string or a list whose first element is the
suggestion text.
"""

import asyncio
import json
from typing import Any, Optional

import requests

from typeahead.config import SuggestProviderConfig
from typeahead.domain.errors import FetchError
from typeahead.logger import get_logger

logger = get_logger("suggest.youtube")


def parse_suggest_response(body: str) -> list[str]:
    """
    Extract suggestion strings from a suggest endpoint response body.

    Args:
        body: Raw response text (JSON or JSONP)

    Returns:
        Suggestion strings in provider order

    Raises:
        ValueError: If the body is not a recognisable suggest payload
    """
    text = body.strip()
    if not text.startswith("["):
        # JSONP: keep what sits between the outermost parentheses
        start = text.find("(")
        end = text.rfind(")")
        if start < 0 or end <= start:
            raise ValueError("response is neither JSON nor JSONP")
        text = text[start + 1 : end]

    try:
        payload = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"invalid JSON payload: {e}") from e

    if not isinstance(payload, list) or len(payload) < 2 or not isinstance(payload[1], list):
        raise ValueError("payload has no suggestion list")

    suggestions: list[str] = []
    for entry in payload[1]:
        if isinstance(entry, str):
            suggestions.append(entry)
        elif isinstance(entry, list) and entry and isinstance(entry[0], str):
            suggestions.append(entry[0])
        else:
            logger.debug(f"Skipping unrecognised suggestion entry: {entry!r}")
    return suggestions


class YouTubeSuggestFetcher:
    """
    Fetches suggestions over HTTP.

    ``requests`` is blocking, so each call runs in a worker thread and the
    event loop keeps processing key events meanwhile.
    """

    def __init__(
        self,
        config: Optional[SuggestProviderConfig] = None,
        max_results: int = 10,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize the fetcher.

        Args:
            config: Endpoint settings (defaults match the public endpoint)
            max_results: Maximum number of suggestions returned
            session: Optional requests session (connection reuse, testing)
        """
        self.config = config or SuggestProviderConfig()
        self.max_results = max_results
        self._session = session or requests.Session()

    def build_params(self, query: str) -> dict[str, Any]:
        return {
            "hl": self.config.language,
            "ds": self.config.dataset,
            "xhr": "t",
            "client": self.config.client,
            "q": query,
        }

    async def fetch(self, query: str) -> list[str]:
        return await asyncio.to_thread(self._fetch_blocking, query)

    def _fetch_blocking(self, query: str) -> list[str]:
        try:
            response = self._session.get(
                self.config.url,
                params=self.build_params(query),
                timeout=self.config.timeout,
            )
        except requests.RequestException as e:
            raise FetchError(query, f"request failed: {e}") from e

        if response.status_code != 200:
            raise FetchError(query, f"unexpected status {response.status_code}")

        try:
            suggestions = parse_suggest_response(response.text)
        except ValueError as e:
            raise FetchError(query, str(e)) from e

        logger.debug(f"Provider returned {len(suggestions)} suggestion(s) for {query!r}")
        return suggestions[: self.max_results]

    def close(self) -> None:
        """Release pooled connections."""
        self._session.close()
