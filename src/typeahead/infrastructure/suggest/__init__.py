"""Suggestion providers."""

from typeahead.infrastructure.suggest.static import DEFAULT_VOCABULARY, StaticSuggestFetcher
from typeahead.infrastructure.suggest.youtube import YouTubeSuggestFetcher, parse_suggest_response

__all__ = [
    "DEFAULT_VOCABULARY",
    "StaticSuggestFetcher",
    "YouTubeSuggestFetcher",
    "parse_suggest_response",
]
