"""Infrastructure layer - concrete collaborators and controller wiring."""

from typing import Optional

from typeahead.application import TypeaheadController
from typeahead.config import TypeaheadConfig
from typeahead.domain.events import EventBus
from typeahead.domain.protocols import Scheduler, SuggestionFetcher
from typeahead.infrastructure.scheduler import AsyncioScheduler
from typeahead.infrastructure.suggest import StaticSuggestFetcher, YouTubeSuggestFetcher

__all__ = [
    "AsyncioScheduler",
    "StaticSuggestFetcher",
    "YouTubeSuggestFetcher",
    "create_controller",
    "create_fetcher",
]


def create_fetcher(config: Optional[TypeaheadConfig] = None) -> SuggestionFetcher:
    """Build the suggestion provider selected by ``config.provider``."""
    config = config or TypeaheadConfig()
    if config.provider == "static":
        return StaticSuggestFetcher(max_results=config.max_results)
    return YouTubeSuggestFetcher(config.suggest, max_results=config.max_results)


def create_controller(
    config: Optional[TypeaheadConfig] = None,
    fetcher: Optional[SuggestionFetcher] = None,
    scheduler: Optional[Scheduler] = None,
    event_bus: Optional[EventBus] = None,
) -> TypeaheadController:
    """
    Wire a controller to the configured provider and the asyncio scheduler.

    Any collaborator passed in is used as is; the controller takes ownership
    of the fetcher either way.
    """
    config = config or TypeaheadConfig()
    return TypeaheadController(
        fetcher or create_fetcher(config),
        scheduler or AsyncioScheduler(),
        config=config,
        event_bus=event_bus,
    )
