"""Domain protocols - interfaces for the controller's external collaborators.

Using protocols keeps the controller independent of transport and event
loop details and makes both easy to replace in tests.
"""

from typeahead.domain.protocols.fetcher import SuggestionFetcher
from typeahead.domain.protocols.scheduler import Scheduler, TimerHandle

__all__ = ["SuggestionFetcher", "Scheduler", "TimerHandle"]
