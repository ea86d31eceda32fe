"""
SelectionController - visibility, results and the highlighted suggestion.

States are Hidden and ShowingResults. New results show the list with the
first suggestion highlighted, arrows move the highlight cyclically, and
Commit or Dismiss hide the list again.

Hiding records the pipeline epoch current at that moment. Results whose
epoch is not newer are ignored, so a fetch that was already in flight
cannot reopen the list; the next query typed afterwards can.
"""

from dataclasses import replace
from typing import Callable, Optional

from typeahead.domain.cyclic_index import CyclicIndex
from typeahead.domain.events import (
    ActiveIndexChanged,
    Committed,
    EventBus,
    ResultsChanged,
    VisibilityChanged,
)
from typeahead.domain.types import QueryResult, SelectionState
from typeahead.logger import get_logger

logger = get_logger("selection")


class SelectionController:
    """Sole owner of ``SelectionState``; every change is published on the bus."""

    def __init__(
        self,
        event_bus: EventBus,
        epoch_source: Optional[Callable[[], int]] = None,
        max_results: Optional[int] = None,
    ):
        """
        Initialize the controller.

        Args:
            event_bus: Bus the output events are published on
            epoch_source: Returns the latest dispatched fetch epoch
            max_results: Maximum suggestions kept from one result list
        """
        self._bus = event_bus
        self._epoch_source = epoch_source or (lambda: 0)
        self._max_results = max_results
        self._state = SelectionState()
        self._cursor = CyclicIndex()
        self._epoch_floor = 0

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def epoch_floor(self) -> int:
        """Results with an epoch at or below this are ignored."""
        return self._epoch_floor

    def show_results(self, result: QueryResult) -> bool:
        """
        Replace the list with a freshly fetched one and show it.

        An empty list still raises visibility so the UI can render a
        "no results" state.

        Returns:
            True if the result was applied, False if it was ignored
        """
        if result.epoch <= self._epoch_floor:
            logger.debug(f"Ignoring result of epoch {result.epoch}; list was hidden at epoch {self._epoch_floor}")
            return False

        results = result.suggestions
        if self._max_results is not None:
            results = results[: self._max_results]

        was_visible = self._state.visible
        self._cursor.reset()
        active_index = 0 if results else None
        self._state = replace(self._state, visible=True, results=results, active_index=active_index)

        self._bus.publish(ResultsChanged(results=results, query=result.query))
        if active_index is not None:
            self._bus.publish(ActiveIndexChanged(index=active_index))
        if not was_visible:
            self._bus.publish(VisibilityChanged(visible=True))
        return True

    def navigate(self, direction: int) -> Optional[int]:
        """
        Move the highlight one step (+1 next, -1 previous) with wraparound.

        Returns:
            The new index, or None when hidden or there is nothing to navigate
        """
        if not self._state.visible or not self._state.results:
            return None

        index = self._cursor.advance(direction, len(self._state.results))
        self._state = replace(self._state, active_index=index)
        self._bus.publish(ActiveIndexChanged(index=index))
        return index

    def commit(self) -> Optional[str]:
        """
        Commit the highlighted suggestion and hide the list.

        Returns:
            The committed suggestion, or None if there was nothing to commit
        """
        if not self._state.visible:
            return None
        suggestion = self._state.active_suggestion
        if suggestion is None:
            return None
        return self._commit(suggestion)

    def commit_at(self, index: int) -> Optional[str]:
        """Commit the suggestion at ``index`` (pointer selection)."""
        if not self._state.visible or not 0 <= index < len(self._state.results):
            return None
        self._cursor.reset(index)
        if index != self._state.active_index:
            self._state = replace(self._state, active_index=index)
            self._bus.publish(ActiveIndexChanged(index=index))
        return self._commit(self._state.results[index])

    def dismiss(self) -> bool:
        """
        Hide the list without committing; results are kept.

        Returns:
            True if the list was visible
        """
        self._raise_floor()
        if not self._state.visible:
            return False
        self._state = replace(self._state, visible=False)
        self._bus.publish(VisibilityChanged(visible=False))
        return True

    def _commit(self, suggestion: str) -> str:
        self._raise_floor()
        self._state = replace(self._state, visible=False, committed_value=suggestion)
        self._bus.publish(VisibilityChanged(visible=False))
        self._bus.publish(Committed(value=suggestion))
        logger.info(f"Committed suggestion {suggestion!r}")
        return suggestion

    def _raise_floor(self) -> None:
        self._epoch_floor = max(self._epoch_floor, self._epoch_source())
