"""
TypeaheadController - facade wiring key events to the pipeline and selection.

Key-down events drive commit, dismiss and navigation; key-up events carry
the field text into the query pipeline. The surrounding UI observes the
controller through the events published on its EventBus.
"""

from typing import Callable, Optional, Type, TypeVar

from typeahead.application.query_pipeline import QueryPipeline
from typeahead.application.selection import SelectionController
from typeahead.config import TypeaheadConfig
from typeahead.domain.events import Event, EventBus, FetchFailed
from typeahead.domain.keys import Action, classify_key_down, classify_key_up
from typeahead.domain.protocols import Scheduler, SuggestionFetcher
from typeahead.domain.types import QueryResult, SelectionState
from typeahead.logger import get_logger

logger = get_logger("controller")

E = TypeVar("E", bound=Event)


class TypeaheadController:
    """
    Input-driven suggestion controller for one text field.

    Lifecycle:
        1. Create with a fetcher and a scheduler (and optionally config, bus)
        2. Register observers with `subscribe()`
        3. Feed `handle_key_down()` / `handle_key_up()` from the input field
        4. Call `close()` (or leave the `with` block) on teardown

    The controller owns the fetcher it is given and releases it on `close()`.
    After `close()` no further events are published and key handlers are
    no-ops.
    """

    def __init__(
        self,
        fetcher: SuggestionFetcher,
        scheduler: Scheduler,
        config: Optional[TypeaheadConfig] = None,
        event_bus: Optional[EventBus] = None,
    ):
        self.config = config or TypeaheadConfig()
        self._owns_bus = event_bus is None
        self.event_bus = event_bus or EventBus()
        self._fetcher = fetcher
        self._subscriptions: list[tuple[Type[Event], Callable]] = []
        self._closed = False

        self._pipeline = QueryPipeline(
            fetcher,
            scheduler,
            on_results=self._on_results,
            on_error=self._on_fetch_error,
            debounce_interval=self.config.debounce_interval,
        )
        self._selection = SelectionController(
            self.event_bus,
            epoch_source=lambda: self._pipeline.epoch,
            max_results=self.config.max_results,
        )
        logger.debug(
            f"Controller created (debounce={self.config.debounce_ms}ms, max_results={self.config.max_results})"
        )

    @property
    def state(self) -> SelectionState:
        return self._selection.state

    @property
    def pipeline(self) -> QueryPipeline:
        return self._pipeline

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, event_type: Type[E], handler: Callable[[E], None]) -> None:
        """
        Observe an output event; released automatically on `close()`.

        Raises:
            RuntimeError: If the controller is already closed
        """
        if self._closed:
            raise RuntimeError("TypeaheadController is closed")
        self.event_bus.subscribe(event_type, handler)
        self._subscriptions.append((event_type, handler))

    def unsubscribe(self, event_type: Type[E], handler: Callable[[E], None]) -> None:
        self.event_bus.unsubscribe(event_type, handler)
        try:
            self._subscriptions.remove((event_type, handler))
        except ValueError:
            pass

    def handle_key_down(self, key_code: int) -> bool:
        """
        Handle a key-down event.

        Returns:
            True if the platform's default behaviour should be suppressed:
            always for Escape, for Enter only when a suggestion was committed
        """
        if self._closed:
            return False

        action = classify_key_down(key_code)
        if action is Action.COMMIT:
            return self.commit() is not None
        if action is Action.DISMISS:
            self.dismiss()
            return True
        if action is Action.NAVIGATE_NEXT:
            self._selection.navigate(1)
        elif action is Action.NAVIGATE_PREV:
            self._selection.navigate(-1)
        return False

    def handle_key_up(self, key_code: int, text: str) -> None:
        """Handle a key-up event carrying the field's current text."""
        if self._closed:
            return
        if classify_key_up(key_code) is Action.TEXT_CHANGED:
            self._pipeline.submit(text)

    def commit(self) -> Optional[str]:
        """Commit the highlighted suggestion, if any."""
        if self._closed:
            return None
        value = self._selection.commit()
        if value is not None:
            self._pipeline.cancel_pending()
        return value

    def select(self, index: int) -> Optional[str]:
        """Commit the suggestion at ``index`` (e.g. clicked with the mouse)."""
        if self._closed:
            return None
        value = self._selection.commit_at(index)
        if value is not None:
            self._pipeline.cancel_pending()
        return value

    def dismiss(self) -> None:
        """Hide the list (Escape or a click outside it)."""
        if self._closed:
            return
        self._pipeline.cancel_pending()
        self._selection.dismiss()

    def close(self) -> None:
        """
        Release the pipeline, the fetcher and every subscription made through
        the controller. A bus the controller created itself is closed too.

        Idempotent; each release step runs even if an earlier one failed.
        """
        if self._closed:
            return
        self._closed = True

        try:
            self._pipeline.close()
        except Exception as e:
            logger.opt(exception=True).error(f"Error closing query pipeline: {e}")

        release = getattr(self._fetcher, "close", None)
        if callable(release):
            try:
                release()
            except Exception as e:
                logger.opt(exception=True).error(f"Error closing suggestion fetcher: {e}")

        for event_type, handler in self._subscriptions:
            try:
                self.event_bus.unsubscribe(event_type, handler)
            except Exception as e:
                logger.opt(exception=True).error(f"Error releasing {event_type.__name__} subscription: {e}")
        self._subscriptions.clear()

        if self._owns_bus:
            self.event_bus.close()
        logger.debug("Controller closed")

    def __enter__(self) -> "TypeaheadController":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _on_results(self, result: QueryResult) -> None:
        if self._closed:
            return
        self._selection.show_results(result)

    def _on_fetch_error(self, query: str, error: Exception) -> None:
        if self._closed:
            return
        self.event_bus.publish(FetchFailed(query=query, error=str(error)))
