"""
QueryPipeline - debounce, de-duplicate and dispatch suggestion queries.

Raw text changes go through three stages:

1. Debounce: a candidate is held until no newer candidate arrives for the
   quiet interval; earlier candidates of a burst never reach the fetcher.
2. De-duplication: a candidate equal to the last dispatched query is dropped.
3. Dispatch: the query is fetched under a new epoch. Whatever the fetch
   produces is delivered only if its epoch is still the latest when it
   settles, so an old response can never overwrite a newer query's results.
"""

import asyncio
from collections.abc import Sequence
from typing import Callable, Optional

from typeahead.domain.protocols import Scheduler, SuggestionFetcher, TimerHandle
from typeahead.domain.types import QueryResult
from typeahead.logger import get_logger
from typeahead.utils import shorten

logger = get_logger("query_pipeline")

ResultsCallback = Callable[[QueryResult], None]
ErrorCallback = Callable[[str, Exception], None]

DEFAULT_DEBOUNCE_INTERVAL = 0.4


class QueryPipeline:
    """
    Turns a stream of field values into a stream of fresh suggestion lists.

    All methods are meant to be called from the event loop thread. The only
    suspension point is the fetcher call, which runs as its own task so key
    handling never waits on the network.
    """

    def __init__(
        self,
        fetcher: SuggestionFetcher,
        scheduler: Scheduler,
        on_results: ResultsCallback,
        on_error: Optional[ErrorCallback] = None,
        debounce_interval: float = DEFAULT_DEBOUNCE_INTERVAL,
    ):
        """
        Initialize the pipeline.

        Args:
            fetcher: Suggestion provider
            scheduler: Source of cancellable delayed callbacks
            on_results: Called with each result of the latest epoch
            on_error: Called with (query, error) when the latest fetch fails
            debounce_interval: Quiet interval in seconds
        """
        if debounce_interval < 0:
            raise ValueError(f"debounce_interval must be non-negative, got {debounce_interval}")

        self._fetcher = fetcher
        self._on_results = on_results
        self._on_error = on_error
        self._scheduler = scheduler
        self._debounce_interval = debounce_interval

        self._timer: Optional[TimerHandle] = None
        self._pending_query: Optional[str] = None
        self._last_query: Optional[str] = None
        self._epoch = 0
        self._tasks: set[asyncio.Task] = set()
        self._closed = False

    @property
    def epoch(self) -> int:
        """Epoch of the most recently dispatched fetch (0 before any)."""
        return self._epoch

    @property
    def last_query(self) -> Optional[str]:
        """Most recently dispatched query."""
        return self._last_query

    @property
    def pending_query(self) -> Optional[str]:
        """Candidate waiting out the quiet interval, if any."""
        return self._pending_query

    @property
    def in_flight(self) -> int:
        """Number of fetch tasks that have not settled yet."""
        return len(self._tasks)

    @property
    def debounce_interval(self) -> float:
        return self._debounce_interval

    @property
    def closed(self) -> bool:
        return self._closed

    def submit(self, text: str) -> None:
        """
        Offer the current field value as a query candidate.

        Restarts the quiet interval; only the last candidate of a burst
        survives.
        """
        if self._closed:
            logger.debug("Ignoring candidate submitted after close")
            return

        if self._timer is not None:
            self._timer.cancel()
        self._pending_query = text
        self._timer = self._scheduler.call_later(self._debounce_interval, self._on_quiet)
        logger.debug(f"Candidate queued: {shorten(text)!r}")

    def cancel_pending(self) -> None:
        """Drop a candidate that has not been dispatched yet."""
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        if self._pending_query is not None:
            logger.debug(f"Dropped pending candidate {shorten(self._pending_query)!r}")
        self._pending_query = None

    def close(self) -> None:
        """
        Stop the pipeline.

        Cancels the quiet-interval timer and every in-flight fetch, and bumps
        the epoch so nothing that settles later can be delivered. Calling it
        again is a no-op.
        """
        if self._closed:
            return
        self._closed = True
        self.cancel_pending()
        self._epoch += 1

        for task in list(self._tasks):
            if not task.done():
                task.cancel()
        self._tasks.clear()
        logger.debug("Query pipeline closed")

    def _on_quiet(self) -> None:
        """Quiet interval elapsed: de-duplicate and dispatch the survivor."""
        self._timer = None
        query = self._pending_query
        self._pending_query = None

        if self._closed or query is None:
            return

        if query == self._last_query:
            logger.debug(f"Query unchanged, not re-fetching: {shorten(query)!r}")
            return

        self._dispatch(query)

    def _dispatch(self, query: str) -> None:
        self._epoch += 1
        self._last_query = query
        epoch = self._epoch

        task = asyncio.create_task(self._run_fetch(query, epoch))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        logger.debug(f"Dispatched query {shorten(query)!r} (epoch={epoch}, in_flight={len(self._tasks)})")

    async def _run_fetch(self, query: str, epoch: int) -> None:
        try:
            suggestions = await self._fetcher.fetch(query)
        except Exception as e:
            if epoch != self._epoch:
                logger.debug(f"Discarding stale failure for epoch {epoch} (latest={self._epoch}): {e}")
                return
            logger.warning(f"Fetching suggestions for {shorten(query)!r} failed: {e}")
            if self._on_error is not None:
                self._on_error(query, e)
            return

        if epoch != self._epoch:
            logger.debug(f"Discarding stale result for epoch {epoch} (latest={self._epoch})")
            return

        result = QueryResult(query=query, suggestions=_freeze(suggestions), epoch=epoch)
        logger.debug(f"Delivering {len(result.suggestions)} suggestion(s) for epoch {epoch}")
        self._on_results(result)


def _freeze(suggestions: Sequence[str]) -> tuple[str, ...]:
    return tuple(str(suggestion) for suggestion in suggestions)
