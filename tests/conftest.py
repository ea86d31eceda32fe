"""Shared fixtures: a manual-clock scheduler and a controllable fetcher."""

import asyncio
import os
import tempfile
from typing import Callable, Optional

import pytest

# Keep test runs from writing typeahead.log into the project root
os.environ.setdefault("TYPEAHEAD_LOG_FILE", os.path.join(tempfile.gettempdir(), "typeahead-tests.log"))


class FakeTimer:
    """Timer handle returned by FakeScheduler."""

    def __init__(self, when: float, callback: Callable[[], None]):
        self.when = when
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class FakeScheduler:
    """Scheduler driven by an explicit clock for deterministic debounce tests."""

    def __init__(self):
        self.now = 0.0
        self._timers: list[FakeTimer] = []

    def call_later(self, delay: float, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(self.now + delay, callback)
        self._timers.append(timer)
        return timer

    def advance(self, seconds: float) -> None:
        """Move the clock forward, running every timer that falls due."""
        target = self.now + seconds
        while True:
            due = [t for t in self._timers if not t.cancelled and t.when <= target]
            if not due:
                break
            timer = min(due, key=lambda t: t.when)
            self._timers.remove(timer)
            self.now = timer.when
            timer.callback()
        self.now = target
        self._timers = [t for t in self._timers if not t.cancelled]

    @property
    def pending(self) -> int:
        return sum(1 for t in self._timers if not t.cancelled)


class ControlledFetcher:
    """Fetcher whose responses are released explicitly by the test."""

    def __init__(self):
        self.calls: list[str] = []
        self._futures: dict[str, list[asyncio.Future]] = {}

    async def fetch(self, query: str) -> list[str]:
        self.calls.append(query)
        future = asyncio.get_running_loop().create_future()
        self._futures.setdefault(query, []).append(future)
        return await future

    def resolve(self, query: str, suggestions: list[str]) -> None:
        self._futures[query].pop(0).set_result(list(suggestions))

    def fail(self, query: str, error: Optional[Exception] = None) -> None:
        self._futures[query].pop(0).set_exception(error or RuntimeError("provider unavailable"))


async def _settle(rounds: int = 5) -> None:
    """Let scheduled tasks run until they block again."""
    for _ in range(rounds):
        await asyncio.sleep(0)


@pytest.fixture
def scheduler() -> FakeScheduler:
    return FakeScheduler()


@pytest.fixture
def fetcher() -> ControlledFetcher:
    return ControlledFetcher()


@pytest.fixture
def settle():
    return _settle
