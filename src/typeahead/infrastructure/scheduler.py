"""Asyncio-backed scheduler for delayed callbacks."""

import asyncio
from typing import Callable, Optional

from typeahead.domain.protocols import TimerHandle

__all__ = ["AsyncioScheduler"]


class AsyncioScheduler:
    """
    Schedules callbacks on an asyncio event loop.

    The loop is resolved lazily, so the scheduler can be created before the
    application's loop starts (e.g. while a Textual app is being built).
    """

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self._loop = loop

    def _get_loop(self) -> asyncio.AbstractEventLoop:
        if self._loop is None:
            return asyncio.get_running_loop()
        return self._loop

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        return self._get_loop().call_later(max(delay, 0.0), callback)
