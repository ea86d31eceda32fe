"""Scheduler protocol for cancellable delayed callbacks."""

from typing import Callable, Protocol

__all__ = ["Scheduler", "TimerHandle"]


class TimerHandle(Protocol):
    """Handle to a delayed callback."""

    def cancel(self) -> None:
        """Cancel the callback; cancelling twice or after it ran is a no-op."""
        ...


class Scheduler(Protocol):
    """Single-threaded scheduler running callbacks after a delay."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> TimerHandle:
        """Run ``callback`` once ``delay`` seconds have elapsed.

        Args:
            delay: Delay in seconds
            callback: Zero-argument callable

        Returns:
            Handle that can cancel the callback before it runs
        """
        ...
