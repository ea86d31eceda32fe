"""Event bus implementation for decoupled event-driven communication.

The EventBus lets the controller publish its outputs without knowing who
renders them. It assumes everything runs on a single event loop.

Lifecycle:
    A bus is closed together with the controller that owns it. Once closed it
    drops every subscription, publishing becomes a no-op and new
    subscriptions are refused, so no output can reach the UI after teardown.

Event Handler Contract:
    Event handlers MUST be synchronous (non-async) functions. This is enforced
    at subscription time. Handlers should be fast coordinators that schedule
    async work rather than executing it directly.
"""

import asyncio
from typing import Callable, Type, TypeVar

from typeahead.logger import get_logger

from .types import Event

logger = get_logger("events.bus")

T = TypeVar("T", bound=Event)

# Type alias for event handlers - must be synchronous
EventHandler = Callable[[Event], None]


class EventBus:
    """Event bus for publishing and subscribing to events.

    Example:
        ```python
        event_bus = EventBus()
        event_bus.subscribe(Committed, lambda event: print(event.value))
        event_bus.publish(Committed(value="cats"))
        ```

    Thread safety:
        This implementation is NOT thread-safe. It assumes all operations
        happen within the same async event loop.
    """

    def __init__(self):
        self._handlers: dict[Type[Event], list[Callable[[Event], None]]] = {}
        """Registry of event handlers by event type."""
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Subscribe to events of a specific type.

        Args:
            event_type: The type of event to subscribe to (e.g., Committed)
            handler: Callback invoked with each published event of this type.
                    MUST be synchronous (non-async).

        Raises:
            TypeError: If handler is an async function (coroutine function)
            RuntimeError: If the bus is closed
        """
        if self._closed:
            raise RuntimeError("EventBus is closed")
        if asyncio.iscoroutinefunction(handler):
            raise TypeError(
                f"Event handlers must be synchronous functions. "
                f"Handler {getattr(handler, '__name__', handler)!r} is an async function (coroutine function). "
                f"To perform async work, schedule it using asyncio.create_task() instead."
            )

        handlers = self._handlers.setdefault(event_type, [])

        # Avoid duplicate subscriptions of the same handler
        if handler not in handlers:
            handlers.append(handler)  # type: ignore[arg-type]
            logger.debug(f"Subscribed handler for {event_type.__name__}")
        else:
            logger.debug(f"Handler already subscribed for {event_type.__name__}, skipping")

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        """
        Unsubscribe a handler from events of a specific type.

        If the handler was not subscribed, this is a no-op.
        """
        if event_type in self._handlers:
            try:
                self._handlers[event_type].remove(handler)  # type: ignore[arg-type]
                logger.debug(f"Unsubscribed handler for {event_type.__name__}")
            except ValueError:
                logger.debug(f"Handler not found in subscriptions for {event_type.__name__}")

    def publish(self, event: Event) -> None:
        """
        Publish an event to all subscribed handlers.

        Handlers are called synchronously in subscription order. A handler
        that raises is logged and does not prevent the others from running.
        Events published after `close()` are dropped.
        """
        event_type = type(event)
        if self._closed:
            logger.debug(f"Dropping {event_type.__name__} published after close")
            return

        # Copy so handlers may unsubscribe while being notified
        handlers = list(self._handlers.get(event_type, []))

        if not handlers:
            logger.debug(f"No handlers subscribed for {event_type.__name__}")
            return

        logger.debug(f"Publishing {event_type.__name__} to {len(handlers)} handler(s)")

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                logger.opt(exception=True).error(f"Error in event handler for {event_type.__name__}: {e}")

    def clear(self) -> None:
        """Clear all event subscriptions."""
        self._handlers.clear()
        logger.debug("Event bus cleared")

    def close(self) -> None:
        """Drop all subscriptions and stop delivering events. Idempotent."""
        if self._closed:
            return
        self._closed = True
        self._handlers.clear()
        logger.debug("Event bus closed")

    def has_subscribers(self, event_type: Type[Event]) -> bool:
        """Check if there are any subscribers for a specific event type."""
        return bool(self._handlers.get(event_type))
