"""Module: publisher.py.

Author: Michael Economou
Date: 2026-10-19

Publisher - Pure Python Observer pattern implementation.

Maps each event tag to an ordered list of subscribers:
- subscribe(event_type, listener) appends a listener for a tag
- notify(event) calls every listener of that tag, in registration order
- tags nobody subscribed to are a silent no-op
- a failing listener is logged and does not stop the others
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Hashable
from typing import Any, Generic, TypeVar

from clickbus.utils.logging.logger_factory import get_cached_logger

logger = get_cached_logger(__name__)

__all__ = ["Publisher", "Subscriber"]

E = TypeVar("E", bound=Hashable)

Subscriber = Callable[[E], Any]


def _callback_name(callback: Callable[..., Any]) -> str:
    return getattr(callback, "__qualname__", None) or repr(callback)


class Publisher(Generic[E]):
    """Sends events to the subscribers registered for them.

    Usage:
        publisher: Publisher[Event] = Publisher()
        publisher.subscribe(Event.TEST, on_test)
        publisher.notify(Event.TEST)  # calls on_test(Event.TEST)

    Registrations are never removed. Subscribing the same callable twice
    makes it run twice per notification.
    """

    def __init__(self) -> None:
        """Initialize publisher with no subscriptions."""
        self._events: dict[E, list[Subscriber[E]]] = {}
        self._lock = threading.Lock()

    def subscribe(self, event_type: E, listener: Subscriber[E]) -> None:
        """Register listener for event_type.

        Args:
            event_type: Tag to listen for
            listener: Callable taking the published event as its only argument

        Raises:
            TypeError: If listener is not callable

        """
        if not callable(listener):
            raise TypeError(f"Subscriber for {event_type} must be callable, got {listener!r}")

        with self._lock:
            self._events.setdefault(event_type, []).append(listener)

        logger.debug(
            "Subscribed: %s -> %s",
            event_type,
            _callback_name(listener),
            extra={"dev_only": True},
        )

    def notify(self, event: E) -> None:
        """Call every subscriber of event, synchronously and in registration order.

        A subscriber that raises is logged with its traceback and the
        remaining subscribers still run; the exception does not reach the caller.

        Args:
            event: Tag to publish; passed to each subscriber

        """
        # Snapshot under lock, call outside it
        with self._lock:
            listeners = list(self._events.get(event, ()))

        if not listeners:
            logger.debug("No subscribers for %s", event, extra={"dev_only": True})
            return

        for listener in listeners:
            try:
                listener(event)
            except Exception:
                logger.exception(
                    "Error in subscriber: %s -> %s", event, _callback_name(listener)
                )

    def subscriber_count(self, event: E) -> int:
        """Return how many registrations exist for event."""
        with self._lock:
            return len(self._events.get(event, ()))

    def has_subscribers(self, event: E) -> bool:
        """Return True if at least one subscriber is registered for event."""
        return self.subscriber_count(event) > 0
