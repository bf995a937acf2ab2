"""Synchronous event bus for processing-run notifications."""

from __future__ import annotations

from typing import Any, Callable


class EventBus:
    """Synchronous publish-subscribe event bus.

    Callbacks subscribe to a single event type or to every event. Events
    are delivered on the caller's thread, in registration order, before
    :meth:`emit` returns.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Callable[[Any], None]]] = {}
        self._global_listeners: list[Callable[[Any], None]] = []

    def subscribe(self, event_type: type, callback: Callable[[Any], None]) -> None:
        """Register *callback* for events of exactly *event_type*."""
        self._listeners.setdefault(event_type, []).append(callback)

    def on_all(self, callback: Callable[[Any], None]) -> None:
        """Register *callback* for every event."""
        self._global_listeners.append(callback)

    def emit(self, event: Any) -> None:
        for cb in self._global_listeners:
            cb(event)
        for cb in self._listeners.get(type(event), []):
            cb(event)
