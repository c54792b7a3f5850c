"""In-process listener registry implementing the dispatcher port."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import count
from typing import Any

from delayed_events.application.event_publisher import EventSubscriber, Listener

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _Registration:
    listener: Listener
    priority: int
    sequence: int


class InMemoryEventDispatcher:
    """Call registered listeners synchronously, highest priority first.

    Listeners are called as ``listener(event, event_name, dispatcher)``;
    exceptions bubble up to the publisher. Events published without a name
    are dispatched under their class name.
    """

    def __init__(self) -> None:
        self._listeners: dict[str, list[_Registration]] = {}
        self._sequence = count()

    def publish(self, event: Any, event_name: str | None = None) -> Any:
        name = event_name if event_name is not None else type(event).__name__
        listeners = self.get_listeners(name)
        logger.debug("event_dispatched", extra={"event_name": name, "listener_count": len(listeners)})
        for listener in listeners:
            listener(event, name, self)
        return event

    def add_listener(self, event_name: str, listener: Listener, priority: int = 0) -> None:
        self._listeners.setdefault(event_name, []).append(
            _Registration(listener=listener, priority=priority, sequence=next(self._sequence))
        )

    def remove_listener(self, event_name: str, listener: Listener) -> None:
        registrations = self._listeners.get(event_name)
        if not registrations:
            return
        remaining = [item for item in registrations if item.listener != listener]
        if remaining:
            self._listeners[event_name] = remaining
        else:
            del self._listeners[event_name]

    def add_subscriber(self, subscriber: EventSubscriber) -> None:
        for event_name, (method_name, priority) in _subscriptions(subscriber):
            self.add_listener(event_name, getattr(subscriber, method_name), priority)

    def remove_subscriber(self, subscriber: EventSubscriber) -> None:
        for event_name, (method_name, _priority) in _subscriptions(subscriber):
            self.remove_listener(event_name, getattr(subscriber, method_name))

    def get_listeners(self, event_name: str | None = None) -> Any:
        """Return listeners for one event, or a mapping of every event name to its listeners."""

        if event_name is not None:
            return [item.listener for item in _ordered(self._listeners.get(event_name, []))]
        return {name: [item.listener for item in _ordered(items)] for name, items in sorted(self._listeners.items())}

    def get_listener_priority(self, event_name: str, listener: Listener) -> int | None:
        for item in self._listeners.get(event_name, []):
            if item.listener == listener:
                return item.priority
        return None

    def has_listeners(self, event_name: str | None = None) -> bool:
        if event_name is not None:
            return bool(self._listeners.get(event_name))
        return any(self._listeners.values())


def _ordered(registrations: list[_Registration]) -> list[_Registration]:
    return sorted(registrations, key=lambda item: (-item.priority, item.sequence))


def _subscriptions(subscriber: EventSubscriber) -> list[tuple[str, tuple[str, int]]]:
    entries = []
    for event_name, spec in subscriber.subscribed_events().items():
        if isinstance(spec, str):
            entries.append((event_name, (spec, 0)))
        else:
            method_name, priority = spec
            entries.append((event_name, (method_name, priority)))
    return entries
