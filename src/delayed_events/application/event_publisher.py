"""Application-level event publishing contracts."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol

Listener = Callable[..., Any]


class EventPublisher(Protocol):
    """Port for publishing events."""

    def publish(self, event: Any, event_name: str | None = None) -> Any:
        """Publish a single event."""


class EventSubscriber(Protocol):
    """Object declaring the listeners it wants registered, keyed by event name."""

    def subscribed_events(self) -> Mapping[str, str | tuple[str, int]]:
        """Return event names mapped to a method name or ``(method name, priority)``."""


class EventDispatcher(EventPublisher, Protocol):
    """Publisher that also owns a listener registry."""

    def add_listener(self, event_name: str, listener: Listener, priority: int = 0) -> None: ...

    def remove_listener(self, event_name: str, listener: Listener) -> None: ...

    def add_subscriber(self, subscriber: EventSubscriber) -> None: ...

    def remove_subscriber(self, subscriber: EventSubscriber) -> None: ...

    def get_listeners(self, event_name: str | None = None) -> Any: ...

    def get_listener_priority(self, event_name: str, listener: Listener) -> int | None: ...

    def has_listeners(self, event_name: str | None = None) -> bool: ...


class NullEventPublisher:
    """No-op publisher used when nothing should observe events."""

    def publish(self, event: Any, event_name: str | None = None) -> Any:  # noqa: ARG002
        return event
