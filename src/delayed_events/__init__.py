"""Public package exports for delayed_events with lazy imports."""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "DelayedEventPublisher",
    "flush_on_success",
    "EventDispatcher",
    "EventPublisher",
    "EventSubscriber",
    "NullEventPublisher",
    "LoggingFailureHandler",
    "reraise_failure",
    "QueuedEvent",
    "InMemoryEventDispatcher",
    "LoggingEventPublisher",
    "DelayedPublishingConfig",
    "build_delayed_publisher",
    "load_delay_config",
]

_EXPORT_MODULES: dict[str, str] = {
    "DelayedEventPublisher": "delayed_events.application.delayed_event_publisher",
    "flush_on_success": "delayed_events.application.delayed_event_publisher",
    "EventDispatcher": "delayed_events.application.event_publisher",
    "EventPublisher": "delayed_events.application.event_publisher",
    "EventSubscriber": "delayed_events.application.event_publisher",
    "NullEventPublisher": "delayed_events.application.event_publisher",
    "LoggingFailureHandler": "delayed_events.application.failure_handlers",
    "reraise_failure": "delayed_events.application.failure_handlers",
    "QueuedEvent": "delayed_events.domain.events",
    "InMemoryEventDispatcher": "delayed_events.infrastructure.in_memory_dispatcher",
    "LoggingEventPublisher": "delayed_events.infrastructure.logging_event_publisher",
    "DelayedPublishingConfig": "delayed_events.utils.config",
    "build_delayed_publisher": "delayed_events.utils.config",
    "load_delay_config": "delayed_events.utils.config",
}


def __getattr__(name: str) -> Any:
    if name not in _EXPORT_MODULES:
        raise AttributeError(f"module 'delayed_events' has no attribute {name!r}")

    module = import_module(_EXPORT_MODULES[name])
    value = getattr(module, name)
    globals()[name] = value
    return value
