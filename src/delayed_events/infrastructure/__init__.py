"""Infrastructure adapters for event publishing."""

from .in_memory_dispatcher import InMemoryEventDispatcher
from .logging_event_publisher import LoggingEventPublisher

__all__ = ["InMemoryEventDispatcher", "LoggingEventPublisher"]
