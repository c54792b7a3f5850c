"""DDD application layer."""

from .delayed_event_publisher import DelayedEventPublisher, always_delay, flush_on_success
from .event_publisher import EventDispatcher, EventPublisher, EventSubscriber, NullEventPublisher
from .failure_handlers import LoggingFailureHandler, reraise_failure

__all__ = [
    "DelayedEventPublisher",
    "EventDispatcher",
    "EventPublisher",
    "EventSubscriber",
    "LoggingFailureHandler",
    "NullEventPublisher",
    "always_delay",
    "flush_on_success",
    "reraise_failure",
]
