"""Publisher decorator that holds events back until an explicit flush."""

from __future__ import annotations

import logging
from collections import deque
from contextlib import contextmanager
from typing import Any, Callable, Iterator

from delayed_events.application.event_publisher import EventPublisher, EventSubscriber, Listener
from delayed_events.application.failure_handlers import FailureHandler, reraise_failure
from delayed_events.domain.events import QueuedEvent

logger = logging.getLogger(__name__)

DelayArbiter = Callable[[Any, "str | None"], bool]
FlushAction = Callable[[QueuedEvent], Any]


def always_delay(event: Any, event_name: str | None = None) -> bool:  # noqa: ARG001
    return True


class DelayedEventPublisher:
    """Queue published events and deliver them when :meth:`flush` is called.

    ``delay_arbiter`` decides per event whether it is queued; it is only
    consulted while delaying is enabled. ``flush_action`` delivers one queued
    event and defaults to publishing it through the wrapped publisher.
    ``failure_handler`` receives ``(failure, event, event_name)`` for every
    delivery that raises; the default re-raises, which stops the flush and
    leaves the remaining events queued for the next call.

    Listener registry methods are forwarded to the wrapped publisher so the
    decorator can stand in wherever a full dispatcher is expected.
    """

    def __init__(
        self,
        publisher: EventPublisher,
        *,
        disabled: bool = False,
        delay_arbiter: DelayArbiter | None = None,
        failure_handler: FailureHandler | None = None,
        flush_action: FlushAction | None = None,
    ) -> None:
        self._publisher = publisher
        self._enabled = not disabled
        self._delay_arbiter = delay_arbiter if delay_arbiter is not None else always_delay
        self._failure_handler = failure_handler if failure_handler is not None else reraise_failure
        self._flush_action = flush_action if flush_action is not None else self._forward
        self._queue: deque[QueuedEvent] = deque()

    @property
    def enabled(self) -> bool:
        return self._enabled

    @property
    def queued_events(self) -> tuple[QueuedEvent, ...]:
        """Snapshot of the pending events, oldest first."""

        return tuple(self._queue)

    def __len__(self) -> int:
        return len(self._queue)

    def publish(self, event: Any, event_name: str | None = None) -> Any:
        if self._should_delay(event, event_name):
            self._queue.append(QueuedEvent(event=event, event_name=event_name))
            logger.debug(
                "event_delayed",
                extra={"event_name": event_name, "event_type": type(event).__name__, "queue_size": len(self._queue)},
            )
            return event

        logger.debug(
            "event_forwarded",
            extra={"event_name": event_name, "event_type": type(event).__name__, "queue_size": len(self._queue)},
        )
        return self._forward(QueuedEvent(event=event, event_name=event_name))

    def flush(self) -> None:
        """Deliver every queued event in publication order."""

        if not self._queue:
            return

        logger.debug("delayed_events_flush_started", extra={"queue_size": len(self._queue)})
        delivered = 0
        while self._queue:
            entry = self._queue.popleft()
            try:
                self._flush_action(entry)
            except Exception as exc:
                self._failure_handler(exc, entry.event, entry.event_name)
            else:
                delivered += 1
        logger.debug("delayed_events_flush_finished", extra={"delivered": delivered})

    def _should_delay(self, event: Any, event_name: str | None) -> bool:
        return self._enabled and bool(self._delay_arbiter(event, event_name))

    def _forward(self, entry: QueuedEvent) -> Any:
        if entry.event_name is None:
            return self._publisher.publish(entry.event)
        return self._publisher.publish(entry.event, entry.event_name)

    def add_listener(self, event_name: str, listener: Listener, priority: int = 0) -> None:
        self._publisher.add_listener(event_name, listener, priority)

    def remove_listener(self, event_name: str, listener: Listener) -> None:
        self._publisher.remove_listener(event_name, listener)

    def add_subscriber(self, subscriber: EventSubscriber) -> None:
        self._publisher.add_subscriber(subscriber)

    def remove_subscriber(self, subscriber: EventSubscriber) -> None:
        self._publisher.remove_subscriber(subscriber)

    def get_listeners(self, event_name: str | None = None) -> Any:
        return self._publisher.get_listeners(event_name)

    def get_listener_priority(self, event_name: str, listener: Listener) -> int | None:
        return self._publisher.get_listener_priority(event_name, listener)

    def has_listeners(self, event_name: str | None = None) -> bool:
        return self._publisher.has_listeners(event_name)


@contextmanager
def flush_on_success(publisher: DelayedEventPublisher) -> Iterator[DelayedEventPublisher]:
    """Flush ``publisher`` when the block exits without raising."""

    yield publisher
    publisher.flush()
