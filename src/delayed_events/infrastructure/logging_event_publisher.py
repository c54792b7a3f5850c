"""Simple logging-backed implementation of the event publisher."""

from __future__ import annotations

import logging
from typing import Any

LOGGER = logging.getLogger("delayed_events.events")


class LoggingEventPublisher:
    """Emit published events as structured log records."""

    def publish(self, event: Any, event_name: str | None = None) -> Any:
        LOGGER.info(
            "event_published",
            extra={
                "event_name": event_name if event_name is not None else type(event).__name__,
                "event_type": type(event).__name__,
            },
        )
        return event
