"""Failure handlers invoked when a queued event cannot be delivered during flush."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable

logger = logging.getLogger(__name__)

FailureHandler = Callable[[BaseException, Any, "str | None"], None]


def reraise_failure(failure: BaseException, event: Any, event_name: str | None = None) -> None:  # noqa: ARG001
    """Raise the delivery failure unchanged, stopping the flush."""

    raise failure


@dataclass(frozen=True, slots=True)
class LoggingFailureHandler:
    """Log delivery failures and let the flush continue with the next event."""

    logger: logging.Logger = field(default=logger)

    def __call__(self, failure: BaseException, event: Any, event_name: str | None = None) -> None:
        self.logger.error(
            "delayed_event_delivery_failed",
            exc_info=(type(failure), failure, failure.__traceback__),
            extra={
                "event_name": event_name,
                "event_type": type(event).__name__,
                "failure_type": type(failure).__name__,
            },
        )
