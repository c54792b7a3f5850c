from __future__ import annotations

import logging

import pytest

from delayed_events.application.delayed_event_publisher import DelayedEventPublisher
from delayed_events.application.failure_handlers import LoggingFailureHandler, reraise_failure
from delayed_events.infrastructure.logging_event_publisher import LoggingEventPublisher


def test_reraise_failure_raises_same_object() -> None:
    failure = KeyError("x")

    with pytest.raises(KeyError) as excinfo:
        reraise_failure(failure, object(), "name")

    assert excinfo.value is failure


def test_logging_failure_handler_records_and_continues(caplog) -> None:
    delivered = []

    def flush_action(entry):
        if entry.event_name == "bad":
            raise RuntimeError("nope")
        delivered.append(entry.event_name)

    publisher = DelayedEventPublisher(
        LoggingEventPublisher(),
        failure_handler=LoggingFailureHandler(),
        flush_action=flush_action,
    )
    publisher.publish(object(), "bad")
    publisher.publish(object(), "good")

    with caplog.at_level(logging.ERROR, logger="delayed_events.application.failure_handlers"):
        publisher.flush()

    assert delivered == ["good"]
    records = [record for record in caplog.records if record.getMessage() == "delayed_event_delivery_failed"]
    assert len(records) == 1
    assert records[0].event_name == "bad"
    assert records[0].failure_type == "RuntimeError"
    assert records[0].exc_info[1].args == ("nope",)


def test_logging_event_publisher_emits_record(caplog) -> None:
    class OrderPlaced:
        pass

    event = OrderPlaced()

    with caplog.at_level(logging.INFO, logger="delayed_events.events"):
        result = LoggingEventPublisher().publish(event)

    assert result is event
    record = caplog.records[-1]
    assert record.getMessage() == "event_published"
    assert record.event_name == "OrderPlaced"
    assert record.event_type == "OrderPlaced"


def test_logging_event_publisher_keeps_empty_event_name(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="delayed_events.events"):
        LoggingEventPublisher().publish(object(), "")

    assert caplog.records[-1].event_name == ""
