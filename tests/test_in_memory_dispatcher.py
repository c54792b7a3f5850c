from __future__ import annotations

import pytest

from delayed_events.infrastructure.in_memory_dispatcher import InMemoryEventDispatcher


class UserCreated:
    pass


def test_listeners_run_by_priority_then_registration_order() -> None:
    dispatcher = InMemoryEventDispatcher()
    calls = []

    dispatcher.add_listener("tick", lambda event, name, d: calls.append("low"), -10)
    dispatcher.add_listener("tick", lambda event, name, d: calls.append("first"))
    dispatcher.add_listener("tick", lambda event, name, d: calls.append("high"), 10)
    dispatcher.add_listener("tick", lambda event, name, d: calls.append("second"))

    event = object()
    assert dispatcher.publish(event, "tick") is event
    assert calls == ["high", "first", "second", "low"]


def test_unnamed_events_dispatch_under_class_name() -> None:
    dispatcher = InMemoryEventDispatcher()
    received = []
    dispatcher.add_listener("UserCreated", lambda event, name, d: received.append((event, name, d)))
    event = UserCreated()

    dispatcher.publish(event)

    assert received == [(event, "UserCreated", dispatcher)]


def test_listener_failure_propagates() -> None:
    dispatcher = InMemoryEventDispatcher()

    def explode(event, name, d):
        raise RuntimeError("listener failed")

    dispatcher.add_listener("tick", explode)

    with pytest.raises(RuntimeError):
        dispatcher.publish(object(), "tick")


def test_unknown_listener_queries() -> None:
    dispatcher = InMemoryEventDispatcher()

    assert dispatcher.get_listeners("missing") == []
    assert dispatcher.get_listener_priority("missing", print) is None
    assert dispatcher.has_listeners("missing") is False
    dispatcher.remove_listener("missing", print)


def test_empty_event_name_is_not_replaced_by_class_name() -> None:
    dispatcher = InMemoryEventDispatcher()
    received = []
    dispatcher.add_listener("", lambda event, name, d: received.append(name))
    dispatcher.add_listener("UserCreated", lambda event, name, d: received.append(name))

    dispatcher.publish(UserCreated(), "")

    assert received == [""]
