"""Unit tests for SignalBus."""
from __future__ import annotations

from tick_trace import SignalBus
from tick_trace import signals


def test_publish_is_queued_until_flush():
    bus = SignalBus()
    received = []
    bus.subscribe("progress_changed", lambda name, data: received.append(data))

    bus.publish("progress_changed", progress=12.5)
    assert received == []

    bus.flush()
    assert received == [{"progress": 12.5}]

    bus.flush()
    assert received == [{"progress": 12.5}]


def test_handlers_called_in_publish_order():
    bus = SignalBus()
    received = []

    def handler(name: str, data: dict) -> None:
        received.append(name)

    bus.subscribe("a", handler)
    bus.subscribe("b", handler)
    bus.publish("b")
    bus.publish("a")
    bus.publish("b")
    bus.flush()

    assert received == ["b", "a", "b"]


def test_publish_during_flush_deferred():
    """Signals published by a handler go out on the next flush."""
    bus = SignalBus()
    received = []

    def chain(name: str, data: dict) -> None:
        received.append(name)
        if name == "first":
            bus.publish("second")

    bus.subscribe("first", chain)
    bus.subscribe("second", chain)
    bus.publish("first")

    bus.flush()
    assert received == ["first"]

    bus.flush()
    assert received == ["first", "second"]


def test_subscribe_all_covers_session_signals():
    bus = SignalBus()
    received = []
    bus.subscribe_all(lambda name, data: received.append(name))

    for name in signals.SIGNALS:
        bus.publish(name)
    bus.publish("unrelated")
    bus.flush()

    assert received == list(signals.SIGNALS)
