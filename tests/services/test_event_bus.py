"""
Tests for event bus publishing, filtering and middleware
"""

import pytest

from models.events import EventType, KeyboardKeyPressEvent, KeyboardSource
from services.event_bus import EventBus
from services.middleware import log_middleware


@pytest.mark.asyncio
async def test_basic_pub_sub():
    bus = EventBus()
    received = []

    async def handler(event):
        received.append(event)

    bus.subscribe(EventType.KEYBOARD_KEYPRESS, handler)
    await bus.publish(KeyboardKeyPressEvent("r"))

    assert len(received) == 1
    assert received[0].key == "r"


@pytest.mark.asyncio
async def test_sync_handler():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.KEYBOARD_KEYPRESS, received.append)
    await bus.publish(KeyboardKeyPressEvent("UP"))
    assert [e.key for e in received] == ["UP"]


@pytest.mark.asyncio
async def test_filtering():
    bus = EventBus()
    evdev_events = []
    stdin_events = []

    bus.subscribe(
        EventType.KEYBOARD_KEYPRESS,
        evdev_events.append,
        filter_fn=lambda e: e.source == KeyboardSource.EVDEV
    )
    bus.subscribe(
        EventType.KEYBOARD_KEYPRESS,
        stdin_events.append,
        filter_fn=lambda e: e.source == KeyboardSource.STDIN
    )

    await bus.publish(KeyboardKeyPressEvent("a", source=KeyboardSource.EVDEV))
    await bus.publish(KeyboardKeyPressEvent("b"))
    await bus.publish(KeyboardKeyPressEvent("c", source=KeyboardSource.EVDEV))

    assert len(evdev_events) == 2
    assert len(stdin_events) == 1


@pytest.mark.asyncio
async def test_middleware_blocks():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.KEYBOARD_KEYPRESS, received.append)
    bus.add_middleware(lambda e: None if e.key == "x" else e)

    await bus.publish(KeyboardKeyPressEvent("x"))
    await bus.publish(KeyboardKeyPressEvent("y"))

    assert [e.key for e in received] == ["y"]


@pytest.mark.asyncio
async def test_log_middleware_passes_event_through():
    bus = EventBus()
    received = []
    bus.add_middleware(log_middleware)
    bus.subscribe(EventType.KEYBOARD_KEYPRESS, received.append)

    event = KeyboardKeyPressEvent("C", ["CTRL"])
    await bus.publish(event)
    assert received == [event]


@pytest.mark.asyncio
async def test_priority_order():
    bus = EventBus()
    order = []
    bus.subscribe(EventType.KEYBOARD_KEYPRESS, lambda e: order.append("low"), priority=0)
    bus.subscribe(EventType.KEYBOARD_KEYPRESS, lambda e: order.append("high"), priority=10)

    await bus.publish(KeyboardKeyPressEvent("r"))
    assert order == ["high", "low"]


@pytest.mark.asyncio
async def test_failing_handler_does_not_stop_others():
    bus = EventBus()
    received = []

    def broken(event):
        raise RuntimeError("boom")

    bus.subscribe(EventType.KEYBOARD_KEYPRESS, broken, priority=5)
    bus.subscribe(EventType.KEYBOARD_KEYPRESS, received.append)

    await bus.publish(KeyboardKeyPressEvent("r"))
    assert len(received) == 1


@pytest.mark.asyncio
async def test_unsubscribe():
    bus = EventBus()
    received = []
    bus.subscribe(EventType.KEYBOARD_KEYPRESS, received.append)
    bus.unsubscribe(EventType.KEYBOARD_KEYPRESS, received.append)

    await bus.publish(KeyboardKeyPressEvent("r"))
    assert received == []
