"""
Tests for KeyEventStream
"""

import asyncio

import pytest

from models.events import KeyboardKeyPressEvent
from services.event_bus import EventBus
from services.key_event_stream import KeyEventStream


async def drain(stream):
    return [event.key async for event in stream]


@pytest.mark.asyncio
async def test_bus_events_arrive_in_order():
    bus = EventBus()
    stream = KeyEventStream(bus)

    for key in ("r", "UP", "ESCAPE"):
        await bus.publish(KeyboardKeyPressEvent(key))
    stream.close()

    assert await drain(stream) == ["r", "UP", "ESCAPE"]


@pytest.mark.asyncio
async def test_close_ends_iteration_for_good():
    stream = KeyEventStream()
    stream.close()
    assert await drain(stream) == []
    assert await drain(stream) == []
    assert stream.closed


@pytest.mark.asyncio
async def test_push_after_close_is_ignored():
    stream = KeyEventStream()
    stream.push(KeyboardKeyPressEvent("a"))
    stream.close()
    stream.push(KeyboardKeyPressEvent("b"))
    assert await drain(stream) == ["a"]


@pytest.mark.asyncio
async def test_consumer_waits_for_producer():
    stream = KeyEventStream()

    async def producer():
        await asyncio.sleep(0.01)
        stream.push(KeyboardKeyPressEvent("g"))
        stream.close()

    task = asyncio.create_task(producer())
    keys = await drain(stream)
    await task
    assert keys == ["g"]
