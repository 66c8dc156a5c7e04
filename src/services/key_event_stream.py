"""
KeyEventStream - keyboard events as an async iterator.

Bridges the push-style EventBus to the pull-style control loop: adapters
publish, exactly one consumer awaits the next key.

    stream = KeyEventStream(event_bus)
    async for event in stream:
        ...
"""

import asyncio
from typing import Optional

from models.events import EventType, KeyboardKeyPressEvent
from services.event_bus import EventBus


class KeyEventStream:
    """
    Queue of KeyboardKeyPressEvents fed by the EventBus.

    Iteration ends after close() once queued events have been consumed.
    """

    def __init__(self, event_bus: Optional[EventBus] = None):
        self._queue: "asyncio.Queue[Optional[KeyboardKeyPressEvent]]" = asyncio.Queue()
        self._closed = False
        if event_bus is not None:
            event_bus.subscribe(EventType.KEYBOARD_KEYPRESS, self.push)

    def push(self, event: KeyboardKeyPressEvent) -> None:
        if self._closed:
            return
        self._queue.put_nowait(event)

    def close(self) -> None:
        """Mark end of stream."""
        if not self._closed:
            self._closed = True
            self._queue.put_nowait(None)

    @property
    def closed(self) -> bool:
        return self._closed

    def __aiter__(self):
        return self

    async def __anext__(self) -> KeyboardKeyPressEvent:
        event = await self._queue.get()
        if event is None:
            # Keep the sentinel so further iteration also stops
            self._queue.put_nowait(None)
            raise StopAsyncIteration
        return event
