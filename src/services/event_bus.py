"""
Event Bus - Central event routing

Implements pub-sub:
- Publishers: await publish(event)
- Subscribers: subscribe(event_type, handler, priority, filter_fn)
- Middleware: add_middleware(middleware_fn)
"""

import asyncio
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from models.events import Event, EventType
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.EVENT)


@dataclass
class EventHandler:
    """Event handler registration"""
    handler: Callable[[Event], None]
    priority: int
    filter_fn: Optional[Callable[[Event], bool]]


class EventBus:
    """
    Pub-sub event bus.

    - Handlers run by priority (highest first)
    - Optional per-handler filter
    - Middleware can rewrite or drop events before handlers see them
    - Sync and async handlers both supported
    - A failing handler is logged and the remaining handlers still run

    Example:
        bus = EventBus()
        bus.subscribe(EventType.KEYBOARD_KEYPRESS, on_key, priority=10)
        await bus.publish(KeyboardKeyPressEvent("r"))
    """

    def __init__(self):
        self._handlers: Dict[EventType, List[EventHandler]] = {}
        self._middleware: List[Callable[[Event], Optional[Event]]] = []

    def subscribe(
        self,
        event_type: EventType,
        handler: Callable[[Event], None],
        priority: int = 0,
        filter_fn: Optional[Callable[[Event], bool]] = None
    ) -> None:
        handlers = self._handlers.setdefault(event_type, [])
        handlers.append(EventHandler(handler, priority, filter_fn))
        handlers.sort(key=lambda h: h.priority, reverse=True)

        log.debug(
            "Event handler subscribed",
            event_type=event_type.name,
            handler=getattr(handler, "__name__", repr(handler)),
            priority=priority
        )

    def unsubscribe(self, event_type: EventType, handler: Callable[[Event], None]) -> None:
        handlers = self._handlers.get(event_type, [])
        self._handlers[event_type] = [h for h in handlers if h.handler != handler]

    def add_middleware(self, middleware: Callable[[Event], Optional[Event]]) -> None:
        """
        Add middleware to the processing pipeline (runs in registration order).

        Middleware returns the (possibly modified) event, or None to block it.
        """
        self._middleware.append(middleware)

    async def publish(self, event: Event) -> None:
        for middleware in self._middleware:
            processed = middleware(event)
            if processed is None:
                return
            event = processed

        handlers = self._handlers.get(event.type, [])
        if not handlers:
            log.debug("No handlers for event", event_type=event.type.name)
            return

        for entry in handlers:
            if entry.filter_fn and not entry.filter_fn(event):
                continue

            try:
                if asyncio.iscoroutinefunction(entry.handler):
                    await entry.handler(event)
                else:
                    entry.handler(event)
            except Exception as e:
                log.error(
                    "Event handler failed",
                    handler=getattr(entry.handler, "__name__", repr(entry.handler)),
                    event_type=event.type.name,
                    error=f"{type(e).__name__}: {e}"
                )
