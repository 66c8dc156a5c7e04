"""
Event models

Keyboard adapters publish KeyboardKeyPressEvent on the EventBus; the control
loop consumes them through a KeyEventStream.
"""

from models.events.types import EventType
from models.events.base import Event
from models.events.sources import KeyboardSource
from models.events.hardware import KeyboardKeyPressEvent, ARROW_KEYS

__all__ = [
    "EventType",
    "Event",
    "KeyboardSource",
    "KeyboardKeyPressEvent",
    "ARROW_KEYS",
]
