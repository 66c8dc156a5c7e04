"""Services layer"""

from .event_bus import EventBus
from .key_event_stream import KeyEventStream
from .middleware import log_middleware

__all__ = [
    "EventBus",
    "KeyEventStream",
    "log_middleware",
]
