from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict

from models.events.types import EventType


@dataclass(init=False)
class Event:
    """
    Base event class.

    - type: EventType
    - source: producer enum (KeyboardSource)
    - timestamp: set on creation
    """

    type: EventType
    source: Enum | None
    timestamp: float = field(default_factory=time.time)

    def __init__(self, *, type: EventType, source: Enum | None):
        self.type = type
        self.source = source
        self.timestamp = time.time()

    def to_data(self) -> Dict[str, Any]:
        """Event payload without the type/source/timestamp metadata."""
        return {
            k: v for k, v in self.__dict__.items()
            if k not in ("type", "source", "timestamp")
        }
