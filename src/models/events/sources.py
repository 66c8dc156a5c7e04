from enum import Enum, auto


class KeyboardSource(Enum):
    """Keyboard adapter that produced the event"""
    EVDEV = auto()
    STDIN = auto()
