from enum import Enum, auto


class EventType(Enum):
    # Hardware
    KEYBOARD_KEYPRESS = auto()
