"""
Enums shared across the lightstage controller
"""

from enum import Enum, IntEnum, auto


class Channel(IntEnum):
    """
    Channel order of every lightstage node.

    The value is the channel index inside a node's channel vector. Scene files
    and the color picker both address channels by this order.
    """
    RED = 0
    GREEN = 1
    BLUE = 2
    CIRCULAR_POLARIZED = 3
    WARM_WHITE = 4
    NEUTRAL_WHITE = 5
    VERTICAL_POLARIZED = 6
    HORIZONTAL_POLARIZED = 7
    DIAGONAL_POLARIZED = 8


class PlayerMode(Enum):
    """Top-level operating modes"""
    COLOR_PICKER = auto()   # Uniform color chosen from the keyboard
    SCENE_PLAYER = auto()   # Step through frames of a scene file


class InputKind(Enum):
    """Classification of a keyboard event for the control loop"""
    CHARACTER = auto()  # Single printable character
    ARROW = auto()      # UP / DOWN / LEFT / RIGHT
    QUIT = auto()       # ESC or Ctrl+C
    OTHER = auto()      # Anything else (ENTER, TAB, ...)


class TransportKind(Enum):
    """Light transport selection"""
    AUTO = "auto"
    WS281X = "ws281x"
    VIRTUAL = "virtual"


class KeyboardKind(Enum):
    """Keyboard adapter selection"""
    AUTO = "auto"
    STDIN = "stdin"
    EVDEV = "evdev"


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    HARDWARE = auto()    # Transport, keyboard devices
    SCENE = auto()       # Scene file parsing
    PLAYBACK = auto()    # Frame navigation
    COLOR = auto()       # Color picker changes
    EVENT = auto()       # Event bus events and handling
    SYSTEM = auto()      # Startup, errors
    SHUTDOWN = auto()    # Lights-off and cleanup
