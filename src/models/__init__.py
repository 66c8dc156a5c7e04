"""
Models package - data models for the lightstage controller
"""

from .enums import Channel, PlayerMode, InputKind, LogLevel, LogCategory
from .errors import (
    LightstageError,
    NodeIndexError,
    ReadOnlyFrameError,
    FormatError,
    EmptySceneError,
    TransportError,
)
from .frame import FrameBuffer

__all__ = [
    'Channel',
    'PlayerMode',
    'InputKind',
    'LogLevel',
    'LogCategory',
    'LightstageError',
    'NodeIndexError',
    'ReadOnlyFrameError',
    'FormatError',
    'EmptySceneError',
    'TransportError',
    'FrameBuffer',
]
