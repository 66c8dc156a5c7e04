"""
Session state

All mutable state of a running mode lives in one session object owned by
its controller; nothing is module-global.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING

from managers.color_resolver import OFF_KEY
from models.config import BrightnessConfig
from models.frame import FrameBuffer

if TYPE_CHECKING:
    from engine.scene_store import SceneStore
    from engine.playback_cursor import PlaybackCursor


@dataclass
class PickerSession:
    """Uniform color picker: one color key at one brightness on every node."""
    frame: FrameBuffer
    brightness: int
    color_key: str = OFF_KEY

    @classmethod
    def create(cls, node_count: int, channel_count: int, brightness: BrightnessConfig) -> PickerSession:
        return cls(frame=FrameBuffer(node_count, channel_count), brightness=brightness.initial)


@dataclass
class PlayerSession:
    """Scene player: the loaded scene plus the cursor borrowing it."""
    scene: SceneStore
    cursor: PlaybackCursor
