"""Scene engine - scene storage, text parser and playback cursor"""

from engine.scene_store import SceneStore
from engine.scene_parser import SceneParser, parse_scene
from engine.playback_cursor import PlaybackCursor

__all__ = [
    "SceneStore",
    "SceneParser",
    "parse_scene",
    "PlaybackCursor",
]
