"""
SceneStore - ordered, append-only collection of frames.

Insertion order is playback order. Frames are stored as read-only copies, so
nothing can change a scene once a frame has been committed. A scene may be
empty; PlaybackCursor handles that case.
"""

from __future__ import annotations
from pathlib import Path
from typing import Iterable, Iterator, Tuple, Union

from models.frame import FrameBuffer


class SceneStore:
    """
    Ordered sequence of FrameBuffers with a fixed geometry.

    Usually built by the scene parser:

        scene = SceneStore.load("scenes/sweep.txt", node_count=143, channel_count=9)
        scene.frame_count()   # number of committed frames
        scene.frame(0)        # read-only FrameBuffer
    """

    def __init__(self, node_count: int, channel_count: int):
        self._node_count = node_count
        self._channel_count = channel_count
        self._frames: list[FrameBuffer] = []

    # ==================== Construction ====================

    @classmethod
    def from_lines(cls, lines: Iterable[str], node_count: int, channel_count: int) -> SceneStore:
        """Parse scene lines. Raises FormatError on malformed content."""
        from engine.scene_parser import SceneParser
        return SceneParser(node_count, channel_count).parse(lines)

    @classmethod
    def from_text(cls, text: str, node_count: int, channel_count: int) -> SceneStore:
        return cls.from_lines(text.splitlines(), node_count, channel_count)

    @classmethod
    def load(cls, path: Union[str, Path], node_count: int, channel_count: int) -> SceneStore:
        """Parse a scene file (UTF-8). I/O errors propagate as OSError."""
        with open(path, "r", encoding="utf-8") as f:
            return cls.from_lines(f, node_count, channel_count)

    def new_frame(self) -> FrameBuffer:
        """Blank writable frame with this scene's geometry."""
        return FrameBuffer(self._node_count, self._channel_count)

    def add_frame(self, frame: FrameBuffer) -> None:
        """Append a read-only copy of `frame` to the end of the scene."""
        if (frame.node_count, frame.channel_count) != (self._node_count, self._channel_count):
            raise ValueError(
                f"Frame geometry {frame.node_count}x{frame.channel_count} does not match "
                f"scene geometry {self._node_count}x{self._channel_count}"
            )
        self._frames.append(frame.frozen())

    # ==================== Queries ====================

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def channel_count(self) -> int:
        return self._channel_count

    @property
    def frames(self) -> Tuple[FrameBuffer, ...]:
        return tuple(self._frames)

    def frame_count(self) -> int:
        return len(self._frames)

    def frame(self, index: int) -> FrameBuffer:
        """Frame at a 0-based position; plain IndexError when out of range."""
        if not 0 <= index < len(self._frames):
            raise IndexError(f"Frame index {index} out of range (scene has {len(self._frames)} frames)")
        return self._frames[index]

    def is_empty(self) -> bool:
        return not self._frames

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[FrameBuffer]:
        return iter(self._frames)

    def __repr__(self) -> str:
        return f"SceneStore({self._node_count}x{self._channel_count}, frames={len(self._frames)})"
