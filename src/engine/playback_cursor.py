"""
PlaybackCursor - keyboard-driven position inside a SceneStore.

Navigation saturates at both ends and never wraps. There is no timer: the
cursor only moves when advance() or retreat() is called.
"""

from typing import List

from engine.scene_store import SceneStore
from models.errors import EmptySceneError
from models.frame import FrameBuffer
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.PLAYBACK)


class PlaybackCursor:
    """
    Index into a borrowed SceneStore.

    Invariant: 0 <= index < frame_count whenever the scene has frames. With an
    empty scene the index stays 0 and node queries raise EmptySceneError.
    """

    def __init__(self, scene: SceneStore):
        self._scene = scene
        self._index = 0

    @property
    def scene(self) -> SceneStore:
        return self._scene

    @property
    def index(self) -> int:
        return self._index

    @property
    def frame_count(self) -> int:
        return self._scene.frame_count()

    def advance(self) -> bool:
        """Move to the next frame. Returns False when already on the last one."""
        if self._index < self.frame_count - 1:
            self._index += 1
            log.debug("Advanced", index=self._index)
            return True
        return False

    def retreat(self) -> bool:
        """Move to the previous frame. Returns False when already on the first one."""
        if self._index > 0:
            self._index -= 1
            log.debug("Retreated", index=self._index)
            return True
        return False

    def current_frame(self) -> FrameBuffer:
        if self._scene.is_empty():
            raise EmptySceneError()
        return self._scene.frame(self._index)

    def current_node(self, node_index: int) -> List[int]:
        """Channel vector of one node in the current frame."""
        return self.current_frame().get_node(node_index)

    def position_label(self) -> str:
        if self._scene.is_empty():
            return "Frame 0 of 0"
        return f"Frame {self._index + 1} of {self.frame_count}"
