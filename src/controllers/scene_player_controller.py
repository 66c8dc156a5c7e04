"""
Scene player mode - step through the frames of a scene file.

Keys:
    Right / Left    next / previous frame (stops at both ends)
    Esc / Ctrl+C    lights off and quit
"""

from engine.playback_cursor import PlaybackCursor
from engine.scene_store import SceneStore
from hardware.led.transport_interface import ILightTransport
from models.enums import InputKind, PlayerMode
from models.events import KeyboardKeyPressEvent
from models.frame import FrameBuffer
from models.session import PlayerSession
from utils.logger import get_logger, LogCategory

from controllers.lightstage_controller import LightstageController

log = get_logger().for_category(LogCategory.PLAYBACK)


class ScenePlayerController(LightstageController):
    """Manual, key-driven scene playback."""

    mode = PlayerMode.SCENE_PLAYER

    def __init__(self, transport: ILightTransport, scene: SceneStore):
        if (scene.node_count, scene.channel_count) != (transport.node_count, transport.channel_count):
            raise ValueError(
                f"Scene geometry {scene.node_count}x{scene.channel_count} does not match "
                f"transport {transport.node_count}x{transport.channel_count}"
            )
        super().__init__(transport)
        self.session = PlayerSession(scene=scene, cursor=PlaybackCursor(scene))

    @property
    def cursor(self) -> PlaybackCursor:
        return self.session.cursor

    def active_frame(self) -> FrameBuffer:
        return self.cursor.current_frame()

    def status_line(self) -> str:
        return self.cursor.position_label()

    def handle_event(self, event: KeyboardKeyPressEvent) -> None:
        if event.kind is not InputKind.ARROW:
            return
        if event.key == "RIGHT":
            self.cursor.advance()
        elif event.key == "LEFT":
            self.cursor.retreat()
