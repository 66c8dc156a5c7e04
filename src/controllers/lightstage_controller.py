"""
Control loop shared by both lightstage modes.

One loop, one thread:
    render initial frame -> write
    for each key: handle -> write
    quit / end of input -> all-off write -> return

A failed hardware write is logged and skipped; the next key renders again.
Scene and index errors are not caught here and end the session.
"""

from typing import AsyncIterator

from hardware.led.transport_interface import ILightTransport
from models.enums import PlayerMode
from models.errors import TransportError
from models.events import KeyboardKeyPressEvent
from models.frame import FrameBuffer
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.SYSTEM)


class LightstageController:
    """
    Base class for the color picker and scene player.

    Subclasses provide:
    - active_frame(): frame to show right now
    - handle_event(event): update session state for one key
    - status_line(): one-line summary shown after every key
    """

    mode: PlayerMode

    def __init__(self, transport: ILightTransport):
        self.transport = transport
        self.failed_writes = 0

    def active_frame(self) -> FrameBuffer:
        raise NotImplementedError

    def handle_event(self, event: KeyboardKeyPressEvent) -> None:
        raise NotImplementedError

    def status_line(self) -> str:
        raise NotImplementedError

    # ============================================================
    # Loop
    # ============================================================

    async def run(self, events: AsyncIterator[KeyboardKeyPressEvent]) -> None:
        """
        Drive the lights from `events` until quit or end of input.

        Raises:
            EmptySceneError / NodeIndexError: from rendering, session is over
            TransportError: only from the final all-off write
        """
        log.info(f"{self.mode.name} started")
        self.render()

        async for event in events:
            if event.is_quit:
                log.info("Quit requested", key=event.key)
                break
            self.handle_event(event)
            self.render()
        else:
            log.info("Input closed")

        self.lights_off()

    def render(self) -> bool:
        """Write the active frame. Returns False if the transport failed."""
        frame = self.active_frame()
        log.info(self.status_line(), category=LogCategory.PLAYBACK)
        try:
            self.transport.write(frame.to_matrix())
            return True
        except TransportError as ex:
            self.failed_writes += 1
            log.warn("Frame write failed, skipping", error=str(ex), failed_writes=self.failed_writes)
            return False

    def lights_off(self) -> None:
        """Final write: every channel of every node off."""
        self.transport.clear()
        log.info("Lights off", category=LogCategory.SHUTDOWN)
