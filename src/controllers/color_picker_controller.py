"""
Color picker mode - uniform color on every node.

Keys:
    r g b w n       red, green, blue, warm white, neutral white
    c v h d p       circular, vertical, horizontal, diagonal, all polarized
    a / o           all channels / off
    Up / Down       brightness +/- step
    Esc / Ctrl+C    lights off and quit
"""

from hardware.led.transport_interface import ILightTransport
from managers.color_resolver import ColorResolver
from models.config import BrightnessConfig
from models.enums import InputKind, PlayerMode
from models.events import KeyboardKeyPressEvent
from models.frame import FrameBuffer
from models.session import PickerSession
from utils.logger import get_logger, LogCategory

from controllers.lightstage_controller import LightstageController

log = get_logger().for_category(LogCategory.COLOR)


class ColorPickerController(LightstageController):
    """Interactive uniform color picker."""

    mode = PlayerMode.COLOR_PICKER

    def __init__(
        self,
        transport: ILightTransport,
        resolver: ColorResolver,
        brightness: BrightnessConfig,
    ):
        super().__init__(transport)
        self.resolver = resolver
        self.brightness_policy = brightness
        self.session = PickerSession.create(transport.node_count, transport.channel_count, brightness)

    def active_frame(self) -> FrameBuffer:
        return self.session.frame

    def status_line(self) -> str:
        return f"Brightness: {self.session.brightness}\tColor: {self.session.color_key}"

    def handle_event(self, event: KeyboardKeyPressEvent) -> None:
        kind = event.kind
        if kind is InputKind.CHARACTER:
            self.select_color(event.key)
        elif kind is InputKind.ARROW and event.key == "UP":
            self.brighter()
        elif kind is InputKind.ARROW and event.key == "DOWN":
            self.dimmer()

    def select_color(self, key: str) -> bool:
        """Apply a color key. Unknown keys leave the current color untouched."""
        channels = self.resolver.resolve(key, self.session.brightness)
        if channels is None:
            log.debug("Not a color key", key=key)
            return False
        self.session.frame.fill(channels)
        self.session.color_key = key.lower()
        log.debug("Color selected", key=self.session.color_key)
        return True

    def brighter(self) -> None:
        policy = self.brightness_policy
        if self.session.brightness < policy.maximum:
            self._set_brightness(min(self.session.brightness + policy.step, policy.maximum))

    def dimmer(self) -> None:
        policy = self.brightness_policy
        if self.session.brightness > policy.minimum:
            self._set_brightness(max(self.session.brightness - policy.step, policy.minimum))

    def _set_brightness(self, value: int) -> None:
        self.session.brightness = value
        self.session.frame.fill(self.resolver.resolve(self.session.color_key, value))
