# hardware/led/ws281x_transport.py
"""
WS281xTransport - rpi_ws281x hardware driver
============================================
Concrete ILightTransport for lightstage nodes built from WS281x driver chips.

Each node is a chain of 3-channel driver chips, so a node with 9 channels
occupies 3 "pixels" on the data line. Channel bytes are streamed in node
order and packed three per pixel; a trailing partial pixel is zero padded.
With color_order RGB the bytes go out on the wire unchanged.
"""

from __future__ import annotations
from typing import Sequence

from rpi_ws281x import PixelStrip, ws

from hardware.led.transport_interface import ILightTransport, check_geometry
from models.config import TransportConfig
from models.errors import TransportError
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)

CHANNELS_PER_CHIP = 3


def pixels_for(node_count: int, channel_count: int) -> int:
    """Number of WS281x pixels needed to carry node_count x channel_count bytes."""
    total = node_count * channel_count
    return (total + CHANNELS_PER_CHIP - 1) // CHANNELS_PER_CHIP


class WS281xTransport(ILightTransport):
    """
    Lightstage output through rpi_ws281x (PWM, PCM or SPI depending on GPIO).

    Any exception raised by the driver is wrapped in TransportError; nothing
    is retried here.
    """

    def __init__(self, node_count: int, channel_count: int, config: TransportConfig) -> None:
        self._node_count = node_count
        self._channel_count = channel_count
        self.config = config
        self.pixel_count = pixels_for(node_count, channel_count)

        try:
            self._pixel_strip = PixelStrip(
                self.pixel_count,
                config.gpio_pin,
                config.frequency_hz,
                config.dma_channel,
                config.invert,
                config.brightness,
                config.pwm_channel,
                self._decode_color_order(config.color_order),
            )
            self._pixel_strip.begin()
        except Exception as ex:
            raise TransportError(f"WS281x init failed on GPIO {config.gpio_pin}: {ex}") from ex

        log.info(
            "WS281xTransport initialized",
            gpio=config.gpio_pin,
            nodes=node_count,
            channels=channel_count,
            pixels=self.pixel_count,
            dma=config.dma_channel,
        )

    # ==================== ILightTransport API ====================

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def channel_count(self) -> int:
        return self._channel_count

    def write(self, matrix: Sequence[Sequence[int]]) -> None:
        """Pack the frame into pixels and push it in a single show()."""
        check_geometry(matrix, self._node_count, self._channel_count)
        data = bytearray()
        for node in matrix:
            data.extend(node)
        data.extend(bytes(self.pixel_count * CHANNELS_PER_CHIP - len(data)))
        self._push(data)

    def clear(self) -> None:
        self._push(bytes(self.pixel_count * CHANNELS_PER_CHIP))

    def _push(self, data: bytes) -> None:
        try:
            for pixel in range(self.pixel_count):
                base = pixel * CHANNELS_PER_CHIP
                self._pixel_strip.setPixelColorRGB(pixel, data[base], data[base + 1], data[base + 2])
            self._pixel_strip.show()
        except Exception as ex:
            raise TransportError(f"WS281x write failed: {ex}") from ex

    # ==================== Helpers ====================

    @staticmethod
    def _decode_color_order(order: str) -> int:
        """Map color order string to rpi_ws281x strip type constant."""
        mapping = {
            "RGB": ws.WS2811_STRIP_RGB,
            "RBG": ws.WS2811_STRIP_RBG,
            "GRB": ws.WS2811_STRIP_GRB,
            "GBR": ws.WS2811_STRIP_GBR,
            "BRG": ws.WS2811_STRIP_BRG,
            "BGR": ws.WS2811_STRIP_BGR,
        }
        try:
            return mapping[order.upper()]
        except KeyError:
            raise ValueError(f"Unsupported color order: {order}") from None
