# hardware/led/transport_factory.py

from hardware.led.transport_interface import ILightTransport
from hardware.led.virtual_transport import VirtualTransport
from models.config import LightstageConfig
from models.enums import TransportKind
from runtime.runtime_info import RuntimeInfo
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


def create_transport(config: LightstageConfig) -> ILightTransport:
    """
    Build the light transport selected in config.

    AUTO: ws281x on a Raspberry Pi with rpi_ws281x installed, otherwise the
    virtual transport (so the app still runs on a PC). WS281X is strict and
    lets TransportError / ImportError through.
    """
    nodes = config.stage.node_count
    channels = config.stage.channel_count
    kind = config.transport.kind

    if kind is TransportKind.VIRTUAL:
        return VirtualTransport(nodes, channels)

    if kind is TransportKind.WS281X:
        from hardware.led.ws281x_transport import WS281xTransport
        return WS281xTransport(nodes, channels, config.transport)

    if RuntimeInfo.is_raspberry_pi() and RuntimeInfo.has_ws281x():
        from hardware.led.ws281x_transport import WS281xTransport
        return WS281xTransport(nodes, channels, config.transport)

    log.warn("No lightstage hardware detected, using virtual transport")
    return VirtualTransport(nodes, channels)
