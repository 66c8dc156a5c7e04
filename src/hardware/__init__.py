"""
Hardware Layer

Low-level device access only:

- Light transport (WS281xTransport, VirtualTransport + ILightTransport)
- Keyboard adapters (stdin terminal, evdev)
"""
from .led.transport_interface import ILightTransport
from .led.virtual_transport import VirtualTransport
from .led.transport_factory import create_transport

__all__ = [
    "ILightTransport",
    "VirtualTransport",
    "create_transport",
]
