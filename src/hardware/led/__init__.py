from .transport_interface import ILightTransport
from .virtual_transport import VirtualTransport
from .transport_factory import create_transport

__all__ = [
    "ILightTransport",
    "VirtualTransport",
    "create_transport",
]
