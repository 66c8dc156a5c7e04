# hardware/led/transport_interface.py
"""
ILightTransport Protocol
========================
Hardware abstraction for the lightstage.
Minimal contract for anything that can put a frame on the lights.
"""

from __future__ import annotations
from typing import Protocol, Sequence


class ILightTransport(Protocol):
    """
    Protocol defining the lightstage output contract.

    All implementations must provide:
    - node_count / channel_count: geometry the transport expects
    - write: push one complete node x channel matrix to the lights
    - clear: turn every channel off
    """

    @property
    def node_count(self) -> int:
        ...

    @property
    def channel_count(self) -> int:
        ...

    def write(self, matrix: Sequence[Sequence[int]]) -> None:
        """
        Send a full frame.

        Raises:
            ValueError: matrix geometry differs from node_count x channel_count
            TransportError: the hardware rejected the write
        """
        ...

    def clear(self) -> None:
        """Write an all-off frame. Raises TransportError on failure."""
        ...


def check_geometry(matrix: Sequence[Sequence[int]], node_count: int, channel_count: int) -> None:
    """Raise ValueError unless matrix is exactly node_count x channel_count."""
    if len(matrix) != node_count:
        raise ValueError(f"Frame has {len(matrix)} nodes, transport expects {node_count}")
    for index, node in enumerate(matrix):
        if len(node) != channel_count:
            raise ValueError(
                f"Node {index} has {len(node)} channels, transport expects {channel_count}"
            )
