from __future__ import annotations
from typing import List, Optional, Sequence

from hardware.led.transport_interface import ILightTransport, check_geometry
from utils.logger import get_logger, LogCategory

log = get_logger().for_category(LogCategory.HARDWARE)


class VirtualTransport(ILightTransport):
    """
    In-memory transport for machines without lightstage hardware.

    Keeps the last written frame so tests and dry runs can inspect it.
    """

    def __init__(self, node_count: int, channel_count: int):
        self._node_count = node_count
        self._channel_count = channel_count
        self.last_frame: Optional[List[List[int]]] = None
        self.write_count = 0
        log.info("VirtualTransport initialized", nodes=node_count, channels=channel_count)

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def channel_count(self) -> int:
        return self._channel_count

    def write(self, matrix: Sequence[Sequence[int]]) -> None:
        check_geometry(matrix, self._node_count, self._channel_count)
        self.last_frame = [list(node) for node in matrix]
        self.write_count += 1

    def clear(self) -> None:
        self.write([[0] * self._channel_count for _ in range(self._node_count)])

    def is_dark(self) -> bool:
        """True when the last written frame had every channel off."""
        return self.last_frame is not None and not any(any(node) for node in self.last_frame)
