"""
FrameBuffer - complete light state of the stage at one instant.

Geometry is fixed at construction:
    node_count    (N) addressable nodes
    channel_count (M) channel values per node, each 0-255

Storage is a single preallocated bytearray of N*M bytes, node-major. Nodes are
always complete; an untouched node is all zeros (off).
"""

from __future__ import annotations
from typing import Iterable, List, Sequence

from models.errors import NodeIndexError, ReadOnlyFrameError


class FrameBuffer:
    """
    Fixed-geometry grid of per-node channel values.

    Example:
        frame = FrameBuffer(143, 9)
        frame.set_node(0, [255, 0, 0, 0, 0, 0, 0, 0, 0])
        frame.get_node(0)      # [255, 0, 0, 0, 0, 0, 0, 0, 0]
        frame.get_node(143)    # NodeIndexError
    """

    __slots__ = ("_node_count", "_channel_count", "_data", "_read_only")

    def __init__(self, node_count: int, channel_count: int):
        if node_count < 1 or channel_count < 1:
            raise ValueError(
                f"Frame geometry must be positive, got {node_count}x{channel_count}"
            )
        self._node_count = node_count
        self._channel_count = channel_count
        self._data = bytearray(node_count * channel_count)
        self._read_only = False

    # ==================== Geometry ====================

    @property
    def node_count(self) -> int:
        return self._node_count

    @property
    def channel_count(self) -> int:
        return self._channel_count

    @property
    def read_only(self) -> bool:
        return self._read_only

    # ==================== Node access ====================

    def _offset(self, index: int) -> int:
        if not 0 <= index < self._node_count:
            raise NodeIndexError(index, self._node_count)
        return index * self._channel_count

    def set_node(self, index: int, channels: Sequence[int]) -> None:
        """
        Replace the whole channel vector of one node.

        Raises:
            NodeIndexError: index outside [0, node_count)
            ValueError: vector length is not channel_count or a value is not 0-255
            ReadOnlyFrameError: frame belongs to a scene
        """
        if self._read_only:
            raise ReadOnlyFrameError("Frame is part of a scene and cannot be modified")
        start = self._offset(index)
        if len(channels) != self._channel_count:
            raise ValueError(
                f"Expected {self._channel_count} channel values, got {len(channels)}"
            )
        # bytes() validates the 0-255 range before anything is written
        self._data[start:start + self._channel_count] = bytes(channels)

    def get_node(self, index: int) -> List[int]:
        """Return a copy of one node's channel vector."""
        start = self._offset(index)
        return list(self._data[start:start + self._channel_count])

    def fill(self, channels: Sequence[int]) -> None:
        """Set every node to the same channel vector."""
        for index in range(self._node_count):
            self.set_node(index, channels)

    def nodes(self) -> Iterable[List[int]]:
        for index in range(self._node_count):
            yield self.get_node(index)

    # ==================== Conversion ====================

    def to_matrix(self) -> List[List[int]]:
        """Full N x M matrix, the shape the light transport accepts."""
        return list(self.nodes())

    def to_bytes(self) -> bytes:
        """Channel bytes in node order."""
        return bytes(self._data)

    def copy(self) -> FrameBuffer:
        """Writable copy with the same geometry and content."""
        clone = FrameBuffer(self._node_count, self._channel_count)
        clone._data[:] = self._data
        return clone

    def frozen(self) -> FrameBuffer:
        """Read-only copy, used when a frame is committed to a scene."""
        clone = self.copy()
        clone._read_only = True
        return clone

    def is_blank(self) -> bool:
        return not any(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FrameBuffer):
            return NotImplemented
        return (
            self._node_count == other._node_count
            and self._channel_count == other._channel_count
            and self._data == other._data
        )

    def __repr__(self) -> str:
        lit = sum(1 for node in self.nodes() if any(node))
        return f"FrameBuffer({self._node_count}x{self._channel_count}, lit_nodes={lit})"
