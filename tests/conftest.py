import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from hardware.led.virtual_transport import VirtualTransport
from models.events import KeyboardKeyPressEvent


NODES = 4
CHANNELS = 9


@pytest.fixture
def transport():
    """Small virtual stage: 4 nodes x 9 channels."""
    return VirtualTransport(NODES, CHANNELS)


@pytest.fixture
def keys():
    """Build an async event stream from key names: keys("r", "UP", "ESCAPE")."""

    def build(*names, modifiers=None):
        async def stream():
            for name in names:
                yield KeyboardKeyPressEvent(name, modifiers)
        return stream()

    return build


class FlakyTransport(VirtualTransport):
    """Virtual transport whose writes fail while `failing` is set."""

    def __init__(self, node_count, channel_count):
        super().__init__(node_count, channel_count)
        self.failing = False

    def write(self, matrix):
        if self.failing:
            from models.errors import TransportError
            raise TransportError("bus error")
        super().write(matrix)


@pytest.fixture
def flaky_transport():
    return FlakyTransport(NODES, CHANNELS)
