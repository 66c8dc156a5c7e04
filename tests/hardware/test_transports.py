"""
Tests for light transports and the transport factory
"""

from unittest.mock import patch

import pytest

from hardware.led.transport_factory import create_transport
from hardware.led.virtual_transport import VirtualTransport
from models.config import LightstageConfig, StageConfig, TransportConfig
from models.enums import TransportKind
from models.errors import TransportError


class TestVirtualTransport:

    def test_write_keeps_last_frame(self):
        transport = VirtualTransport(2, 3)
        transport.write([[1, 2, 3], [4, 5, 6]])
        assert transport.last_frame == [[1, 2, 3], [4, 5, 6]]
        assert transport.write_count == 1

    def test_clear_writes_all_off(self):
        transport = VirtualTransport(2, 3)
        transport.write([[9, 9, 9], [9, 9, 9]])
        transport.clear()
        assert transport.is_dark()
        assert transport.write_count == 2

    @pytest.mark.parametrize("matrix", [
        [[1, 2, 3]],
        [[1, 2, 3], [4, 5]],
        [[1, 2, 3], [4, 5, 6], [7, 8, 9]],
    ])
    def test_wrong_geometry_rejected(self, matrix):
        transport = VirtualTransport(2, 3)
        with pytest.raises(ValueError):
            transport.write(matrix)
        assert transport.write_count == 0


def config_with(kind):
    return LightstageConfig(stage=StageConfig(node_count=3, channel_count=9), transport=TransportConfig(kind=kind))


class TestTransportFactory:

    def test_virtual_requested(self):
        transport = create_transport(config_with(TransportKind.VIRTUAL))
        assert isinstance(transport, VirtualTransport)
        assert (transport.node_count, transport.channel_count) == (3, 9)

    def test_auto_off_pi_is_virtual(self):
        with patch("hardware.led.transport_factory.RuntimeInfo.is_raspberry_pi", return_value=False):
            transport = create_transport(config_with(TransportKind.AUTO))
        assert isinstance(transport, VirtualTransport)


class TestWS281xTransport:
    """Driver calls are mocked; only packing and error wrapping are tested."""

    @pytest.fixture
    def module(self):
        pytest.importorskip("rpi_ws281x")
        import hardware.led.ws281x_transport as module
        return module

    @pytest.fixture
    def strip(self, module):
        with patch.object(module, "PixelStrip") as pixel_strip_cls:
            yield pixel_strip_cls

    def test_pixel_count_packs_three_channels(self, module):
        assert module.pixels_for(143, 9) == 429
        assert module.pixels_for(1, 4) == 2

    def test_write_streams_channels_in_node_order(self, module, strip):
        transport = module.WS281xTransport(2, 3, TransportConfig())
        transport.write([[1, 2, 3], [4, 5, 6]])

        driver = strip.return_value
        driver.begin.assert_called_once()
        driver.setPixelColorRGB.assert_any_call(0, 1, 2, 3)
        driver.setPixelColorRGB.assert_any_call(1, 4, 5, 6)
        driver.show.assert_called_once()

    def test_partial_pixel_is_zero_padded(self, module, strip):
        transport = module.WS281xTransport(1, 4, TransportConfig())
        transport.write([[10, 20, 30, 40]])
        strip.return_value.setPixelColorRGB.assert_any_call(1, 40, 0, 0)

    def test_driver_failure_becomes_transport_error(self, module, strip):
        transport = module.WS281xTransport(1, 3, TransportConfig())
        strip.return_value.show.side_effect = RuntimeError("ws2811_render failed with code -3")
        with pytest.raises(TransportError):
            transport.write([[1, 1, 1]])

    def test_init_failure_becomes_transport_error(self, module, strip):
        strip.return_value.begin.side_effect = RuntimeError("ws2811_init failed with code -5")
        with pytest.raises(TransportError):
            module.WS281xTransport(1, 3, TransportConfig())
