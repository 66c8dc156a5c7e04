"""
Unit tests for ColorResolver
"""

import pytest

from managers.color_resolver import ColorResolver, COLOR_KEYS
from models.enums import Channel


@pytest.fixture
def resolver():
    return ColorResolver(channel_count=9)


@pytest.mark.parametrize("key, channel", [
    ("r", Channel.RED),
    ("g", Channel.GREEN),
    ("b", Channel.BLUE),
    ("c", Channel.CIRCULAR_POLARIZED),
    ("w", Channel.WARM_WHITE),
    ("n", Channel.NEUTRAL_WHITE),
    ("v", Channel.VERTICAL_POLARIZED),
    ("h", Channel.HORIZONTAL_POLARIZED),
    ("d", Channel.DIAGONAL_POLARIZED),
])
def test_single_channel_keys(resolver, key, channel):
    vector = resolver.resolve(key, 200)
    expected = [0] * 9
    expected[channel] = 200
    assert vector == expected


def test_all_polarized(resolver):
    assert resolver.resolve("p", 50) == [0, 0, 0, 50, 0, 0, 50, 50, 50]


def test_all_and_off(resolver):
    assert resolver.resolve("a", 120) == [120] * 9
    assert resolver.resolve("o", 120) == [0] * 9
    assert resolver.off() == [0] * 9


def test_upper_case_keys_resolve(resolver):
    assert resolver.resolve("R", 10) == resolver.resolve("r", 10)


@pytest.mark.parametrize("key", ["x", "z", "1", "UP", ""])
def test_unknown_key_has_no_mapping(resolver, key):
    assert resolver.resolve(key, 100) is None
    assert not resolver.is_color_key(key)


def test_brightness_range_checked(resolver):
    with pytest.raises(ValueError):
        resolver.resolve("r", 256)
    with pytest.raises(ValueError):
        resolver.resolve("r", -1)


def test_vector_length_follows_channel_count():
    assert ColorResolver(channel_count=3).resolve("a", 9) == [9, 9, 9]


def test_key_table_is_complete(resolver):
    assert set(resolver.keys) == set("rgbcwnvhdpao")
    assert set(COLOR_KEYS) == set(resolver.keys)


def test_all_lights_extra_channels():
    assert ColorResolver(channel_count=12).resolve("A", 100) == [100] * 12
