"""
Color Resolver - keyboard key + brightness -> node channel vector.

Keys (case-insensitive):

    Non-polarized           Polarized (cool white)
      r  red                  c  circular
      g  green                v  vertical
      b  blue                 h  horizontal
      w  warm white           d  diagonal
      n  neutral white        p  all polarized
    a  all channels
    o  off
"""

from typing import Dict, FrozenSet, List, Optional

from models.enums import Channel

_POLARIZED = frozenset({
    Channel.CIRCULAR_POLARIZED,
    Channel.VERTICAL_POLARIZED,
    Channel.HORIZONTAL_POLARIZED,
    Channel.DIAGONAL_POLARIZED,
})

# key -> channels lit at full requested brightness
COLOR_KEYS: Dict[str, FrozenSet[Channel]] = {
    "r": frozenset({Channel.RED}),
    "g": frozenset({Channel.GREEN}),
    "b": frozenset({Channel.BLUE}),
    "c": frozenset({Channel.CIRCULAR_POLARIZED}),
    "w": frozenset({Channel.WARM_WHITE}),
    "n": frozenset({Channel.NEUTRAL_WHITE}),
    "v": frozenset({Channel.VERTICAL_POLARIZED}),
    "h": frozenset({Channel.HORIZONTAL_POLARIZED}),
    "d": frozenset({Channel.DIAGONAL_POLARIZED}),
    "p": _POLARIZED,
    "a": frozenset(Channel),
    "o": frozenset(),
}

OFF_KEY = "o"
# Lights every channel, including any beyond the named ones
ALL_KEY = "a"


class ColorResolver:
    """
    Pure lookup from symbolic color key to channel vector.

    Example:
        resolver = ColorResolver(channel_count=9)
        resolver.resolve("r", 200)   # [200, 0, 0, 0, 0, 0, 0, 0, 0]
        resolver.resolve("x", 200)   # None - caller keeps its current color
    """

    def __init__(self, channel_count: int = len(Channel)):
        self.channel_count = channel_count

    @property
    def keys(self) -> List[str]:
        return list(COLOR_KEYS)

    def is_color_key(self, key: str) -> bool:
        return key.lower() in COLOR_KEYS

    def resolve(self, key: str, brightness: int) -> Optional[List[int]]:
        """
        Channel vector for `key` scaled to `brightness`.

        Returns:
            List of channel_count values, or None for an unknown key

        Raises:
            ValueError: brightness outside 0-255
        """
        if not 0 <= brightness <= 255:
            raise ValueError(f"Brightness {brightness} outside 0..255")

        key = key.lower()
        if key == ALL_KEY:
            return [brightness] * self.channel_count
        lit = COLOR_KEYS.get(key)
        if lit is None:
            return None
        return [brightness if channel in lit else 0 for channel in range(self.channel_count)]

    def off(self) -> List[int]:
        return [0] * self.channel_count
