"""
Configuration models

Frozen dataclasses built once at startup by ConfigManager. Geometry (node and
channel count) is resolved here and never changes per scene.
"""

from dataclasses import dataclass, field
from typing import Optional

from models.enums import TransportKind, KeyboardKind, Channel


@dataclass(frozen=True)
class StageConfig:
    """Lightstage geometry"""
    node_count: int = 143
    channel_count: int = len(Channel)

    def __post_init__(self):
        if self.node_count < 1:
            raise ValueError(f"stage.node_count must be >= 1, got {self.node_count}")
        if self.channel_count < 1:
            raise ValueError(f"stage.channel_count must be >= 1, got {self.channel_count}")


@dataclass(frozen=True)
class BrightnessConfig:
    """
    Color picker brightness policy.

    Up/Down arrows move by `step` and stop at `minimum` / `maximum`.
    """
    initial: int = 200
    step: int = 10
    minimum: int = 10
    maximum: int = 250

    def __post_init__(self):
        if not 0 <= self.minimum <= self.maximum <= 255:
            raise ValueError(
                f"brightness bounds must satisfy 0 <= minimum <= maximum <= 255, "
                f"got {self.minimum}..{self.maximum}"
            )
        if not self.minimum <= self.initial <= self.maximum:
            raise ValueError(f"brightness.initial {self.initial} outside {self.minimum}..{self.maximum}")
        if self.step < 1:
            raise ValueError(f"brightness.step must be >= 1, got {self.step}")


@dataclass(frozen=True)
class TransportConfig:
    """Light transport selection and WS281x driver settings"""
    kind: TransportKind = TransportKind.AUTO
    gpio_pin: int = 10            # SPI MOSI
    frequency_hz: int = 800_000
    dma_channel: int = 10
    brightness: int = 255         # Driver-level brightness limit
    invert: bool = False
    pwm_channel: int = 0
    color_order: str = "RGB"      # RGB streams channel bytes unchanged


@dataclass(frozen=True)
class InputConfig:
    """Keyboard adapter selection"""
    keyboard: KeyboardKind = KeyboardKind.AUTO
    device_path: Optional[str] = None   # evdev device, auto-detected when None


@dataclass(frozen=True)
class LightstageConfig:
    """Complete application configuration"""
    stage: StageConfig = field(default_factory=StageConfig)
    brightness: BrightnessConfig = field(default_factory=BrightnessConfig)
    transport: TransportConfig = field(default_factory=TransportConfig)
    input: InputConfig = field(default_factory=InputConfig)
