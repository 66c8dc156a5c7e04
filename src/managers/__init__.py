"""Managers - configuration loading and color lookup"""

from .config_manager import ConfigManager
from .color_resolver import ColorResolver, COLOR_KEYS

__all__ = [
    'ConfigManager',
    'ColorResolver',
    'COLOR_KEYS',
]
