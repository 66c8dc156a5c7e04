"""
Utility helpers for the lightstage controller
"""

from .logger import get_logger, configure_logger, Logger, BoundLogger

__all__ = [
    'get_logger',
    'configure_logger',
    'Logger',
    'BoundLogger',
]
