from .adapters.base import IKeyboardAdapter
from .factory import start_keyboard, candidate_adapters

__all__ = [
    "IKeyboardAdapter",
    "start_keyboard",
    "candidate_adapters",
]
