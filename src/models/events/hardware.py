"""Keyboard input events"""

from dataclasses import dataclass
from typing import List, Optional

from models.enums import InputKind
from models.events.base import Event
from models.events.types import EventType
from models.events.sources import KeyboardSource

ARROW_KEYS = frozenset({"UP", "DOWN", "LEFT", "RIGHT"})


@dataclass(init=False)
class KeyboardKeyPressEvent(Event):
    """
    Keyboard key press.

    `key` is either a single printable character exactly as typed ('r', 'R',
    '7') or an upper-case key name ('UP', 'ESCAPE', 'ENTER'). Control
    combinations carry the letter plus a 'CTRL' modifier.
    """
    key: str
    modifiers: List[str]
    source: KeyboardSource

    def __init__(self, key: str, modifiers: Optional[List[str]] = None, source: KeyboardSource = KeyboardSource.STDIN):
        super().__init__(type=EventType.KEYBOARD_KEYPRESS, source=source)
        self.key = key
        self.modifiers = modifiers or []

    @property
    def kind(self) -> InputKind:
        if "CTRL" in self.modifiers:
            return InputKind.QUIT if self.key.upper() == "C" else InputKind.OTHER
        if self.key == "ESCAPE":
            return InputKind.QUIT
        if self.key in ARROW_KEYS:
            return InputKind.ARROW
        if len(self.key) == 1 and self.key.isprintable() and not self.key.isspace():
            return InputKind.CHARACTER
        return InputKind.OTHER

    @property
    def is_quit(self) -> bool:
        return self.kind is InputKind.QUIT
