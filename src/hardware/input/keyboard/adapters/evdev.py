# Physical keyboard via Linux evdev (/dev/input/event*)
import asyncio
from typing import Dict, Optional

from evdev import InputDevice, list_devices, ecodes

from services.event_bus import EventBus
from models.events import KeyboardKeyPressEvent, KeyboardSource
from utils.logger import get_logger, LogCategory
from .base import IKeyboardAdapter

log = get_logger().for_category(LogCategory.HARDWARE)

NAMED_KEYS = {
    "UP": "UP",
    "DOWN": "DOWN",
    "LEFT": "LEFT",
    "RIGHT": "RIGHT",
    "ESC": "ESCAPE",
    "ENTER": "ENTER",
    "SPACE": "SPACE",
    "TAB": "TAB",
    "BACKSPACE": "BACKSPACE",
}

PURE_MODIFIERS = {
    "LEFTCTRL", "RIGHTCTRL", "LEFTSHIFT", "RIGHTSHIFT",
    "LEFTALT", "RIGHTALT", "LEFTMETA", "RIGHTMETA",
}

KEY_DOWN = 1


class EvdevKeyboardAdapter(IKeyboardAdapter):
    """
    Physical keyboard input via Linux evdev.

    Used when the program runs headless on the Pi with a USB keyboard plugged
    in and no terminal attached.

    - Events read with evdev's async_read_loop on the running event loop
    - Letters are reported lower case, upper case while SHIFT is held
    - CTRL/SHIFT/ALT state tracked from key down/up events
    """

    def __init__(self, event_bus: EventBus, device_path: Optional[str] = None):
        self.event_bus = event_bus
        self.device_path = device_path
        self.device: Optional[InputDevice] = None
        self._modifiers: Dict[str, bool] = {
            "CTRL": False,
            "SHIFT": False,
            "ALT": False,
        }

    def _find_keyboard_device(self) -> Optional[str]:
        """Pick the input device that looks most like a full keyboard."""
        candidates = []

        for path in list_devices():
            try:
                device = InputDevice(path)
                caps = device.capabilities()
            except OSError as e:
                log.debug(f"Cannot inspect {path}: {e}")
                continue

            key_codes = caps.get(ecodes.EV_KEY, [])
            has_letters = any(ecodes.KEY_A <= code <= ecodes.KEY_Z for code in key_codes)
            has_arrows = ecodes.KEY_UP in key_codes and ecodes.KEY_DOWN in key_codes
            if has_letters and has_arrows:
                candidates.append((path, device.name, len(key_codes)))
            device.close()

        if not candidates:
            return None

        # More keys = more likely a full keyboard
        candidates.sort(key=lambda x: -x[2])
        best_path, best_name, num_keys = candidates[0]
        log.info("Selected keyboard device", name=best_name, path=best_path, total_keys=num_keys)
        return best_path

    async def run(self) -> None:
        """
        Read key events until cancelled.

        Raises:
            RuntimeError: no usable keyboard device
        """
        if not self.device_path:
            self.device_path = self._find_keyboard_device()
        if not self.device_path:
            raise RuntimeError("No physical keyboard found via evdev")

        try:
            self.device = InputDevice(self.device_path)
        except OSError as e:
            raise RuntimeError(f"Cannot open keyboard device: {e}") from e

        log.info("Listening for physical keyboard input", device=self.device.name, path=self.device_path)

        try:
            async for event in self.device.async_read_loop():
                if event.type == ecodes.EV_KEY:
                    await self._handle_key_event(event.code, event.value)
        except asyncio.CancelledError:
            log.debug("Evdev keyboard cancelled")
            raise
        finally:
            self.device.close()

    async def _handle_key_event(self, code: int, value: int) -> None:
        key_name = ecodes.KEY.get(code)
        if isinstance(key_name, list):
            key_name = key_name[0]
        if not key_name:
            log.debug(f"Unknown key code: {code}")
            return

        name = key_name.replace("KEY_", "")
        self._update_modifier_state(name, pressed=value != 0)

        if value != KEY_DOWN or name in PURE_MODIFIERS:
            return

        key = self._translate(name)
        if not key:
            return

        modifiers = [k for k, v in self._modifiers.items() if v]
        if "CTRL" in modifiers:
            key = key.upper()
        log.debug("Keyboard key pressed (evdev)", key=key, modifiers=modifiers or None)
        await self.event_bus.publish(
            KeyboardKeyPressEvent(key, [m for m in modifiers if m != "SHIFT"], source=KeyboardSource.EVDEV)
        )

    def _translate(self, name: str) -> str:
        if name in NAMED_KEYS:
            return NAMED_KEYS[name]
        if len(name) == 1 and name.isalpha():
            return name.upper() if self._modifiers["SHIFT"] else name.lower()
        if len(name) == 1 and name.isdigit():
            return name
        return ""

    def _update_modifier_state(self, name: str, pressed: bool) -> None:
        if "CTRL" in name:
            self._modifiers["CTRL"] = pressed
        elif "SHIFT" in name:
            self._modifiers["SHIFT"] = pressed
        elif "ALT" in name:
            self._modifiers["ALT"] = pressed
