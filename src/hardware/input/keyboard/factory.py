import asyncio
from typing import List

from services.event_bus import EventBus
from models.config import InputConfig
from models.enums import KeyboardKind
from runtime.runtime_info import RuntimeInfo
from utils.logger import get_logger, LogCategory
from .adapters.base import IKeyboardAdapter

log = get_logger().for_category(LogCategory.HARDWARE)


def candidate_adapters(event_bus: EventBus, config: InputConfig) -> List[IKeyboardAdapter]:
    """
    Keyboard adapters to try, in priority order.

    AUTO:
    1. STDIN (terminal, SSH) when stdin is a TTY
    2. Evdev (physical keyboard on a headless Pi)
    """
    adapters: List[IKeyboardAdapter] = []
    want_stdin = config.keyboard in (KeyboardKind.AUTO, KeyboardKind.STDIN)
    want_evdev = config.keyboard in (KeyboardKind.AUTO, KeyboardKind.EVDEV)

    if want_stdin and RuntimeInfo.has_termios():
        if config.keyboard is KeyboardKind.STDIN or RuntimeInfo.stdin_is_tty():
            from .adapters.stdin import StdinKeyboardAdapter
            adapters.append(StdinKeyboardAdapter(event_bus))

    if want_evdev and RuntimeInfo.has_evdev():
        try:
            from .adapters.evdev import EvdevKeyboardAdapter
            adapters.append(EvdevKeyboardAdapter(event_bus, config.device_path))
        except ImportError as e:
            log.info("Evdev adapter not available", reason=str(e))

    return adapters


async def start_keyboard(event_bus: EventBus, config: InputConfig) -> None:
    """
    Run the first keyboard adapter that starts.

    Returns when that adapter's input ends (EOF).

    Raises:
        RuntimeError: no adapter could be started
    """
    for adapter in candidate_adapters(event_bus, config):
        name = adapter.__class__.__name__
        try:
            log.info("Starting keyboard adapter", adapter=name)
            await adapter.run()
            return

        except asyncio.CancelledError:
            raise

        except RuntimeError as e:
            log.warn("Keyboard adapter failed, falling back", adapter=name, reason=str(e))

    log.error("No keyboard adapter could be started", preference=config.keyboard.value)
    raise RuntimeError("Keyboard input unavailable")
