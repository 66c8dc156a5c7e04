import asyncio
import codecs
import errno
import os
import select
import sys
from typing import Optional, List

from services.event_bus import EventBus
from models.events import KeyboardKeyPressEvent, KeyboardSource
from utils.logger import get_logger, LogCategory
from .base import IKeyboardAdapter

log = get_logger().for_category(LogCategory.HARDWARE)

# Final byte of CSI (ESC [) and SS3 (ESC O) cursor key sequences
ARROW_MAP = {
    'A': 'UP',
    'B': 'DOWN',
    'C': 'RIGHT',
    'D': 'LEFT',
}

POLL_INTERVAL = 0.01
# How long a lone ESC waits for the rest of an escape sequence
ESC_TIMEOUT = 0.05
READ_SIZE = 64


class StdinKeyboardAdapter(IKeyboardAdapter):
    """
    Terminal keyboard adapter

    Intended for:
    - SSH sessions
    - Local Unix terminals

    Features:
    - cbreak mode (keys arrive unbuffered, settings restored on exit)
    - Arrow keys from ESC [ A..D and ESC O A..D
    - Lone ESC reported as ESCAPE once no sequence follows
    - Ctrl+Key reported as the letter with a CTRL modifier

    Returns from run() at end of input (EOF) or when the terminal hangs up.
    """

    def __init__(self, event_bus: EventBus, stream=None):
        self.event_bus = event_bus
        self.stream = stream or sys.stdin
        self._old_settings = None
        self._buffer = ""
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")

    async def run(self) -> None:
        """
        Read stdin until EOF or cancellation.

        Raises:
            RuntimeError: stdin is not a TTY
        """
        if not self.stream.isatty():
            raise RuntimeError("STDIN is not a TTY")

        import termios
        import tty

        fd = self.stream.fileno()
        self._old_settings = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        log.info("STDIN keyboard adapter active (cbreak mode enabled)")

        try:
            while True:
                # Raw reads on the descriptor: a buffered text read would hide
                # the rest of an escape sequence from select()
                ready, _, _ = select.select([fd], [], [], 0)

                if not ready:
                    if self._buffer == "\x1b":
                        ready, _, _ = select.select([fd], [], [], ESC_TIMEOUT)
                        if not ready:
                            self._buffer = ""
                            await self._publish_key("ESCAPE")
                            continue
                    else:
                        await asyncio.sleep(POLL_INTERVAL)
                        continue

                try:
                    data = os.read(fd, READ_SIZE)
                except OSError as e:
                    if e.errno == errno.EIO:
                        # Terminal hung up (SSH session closed)
                        log.info("STDIN hung up")
                        return
                    raise RuntimeError("STDIN read failed") from e

                if not data:
                    log.info("STDIN closed (EOF)")
                    return

                await self.feed(self._decoder.decode(data))

        except asyncio.CancelledError:
            log.debug("STDIN keyboard adapter cancelled")
            raise

        finally:
            if self._old_settings:
                try:
                    termios.tcsetattr(fd, termios.TCSADRAIN, self._old_settings)
                    log.debug("Terminal settings restored")
                except termios.error as e:
                    log.warn("Could not restore terminal settings", error=str(e))

    async def feed(self, data: str) -> None:
        """Decode raw terminal input (used by run() and by tests)."""
        self._buffer += data
        await self._process_buffer()

    async def _process_buffer(self) -> None:
        """Emit an event for every complete key in the buffer."""
        while self._buffer:
            if self._buffer.startswith('\x1b'):
                if len(self._buffer) == 1:
                    return  # wait: may be the start of a sequence

                if self._buffer[1] in '[O':
                    if len(self._buffer) < 3:
                        return  # wait for full sequence
                    seq = self._buffer[:3]
                    self._buffer = self._buffer[3:]
                    key = ARROW_MAP.get(seq[2])
                    if key:
                        await self._publish_key(key)
                    else:
                        log.debug("Unknown escape sequence", sequence=repr(seq))
                    continue

                self._buffer = self._buffer[1:]
                await self._publish_key("ESCAPE")
                continue

            char = self._buffer[0]
            self._buffer = self._buffer[1:]

            if char in ('\r', '\n'):
                await self._publish_key("ENTER")
            elif char == '\t':
                await self._publish_key("TAB")
            elif char == '\x7f':
                await self._publish_key("BACKSPACE")
            elif char == ' ':
                await self._publish_key("SPACE")
            elif '\x01' <= char <= '\x1a':
                await self._publish_key(chr(ord(char) + 64), modifiers=["CTRL"])
            elif char.isprintable():
                await self._publish_key(char)

    async def _publish_key(self, key: str, modifiers: Optional[List[str]] = None) -> None:
        log.debug("Keyboard key pressed (stdin)", key=key, modifiers=modifiers)
        await self.event_bus.publish(
            KeyboardKeyPressEvent(key, modifiers, source=KeyboardSource.STDIN)
        )
