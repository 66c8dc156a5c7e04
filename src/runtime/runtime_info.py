import sys
import importlib.util


class RuntimeInfo:
    """Platform probes used to pick hardware and keyboard backends."""

    @classmethod
    def is_linux(cls) -> bool:
        return sys.platform.startswith("linux")

    @classmethod
    def is_raspberry_pi(cls) -> bool:
        if not cls.is_linux():
            return False
        try:
            with open("/proc/device-tree/model", "r") as f:
                if "Raspberry Pi" in f.read():
                    return True
        except OSError:
            pass
        try:
            with open("/proc/cpuinfo", "r") as f:
                return "Raspberry Pi" in f.read()
        except OSError:
            return False

    @classmethod
    def has_ws281x(cls) -> bool:
        return cls.has_module("rpi_ws281x")

    @classmethod
    def has_evdev(cls) -> bool:
        return cls.has_module("evdev")

    @classmethod
    def has_termios(cls) -> bool:
        return cls.has_module("termios")

    @classmethod
    def stdin_is_tty(cls) -> bool:
        try:
            return sys.stdin.isatty()
        except (AttributeError, ValueError):
            return False

    @classmethod
    def has_module(cls, module_name: str) -> bool:
        try:
            return importlib.util.find_spec(module_name) is not None
        except (ImportError, ValueError):
            return False
