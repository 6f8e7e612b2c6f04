"""Coloured console logging and checked assertions."""

from __future__ import annotations

import enum

_RESET = "\033[0m"

_COLOR_CODES = (
    "\x1b[30m", "\x1b[31m", "\x1b[32m", "\x1b[33m",
    "\x1b[34m", "\x1b[35m", "\x1b[36m", "\x1b[37m",
    "\x1b[90m", "\x1b[91m", "\x1b[92m", "\x1b[93m",
    "\x1b[94m", "\x1b[95m", "\x1b[96m", "\x1b[97m",
)


class TextColor(enum.IntEnum):
    """Terminal text colours."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15

    @property
    def code(self) -> str:
        """The ANSI escape sequence selecting this colour."""
        return _COLOR_CODES[self.value]


class AssertionFailedError(AssertionError):
    """Raised when a checked condition does not hold."""


def colorize(prefix: str, color: TextColor, message: str) -> str:
    """Return a coloured log line without the trailing newline."""
    return f"{TextColor(color).code}{prefix}{message}{_RESET}"


def log(prefix: str, color: TextColor, fmt: str, *args: object) -> None:
    """Format a message with ``str.format`` and print it in colour."""
    print(colorize(prefix, color, fmt.format(*args)))


def trace(fmt: str, *args: object) -> None:
    """Log a trace message in green."""
    log("TRACE: ", TextColor.GREEN, fmt, *args)


def warn(fmt: str, *args: object) -> None:
    """Log a warning in yellow."""
    log("WARN:  ", TextColor.YELLOW, fmt, *args)


def error(fmt: str, *args: object) -> None:
    """Log an error in red."""
    log("ERROR: ", TextColor.RED, fmt, *args)


def check(condition: object, fmt: str, *args: object) -> None:
    """Log an error and raise AssertionFailedError if *condition* is false."""
    if not condition:
        message = fmt.format(*args)
        error("{}", message)
        raise AssertionFailedError(message)