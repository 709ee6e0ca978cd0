"""Console output and ANSI colouring of text."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from snitch.append import SmallString, append

Printer = Callable[[str], None]


class Color(str, Enum):
    """ANSI escape sequences used to colour console output."""

    ERROR = "\x1b[1;31m"
    WARNING = "\x1b[1;33m"
    STATUS = "\x1b[1;36m"
    FAIL = "\x1b[1;31m"
    SKIPPED = "\x1b[1;33m"
    SUCCESS = "\x1b[1;32m"
    PASS = SUCCESS
    HIGHLIGHT1 = "\x1b[1;35m"
    HIGHLIGHT2 = "\x1b[1;36m"
    RESET = "\x1b[0m"


@dataclass(frozen=True)
class Colored:
    """A value wrapped between a colour start sequence and a reset sequence."""

    value: Any
    color_start: str
    color_end: str

    def __str__(self) -> str:
        return f"{self.color_start}{self.value}{self.color_end}"


def stdout_print(message: str) -> None:
    """Write a message to standard output."""
    sys.stdout.write(message)


_printers: list[Printer] = [stdout_print]


def console_print(message: str) -> None:
    """Send a message to the current console printer."""
    _printers[-1](message)


def set_console_printer(printer: Printer) -> Printer:
    """Replace the console printer and return the previous one."""
    if not callable(printer):
        raise TypeError("console printer must be callable")
    previous = _printers[-1]
    _printers[-1] = printer
    return previous


def make_colored(value: Any, with_color: bool, start: Color | str) -> Colored:
    """Wrap a value in colour codes, or in nothing when colour is disabled."""
    if not with_color:
        return Colored(value, "", "")
    start_code = start.value if isinstance(start, Color) else str(start)
    return Colored(value, start_code, Color.RESET.value)


def append_colored(buffer: SmallString, colored: Colored) -> bool:
    """Append a coloured value, always keeping the reset sequence when colour is written."""
    codes = len(colored.color_start) + len(colored.color_end)
    if buffer.available() <= codes:
        return False

    could_fit = True
    if not append(buffer, colored.color_start, colored.value):
        buffer.resize(buffer.capacity() - len(colored.color_end))
        could_fit = False

    return append(buffer, colored.color_end) and could_fit