"""Fixed-capacity strings and the append-or-truncate text formatting rules."""

from __future__ import annotations

from enum import Enum
from typing import Iterator

_SINGLE_PRECISION = 6
_DOUBLE_PRECISION = 15


class SmallString:
    """A mutable string that can never grow beyond a fixed capacity."""

    __slots__ = ("_capacity", "_chars")

    def __init__(self, capacity: int, text: str = "") -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        if len(text) > capacity:
            raise ValueError("initial text does not fit in the string capacity")
        self._capacity = capacity
        self._chars: list[str] = list(text)

    def capacity(self) -> int:
        return self._capacity

    def available(self) -> int:
        return self._capacity - len(self._chars)

    def grow(self, count: int) -> None:
        """Extend the string by ``count`` characters of unspecified content."""
        if count < 0 or count > self.available():
            raise OverflowError("cannot grow small string beyond its capacity")
        self._chars.extend("\0" * count)

    def resize(self, size: int) -> None:
        if size < 0 or size > self._capacity:
            raise OverflowError("cannot resize small string beyond its capacity")
        if size <= len(self._chars):
            del self._chars[size:]
        else:
            self._chars.extend("\0" * (size - len(self._chars)))

    def push_back(self, char: str) -> None:
        if len(char) != 1:
            raise ValueError("push_back expects a single character")
        if not self.available():
            raise OverflowError("small string is full")
        self._chars.append(char)

    def pop_back(self) -> str:
        if not self._chars:
            raise IndexError("pop_back on an empty small string")
        return self._chars.pop()

    def clear(self) -> None:
        self._chars.clear()

    def __len__(self) -> int:
        return len(self._chars)

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return "".join(self._chars[index])
        return self._chars[index]

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"SmallString({self._capacity}, {str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SmallString):
            return self._chars == other._chars
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


def format_float(value: float, precision: int) -> str:
    """Format a number in scientific notation with ``precision`` fractional digits."""
    return f"{float(value):.{precision}e}"


def _to_text(arg: object) -> str:
    if isinstance(arg, Enum):
        return _to_text(arg.value)
    if arg is None:
        return "nullptr"
    if isinstance(arg, bool):
        return "true" if arg else "false"
    if isinstance(arg, int):
        return str(arg)
    if isinstance(arg, float):
        return format_float(arg, _DOUBLE_PRECISION)
    if isinstance(arg, (str, SmallString)):
        return str(arg)
    raise TypeError(f"cannot append value of type {type(arg).__name__}")


def append(buffer: SmallString, *args: object) -> bool:
    """Append each argument's text; copy what fits and return False on overflow."""
    for arg in args:
        text = _to_text(arg)
        if not text:
            continue
        room = buffer.available()
        buffer._chars.extend(text[:room])
        if len(text) > room:
            return False
    return True


def truncate_end(buffer: SmallString) -> None:
    """Mark the end of the buffer with '...' to show that text was cut off."""
    new_size = min(buffer.capacity(), len(buffer) + 3)
    dots = min(3, new_size)
    buffer.resize(new_size)
    buffer._chars[new_size - dots:] = "." * dots


def append_or_truncate(buffer: SmallString, *args: object) -> None:
    """Append the arguments, ending with '...' if they did not all fit."""
    if not append(buffer, *args):
        truncate_end(buffer)