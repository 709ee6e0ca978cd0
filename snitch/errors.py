"""Fatal error handling: termination and configurable assertion failures."""

from __future__ import annotations

from typing import Callable

from snitch.console import console_print

Handler = Callable[[str], None]


class Terminated(BaseException):
    """Raised when the framework terminates because of an unrecoverable error."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


def terminate_with(msg: str) -> None:
    """Report the message on the console and terminate."""
    console_print("terminate called with message: ")
    console_print(msg)
    console_print("\n")
    raise Terminated(msg)


_handlers: list[Handler] = [terminate_with]


def set_assertion_failed_handler(handler: Handler) -> Handler:
    """Install a new assertion failure handler and return the previous one."""
    if not callable(handler):
        raise TypeError("assertion failure handler must be callable")
    previous = _handlers[-1]
    _handlers[-1] = handler
    return previous


def assertion_failed(msg: str) -> None:
    """Invoke the assertion failure handler; it must not return normally."""
    _handlers[-1](msg)
    raise Terminated(msg)