"""Writing report output to a file."""

from __future__ import annotations

import os
from typing import IO

from snitch.errors import assertion_failed

MAX_PATH_LENGTH = 1024


class FileWriter:
    """Writes messages to a file, flushing after each one.

    A writer created without a path discards everything written to it.
    """

    def __init__(self, path: str | os.PathLike | None = None) -> None:
        self._handle: IO[str] | None = None
        if path is None:
            return

        path_str = os.fspath(path)
        if len(path_str) > MAX_PATH_LENGTH:
            assertion_failed("output file path is too long")

        try:
            self._handle = open(path_str, "w", encoding="utf-8", newline="")
        except OSError:
            assertion_failed("output file could not be opened for writing")

    def write(self, message: str) -> None:
        if self._handle is None:
            return
        self._handle.write(message)
        self._handle.flush()

    def close(self) -> None:
        if self._handle is None:
            return
        handle, self._handle = self._handle, None
        handle.close()

    def __enter__(self) -> FileWriter:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()