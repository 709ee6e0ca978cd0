"""Matchers that compare values and describe why they matched or not."""

from __future__ import annotations

from enum import Enum, auto

from snitch.append import SmallString, append_or_truncate

MAX_MESSAGE_LENGTH = 1024


class MatchStatus(Enum):
    FAILED = auto()
    MATCHED = auto()


class ContainsSubstring:
    """Matches strings that contain a given substring."""

    _subject_type: type = str

    def __init__(self, pattern: str) -> None:
        self.substring_pattern = pattern

    def match(self, message: str) -> bool:
        return self.substring_pattern in message

    def describe_match(self, message: str, status: MatchStatus) -> str:
        description = SmallString(MAX_MESSAGE_LENGTH)
        append_or_truncate(
            description,
            "found" if status is MatchStatus.MATCHED else "could not find",
            " '",
            self.substring_pattern,
            "' in '",
            message,
            "'",
        )
        return str(description)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, type(self)):
            return other.substring_pattern == self.substring_pattern
        if isinstance(other, self._subject_type):
            return self.match(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.substring_pattern!r})"


class WithWhatContains(ContainsSubstring):
    """Matches exceptions whose message contains a given substring."""

    _subject_type = BaseException

    def match(self, error: BaseException) -> bool:  # type: ignore[override]
        return super().match(str(error))

    def describe_match(  # type: ignore[override]
        self, error: BaseException, status: MatchStatus
    ) -> str:
        return super().describe_match(str(error), status)