"""Error records collected during parsing, compilation and execution."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Iterator, Optional

from apecore.common import SrcPos

ERRORS_MAX_COUNT = 16
ERROR_MESSAGE_MAX_LENGTH = 255


class ErrorType(enum.IntEnum):
    """Category of a reported error."""

    NONE = 0
    PARSING = 1
    COMPILATION = 2
    RUNTIME = 3
    TIMEOUT = 4
    ALLOCATION = 5
    USER = 6

    def __str__(self) -> str:
        if self is ErrorType.NONE:
            return "INVALID"
        return self.name


@dataclass
class Error:
    """A single error with its category, message and source position."""

    type: ErrorType
    message: str
    pos: SrcPos
    traceback: Any = None


class ErrorList:
    """A bounded list of errors; additions beyond the limit are dropped."""

    def __init__(self) -> None:
        self._errors: list[Error] = []

    def add(self, type: ErrorType, pos: SrcPos, message: str) -> None:
        """Record an error, truncating overly long messages."""
        if len(self._errors) >= ERRORS_MAX_COUNT:
            return
        self._errors.append(
            Error(type, message[: ERROR_MESSAGE_MAX_LENGTH - 1], pos)
        )

    def addf(self, type: ErrorType, pos: SrcPos, fmt: str, *args: Any) -> None:
        """Record an error whose message is *fmt* formatted with ``%``."""
        self.add(type, pos, fmt % args)

    def clear(self) -> None:
        """Forget every recorded error."""
        self._errors.clear()

    def last(self) -> Optional[Error]:
        """Return the most recent error, or None if there is none."""
        return self._errors[-1] if self._errors else None

    def has_errors(self) -> bool:
        """Return True if any error was recorded."""
        return bool(self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[Error]:
        return iter(list(self._errors))

    def __getitem__(self, index: int) -> Error:
        return self._errors[index]