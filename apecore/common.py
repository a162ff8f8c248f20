"""Source positions, float/bit conversions and a millisecond timer."""

from __future__ import annotations

import struct
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from apecore.compiled_file import CompiledFile


@dataclass(frozen=True)
class SrcPos:
    """A line and column within a compiled file."""

    file: Optional["CompiledFile"] = field(default=None, compare=False)
    line: int = 0
    column: int = 0

    @property
    def is_valid(self) -> bool:
        return self.line >= 0 and self.column >= 0


SRC_POS_INVALID = SrcPos(None, -1, -1)
SRC_POS_ZERO = SrcPos(None, 0, 0)


def double_to_uint64(value: float) -> int:
    """Return the IEEE-754 bit pattern of *value* as an unsigned integer."""
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def uint64_to_double(value: int) -> float:
    """Interpret the unsigned 64-bit integer *value* as an IEEE-754 double."""
    if not 0 <= value < (1 << 64):
        raise ValueError("value does not fit in 64 bits")
    return struct.unpack("<d", struct.pack("<Q", value))[0]


def timer_platform_supported() -> bool:
    """Report whether elapsed-time measurement is available."""
    return True


@dataclass(frozen=True)
class Timer:
    """Measures wall-clock time elapsed since it was started."""

    start_time_ms: float

    @classmethod
    def start(cls) -> "Timer":
        """Start a new timer at the current moment."""
        return cls(time.perf_counter() * 1000.0)

    def elapsed_ms(self) -> float:
        """Return the milliseconds elapsed since the timer started."""
        return time.perf_counter() * 1000.0 - self.start_time_ms