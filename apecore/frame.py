"""Execution frame: a cursor over a function's compiled bytecode."""

from __future__ import annotations

from typing import Any, Optional

from apecore.common import SRC_POS_INVALID, SrcPos
from apecore.compilation_scope import CompilationResult


class Frame:
    """Reads opcodes and big-endian operands from one function's bytecode.

    ``ip`` is the position of the next byte to read; ``src_ip`` is the
    position of the most recently read opcode and selects the source
    position reported for it.
    """

    def __init__(
        self,
        result: CompilationResult,
        base_pointer: int = 0,
        function: Any = None,
    ) -> None:
        if not isinstance(result, CompilationResult):
            raise TypeError(
                f"expected a CompilationResult, not {type(result).__name__}"
            )
        self.function = function
        self.ip = 0
        self.base_pointer = base_pointer
        self.src_ip = 0
        self.bytecode = bytes(result.bytecode)
        self.src_positions: Optional[list[SrcPos]] = (
            list(result.src_positions) if result.src_positions else None
        )
        self.bytecode_size = result.count
        self.recover_ip = -1
        self.is_recovering = False

    def _take(self, size: int) -> bytes:
        end = self.ip + size
        if self.ip < 0 or end > len(self.bytecode):
            raise IndexError(
                f"reading {size} byte(s) at {self.ip} runs past the end of "
                f"{len(self.bytecode)} byte(s) of bytecode"
            )
        data = self.bytecode[self.ip:end]
        self.ip = end
        return data

    def read_opcode(self) -> int:
        """Read the next opcode byte and remember where it started."""
        self.src_ip = self.ip
        return self.read_uint8()

    def read_uint64(self) -> int:
        """Read a big-endian unsigned 64-bit operand."""
        return int.from_bytes(self._take(8), "big")

    def read_uint16(self) -> int:
        """Read a big-endian unsigned 16-bit operand."""
        return int.from_bytes(self._take(2), "big")

    def read_uint8(self) -> int:
        """Read a single unsigned byte."""
        return self._take(1)[0]

    def src_position(self) -> SrcPos:
        """Return the source position of the last opcode read."""
        if self.src_positions:
            return self.src_positions[self.src_ip]
        return SRC_POS_INVALID