"""Per-function compilation state and the bytecode it produces."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from apecore.arrays import Array
from apecore.common import SrcPos


@dataclass
class CompilationResult:
    """Bytecode with the source position of every byte."""

    bytecode: bytes
    src_positions: list[SrcPos] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.bytecode)


class CompilationScope:
    """Bytecode being emitted for one function, plus loop jump targets."""

    def __init__(self, outer: Optional["CompilationScope"] = None) -> None:
        self.outer = outer
        self.bytecode = Array()
        self.src_positions = Array()
        self.break_ip_stack = Array()
        self.continue_ip_stack = Array()
        self.last_opcode: Optional[int] = None

    def orphan_result(self) -> CompilationResult:
        """Move the emitted bytecode into a result, leaving this scope empty."""
        code = bytes(self.bytecode.orphan_data())
        positions = self.src_positions.orphan_data()
        return CompilationResult(code, positions)