from apecore.common import SrcPos
from apecore.compilation_scope import CompilationResult, CompilationScope


def test_new_scope_is_empty_and_links_outer():
    outer = CompilationScope()
    inner = CompilationScope(outer)
    assert outer.outer is None
    assert inner.outer is outer
    assert len(inner.bytecode) == 0
    assert len(inner.src_positions) == 0
    assert len(inner.break_ip_stack) == 0
    assert len(inner.continue_ip_stack) == 0


def test_orphan_result_moves_bytecode():
    scope = CompilationScope()
    code = [1, 0, 2, 255]
    positions = [SrcPos(None, 1, c) for c in range(len(code))]
    scope.bytecode.add_many(code)
    scope.src_positions.add_many(positions)

    result = scope.orphan_result()
    assert result.bytecode == bytes(code)
    assert result.src_positions == positions
    assert result.count == len(code)

    assert len(scope.bytecode) == 0
    assert scope.bytecode.capacity() == 0
    assert len(scope.src_positions) == 0


def test_scope_reusable_after_orphan():
    scope = CompilationScope()
    scope.bytecode.add(7)
    scope.orphan_result()
    scope.bytecode.add(9)
    assert scope.orphan_result().bytecode == bytes([9])


def test_result_count_matches_bytecode():
    result = CompilationResult(b"\x01\x02\x03")
    assert result.count == 3
    assert result.src_positions == []