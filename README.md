# apecore

Building blocks for the runtime of a small bytecode-compiled scripting
language. The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Modules

- `apecore.hashmaps`
  - `StringDict`: an open-addressing map with `str` keys. Entries are kept
    in dense arrays; `key_at` and `value_at` give positional access.
    Removing an entry moves the last entry into its slot. `remove` raises
    `KeyError` for a missing key. `copy()` builds a new map whose values are
    made by the `copy_fn` given to the constructor, and raises `ValueError`
    if there is none.
  - `ValueDict`: the same map with keys of any kind, an optional `hash_fn`
    and `equals_fn`, a starting `min_capacity`, `set_value_at`, `clear` and
    `capacity()`.
  - `djb2_hash(data)`: the 64-bit djb2 hash of bytes or of a string's UTF-8
    encoding. `upper_power_of_two(value)` rounds up to a power of two.
- `apecore.arrays`
  - `Array`: a growable array that doubles its capacity when full. After
    `lock_capacity()`, adding past the capacity raises `CapacityLockedError`.
    It has `add`, `add_many`, `add_array` (all or nothing), `push`, `pop`,
    `top`, `set`, `set_many`, `get`, `remove_at`, `remove_item`, `index`,
    `reverse`, `copy`, `clear`, `capacity()` and `orphan_data()`, which hands
    over the items and leaves an empty array of capacity zero. Removing the
    first item lowers the capacity by one.
- `apecore.strbuf`
  - `StringBuilder`: collects text with `append` and printf-style
    `appendf`; `build()` returns the text and empties the builder, `str()`
    returns it without emptying.
- `apecore.textutils`: `split_string`, `join`, `canonicalise_path` (drops
  `.` segments and collapses `segment/..` pairs) and `is_path_absolute`.
- `apecore.common`: the frozen `SrcPos` dataclass with `SRC_POS_INVALID`
  and `SRC_POS_ZERO`, the bit-exact `double_to_uint64` and
  `uint64_to_double`, `timer_platform_supported()` and a millisecond
  `Timer` (`Timer.start()`, `elapsed_ms()`).
- `apecore.errors`: `ErrorType`, `Error` and `ErrorList`. The list keeps at
  most 16 errors, drops any beyond that, and cuts messages to 254
  characters.
- `apecore.compiled_file`: `CompiledFile`, holding a path, its directory
  part (up to and including the last `/`) and a list of lines.
- `apecore.compilation_scope`: `CompilationScope`, with bytecode, source
  positions and break/continue stacks, and the `CompilationResult` that
  `orphan_result()` hands over.
- `apecore.frame`: `Frame`, which reads opcodes and big-endian 8-, 16- and
  64-bit operands from a `CompilationResult` and reports the source
  position of the last opcode read. Reading past the end raises
  `IndexError`.

## Example

```python
from apecore.hashmaps import StringDict
from apecore.textutils import canonicalise_path
from apecore.strbuf import StringBuilder

d = StringDict()
d.set("one", 1)
d.set("two", 2)
d.remove("one")
print(list(d.items()))                      # [('two', 2)]

print(canonicalise_path("a/b/../c/./d"))    # a/c/d

sb = StringBuilder()
sb.append("x = ")
sb.appendf("%d", 42)
print(sb.build())                           # x = 42
```

## What it does not do

There is no lexer, parser, compiler or virtual machine here, and no command
to run scripts. The package supplies the data structures and bookkeeping
those parts rely on; it cannot turn source text into bytecode or execute it.