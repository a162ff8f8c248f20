"""Hash maps, arrays, string building, error lists, compilation scopes and bytecode frames for a small scripting language runtime."""

__version__ = "0.1.0"
__all__ = [
    "arrays",
    "common",
    "compilation_scope",
    "compiled_file",
    "errors",
    "frame",
    "hashmaps",
    "strbuf",
    "textutils",
]