"""Description of a source file taking part in a compilation."""

from __future__ import annotations


class CompiledFile:
    """A source file's path, its directory and the lines read from it."""

    def __init__(self, path: str) -> None:
        self.path = path
        slash = path.rfind("/")
        self.dir_path = path[: slash + 1] if slash >= 0 else ""
        self.lines: list[str] = []

    def __repr__(self) -> str:
        return f"CompiledFile(path={self.path!r})"