"""String splitting, joining and path canonicalisation helpers."""

from __future__ import annotations

from typing import Iterable, Optional


def split_string(text: Optional[str], delimiter: str) -> list[str]:
    """Split *text* at each occurrence of *delimiter*.

    After a match, scanning resumes one character past the start of the
    delimiter, so multi-character delimiters leave their tail in the next
    piece. ``None`` yields an empty list.
    """
    if not delimiter:
        raise ValueError("delimiter must not be empty")
    if text is None:
        return []
    parts: list[str] = []
    start = 0
    end = text.find(delimiter, start)
    while end != -1:
        parts.append(text[start:end])
        start = end + 1
        end = text.find(delimiter, start)
    parts.append(text[start:])
    return parts


def join(items: Iterable[str], separator: str) -> str:
    """Join *items* with *separator* placed between consecutive items."""
    return separator.join(items)


def canonicalise_path(path: str) -> str:
    """Remove ``.`` segments and collapse ``segment/..`` pairs in *path*."""
    if "/" not in path or ("/../" not in path and "./" not in path):
        return path

    parts = split_string(path, "/")
    i = 0
    while i < len(parts) - 1:
        if parts[i] == ".":
            del parts[i]
            i = 0
            continue
        if parts[i + 1] == "..":
            del parts[i : i + 2]
            i = 0
            continue
        i += 1
    return join(parts, "/")


def is_path_absolute(path: str) -> bool:
    """Return True if *path* starts at the filesystem root."""
    return path.startswith("/")