"""Resolution policy: turn user input into an absolute path under the anchor.

Pure functions, no filesystem access. Absolute input is returned unchanged;
anything else is joined onto the anchor with ``pathlib`` semantics. Nothing
is collapsed or canonicalized: ``..`` stays in the result.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

StrPath = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


def as_native(path: StrPath) -> Path:
    """Return ``path`` as a ``Path``.

    Goes through ``os.fspath`` so any path-like object is honored by its
    filesystem representation; bytes are decoded with the filesystem encoding.

    Raises:
        TypeError: If ``path`` is not str, bytes or path-like
    """
    if isinstance(path, Path):
        return path
    raw = os.fspath(path)
    if isinstance(raw, bytes):
        raw = os.fsdecode(raw)
    return Path(raw)


def resolve(anchor: Path, path: StrPath) -> Path:
    """Resolve ``path`` against ``anchor``.

    Args:
        anchor: Absolute anchor directory
        path: User-supplied path; empty means the anchor itself

    Returns:
        ``path`` when it is absolute, otherwise ``anchor / path``
    """
    native = as_native(path)
    if native.is_absolute():
        return native
    return anchor / native


def is_anchored(anchor: Path, path: StrPath) -> bool:
    """Return True if ``path`` resolves lexically inside ``anchor``.

    Useful for callers who want to reject absolute inputs that would bypass
    the anchor. Since ``..`` is never collapsed, any ``..`` component below the
    anchor counts as leaving it.
    """
    resolved = resolve(anchor, path)
    try:
        relative = resolved.relative_to(anchor)
    except ValueError:
        return False
    return ".." not in relative.parts


__all__ = ["StrPath", "as_native", "is_anchored", "resolve"]
