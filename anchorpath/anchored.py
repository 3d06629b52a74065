"""AnchoredPath: an absolute path resolved against the program's directory."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Optional

from . import config
from .anchoring import anchor, try_anchor
from .errors import FilesystemError
from .resolver import StrPath, as_native, resolve

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True, order=True, init=False, repr=False)
class AnchoredPath:
    """Immutable handle for one path resolved against the anchor directory.

    ``AnchoredPath("config.toml")`` is ``<anchor>/config.toml``;
    ``AnchoredPath()`` is the anchor itself. Absolute input bypasses the
    anchor. The value stands in for a path: it implements ``os.PathLike``,
    prints like the underlying ``Path`` and forwards read-only ``Path``
    attributes (``name``, ``suffix``, ``exists()`` ...) to it. Unlike
    ``Path.parent``, ``parent()`` is a method returning an ``AnchoredPath``
    or None at a root; use ``as_path()`` where a real ``Path`` is required.

    Equality, ordering and hashing depend only on the resolved path. A
    failed first anchor resolution raises ``AnchorUnavailable``; use the
    ``try_*`` constructors to get an ``AnchorError`` instead.
    """

    _path: Path

    def __init__(self, path: StrPath = "") -> None:
        object.__setattr__(self, "_path", resolve(anchor(), path))

    @classmethod
    def _from_resolved(cls, path: Path) -> AnchoredPath:
        obj = cls.__new__(cls)
        object.__setattr__(obj, "_path", path)
        return obj

    # --- Constructors ---

    @classmethod
    def try_new(cls, path: StrPath = "") -> AnchoredPath:
        """Fallible form of ``AnchoredPath(path)``.

        Raises:
            AnchorError: If the anchor cannot be determined
        """
        return cls._from_resolved(resolve(try_anchor(), path))

    @classmethod
    def with_override(cls, default: StrPath, override: Optional[StrPath]) -> AnchoredPath:
        """Resolve ``override`` when given, otherwise ``default``."""
        return cls(default if override is None else override)

    @classmethod
    def with_override_fn(
        cls, default: StrPath, override_fn: Callable[[], Optional[StrPath]]
    ) -> AnchoredPath:
        """Like ``with_override`` with the override computed by ``override_fn()``.

        ``override_fn`` is called exactly once.
        """
        return cls.with_override(default, override_fn())

    @classmethod
    def try_with_override(cls, default: StrPath, override: Optional[StrPath]) -> AnchoredPath:
        return cls.try_new(default if override is None else override)

    @classmethod
    def try_with_override_fn(
        cls, default: StrPath, override_fn: Callable[[], Optional[StrPath]]
    ) -> AnchoredPath:
        return cls.try_with_override(default, override_fn())

    # --- Path manipulation ---

    def join(self, *segments: StrPath) -> AnchoredPath:
        """Append ``segments``; an absolute segment replaces everything before it."""
        return self._from_resolved(self._path.joinpath(*(as_native(s) for s in segments)))

    def __truediv__(self, segment: StrPath) -> AnchoredPath:
        try:
            return self.join(segment)
        except TypeError:
            return NotImplemented

    def parent(self) -> Optional[AnchoredPath]:
        """Return the containing directory, or None for a filesystem root."""
        parent = self._path.parent
        if parent == self._path:
            return None
        return self._from_resolved(parent)

    def with_extension(self, ext: str) -> AnchoredPath:
        """Replace the final extension with ``ext``.

        One leading dot on ``ext`` is ignored unless it is all of ``ext``, so
        ``"json"`` and ``".json"`` are the same. An empty ``ext`` removes the
        extension. A dot at the start of the name (``.env``) does not begin an
        extension. A path without a file name (a root, or one ending in
        ``..``) is returned unchanged.
        """
        name = self._path.name
        if not name or name in (".", ".."):
            return self
        if ext.startswith(".") and len(ext) > 1:
            ext = ext[1:]
        dot = name.rfind(".")
        stem = name[:dot] if dot > 0 else name
        new_name = f"{stem}.{ext}" if ext else stem
        return self._from_resolved(self._path.with_name(new_name))

    def starts_with(self, prefix: StrPath) -> bool:
        """Return True if ``prefix`` is a leading run of whole path components."""
        return self._path.is_relative_to(as_native(prefix))

    def as_path(self) -> Path:
        """Return the resolved absolute ``Path``."""
        return self._path

    # Immutable, so handing out the inner Path is the same as surrendering it.
    into_path = as_path

    # --- Filesystem helpers ---

    def create_parents(self, mode: Optional[int] = None) -> None:
        """Create every missing ancestor of this path.

        Use when the path names a file about to be written. A path with no
        parent succeeds trivially.

        Raises:
            FilesystemError: If a directory cannot be created
        """
        parent = self._path.parent
        if parent == self._path:
            return
        self._mkdir(parent, mode)

    def create_dir(self, mode: Optional[int] = None) -> None:
        """Create this path as a directory, including missing ancestors.

        Succeeds when the directory already exists.

        Raises:
            FilesystemError: If creation fails, e.g. a file is in the way
        """
        self._mkdir(self._path, mode)

    @staticmethod
    def _mkdir(target: Path, mode: Optional[int]) -> None:
        if mode is None:
            mode = config.settings.dir_mode
        try:
            target.mkdir(parents=True, exist_ok=True, mode=mode)
        except OSError as exc:
            raise FilesystemError(target, exc) from exc
        logger.debug("ensured directory %s", target)

    # --- Path protocol ---

    def __getattr__(self, name: str) -> Any:
        # Only reached for names not defined here; private names are never forwarded.
        if name.startswith("_"):
            raise AttributeError(name)
        return getattr(self._path, name)

    def __fspath__(self) -> str:
        return os.fspath(self._path)

    def __bytes__(self) -> bytes:
        # Filesystem encoding of this platform; not a storage or wire format.
        return os.fsencode(self._path)

    def __str__(self) -> str:
        return str(self._path)

    def __repr__(self) -> str:
        return f"AnchoredPath({str(self._path)!r})"

    def __hash__(self) -> int:
        return hash(self._path)

    def __reduce__(self) -> tuple[Any, ...]:
        return (self._from_resolved, (self._path,))


__all__ = ["AnchoredPath"]
