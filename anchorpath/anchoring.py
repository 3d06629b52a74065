"""Anchor directory resolution.

The anchor is the directory holding the running program. It is computed on
first demand and cached for the life of the process: the first successful
resolution wins and every later caller sees the very same ``Path`` object.
Failures are not cached, so a later call may retry.

When the program is a frozen build (PyInstaller and friends set
``sys.frozen``) the program is the interpreter binary itself; otherwise it is
the ``__main__`` script. ``AP_EXECUTABLE_SOURCE`` forces either choice.
"""

from __future__ import annotations

import logging
import os
import sys
import threading
from pathlib import Path
from typing import Callable, Optional, Union

from . import config
from .errors import AnchorError, AnchorUnavailable, ExecutableNotFound, InvalidExecutablePath

logger = logging.getLogger(__name__)

Locator = Callable[[], Union[str, "os.PathLike[str]"]]


def _main_script() -> Optional[str]:
    main = sys.modules.get("__main__")
    path = getattr(main, "__file__", None)
    return path or None


def locate_executable(source: Optional[str] = None) -> str:
    """Return the path of the running program as reported by the interpreter.

    Args:
        source: ``"interpreter"``, ``"script"`` or ``"auto"``; defaults to
            ``settings.executable_source``

    Returns:
        Absolute path string, or ``""`` when the interpreter reports an empty
        executable path

    Raises:
        OSError: If the location cannot be determined
        ValueError: If ``source`` is not a known source
    """
    source = source or config.settings.executable_source
    if source not in config.EXECUTABLE_SOURCES:
        raise ValueError(f"unknown executable source: {source}")
    if source == "auto":
        source = "interpreter" if getattr(sys, "frozen", False) else "script"

    if source == "script":
        script = _main_script()
        if script:
            # os.getcwd() inside abspath raises FileNotFoundError if cwd was removed
            return os.path.abspath(script)

    exe = sys.executable
    if exe is None:
        raise OSError("sys.executable is not set")
    if not exe:
        return ""
    return os.path.abspath(exe)


def anchor_dir_for(executable: Path) -> Path:
    """Return the directory that anchors ``executable``.

    An executable without a parent component (it is itself a filesystem root)
    is anchored at that root.
    """
    parent = executable.parent
    if parent == executable:
        return Path(executable.anchor) if executable.anchor else executable
    return parent


class AnchorResolver:
    """One-shot cell holding the anchor directory.

    Args:
        locate: Callable returning the running program's path; may raise
            ``OSError``

    Concurrent first calls may each query ``locate``; exactly one result is
    published and returned to all of them.
    """

    def __init__(self, locate: Locator = locate_executable) -> None:
        self._locate = locate
        self._anchor: Optional[Path] = None
        self._lock = threading.Lock()

    @property
    def is_resolved(self) -> bool:
        return self._anchor is not None

    def try_get(self) -> Path:
        """Return the anchor, resolving it on first use.

        Raises:
            ExecutableNotFound: If the program location cannot be queried
            InvalidExecutablePath: If the reported location is empty
        """
        cached = self._anchor
        if cached is not None:
            return cached

        computed = self._compute()
        with self._lock:
            if self._anchor is None:
                self._anchor = computed
                logger.debug("anchor directory resolved: %s", computed)
            return self._anchor

    def get(self) -> Path:
        """Return the anchor or stop the process with ``AnchorUnavailable``."""
        try:
            return self.try_get()
        except AnchorError as exc:
            logger.critical("cannot determine anchor directory: %s", exc)
            raise AnchorUnavailable(exc) from exc

    def _compute(self) -> Path:
        try:
            raw = os.fspath(self._locate())
        except OSError as exc:
            raise ExecutableNotFound(f"executable location query failed: {exc}") from exc

        if isinstance(raw, bytes):
            raw = os.fsdecode(raw)
        if not raw:
            raise InvalidExecutablePath("executable path is empty - unsupported environment")

        exe = Path(raw)
        if not exe.is_absolute():
            try:
                exe = exe.absolute()
            except OSError as exc:
                raise ExecutableNotFound(f"cannot make {raw!r} absolute: {exc}") from exc
        return anchor_dir_for(exe)


_RESOLVER = AnchorResolver()


def try_anchor() -> Path:
    """Return the process-wide anchor directory, raising ``AnchorError`` on failure."""
    return _RESOLVER.try_get()


def anchor() -> Path:
    """Return the process-wide anchor directory.

    A failed first resolution raises ``AnchorUnavailable``, which terminates the
    process unless deliberately caught. Once resolved this never fails.
    """
    return _RESOLVER.get()


__all__ = [
    "AnchorResolver",
    "anchor",
    "anchor_dir_for",
    "locate_executable",
    "try_anchor",
]
