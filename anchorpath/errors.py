"""Error taxonomy for anchorpath.

Anchor failures come from the executable-location query and are only ever
raised by the first resolution attempt; once an anchor has been published no
anchor error can occur again. Filesystem failures come from the directory
helpers on ``AnchoredPath`` and carry the underlying ``OSError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class AnchorPathError(Exception):
    """Base class for every error raised by anchorpath."""


class AnchorError(AnchorPathError):
    """The anchor directory could not be determined.

    Instances of the same kind carrying the same detail compare equal.
    """

    summary = "Anchor resolution failed"

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.summary}: {self.detail}"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.detail!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnchorError):
            return NotImplemented
        return type(self) is type(other) and self.detail == other.detail

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.detail))


class ExecutableNotFound(AnchorError):
    """The host could not report the running executable's location."""

    summary = "Failed to determine executable location"


class InvalidExecutablePath(AnchorError):
    """The host reported an empty executable path."""

    summary = "Invalid executable path"


class FilesystemError(AnchorPathError):
    """A directory-creation helper failed.

    Args:
        path: The directory that could not be created
        cause: The ``OSError`` raised by the host
    """

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(path, cause)
        self.path = path
        self.cause = cause

    @property
    def errno(self) -> Optional[int]:
        return self.cause.errno

    def __str__(self) -> str:
        reason = self.cause.strerror or str(self.cause)
        return f"Failed to create directory {self.path}: {reason}"

    def __repr__(self) -> str:
        return f"FilesystemError({str(self.path)!r}, {self.cause!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FilesystemError):
            return NotImplemented
        return (
            self.path == other.path
            and type(self.cause) is type(other.cause)
            and self.cause.errno == other.cause.errno
        )

    def __hash__(self) -> int:
        return hash((self.path, type(self.cause).__name__, self.cause.errno))


class AnchorUnavailable(SystemExit):
    """Raised by the infallible API when the first anchor resolution fails.

    Derives from ``SystemExit`` so that ordinary ``except Exception`` handlers
    do not absorb it: an application that cannot locate its own directory
    stops with a diagnostic. The originating ``AnchorError`` is available as
    ``error`` and as ``__cause__``.
    """

    def __init__(self, error: AnchorError) -> None:
        super().__init__(f"anchorpath: {error}")
        self.error = error


__all__ = [
    "AnchorPathError",
    "AnchorError",
    "ExecutableNotFound",
    "InvalidExecutablePath",
    "FilesystemError",
    "AnchorUnavailable",
]
