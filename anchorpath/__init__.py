"""anchorpath: paths anchored at the running program's directory."""

from .anchored import AnchoredPath
from .anchoring import AnchorResolver, anchor, try_anchor
from .errors import (
    AnchorError,
    AnchorPathError,
    AnchorUnavailable,
    ExecutableNotFound,
    FilesystemError,
    InvalidExecutablePath,
)
from .facade import anchored_path, try_anchored_path
from .resolver import is_anchored, resolve

__version__ = "0.1.0"

__all__ = [
    "AnchoredPath",
    "AnchorResolver",
    "anchor",
    "try_anchor",
    "anchored_path",
    "try_anchored_path",
    "resolve",
    "is_anchored",
    "AnchorPathError",
    "AnchorError",
    "ExecutableNotFound",
    "InvalidExecutablePath",
    "FilesystemError",
    "AnchorUnavailable",
]
