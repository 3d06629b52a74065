"""Tests for the anchorpath error types."""

from __future__ import annotations

import pickle
from pathlib import Path

from anchorpath.errors import (
    AnchorError,
    AnchorPathError,
    AnchorUnavailable,
    ExecutableNotFound,
    FilesystemError,
    InvalidExecutablePath,
)


def test_display_messages():
    exec_error = ExecutableNotFound("test error")
    invalid_error = InvalidExecutablePath("test path")
    assert "Failed to determine executable location" in str(exec_error)
    assert "test error" in str(exec_error)
    assert "Invalid executable path" in str(invalid_error)
    assert "test path" in str(invalid_error)


def test_repr_names_kind():
    assert "ExecutableNotFound" in repr(ExecutableNotFound("x"))
    assert "InvalidExecutablePath" in repr(InvalidExecutablePath("x"))


def test_equality():
    assert ExecutableNotFound("same") == ExecutableNotFound("same")
    assert ExecutableNotFound("same") != ExecutableNotFound("different")
    assert ExecutableNotFound("path") != InvalidExecutablePath("path")
    assert hash(ExecutableNotFound("same")) == hash(ExecutableNotFound("same"))


def test_hierarchy():
    assert issubclass(AnchorError, AnchorPathError)
    assert issubclass(FilesystemError, AnchorPathError)
    assert issubclass(AnchorUnavailable, SystemExit)
    assert not issubclass(AnchorUnavailable, Exception)


def test_filesystem_error_exposes_cause():
    cause = PermissionError(13, "Permission denied")
    err = FilesystemError(Path("/opt/app/cache"), cause)
    assert err.cause is cause
    assert err.errno == 13
    assert str(err) == "Failed to create directory /opt/app/cache: Permission denied"
    assert err != FilesystemError(Path("/opt/app/cache"), FileNotFoundError(2, "missing"))


def test_anchor_unavailable_message():
    err = AnchorUnavailable(InvalidExecutablePath("empty"))
    assert err.code == "anchorpath: Invalid executable path: empty"
    assert err.error == InvalidExecutablePath("empty")


def test_filesystem_error_survives_pickling():
    err = FilesystemError(Path("/opt/app/cache"), FileExistsError(17, "File exists"))
    restored = pickle.loads(pickle.dumps(err))
    assert isinstance(restored.path, Path)
    assert restored.path == err.path
    assert restored == err
    assert str(restored) == str(err)
