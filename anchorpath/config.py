"""anchorpath runtime settings.

Provides typed settings backed by environment variables following the AP_*
naming convention. Values are read once, at import.

Example:
    >>> from anchorpath.config import settings
    >>> settings.executable_source
    'auto'

Environment Variables:
    AP_EXECUTABLE_SOURCE: Where the running program is located: ``auto``,
        ``interpreter`` or ``script`` (default: auto)
    AP_DIR_MODE: Octal permission bits for directories created by the
        directory helpers, before umask (default: 777)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

EXECUTABLE_SOURCES = ("auto", "interpreter", "script")


def _env(name: str, default: str) -> str:
    """Get environment variable with AP_* prefix validation."""
    if not name.startswith("AP_"):
        raise ValueError(f"Only AP_* env vars are allowed, got: {name}")
    return os.getenv(name, default)


def _env_choice(name: str, default: str, choices: tuple[str, ...]) -> str:
    """Get environment variable restricted to ``choices`` (case-insensitive)."""
    raw = _env(name, default).strip().lower()
    return raw if raw in choices else default


def _env_octal(name: str, default: int) -> int:
    """Get environment variable as an octal integer (``755``, ``0o755``)."""
    raw = _env(name, format(default, "o")).strip().lower()
    if raw.startswith("0o"):
        raw = raw[2:]
    try:
        value = int(raw, 8)
    except ValueError:
        return default
    return value if 0 <= value <= 0o7777 else default


@dataclass(frozen=True)
class Settings:
    """Centralized runtime settings for anchorpath.

    This dataclass is frozen to prevent accidental mutation at runtime.
    For testing, set environment variables and reload this module, or
    monkeypatch the module-level `settings` instance.
    """

    executable_source: str = _env_choice("AP_EXECUTABLE_SOURCE", "auto", EXECUTABLE_SOURCES)
    dir_mode: int = _env_octal("AP_DIR_MODE", 0o777)


# Module-level instance for convenient access
settings = Settings()

__all__ = ["settings", "Settings", "EXECUTABLE_SOURCES"]
