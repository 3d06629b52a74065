"""Declarative construction of AnchoredPath values.

One call covers the four common shapes:

    anchored_path("config.toml")
    anchored_path("config.toml", env="MYAPP_CONFIG")
    anchored_path("config.toml", override=args.config)
    anchored_path("config.toml", fn=lambda: settings.get("config"))
"""

from __future__ import annotations

import os
from typing import Callable, Optional

from .anchored import AnchoredPath
from .resolver import StrPath

OverrideFn = Callable[[], Optional[StrPath]]


def _env_override(name: str) -> Optional[str]:
    """Return the value of ``name`` when set and non-empty."""
    return os.environ.get(name) or None


def _pick_override(
    env: Optional[str], override: Optional[StrPath], fn: Optional[OverrideFn]
) -> OverrideFn:
    given = [k for k, v in (("env", env), ("override", override), ("fn", fn)) if v is not None]
    if len(given) > 1:
        raise TypeError(f"at most one of env/override/fn may be given, got: {', '.join(given)}")
    if env is not None:
        return lambda: _env_override(env)
    if fn is not None:
        return fn
    return lambda: override


def anchored_path(
    default: StrPath,
    *,
    env: Optional[str] = None,
    override: Optional[StrPath] = None,
    fn: Optional[OverrideFn] = None,
) -> AnchoredPath:
    """Build an ``AnchoredPath`` from ``default`` and at most one override source.

    Args:
        default: Path used when no override applies
        env: Name of an environment variable; a non-empty value overrides
        override: Explicit override; ``None`` means absent
        fn: Callable returning the override or ``None``; called once

    Raises:
        TypeError: If more than one override source is given
        AnchorUnavailable: If the anchor cannot be determined
    """
    return AnchoredPath.with_override_fn(default, _pick_override(env, override, fn))


def try_anchored_path(
    default: StrPath,
    *,
    env: Optional[str] = None,
    override: Optional[StrPath] = None,
    fn: Optional[OverrideFn] = None,
) -> AnchoredPath:
    """Fallible form of ``anchored_path``; raises ``AnchorError`` instead."""
    return AnchoredPath.try_with_override_fn(default, _pick_override(env, override, fn))


__all__ = ["anchored_path", "try_anchored_path"]
