# tests/conftest.py
# Pin the process-wide anchor for tests that need a known directory.

from __future__ import annotations

from pathlib import Path

import pytest

from anchorpath import anchoring
from anchorpath.anchoring import AnchorResolver

FAKE_EXECUTABLE = "/opt/app/app"


@pytest.fixture
def fixed_anchor(monkeypatch) -> Path:
    """Swap the process-wide resolver for one whose program lives in /opt/app."""
    resolver = AnchorResolver(lambda: FAKE_EXECUTABLE)
    monkeypatch.setattr(anchoring, "_RESOLVER", resolver)
    return resolver.get()


@pytest.fixture
def tmp_anchor(monkeypatch, tmp_path: Path) -> Path:
    """Anchor resolution at a real, writable temporary directory."""
    base = tmp_path / "app"
    base.mkdir()
    resolver = AnchorResolver(lambda: base / "app.bin")
    monkeypatch.setattr(anchoring, "_RESOLVER", resolver)
    return resolver.get()


@pytest.fixture
def failing_anchor(monkeypatch) -> AnchorResolver:
    """Resolver whose executable query always fails."""

    def locate() -> str:
        raise OSError("no such process image")

    resolver = AnchorResolver(locate)
    monkeypatch.setattr(anchoring, "_RESOLVER", resolver)
    return resolver
