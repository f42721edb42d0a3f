"""
Root conftest.py — registers custom markers.

Markers:
  @pytest.mark.pty   — needs a pseudo-terminal (os.openpty + termios);
                       skipped where unavailable or with NO_PTY_TESTS=1
"""
from __future__ import annotations

import os

import pytest


def _pty_available() -> bool:
    if not hasattr(os, "openpty"):
        return False
    try:
        import termios  # noqa: F401
    except ImportError:
        return False
    try:
        master, slave = os.openpty()
    except OSError:
        return False
    os.close(master)
    os.close(slave)
    return True


# ---------------------------------------------------------------------------
# Custom markers
# ---------------------------------------------------------------------------

def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line(
        "markers",
        "pty: mark test as requiring a pseudo-terminal",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip @pytest.mark.pty tests when no pseudo-terminal can be opened."""
    disabled = os.environ.get("NO_PTY_TESTS", "").lower() in ("1", "true", "yes")
    if not disabled and _pty_available():
        return
    skip_pty = pytest.mark.skip(reason="Pseudo-terminal not available")
    for item in items:
        if "pty" in item.keywords:
            item.add_marker(skip_pty)
