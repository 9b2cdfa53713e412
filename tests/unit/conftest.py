"""Shared fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
import structlog

from mp_guard.kernel.guard import set_debugger_hook


@pytest.fixture(autouse=True)
def _reset_guard_state() -> Iterator[None]:
    """Every test starts and ends with the no-op debugger hook and default structlog."""
    set_debugger_hook(None)
    yield
    set_debugger_hook(None)
    structlog.reset_defaults()
