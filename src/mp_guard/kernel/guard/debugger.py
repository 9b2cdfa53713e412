"""Pluggable "break into the debugger" hook for internal errors.

Internal errors signal a defect, so :func:`~mp_guard.kernel.guard.verify_internal`
gives an attached debugger a chance to stop before raising. The hook is purely
diagnostic: it runs at most once per failing check, and whatever it does
(including raising) never changes the error that is raised afterwards.

The default hook is :func:`noop_hook`. Install :func:`breakpoint_hook` (or
set ``MP_GUARD_BREAK_ON_INTERNAL_ERROR=true`` and call
:func:`~mp_guard.config.configure_guards`) to stop under a debugger.
"""
from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from contextlib import contextmanager

from mp_guard.observability.logging import get_logger

type DebuggerHook = Callable[[], None]

_log = get_logger(__name__)


def noop_hook() -> None:
    """Default hook: do nothing."""


def breakpoint_hook() -> None:
    """Enter the debugger, but only when a tracer is already attached."""
    if sys.gettrace() is not None:
        breakpoint()  # noqa: T100


_hook: DebuggerHook = noop_hook


def get_debugger_hook() -> DebuggerHook:
    return _hook


def set_debugger_hook(hook: DebuggerHook | None) -> DebuggerHook:
    """Install *hook* (``None`` restores the no-op) and return the previous one."""
    global _hook
    previous = _hook
    _hook = hook if hook is not None else noop_hook
    return previous


@contextmanager
def debugger_hook(hook: DebuggerHook | None) -> Iterator[DebuggerHook]:
    """Install *hook* for the duration of the ``with`` block."""
    previous = set_debugger_hook(hook)
    try:
        yield get_debugger_hook()
    finally:
        set_debugger_hook(previous)


def notify_debugger() -> None:
    """Run the installed hook; a failing hook is logged, not propagated."""
    hook = _hook
    try:
        hook()
    except Exception:  # noqa: BLE001
        _log.warning("guard.debugger_hook_failed", hook=getattr(hook, "__name__", repr(hook)), exc_info=True)


__all__ = [
    "DebuggerHook",
    "breakpoint_hook",
    "debugger_hook",
    "get_debugger_hook",
    "noop_hook",
    "notify_debugger",
    "set_debugger_hook",
]
