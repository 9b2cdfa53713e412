"""Config settings – GuardSettings and configure_guards."""
from __future__ import annotations

import dataclasses

from mp_guard.config.settings.base import Settings
from mp_guard.kernel.guard.debugger import (
    DebuggerHook,
    breakpoint_hook,
    noop_hook,
    set_debugger_hook,
)
from mp_guard.observability.logging import get_logger

_log = get_logger(__name__)


@dataclasses.dataclass
class GuardSettings(Settings):
    """Process-wide guard behaviour, read from ``MP_GUARD_*`` variables."""

    _prefix: dataclasses.ClassVar[str] = "MP_GUARD"

    break_on_internal_error: bool = False


def configure_guards(settings: GuardSettings) -> DebuggerHook:
    """Apply *settings* and return the debugger hook that was replaced."""
    hook = breakpoint_hook if settings.break_on_internal_error else noop_hook
    previous = set_debugger_hook(hook)
    _log.info("guard.configured", break_on_internal_error=settings.break_on_internal_error)
    return previous


__all__ = ["GuardSettings", "configure_guards"]
