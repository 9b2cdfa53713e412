"""Guard – precondition and invariant checks that raise categorised errors."""
from mp_guard.kernel.guard.checks import (
    throw_internal,
    throw_protocol,
    verify_argument,
    verify_argument_not_null,
    verify_internal,
    verify_non_zero_length,
    verify_operation,
    verify_protocol,
    wrap,
)
from mp_guard.kernel.guard.debugger import (
    DebuggerHook,
    breakpoint_hook,
    debugger_hook,
    get_debugger_hook,
    noop_hook,
    set_debugger_hook,
)
from mp_guard.kernel.guard.strings import UNEXPECTED_EMPTY_STRING

__all__ = [
    "UNEXPECTED_EMPTY_STRING",
    "DebuggerHook",
    "breakpoint_hook",
    "debugger_hook",
    "get_debugger_hook",
    "noop_hook",
    "set_debugger_hook",
    "throw_internal",
    "throw_protocol",
    "verify_argument",
    "verify_argument_not_null",
    "verify_internal",
    "verify_non_zero_length",
    "verify_operation",
    "verify_protocol",
    "wrap",
]
