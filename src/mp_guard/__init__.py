"""
mp_guard – precondition and invariant guards for the messaging platform.

Import path convention::

    from mp_guard import verify_argument_not_null, verify_protocol, ProtocolError
    from mp_guard.kernel.guard import debugger_hook
    from mp_guard.config import GuardSettings, configure_guards
"""

from mp_guard.kernel.errors import (
    ArgumentError,
    ArgumentNullError,
    BaseError,
    InternalError,
    InvalidOperationError,
    ProtocolError,
)
from mp_guard.kernel.guard import (
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

__version__ = "0.1.0"
__all__ = [
    "ArgumentError",
    "ArgumentNullError",
    "BaseError",
    "InternalError",
    "InvalidOperationError",
    "ProtocolError",
    "__version__",
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
