"""Kernel – errors, messaging port and guard functions."""

from mp_guard.kernel.errors import (
    ArgumentError,
    ArgumentNullError,
    BaseError,
    InternalError,
    InvalidOperationError,
    ProtocolError,
)

__all__ = [
    "ArgumentError",
    "ArgumentNullError",
    "BaseError",
    "InternalError",
    "InvalidOperationError",
    "ProtocolError",
]
