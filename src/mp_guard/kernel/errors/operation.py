"""Invalid-operation errors."""

from __future__ import annotations

from mp_guard.kernel.errors.base import BaseError


class InvalidOperationError(BaseError, RuntimeError):
    """The operation is not valid for the current object or process state."""

    default_code = "invalid_operation"
    default_message = "Operation is not valid due to the current state of the object."


__all__ = ["InvalidOperationError"]
