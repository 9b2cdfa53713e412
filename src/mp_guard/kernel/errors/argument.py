"""Argument errors: the caller supplied an invalid value."""

from __future__ import annotations

from typing import Any

from mp_guard.kernel.errors.base import BaseError


class ArgumentError(BaseError, ValueError):
    """A supplied argument is invalid.

    ``param_name`` names the offending parameter when known. It is appended
    to ``str(err)`` but never to ``err.message``.
    """

    default_code = "argument_error"
    default_message = "Value does not fall within the expected range."

    def __init__(
        self,
        message: str | None = None,
        *,
        param_name: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.param_name = param_name

    def __str__(self) -> str:
        if self.param_name:
            return f"{self.message} (Parameter '{self.param_name}')"
        return self.message

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.param_name is not None:
            base["param_name"] = self.param_name
        return base


class ArgumentNullError(ArgumentError):
    """A required argument was ``None``."""

    default_code = "argument_null"
    default_message = "Value cannot be null."

    def __init__(
        self,
        param_name: str | None = None,
        message: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, param_name=param_name, **kwargs)


__all__ = ["ArgumentError", "ArgumentNullError"]
