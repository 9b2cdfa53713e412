"""Protocol errors: a remote peer or wire input broke the protocol."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from mp_guard.kernel.errors.base import BaseError

if TYPE_CHECKING:
    from mp_guard.kernel.messaging import ProtocolMessage


class ProtocolError(BaseError):
    """The expected message protocol was violated.

    ``faulted_message`` is the message under processing when the violation
    was detected. It is held for diagnostics only and never modified.
    """

    default_code = "protocol_error"
    default_message = "A protocol error occurred."

    def __init__(
        self,
        message: str | None = None,
        *,
        faulted_message: ProtocolMessage | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.faulted_message = faulted_message

    def to_dict(self) -> dict[str, Any]:
        base = super().to_dict()
        if self.faulted_message is not None:
            base["faulted_message"] = type(self.faulted_message).__name__
        return base


__all__ = ["ProtocolError"]
