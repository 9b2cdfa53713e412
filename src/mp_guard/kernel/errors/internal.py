"""Internal errors: an invariant the code base relies on did not hold."""

from __future__ import annotations

from mp_guard.kernel.errors.base import BaseError


class InternalError(BaseError):
    """A defect in the calling code, not bad input.

    Not meant to be handled in production; it is surfaced to developers.
    """

    default_code = "internal_error"
    default_message = "An internal error occurred."


__all__ = ["InternalError"]
