"""Guard functions: check a condition, raise a categorised error if it fails.

Every ``verify_*`` function returns ``None`` when its condition holds and
raises exactly one error otherwise. Messages are templates in
:meth:`str.format` positional syntax (``"bad value {0}"``); they are only
formatted on the failure path. A template that asks for more arguments than
were supplied fails inside :meth:`str.format`. That is a bug at the call
site and is left to propagate as-is.

Usage::

    from mp_guard import verify_argument_not_null, verify_protocol

    def handle(message, nonce):
        verify_argument_not_null(message, "message")
        verify_protocol(len(nonce) >= 16, "nonce too short: {0} bytes", len(nonce),
                        faulted_message=message)
"""
from __future__ import annotations

from collections.abc import Sized
from typing import Any, NoReturn

from mp_guard.kernel.errors import (
    ArgumentError,
    ArgumentNullError,
    InternalError,
    InvalidOperationError,
    ProtocolError,
)
from mp_guard.kernel.guard.debugger import notify_debugger
from mp_guard.kernel.guard.strings import UNEXPECTED_EMPTY_STRING
from mp_guard.kernel.messaging import ProtocolMessage
from mp_guard.observability.logging import get_logger

_log = get_logger(__name__)


def wrap(inner: BaseException, message: str, *args: Any) -> ProtocolError:
    """Build (but do not raise) a :class:`ProtocolError` chained to *inner*.

    Usage::

        try:
            payload = decode(blob)
        except ValueError as exc:
            raise wrap(exc, "undecodable {0} payload", kind) from exc
    """
    return ProtocolError(message.format(*args), cause=inner)


def throw_internal(message: str) -> NoReturn:
    """Unconditionally raise an :class:`InternalError` with *message* verbatim."""
    verify_internal(False, message)
    # never reached
    raise InternalError()


def verify_internal(condition: bool, message: str, *args: Any) -> None:
    """Raise :class:`InternalError` when *condition* is false.

    Without *args* the message is used verbatim and the debugger hook gets a
    chance to run first. With *args* the message is formatted.
    """
    if condition:
        return
    if args:
        message = message.format(*args)
    else:
        notify_debugger()
    _log.debug("guard.internal_error", message=message)
    raise InternalError(message)


def verify_operation(condition: bool, message: str, *args: Any) -> None:
    """Raise :class:`InvalidOperationError` when *condition* is false."""
    if not condition:
        if args:
            message = message.format(*args)
        raise InvalidOperationError(message)


def verify_protocol(
    condition: bool,
    message: str,
    *args: Any,
    faulted_message: ProtocolMessage | None = None,
) -> None:
    """Raise :class:`ProtocolError` when *condition* is false.

    *faulted_message*, when given, is attached to the error by reference.
    """
    if not condition:
        raise ProtocolError(message.format(*args), faulted_message=faulted_message)


def throw_protocol(message: str, *args: Any) -> InternalError:
    """Unconditionally raise a :class:`ProtocolError`.

    Never returns. The declared return value only exists so that call sites
    can write ``raise throw_protocol(...)`` after an unreachable branch.
    """
    verify_protocol(False, message, *args)
    return InternalError()


def verify_argument(condition: bool, message: str, *args: Any) -> None:
    """Raise :class:`ArgumentError` when *condition* is false."""
    if not condition:
        raise ArgumentError(message.format(*args))


def verify_argument_not_null(value: object, param_name: str) -> None:
    """Raise :class:`ArgumentNullError` when *value* is ``None``.

    Falsy but present values (``0``, ``""``, ``[]``) pass.
    """
    if value is None:
        raise ArgumentNullError(param_name)


def verify_non_zero_length(value: Sized | None, param_name: str) -> None:
    """Require *value* to be present and non-empty.

    The null check runs first, so ``None`` raises :class:`ArgumentNullError`
    and only an empty value raises a plain :class:`ArgumentError`.
    """
    verify_argument_not_null(value, param_name)
    if len(value) == 0:  # type: ignore[arg-type]
        raise ArgumentError(UNEXPECTED_EMPTY_STRING, param_name=param_name)


__all__ = [
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
