"""Kernel messaging – the protocol message port."""
from __future__ import annotations

from collections.abc import Mapping
from typing import Protocol, runtime_checkable

type ProtocolVersion = str


@runtime_checkable
class ProtocolMessage(Protocol):
    """Port: a message exchanged by the parent messaging protocol.

    Guards only ever hold a reference to one of these for diagnostics
    (see :attr:`ProtocolError.faulted_message`); they never read or mutate it.
    """

    @property
    def version(self) -> ProtocolVersion: ...

    @property
    def extra_data(self) -> Mapping[str, str]: ...


__all__ = ["ProtocolMessage", "ProtocolVersion"]
