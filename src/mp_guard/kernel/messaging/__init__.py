"""Kernel messaging – ports the guards refer to."""
from mp_guard.kernel.messaging.message import ProtocolMessage, ProtocolVersion

__all__ = ["ProtocolMessage", "ProtocolVersion"]
