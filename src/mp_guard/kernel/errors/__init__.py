"""Kernel error hierarchy: public re-export surface.

Hierarchy::

    BaseError
    ├── InternalError          (internal.py)
    ├── InvalidOperationError  (operation.py, also a RuntimeError)
    ├── ArgumentError          (argument.py, also a ValueError)
    │   └── ArgumentNullError
    └── ProtocolError          (protocol.py)
"""

from mp_guard.kernel.errors.argument import ArgumentError, ArgumentNullError
from mp_guard.kernel.errors.base import BaseError
from mp_guard.kernel.errors.internal import InternalError
from mp_guard.kernel.errors.operation import InvalidOperationError
from mp_guard.kernel.errors.protocol import ProtocolError

__all__ = [
    "ArgumentError",
    "ArgumentNullError",
    "BaseError",
    "InternalError",
    "InvalidOperationError",
    "ProtocolError",
]
