"""Testing fakes – FakeProtocolMessage."""
from __future__ import annotations

import dataclasses
from collections.abc import Mapping


@dataclasses.dataclass(frozen=True, eq=False)
class FakeProtocolMessage:
    """Minimal :class:`~mp_guard.kernel.messaging.ProtocolMessage`.

    Compares by identity so tests can assert a guard kept the very same object.
    """

    version: str = "2.0"
    extra_data: Mapping[str, str] = dataclasses.field(default_factory=dict)


__all__ = ["FakeProtocolMessage"]
