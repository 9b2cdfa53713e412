"""Testing support – fakes and Hypothesis strategies.

``mp_guard.testing.generators`` needs the ``test`` extra (hypothesis); the
fakes have no extra requirements.
"""

from mp_guard.testing.fakes import FakeProtocolMessage, RecordingDebuggerHook

__all__ = ["FakeProtocolMessage", "RecordingDebuggerHook"]
