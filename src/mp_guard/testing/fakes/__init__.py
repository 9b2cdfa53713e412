"""Testing fakes – in-memory doubles for guard collaborators."""
from mp_guard.testing.fakes.debugger import RecordingDebuggerHook
from mp_guard.testing.fakes.message import FakeProtocolMessage

__all__ = ["FakeProtocolMessage", "RecordingDebuggerHook"]
