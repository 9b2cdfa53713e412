"""Testing generators – Hypothesis strategies."""
from mp_guard.testing.generators.strategies import (
    message_template_strategy,
    present_value_strategy,
)

__all__ = ["message_template_strategy", "present_value_strategy"]
