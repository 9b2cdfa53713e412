"""Testing generators – Hypothesis strategies for guard messages.

Requires the ``hypothesis`` package:

    pip install "mp-guard[test]"
"""
from __future__ import annotations

from typing import Any

import hypothesis.strategies as st
from hypothesis.strategies import SearchStrategy

# Literal text must not contain braces, or str.format would treat it as a field.
_literal = st.text(
    alphabet=st.characters(exclude_categories=("Cs",), exclude_characters="{}"),
    max_size=20,
)

_argument = st.one_of(
    st.integers(),
    st.text(max_size=10),
    st.booleans(),
    st.floats(allow_nan=False, allow_infinity=False),
    st.none(),
)


@st.composite
def _template_with_args(draw: Any, max_args: int) -> tuple[str, tuple[Any, ...]]:
    args = tuple(draw(st.lists(_argument, max_size=max_args)))
    parts = [draw(_literal)]
    for index in range(len(args)):
        parts.append(f"{{{index}}}")
        parts.append(draw(_literal))
    return "".join(parts), args


def message_template_strategy(max_args: int = 4) -> SearchStrategy[tuple[str, tuple[Any, ...]]]:
    """Strategy for ``(template, args)`` pairs with one ``{i}`` per argument.

    Example::

        @given(message_template_strategy())
        def test_message_is_formatted(pair):
            template, args = pair
            with pytest.raises(ArgumentError) as info:
                verify_argument(False, template, *args)
            assert info.value.message == template.format(*args)
    """
    return _template_with_args(max_args)


def present_value_strategy() -> SearchStrategy[Any]:
    """Strategy for arbitrary non-``None`` values, falsy ones included."""
    return st.one_of(
        st.just(0),
        st.just(""),
        st.just(False),
        st.just([]),
        st.just({}),
        st.integers(),
        st.text(),
        st.lists(st.integers(), max_size=3),
    )


__all__ = ["message_template_strategy", "present_value_strategy"]
