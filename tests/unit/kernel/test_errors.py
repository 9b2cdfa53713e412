"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import pytest

from mp_guard.kernel.errors import (
    ArgumentError,
    ArgumentNullError,
    BaseError,
    InternalError,
    InvalidOperationError,
    ProtocolError,
)
from mp_guard.testing.fakes import FakeProtocolMessage


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_str_is_message(self) -> None:
        assert str(BaseError("plain text")) == "plain text"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_default_message_when_omitted(self) -> None:
        assert BaseError().message == BaseError.default_message

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_includes_cause_repr(self) -> None:
        err = BaseError("wrapper", cause=ValueError("original"))
        assert "original" in err.to_dict()["cause"]

    def test_cause_sets_dunder_cause(self) -> None:
        cause = RuntimeError("root")
        err = BaseError("wrap", cause=cause)
        assert err.cause is cause
        assert err.__cause__ is cause

    def test_repr_contains_code_and_message(self) -> None:
        r = repr(BaseError("hello", code="hi"))
        assert "hi" in r
        assert "hello" in r


class TestCategories:
    @pytest.mark.parametrize(
        ("cls", "code"),
        [
            (InternalError, "internal_error"),
            (InvalidOperationError, "invalid_operation"),
            (ArgumentError, "argument_error"),
            (ArgumentNullError, "argument_null"),
            (ProtocolError, "protocol_error"),
        ],
    )
    def test_default_codes(self, cls: type[BaseError], code: str) -> None:
        assert cls().code == code
        assert issubclass(cls, BaseError)

    def test_builtin_mixins(self) -> None:
        assert issubclass(InvalidOperationError, RuntimeError)
        assert issubclass(ArgumentError, ValueError)
        assert issubclass(ArgumentNullError, ValueError)

    def test_categories_are_independent(self) -> None:
        with pytest.raises(ProtocolError):
            try:
                raise ProtocolError("p")
            except (InternalError, InvalidOperationError, ArgumentError):
                pytest.fail("protocol error caught as another category")

    def test_internal_error_without_message(self) -> None:
        assert InternalError().message == "An internal error occurred."


class TestArgumentErrors:
    def test_param_name_in_str_not_message(self) -> None:
        err = ArgumentError("bad", param_name="size")
        assert err.message == "bad"
        assert str(err) == "bad (Parameter 'size')"
        assert err.to_dict()["param_name"] == "size"

    def test_without_param_name(self) -> None:
        err = ArgumentError("bad")
        assert str(err) == "bad"
        assert "param_name" not in err.to_dict()

    def test_null_error_builds_own_message(self) -> None:
        err = ArgumentNullError("foo")
        assert err.param_name == "foo"
        assert err.message == "Value cannot be null."
        assert "foo" in str(err)

    def test_null_error_is_argument_error(self) -> None:
        with pytest.raises(ArgumentError):
            raise ArgumentNullError("x")


class TestProtocolError:
    def test_faulted_message_kept_by_reference(self) -> None:
        msg = FakeProtocolMessage()
        err = ProtocolError("bad", faulted_message=msg)
        assert err.faulted_message is msg

    def test_faulted_message_defaults_to_none(self) -> None:
        assert ProtocolError("bad").faulted_message is None

    def test_to_dict_names_faulted_message_type(self) -> None:
        err = ProtocolError("bad", faulted_message=FakeProtocolMessage())
        assert err.to_dict()["faulted_message"] == "FakeProtocolMessage"

    def test_cause_chaining(self) -> None:
        root = OSError("socket closed")
        err = ProtocolError("read failed", cause=root)
        assert err.__cause__ is root
        assert "cause" in err.to_dict()
