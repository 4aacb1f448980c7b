"""Unit tests for kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from healthcheck_core.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    MessageFormatError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_stored(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "base_error"

    def test_custom_code(self) -> None:
        err = BaseError("m", code="custom")
        assert err.code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {
            "type": "BaseError",
            "code": "my_code",
            "message": "m",
            "detail": {"key": "val"},
        }

    def test_to_dict_includes_cause_repr(self) -> None:
        cause = ValueError("original")
        err = BaseError("wrapper", cause=cause)
        assert "original" in err.to_dict()["cause"]
        assert err.__cause__ is cause

    def test_str_is_plain_message(self) -> None:
        assert str(BaseError("disk check misconfigured", code="c")) == "disk check misconfigured"

    def test_cause_tracks_explicit_chaining(self) -> None:
        cause = OSError("eio")
        try:
            raise BaseError("wrapper") from cause
        except BaseError as err:
            assert err.cause is cause

    def test_detail_is_copied(self) -> None:
        detail = {"k": 1}
        err = BaseError("m", detail=detail)
        detail["k"] = 2
        assert err.detail == {"k": 1}

    def test_to_dict_is_json_serialisable(self) -> None:
        payload = json.loads(json.dumps(DomainError("bad", cause=ValueError("x")).to_dict()))
        assert payload["type"] == "DomainError"
        assert payload["cause"] == "ValueError('x')"

    def test_repr(self) -> None:
        assert repr(DomainError("bad")) == "DomainError(code='domain_error', message='bad')"


class TestHierarchy:
    @pytest.mark.parametrize(
        "cls",
        [DomainError, ValidationError, ApplicationError],
    )
    def test_subclasses_base_error(self, cls: type[BaseError]) -> None:
        assert issubclass(cls, BaseError)

    def test_message_format_error_is_validation_error(self) -> None:
        assert issubclass(MessageFormatError, ValidationError)
        assert issubclass(MessageFormatError, DomainError)


class TestMessageFormatError:
    def test_carries_template_and_arguments(self) -> None:
        cause = TypeError("not enough arguments for format string")
        err = MessageFormatError("code=%d %s", (42,), cause=cause)
        assert err.template == "code=%d %s"
        assert err.arguments == (42,)
        assert err.code == "message_format_error"
        assert err.__cause__ is cause

    def test_message_names_template_and_reason(self) -> None:
        err = MessageFormatError("x=%d", (), cause=TypeError("boom"))
        assert "'x=%d'" in err.message
        assert "boom" in err.message

    def test_to_dict_lists_field_error(self) -> None:
        err = MessageFormatError("x=%d", ("a",), cause=TypeError("bad"))
        assert err.to_dict()["errors"] == [
            {"field": "message", "template": "x=%d", "reason": "bad"}
        ]
