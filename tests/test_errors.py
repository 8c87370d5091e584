from __future__ import annotations

import pytest

from resultkit.errors import (
    ConfigurationError,
    InvalidCastError,
    InvalidResultError,
    ResultError,
    ResultFormatError,
)

pytestmark = pytest.mark.unit


def test_result_error_carries_hint() -> None:
    err = ResultError("boom", hint="do this")

    assert str(err) == "boom"
    assert err.hint == "do this"


def test_hint_defaults_to_none() -> None:
    assert ResultError("fail").hint is None


def test_invalid_result_error_keeps_payload() -> None:
    err = InvalidResultError("not found", error={"code": 404})

    assert err.error == {"code": 404}
    assert err.hint is None


def test_subclass_hierarchy() -> None:
    """Every error is a ResultError; casts and format errors match builtin kinds."""
    for cls in (ConfigurationError, InvalidCastError, InvalidResultError, ResultFormatError):
        assert issubclass(cls, ResultError)

    assert issubclass(InvalidCastError, TypeError)
    assert issubclass(ResultFormatError, ValueError)
