from __future__ import annotations

import pytest

from gowait.errors import (
    ConfigurationError,
    GowaitError,
    InvariantViolationError,
    NotAwaitableError,
)

pytestmark = pytest.mark.unit


def test_hint_is_appended_to_message() -> None:
    err = GowaitError("boom", hint="do this")

    assert str(err) == "boom. do this"
    assert err.hint == "do this"


def test_hint_defaults_to_none() -> None:
    err = GowaitError("fail")

    assert str(err) == "fail"
    assert err.hint is None


def test_not_awaitable_error_keeps_value_and_repr() -> None:
    err = NotAwaitableError("text")

    assert err.value == "text"
    assert str(err) == "'text' is not an awaitable or awaitable returning function"


def test_subclass_hierarchy() -> None:
    """Every error is catchable as GowaitError; misuse also as TypeError."""
    assert issubclass(NotAwaitableError, GowaitError)
    assert issubclass(NotAwaitableError, TypeError)
    assert issubclass(ConfigurationError, GowaitError)
    assert issubclass(InvariantViolationError, GowaitError)
    assert not issubclass(ConfigurationError, TypeError)
