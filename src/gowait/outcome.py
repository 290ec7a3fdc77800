"""Outcome tuple: ``(error, value)`` with exactly one slot empty.

Success is ``(None, value)`` and failure is ``(error, None)``, so callers
branch with a plain conditional:

    err, value = await gowait(fetch())
    if err:
        ...
"""

from __future__ import annotations

from typing import Any

from gowait.errors import InvariantViolationError

__all__ = [
    "Outcome",
    "failure",
    "is_failure",
    "is_success",
    "success",
    "unwrap",
    "validate_outcome",
]

type Outcome[T, E] = tuple[E, None] | tuple[None, T]


def success[T](value: T) -> tuple[None, T]:
    return (None, value)


def failure[E](error: E) -> tuple[E, None]:
    return (error, None)


def is_success(outcome: Outcome[Any, Any]) -> bool:
    """Return True when the error slot is empty."""
    return outcome[0] is None


def is_failure(outcome: Outcome[Any, Any]) -> bool:
    """Return True when the error slot holds a failure."""
    return outcome[0] is not None


def unwrap[T](outcome: Outcome[T, BaseException]) -> T:
    """Return the value of a success, or raise the captured error.

    Useful at the edge of tuple-style code, where the caller wants to go back
    to ordinary exception flow.
    """
    error, value = outcome
    if error is not None:
        raise error
    return value  # type: ignore[return-value]


def validate_outcome(outcome: object) -> None:
    """Raise InvariantViolationError unless *outcome* is a well-formed pair.

    A success whose value is itself None is indistinguishable from an empty
    slot, so the only rejected shapes are wrong arity and both slots filled.
    """
    if not isinstance(outcome, tuple) or len(outcome) != 2:
        raise InvariantViolationError(
            f"Outcome must be a 2-tuple, got {type(outcome).__name__}",
        )
    error, value = outcome
    if error is not None and value is not None:
        raise InvariantViolationError(
            "Outcome has both an error and a value",
            hint="Exactly one slot may be filled.",
        )
