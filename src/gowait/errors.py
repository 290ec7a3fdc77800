"""Exception hierarchy for gowait."""

from __future__ import annotations

from typing import Any


class GowaitError(Exception):
    """Base exception for all gowait errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint

    def __str__(self) -> str:
        """Return the message followed by the hint, when one is set."""
        msg = super().__str__()
        return f"{msg}. {self.hint}" if self.hint else msg


class NotAwaitableError(GowaitError, TypeError):
    """The operation was neither an awaitable nor a callable returning one.

    This is a caller bug, so it is raised rather than captured into an
    outcome. It subclasses ``TypeError`` so generic handlers still see it.
    """

    def __init__(self, value: Any, *, hint: str | None = None) -> None:
        super().__init__(
            f"{value!r} is not an awaitable or awaitable returning function",
            hint=hint,
        )
        self.value = value


class ConfigurationError(GowaitError):
    """A defect policy failed validation."""


class InvariantViolationError(GowaitError):
    """An outcome does not have exactly one empty slot.

    Only raised when dev-time validation is enabled.
    """
