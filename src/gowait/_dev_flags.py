"""Development-time toggle for outcome shape checks.

When on, every outcome the adapter returns goes through
:func:`gowait.outcome.validate_outcome` before reaching the caller.
"""

from __future__ import annotations

import os

__all__ = ["dev_validate_enabled"]


def dev_validate_enabled(*, override: bool | None = None) -> bool:
    """Return True when the adapter should shape-check its outcomes.

    ``override`` wins when given; otherwise ``GOWAIT_VALIDATE=1`` turns the
    checks on. Any other value, including ``"true"``, leaves them off.
    """
    if override is not None:
        return bool(override)
    return os.getenv("GOWAIT_VALIDATE") == "1"
