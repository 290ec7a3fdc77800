"""gowait: turn awaitables into ``(error, value)`` outcomes.

Public API:
    - gowait(): Await an operation and return an outcome pair
    - gowait_with(): Same, with an explicit DefectPolicy
    - settled(): Decorator form of gowait()
    - Outcome: The ``(error, value)`` type
    - DefectPolicy / is_defect(): Which failures are re-raised instead of captured
"""

from __future__ import annotations

import logging

from gowait.adapter import gowait, gowait_with, settled
from gowait.defects import DEFAULT_CATEGORIES, DefectCategory, DefectPolicy, is_defect
from gowait.errors import (
    ConfigurationError,
    GowaitError,
    InvariantViolationError,
    NotAwaitableError,
)
from gowait.outcome import Outcome, failure, is_failure, is_success, success, unwrap

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("gowait")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("gowait").addHandler(logging.NullHandler())

__all__ = [
    "DEFAULT_CATEGORIES",
    "ConfigurationError",
    "DefectCategory",
    "DefectPolicy",
    "GowaitError",
    "InvariantViolationError",
    "NotAwaitableError",
    "Outcome",
    "failure",
    "gowait",
    "gowait_with",
    "is_defect",
    "is_failure",
    "is_success",
    "settled",
    "success",
    "unwrap",
]
