"""Pytest configuration and fixtures.

Provides environment isolation and logging configuration. All fixtures here
are autouse unless noted.
"""

from __future__ import annotations

import logging
import os

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def isolate_gowait_env(request, monkeypatch):
    """Ensure a clean GOWAIT_* environment for each test.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("GOWAIT_"):
            monkeypatch.delenv(key, raising=False)


@pytest.fixture
def validate_outcomes(monkeypatch):
    """Enable dev-time outcome validation for one test (not autouse)."""
    monkeypatch.setenv("GOWAIT_VALIDATE", "1")


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(scope="session", autouse=True)
def quiet_noisy_libraries():
    """Suppress noisy library loggers."""
    logging.getLogger("asyncio").setLevel(logging.WARNING)
