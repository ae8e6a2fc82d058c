"""Pytest configuration and shared fixtures for randkit tests."""

from __future__ import annotations

import logging

import pytest
import structlog
from hypothesis import HealthCheck, settings
from randkit import SystemSource, clear_log_hooks, reset

# The autouse reset fixture runs once per test, not per example; that is fine here
settings.register_profile('randkit', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('randkit')


@pytest.fixture(autouse=True)
def isolated_config():
    """Reset library configuration and log hooks around every test."""
    reset()
    clear_log_hooks()
    yield
    reset()
    clear_log_hooks()


@pytest.fixture
def restore_logging():
    """Restore structlog and root logger state changed by configure_logging()."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def seeded_source() -> SystemSource:
    """Deterministic system source for statistical tests."""
    return SystemSource(seed=20240917)
