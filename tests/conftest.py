"""Pytest configuration and shared fixtures for safer tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from hypothesis import HealthCheck, settings
from safer import Err, Nothing, Ok, Some, clear_log_hooks, reset_config

# _isolate_config runs once per test, not once per hypothesis example.
settings.register_profile('safer', suppress_health_check=[HealthCheck.function_scoped_fixture])
settings.load_profile('safer')


@pytest.fixture(autouse=True)
def _isolate_config(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start each test from an unconfigured library and a clean environment."""
    for name in ('SAFER_LOG_LEVEL', 'SAFER_JSON_LOGS', 'SAFER_TRACE_EFFECTS'):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    clear_log_hooks()
    yield
    reset_config()
    clear_log_hooks()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    return Nothing
