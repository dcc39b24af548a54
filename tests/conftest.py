"""Pytest configuration and shared fixtures for funclib tests."""

import pytest
from funclib._config import reset_config


@pytest.fixture
def fresh_config(monkeypatch):
    """Start every test from an environment-derived default configuration."""
    for name in ('FUNCLIB_LOG_LEVEL', 'FUNCLIB_LOG_JSON', 'FUNCLIB_MEMO_LOCKING'):
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from funclib import Some

    return Some('hello')


@pytest.fixture
def sample_invalid():
    """Sample Invalid value with two errors."""
    from funclib import invalid

    return invalid('name is required', 'age must be positive')


@pytest.fixture
def sample_fault():
    """Sample captured exception."""
    return ValueError('test error')
