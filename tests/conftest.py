"""Pytest configuration and shared fixtures for fp-toolkit tests."""

import pytest

from fp_toolkit import _config


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    """Start every test without stored configuration or FP_TOOLKIT_* variables."""
    for name in ('FP_TOOLKIT_LOG_LEVEL', 'FP_TOOLKIT_JSON_LOGS', 'FP_TOOLKIT_PARALLEL_LIMIT'):
        monkeypatch.delenv(name, raising=False)
    _config._reset()
    yield
    _config._reset()


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from fp_toolkit import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from fp_toolkit import Err

    return Err('test error')


@pytest.fixture
def call_log():
    """Ordered record of side effects, shared between producers in a test."""
    return []
