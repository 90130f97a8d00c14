"""Pytest configuration and shared fixtures for perhaps tests."""

import pytest

from perhaps import _config
from perhaps._logging import clear_log_hooks


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from perhaps import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from perhaps import Nothing

    return Nothing


@pytest.fixture
def div_callback():
    """Callback wrapping true division."""
    from perhaps import from_function

    return from_function(lambda a, b: a / b)


@pytest.fixture(autouse=True)
def reset_config():
    """Start and finish every test without configuration or log hooks."""
    _config.reset()
    clear_log_hooks()
    yield
    _config.reset()
    clear_log_hooks()
