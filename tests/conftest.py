"""Pytest configuration and shared fixtures for boxed tests."""

from __future__ import annotations

import importlib
import logging
from collections.abc import Generator

import pytest
import structlog

from boxed import _config
from boxed._logging import clear_log_hooks


@pytest.fixture(autouse=True)
def clean_config(monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Start every test from built-in defaults, unaffected by the environment."""
    for var in ('BOXED_RETRIES', 'BOXED_RETRY_DELAY', 'BOXED_LOG_LEVEL'):
        monkeypatch.delenv(var, raising=False)
    _config.reset()
    clear_log_hooks()
    yield
    _config.reset()
    clear_log_hooks()


@pytest.fixture(autouse=True)
def clean_logging() -> Generator[None]:
    """Undo configure_logging() so tests never see each other's handlers."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    """Record retry delays instead of sleeping."""
    recorded: list[float] = []
    # boxed.retry is shadowed by the retry function on the package, so reach the module directly.
    monkeypatch.setattr(importlib.import_module('boxed.retry').time, 'sleep', recorded.append)
    return recorded


@pytest.fixture
def sample_ok():
    """Sample Ok value for testing."""
    from boxed import Ok

    return Ok(42)


@pytest.fixture
def sample_err():
    """Sample Err value for testing."""
    from boxed import Err

    return Err(ValueError('test error'))


@pytest.fixture
def sample_some():
    """Sample Some value for testing."""
    from boxed import Some

    return Some('hello')


@pytest.fixture
def sample_nothing():
    """Sample Nothing value for testing."""
    from boxed import Nothing

    return Nothing
