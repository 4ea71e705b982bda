"""Tests for Settings, init() and get_config()."""

from __future__ import annotations

import logging

import pytest

from boxed import Settings, get_config, init
from boxed._config import reset


class TestDefaults:
    """Tests for built-in defaults."""

    def test_get_config_without_init(self):
        config = get_config()
        assert config == Settings(retries=5, delay=0.0, log_level=None)

    def test_get_config_is_stable(self):
        assert get_config() is get_config()

    def test_settings_frozen(self):
        with pytest.raises(AttributeError):
            get_config().retries = 1  # type: ignore[misc]


class TestInit:
    """Tests for init()."""

    def test_explicit_values(self):
        config = init(retries=2, delay=1.5)
        assert config.retries == 2
        assert config.delay == 1.5
        assert get_config() is config

    def test_init_replaces_previous(self):
        init(retries=2)
        init(retries=7)
        assert get_config().retries == 7

    @pytest.mark.parametrize(('kwargs', 'field'), [({'retries': -1}, 'retries'), ({'delay': -1.0}, 'delay')])
    def test_negative_rejected(self, kwargs, field):
        with pytest.raises(ValueError, match=field):
            init(**kwargs)

    def test_fractional_retries_rejected(self):
        with pytest.raises(TypeError, match='retries must be an int'):
            init(retries=2.5)  # type: ignore[arg-type]

    def test_log_level_configures_logging(self):
        init(log_level='DEBUG')
        assert logging.getLogger().level == logging.DEBUG

    def test_reset(self):
        init(retries=1)
        reset()
        assert get_config().retries == 5


class TestEnvironment:
    """Tests for BOXED_* environment variables."""

    def test_env_values(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('BOXED_RETRIES', '3')
        monkeypatch.setenv('BOXED_RETRY_DELAY', '0.1')
        config = get_config()
        assert config.retries == 3
        assert config.delay == 0.1

    def test_explicit_beats_env(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('BOXED_RETRIES', '3')
        assert init(retries=9).retries == 9

    def test_env_log_level(self, monkeypatch: pytest.MonkeyPatch):
        monkeypatch.setenv('BOXED_LOG_LEVEL', 'warning')
        assert get_config().log_level == 'WARNING'

    @pytest.mark.parametrize(('var', 'raw'), [('BOXED_RETRIES', 'many'), ('BOXED_RETRIES', '-2'), ('BOXED_RETRY_DELAY', 'soon')])
    def test_invalid_env_ignored(self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture, var, raw):
        monkeypatch.setenv(var, raw)
        with caplog.at_level(logging.WARNING):
            config = get_config()
        assert config == Settings()
        assert var in caplog.text
