"""Tests for logging configuration and hooks."""

from __future__ import annotations

from typing import Any

import pytest

from boxed import Err, retry
from boxed._logging import add_log_hook, clear_log_hooks, configure_logging, get_logger, remove_log_hook


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        get_logger('test').info('Test message', extra_field='extra_value')

        entries = [e for e in received if e.get('event') == 'Test message']
        assert len(entries) == 1
        assert entries[0]['extra_field'] == 'extra_value'
        assert entries[0]['level'] == 'info'

    def test_remove_hook(self) -> None:
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append(event_dict['event'])

        configure_logging(level='DEBUG')
        add_log_hook(hook)
        get_logger('test').info('First')
        remove_log_hook(hook)
        get_logger('test').info('Second')

        assert calls == ['First']

    def test_remove_unknown_hook_is_noop(self) -> None:
        remove_log_hook(lambda _: None)

    def test_clear_hooks(self) -> None:
        calls: list[str] = []
        configure_logging(level='DEBUG')
        add_log_hook(lambda e: calls.append('one'))
        add_log_hook(lambda e: calls.append('two'))
        clear_log_hooks()
        get_logger('test').info('Nobody listens')
        assert calls == []

    def test_failing_hook_warns(self) -> None:
        def broken(event_dict: dict[str, Any]) -> None:
            raise ValueError('hook broke')

        configure_logging(level='DEBUG')
        add_log_hook(broken)
        with pytest.warns(RuntimeWarning, match='hook broke'):
            get_logger('test').info('Still logged')

    def test_retry_events_reach_hooks(self, sleeps) -> None:
        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG')
        add_log_hook(received.append)

        retry(lambda: Err('down'), retries=1)

        events = [e['event'] for e in received]
        assert 'attempt failed, retrying' in events
        assert 'retry budget exhausted' in events


class TestConfigureLogging:
    """Tests for configure_logging()."""

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level='INFO', json_output=True)
        get_logger('json').info('hello', answer=42)
        err = capsys.readouterr().err
        assert '"event": "hello"' in err
        assert '"answer": 42' in err

    def test_level_filters(self, capsys: pytest.CaptureFixture[str]) -> None:
        configure_logging(level='WARNING')
        get_logger('quiet').info('hidden')
        assert 'hidden' not in capsys.readouterr().err
