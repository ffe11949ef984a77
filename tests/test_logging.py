"""Tests for logging configuration and hooks."""

from __future__ import annotations

import logging
import os
import subprocess
import sys
import textwrap
from pathlib import Path
from typing import Any

import pytest
from safer import (
    add_log_hook,
    clear_log_hooks,
    configure_logging,
    get_logger,
    parse_json,
    remove_log_hook,
)


class TestLogHooks:
    """Tests for logging hooks functionality."""

    def test_hook_receives_log_events(self) -> None:
        received: list[dict[str, Any]] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(received.append)

        logger = get_logger('test')
        logger.info('Test message', extra_field='extra_value')

        test_entries = [e for e in received if e.get('event') == 'Test message']
        assert len(test_entries) == 1
        assert test_entries[0]['extra_field'] == 'extra_value'
        assert test_entries[0]['level'] == 'info'

    def test_multiple_hooks_all_called(self) -> None:
        calls: list[str] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(lambda _: calls.append('hook1'))
        add_log_hook(lambda _: calls.append('hook2'))

        get_logger('test').info('Test')

        assert 'hook1' in calls
        assert 'hook2' in calls

    def test_remove_hook(self) -> None:
        calls: list[str] = []

        def hook(event_dict: dict[str, Any]) -> None:
            calls.append('called')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(hook)

        logger = get_logger('test')
        logger.info('First')
        assert len(calls) == 1

        remove_log_hook(hook)
        logger.info('Second')
        assert len(calls) == 1

    def test_remove_unknown_hook_is_noop(self) -> None:
        remove_log_hook(lambda _: None)

    def test_clear_hooks(self) -> None:
        calls: list[str] = []

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(lambda _: calls.append('called'))
        clear_log_hooks()

        get_logger('test').info('Test')
        assert calls == []

    def test_failing_hook_does_not_break_logging(self) -> None:
        calls: list[str] = []

        def bad_hook(event_dict: dict[str, Any]) -> None:
            raise RuntimeError('hook failed')

        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(bad_hook)
        add_log_hook(lambda _: calls.append('good'))

        get_logger('test').info('Test')
        assert calls == ['good']

    def test_hook_gets_a_copy(self) -> None:
        def mutate(event_dict: dict[str, Any]) -> None:
            event_dict['event'] = 'tampered'

        received: list[dict[str, Any]] = []
        configure_logging(level='DEBUG', json_output=True)
        add_log_hook(mutate)
        add_log_hook(received.append)

        get_logger('test').info('original')
        assert received[0]['event'] == 'original'


class TestConsoleOutput:
    """Console renderer is selectable."""

    def test_console_output(self, capsys) -> None:
        configure_logging(level='INFO', json_output=False)
        get_logger('test').info('console line')
        assert 'console line' in capsys.readouterr().err


class TestUnconfigured:
    """Without configure_logging the library writes nothing to stdout or stderr."""

    def test_debug_events_are_silent(self) -> None:
        script = textwrap.dedent(
            """
            from safer import fallible, parse_json, parse_json_with_schema

            @fallible
            def explode():
                raise ValueError('x')

            explode()
            parse_json('{')
            parse_json_with_schema(list[int])('["a"]')
            """
        )
        env = {k: v for k, v in os.environ.items() if not k.startswith('SAFER_')}
        src = str(Path(__file__).resolve().parent.parent / 'src')
        env['PYTHONPATH'] = os.pathsep.join(p for p in (src, env.get('PYTHONPATH')) if p)

        proc = subprocess.run([sys.executable, '-c', script], capture_output=True, text=True, env=env, check=True)

        assert proc.stdout == ''
        assert proc.stderr == ''

    def test_events_follow_stdlib_levels(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.DEBUG, logger='safer.safe_json')
        parse_json('{')
        assert any('json.decode_failed' in r.getMessage() for r in caplog.records if r.name == 'safer.safe_json')
