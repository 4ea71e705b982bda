"""Structured logging for boxed.

boxed only emits debug and warning events from retry() and try_result(); it
never installs handlers on import. Applications call configure_logging()
(or init(log_level=...)) to route those events, and any stdlib logging from
their own code, through one structlog pipeline.
"""

from __future__ import annotations

import logging
import sys
import warnings
from collections.abc import Callable
from typing import Any

import structlog

__all__ = [
    'add_log_hook',
    'clear_log_hooks',
    'configure_logging',
    'get_logger',
    'remove_log_hook',
]

type LogHook = Callable[[dict[str, Any]], None]

_log_hooks: list[LogHook] = []


def _run_hooks(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
    for hook in list(_log_hooks):
        try:
            hook(event_dict.copy())
        except Exception as exc:  # noqa: BLE001
            warnings.warn(f'log hook {hook!r} failed: {exc!r}', RuntimeWarning, stacklevel=2)
    return event_dict


def _shared_processors() -> list[Any]:
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt='iso'),
        structlog.stdlib.ExtraAdder(),
        _run_hooks,
    ]


def _renderer(json_output: bool) -> Any:  # noqa: FBT001
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(level: str = 'INFO', *, json_output: bool = True) -> None:
    """Configure structlog and the stdlib root logger to share one output format.

    Args:
        level: Logging level ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL").
        json_output: If True, emit JSON lines. If False, use console output.
    """
    structlog.configure(
        processors=[
            *_shared_processors(),
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.StackInfoRenderer(),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_output),
        ],
    )

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def get_logger(name: str | None = None) -> Any:
    """Get a structlog logger.

    Loggers are created per call so they always follow the latest
    configure_logging() call. Until structlog is configured, events go to
    the stdlib logger of the same name, so an application that never opts
    in sees only what its own logging setup lets through.
    """
    if structlog.is_configured():
        return structlog.get_logger(name)
    return structlog.wrap_logger(
        logging.getLogger(name or 'boxed'),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.KeyValueRenderer(key_order=['event']),
        ],
    )


def add_log_hook(hook: LogHook) -> None:
    """Register a hook called with a copy of every log entry.

    Hooks only run once configure_logging() has installed the pipeline.
    A hook that raises is reported as a RuntimeWarning and does not stop
    the log call.
    """
    _log_hooks.append(hook)


def remove_log_hook(hook: LogHook) -> None:
    """Remove a previously registered hook; unknown hooks are ignored."""
    if hook in _log_hooks:
        _log_hooks.remove(hook)


def clear_log_hooks() -> None:
    """Remove all registered log hooks."""
    _log_hooks.clear()
