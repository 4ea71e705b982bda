"""Process-wide defaults: Settings, init() and get_config()."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from boxed._logging import configure_logging

__all__ = [
    'DEFAULT_DELAY',
    'DEFAULT_RETRIES',
    'Settings',
    'get_config',
    'init',
    'reset',
]

DEFAULT_RETRIES = 5
DEFAULT_DELAY = 0.0


@dataclass(frozen=True)
class Settings:
    """Defaults applied when a call does not say otherwise.

    Attributes:
        retries: Extra attempts retry() makes after the first failure.
        delay: Seconds retry() sleeps between attempts.
        log_level: Logging level passed to configure_logging(). None leaves
            logging untouched.
    """

    retries: int = DEFAULT_RETRIES
    delay: float = DEFAULT_DELAY
    log_level: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.retries, bool) or not isinstance(self.retries, int):
            msg = f'retries must be an int, got {type(self.retries).__name__}'
            raise TypeError(msg)
        if self.retries < 0:
            msg = f'retries must be non-negative, got {self.retries}'
            raise ValueError(msg)
        if self.delay < 0:
            msg = f'delay must be non-negative, got {self.delay}'
            raise ValueError(msg)


_config: Settings | None = None


def _env_retries() -> int | None:
    raw = os.environ.get('BOXED_RETRIES', '').strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        logging.warning("Invalid BOXED_RETRIES value '%s', using default", raw)
        return None
    if value < 0:
        logging.warning("Negative BOXED_RETRIES value '%s', using default", raw)
        return None
    return value


def _env_delay() -> float | None:
    raw = os.environ.get('BOXED_RETRY_DELAY', '').strip()
    if not raw:
        return None
    try:
        value = float(raw)
    except ValueError:
        logging.warning("Invalid BOXED_RETRY_DELAY value '%s', using default", raw)
        return None
    if value < 0:
        logging.warning("Negative BOXED_RETRY_DELAY value '%s', using default", raw)
        return None
    return value


def _env_log_level() -> str | None:
    return os.environ.get('BOXED_LOG_LEVEL', '').strip().upper() or None


def init(
    retries: int | None = None,
    delay: float | None = None,
    log_level: str | None = None,
) -> Settings:
    """Install process-wide defaults.

    Explicit arguments win over the BOXED_RETRIES, BOXED_RETRY_DELAY and
    BOXED_LOG_LEVEL environment variables, which win over built-in defaults.

    Args:
        retries: Default retry budget.
        delay: Default delay between retries, in seconds.
        log_level: Logging level ("DEBUG", "INFO", etc.). None = silent.

    Returns:
        The Settings that were installed.

    Raises:
        ValueError: If retries or delay is negative.

    Example:
        ```python
        import boxed

        boxed.init(retries=3, delay=0.5, log_level='DEBUG')
        ```
    """
    global _config  # noqa: PLW0603

    if retries is None:
        retries = _env_retries()
    if delay is None:
        delay = _env_delay()
    if log_level is None:
        log_level = _env_log_level()

    _config = Settings(
        retries=DEFAULT_RETRIES if retries is None else retries,
        delay=DEFAULT_DELAY if delay is None else delay,
        log_level=log_level,
    )

    if log_level is not None:
        configure_logging(log_level)

    return _config


def get_config() -> Settings:
    """Return the installed Settings, building them from the environment on first use.

    Unlike init(), the lazy path never configures logging.
    """
    global _config  # noqa: PLW0603

    if _config is None:
        retries = _env_retries()
        delay = _env_delay()
        _config = Settings(
            retries=DEFAULT_RETRIES if retries is None else retries,
            delay=DEFAULT_DELAY if delay is None else delay,
            log_level=_env_log_level(),
        )
    return _config


def reset() -> None:
    """Drop the installed Settings so the next get_config() rereads the environment."""
    global _config  # noqa: PLW0603

    _config = None
