"""Bounded retry of a fallible, zero-argument computation."""

from __future__ import annotations

import time
from collections.abc import Callable
from typing import Any

from boxed._config import get_config
from boxed._logging import get_logger
from boxed.result import Err, Result

__all__ = ['retry']


def retry[T, E](
    computation: Callable[[], Result[T, E]],
    *,
    retries: int | None = None,
    delay: float | None = None,
) -> Result[T, E]:
    """Call computation until it stops returning Err or the budget runs out.

    The first call is unconditional; each Err after it costs one retry. Any
    non-Err outcome is returned at once, without sleeping. When the budget is
    spent the last Err is returned. Errors are never inspected: every failure
    is retried the same way. The delay blocks the calling thread.

    Args:
        computation: Zero-argument function returning a Result.
        retries: Extra attempts after the first failure, so computation runs
            at most retries + 1 times. Defaults to get_config().retries (5).
        delay: Seconds to sleep between attempts; 0 skips sleeping. Defaults
            to get_config().delay (0).

    Returns:
        Result[T, E]: The first success, or the final failure.

    Raises:
        TypeError: If retries is not an int.
        ValueError: If retries or delay is negative.

    Example:
        ```python
        outcome = retry(lambda: fetch_remote(), retries=3, delay=3.0)
        # fetch_remote() runs up to 4 times, 3 seconds apart
        ```
    """
    config = get_config()
    remaining = config.retries if retries is None else retries
    pause = config.delay if delay is None else delay
    if isinstance(remaining, bool) or not isinstance(remaining, int):
        msg = f'retries must be an int, got {type(remaining).__name__}'
        raise TypeError(msg)
    if remaining < 0:
        msg = f'retries must be non-negative, got {remaining}'
        raise ValueError(msg)
    if pause < 0:
        msg = f'delay must be non-negative, got {pause}'
        raise ValueError(msg)

    log = get_logger(__name__)
    attempt = 1
    while True:
        outcome: Any = computation()
        if not isinstance(outcome, Err):
            return outcome
        if remaining <= 0:
            log.warning('retry budget exhausted', attempts=attempt, error=repr(outcome.error))
            return outcome
        log.debug('attempt failed, retrying', attempt=attempt, remaining=remaining, delay=pause)
        if pause:
            time.sleep(pause)
        remaining -= 1
        attempt += 1
