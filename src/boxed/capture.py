"""try_result: turn exceptions raised by a computation into Err values."""

from __future__ import annotations

from collections.abc import Callable
from enum import StrEnum
from typing import Any

from boxed._logging import get_logger
from boxed.result import Err, Result, normalize

__all__ = ['Capture', 'try_result']


class Capture(StrEnum):
    """How much of a captured exception ends up in the Err."""

    FULL = 'full'
    MESSAGE = 'message'
    KIND = 'kind'


def _payload(exc: Exception, mode: Capture) -> Any:
    match mode:
        case Capture.MESSAGE:
            return str(exc)
        case Capture.KIND:
            return type(exc)
        case _:
            return exc


def try_result[T](
    computation: Callable[[], T | Result[T, Any]],
    mode: Capture | str = Capture.FULL,
) -> Result[T, Any]:
    """Run computation, converting any Exception it raises into Err.

    A normal return value goes through normalize(): a bare value becomes
    Ok(value) and a Result is passed through untouched. Exceptions never
    propagate past this call. BaseExceptions that are not Exceptions
    (KeyboardInterrupt, SystemExit) are not captured.

    Args:
        computation: Zero-argument function to run.
        mode: What to keep of a captured exception: the exception itself
            ("full", default), its message ("message"), or its type ("kind").

    Returns:
        Result[T, Any]: Ok with the computation's value, or Err with the
        captured payload.

    Raises:
        ValueError: If mode is not a known capture mode.

    Examples:
        >>> try_result(lambda: 5 + 5)
        Ok(value=10)
        >>> try_result(lambda: 1 / 0, 'message')
        Err(error='division by zero')
        >>> try_result(lambda: 1 / 0, Capture.KIND)
        Err(error=<class 'ZeroDivisionError'>)
    """
    capture = Capture(mode)
    try:
        return normalize(computation())
    except Exception as exc:
        get_logger(__name__).debug(
            'captured exception',
            exc_type=type(exc).__name__,
            mode=capture.value,
        )
        return Err(_payload(exc, capture))
