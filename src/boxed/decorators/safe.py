"""@safe decorator: run every call of a function through try_result()."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from boxed.capture import Capture, try_result
from boxed.result import Result

__all__ = ['safe']


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Result[T, Any]]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    mode: Capture | str = Capture.FULL,
) -> Callable[[Callable[P, T]], Callable[P, Result[T, Any]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    mode: Capture | str = Capture.FULL,
) -> Any:
    """Decorator that returns Ok(value) on success and Err on any Exception.

    Can be used with or without arguments:
        @safe
        def risky(): ...

        @safe(mode='message')
        def risky_message(): ...

    A function that already returns a Result has it passed through untouched.

    Args:
        func: The function to wrap (when used without parentheses).
        mode: Capture mode forwarded to try_result(): "full", "message" or
            "kind".

    Returns:
        A wrapped function that returns Result[T, Any] instead of T.

    Raises:
        ValueError: At decoration time, if mode is not a known capture mode.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(value=5.0)
        divide(10, 0)
        # Err(error=ZeroDivisionError('division by zero'))
        ```
    """
    capture = Capture(mode)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[Any, Any]:
        return try_result(lambda: wrapped(*args, **kwargs), capture)

    if func is not None:
        return wrapper(func)
    return wrapper
