"""@retrying decorator: run every call of a function through retry()."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import wrapt

from boxed.result import Result
from boxed.retry import retry

__all__ = ['retrying']


@overload
def retrying[**P, T, E](func: Callable[P, Result[T, E]]) -> Callable[P, Result[T, E]]: ...


@overload
def retrying[**P, T, E](
    func: None = None,
    *,
    retries: int | None = None,
    delay: float | None = None,
) -> Callable[[Callable[P, Result[T, E]]], Callable[P, Result[T, E]]]: ...


def retrying(
    func: Callable[..., Any] | None = None,
    *,
    retries: int | None = None,
    delay: float | None = None,
) -> Any:
    """Decorator that retries a Result-returning function while it returns Err.

    The same arguments are passed on every attempt. Unset options fall back
    to the configured defaults at call time, not at decoration time.

    Args:
        func: The function to wrap (when used without parentheses).
        retries: Extra attempts after the first failure.
        delay: Seconds to sleep between attempts.

    Example:
        ```python
        @retrying(retries=3, delay=0.5)
        def fetch(url: str) -> Result[bytes, str]:
            ...
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Result[Any, Any]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Result[Any, Any]:
        return retry(lambda: wrapped(*args, **kwargs), retries=retries, delay=delay)

    if func is not None:
        return wrapper(func)
    return wrapper
