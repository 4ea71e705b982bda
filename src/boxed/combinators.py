"""Combinators that work on either container.

Call sites that do not statically know whether they hold a Result or an
Option use these entry points; the argument's variant picks the rules.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from boxed import option, result
from boxed.option import NothingType, Some
from boxed.result import Err, Ok

__all__ = ['flat_map', 'foreach', 'map']


def _module_for(container: Any) -> Any:
    if isinstance(container, Ok | Err):
        return result
    if isinstance(container, Some | NothingType):
        return option
    msg = f'expected a Result or an Option, got {type(container).__name__}'
    raise TypeError(msg)


def map(container: Any, f: Callable[[Any], Any]) -> Any:  # noqa: A001
    """Transform the value of Ok or Some.

    Err and Nothing pass through untouched and f is not called.

    Raises:
        TypeError: If container is neither a Result nor an Option.
        AbsentValueError: If container is Some and f returns Nothing.

    Examples:
        >>> map(Ok(5), lambda x: x * 2)
        Ok(value=10)
        >>> map(Some(5), lambda x: x * 2)
        Some(value=10)
    """
    return _module_for(container).map(container, f)


def flat_map(container: Any, f: Callable[[Any], Any]) -> Any:
    """Chain a container-returning function onto Ok or Some."""
    return _module_for(container).flat_map(container, f)


def foreach(container: Any, f: Callable[[Any], Any]) -> Any:
    """Run f on the value of Ok or Some for its side effect; return the container."""
    return _module_for(container).foreach(container, f)
