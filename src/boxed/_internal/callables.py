"""Arity checks for arguments that may be either a function or a plain value."""

from __future__ import annotations

import inspect
from typing import Any

__all__ = ['accepts']


def accepts(candidate: Any, arity: int) -> bool:
    """Return True if candidate should be called with `arity` positional arguments.

    At zero-argument sites classes are treated as values, not factories, so an
    exception type can be used as an error kind. At sites that pass arguments a
    class is a converter like any other function. Callables whose signature
    cannot be inspected (some builtins) are assumed to fit.

    Args:
        candidate: The fallback or default supplied by the caller.
        arity: Number of positional arguments the call site would pass.

    Returns:
        bool: True if candidate is a function that can take `arity` arguments.

    Examples:
        >>> accepts(lambda: 1, 0)
        True
        >>> accepts(lambda e: e, 0)
        False
        >>> accepts(KeyError, 0)
        False
        >>> accepts(int, 1)
        True
        >>> accepts(42, 1)
        False
    """
    if not callable(candidate):
        return False
    if isinstance(candidate, type) and arity == 0:
        return False
    try:
        signature = inspect.signature(candidate)
    except (TypeError, ValueError):
        return True
    try:
        signature.bind(*([None] * arity))
    except TypeError:
        return False
    return True
