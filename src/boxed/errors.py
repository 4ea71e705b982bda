"""Contract violations: the fatal-abort channel.

Modeled failures travel as Err values and never raise. The exceptions below
are raised only when a caller breaks a container contract.
"""

from __future__ import annotations

from typing import Any

__all__ = [
    'AbsentValueError',
    'ContractError',
    'EmptyOptionError',
    'UnwrapError',
]


class ContractError(RuntimeError):
    """Base class for contract violations raised by boxed."""


class UnwrapError(ContractError):
    """unwrap() was called on an Err without a fallback."""

    def __init__(self, error: Any) -> None:
        self.error = error
        super().__init__(f'called unwrap on Err: {error!r}')


class EmptyOptionError(ContractError):
    """get() was called on Nothing."""

    def __init__(self) -> None:
        super().__init__('cannot get value of an absent option')


class AbsentValueError(ContractError):
    """Nothing ended up where a present value is required.

    Raised when a function passed to Option map() returns Nothing and when
    Some(Nothing) is constructed.
    """

    def __init__(self, message: str = 'Some cannot hold Nothing') -> None:
        super().__init__(message)
