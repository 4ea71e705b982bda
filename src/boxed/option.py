"""Option type: Some[T] | Nothing for values that may be absent.

Absence is the `Nothing` singleton rather than None, so `Some(None)` is a
legitimate present value. The one representational rule is that Nothing can
never be wrapped: `Some(Nothing)` raises AbsentValueError.

Example:
    ```python
    from boxed import option as o
    from boxed.option import Nothing, Some

    def find_user(user_id: int) -> o.Option[str]:
        return o.from_nullable({1: 'ada'}.get(user_id))

    o.map(find_user(1), str.upper)
    # Some(value='ADA')
    o.or_else(find_user(2), Some('guest'))
    # Some(value='guest')
    o.ok_or_else(find_user(2), 'user not found')
    # Err(error='user not found')
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from boxed._internal import accepts
from boxed.errors import AbsentValueError, EmptyOptionError

if TYPE_CHECKING:
    from boxed.result import Result

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'filter',
    'flat_map',
    'foreach',
    'from_nullable',
    'get',
    'is_none',
    'is_some',
    'map',
    'ok_or_else',
    'or_else',
    'to_nullable',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Examples:
        >>> Some(42).get()
        42
        >>> Some(21).map(lambda x: x * 2)
        Some(value=42)
        >>> Some(None).is_some()
        True
    """

    value: T

    def __post_init__(self) -> None:
        if isinstance(self.value, NothingType):
            raise AbsentValueError

    def is_some(self) -> bool:
        """Return True; a value is present."""
        return True

    def is_none(self) -> bool:
        """Return False; a value is present."""
        return False

    def get(self) -> T:
        """Return the contained value."""
        return self.value

    def or_else(self, _alt: Any) -> Some[T]:
        """Return self; the replacement is not evaluated."""
        return self

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        """Apply f to the contained value and wrap the outcome in Some.

        Raises:
            AbsentValueError: If f returns Nothing. A function that may
                produce absence belongs in flat_map.
        """
        mapped = f(self.value)
        if isinstance(mapped, NothingType):
            raise AbsentValueError('map function returned Nothing, use flat_map instead')
        return Some(mapped)

    def flat_map[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        """Apply an Option-returning function to the value; its Option is returned as is."""
        return f(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Some[T] | NothingType:
        """Return self if predicate(value) holds, else Nothing."""
        if predicate(self.value):
            return self
        return Nothing

    def foreach(self, f: Callable[[T], Any]) -> Some[T]:
        """Call f with the value for its side effect and return self."""
        f(self.value)
        return self

    def ok_or_else(self, _alt: Any) -> Result[T, Any]:
        """Convert to Result, returning Ok(value)."""
        from boxed.result import Ok

        return Ok(self.value)

    def to_nullable(self) -> T:
        """Return the contained value, which may itself be None."""
        return self.value


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton in practice - use the `Nothing` constant instead of
    instantiating directly. All instances compare equal.
    """

    def __repr__(self) -> str:
        return 'Nothing'

    def is_some(self) -> bool:
        """Return False; no value is present."""
        return False

    def is_none(self) -> bool:
        """Return True; no value is present."""
        return True

    def get(self) -> NoReturn:
        """Abort, since there is no value.

        Raises:
            EmptyOptionError: Always.
        """
        raise EmptyOptionError

    def or_else(self, alt: Any) -> Any:
        """Return the replacement: alt() for a zero-argument function, else alt."""
        if accepts(alt, 0):
            return alt()
        return alt

    def map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing; f is not called."""
        return self

    def flat_map(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing; f is not called."""
        return self

    def filter(self, _predicate: Callable[[Any], bool]) -> NothingType:
        """Return Nothing; the predicate is not called."""
        return self

    def foreach(self, _f: Callable[[Any], Any]) -> NothingType:
        """Return Nothing without calling f."""
        return self

    def ok_or_else(self, alt: Any) -> Result[Any, Any]:
        """Convert to Err: Err(alt()) for a zero-argument function, else Err(alt)."""
        from boxed.result import Err

        if accepts(alt, 0):
            return Err(alt())
        return Err(alt)

    def to_nullable(self) -> None:
        """Return None."""
        return None


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def is_some(x: Option[Any]) -> TypeIs[Some[Any]]:
    """Check if an Option holds a value."""
    return isinstance(x, Some)


def is_none(x: Option[Any]) -> TypeIs[NothingType]:
    """Check if an Option is Nothing."""
    return isinstance(x, NothingType)


def or_else[T](x: Option[T], alt: Option[T] | Callable[[], Option[T]]) -> Option[T]:
    """Return x if present, otherwise a replacement.

    Args:
        x: The primary Option.
        alt: Replacement used when x is Nothing: a zero-argument function
            whose result is returned, or a value returned directly.

    Examples:
        >>> or_else(Some(5), Some(2))
        Some(value=5)
        >>> or_else(Nothing, Some(2))
        Some(value=2)
        >>> or_else(Nothing, lambda: Some(1))
        Some(value=1)
    """
    return x.or_else(alt)


def get[T](x: Option[T]) -> T:
    """Return the value of Some.

    This is the only operation that turns a total Option into a partial one.
    Call it only where absence has already been ruled out; otherwise prefer
    or_else or ok_or_else.

    Raises:
        EmptyOptionError: If x is Nothing, with the message
            'cannot get value of an absent option'.
    """
    return x.get()


def map[T, U](x: Option[T], f: Callable[[T], U]) -> Option[U]:  # noqa: A001
    """Transform the value of Some; Nothing passes through and f is not called.

    Raises:
        AbsentValueError: If f returns Nothing.
    """
    return x.map(f)


def flat_map[T, U](x: Option[T], f: Callable[[T], Option[U]]) -> Option[U]:
    """Chain a computation that may produce Nothing.

    Args:
        x: The Option to chain from.
        f: Function that takes the value and returns an Option.

    Returns:
        Option[U]: f(value) if x is Some, otherwise Nothing.
    """
    return x.flat_map(f)


def filter[T](x: Option[T], predicate: Callable[[T], bool]) -> Option[T]:  # noqa: A001
    """Keep the value only if predicate(value) is true."""
    return x.filter(predicate)


def foreach[T](x: Option[T], f: Callable[[T], Any]) -> Option[T]:
    """Run f on the value of Some for its side effect; always return x."""
    return x.foreach(f)


def ok_or_else[T, E](x: Option[T], alt: E | Callable[[], E]) -> Result[T, E]:
    """Convert an Option into a Result.

    Args:
        x: The Option to convert.
        alt: Error used when x is Nothing: a zero-argument function producing
            the error, or the error value itself.

    Examples:
        >>> ok_or_else(Some(5), 'missing')
        Ok(value=5)
        >>> ok_or_else(Nothing, 'missing')
        Err(error='missing')
        >>> ok_or_else(Nothing, lambda: 'oh_no')
        Err(error='oh_no')
    """
    return x.ok_or_else(alt)


def from_nullable[T](x: T | None) -> Option[T]:
    """Convert a nullable value to Option: None -> Nothing, else Some(x)."""
    if x is None or isinstance(x, NothingType):
        return Nothing
    return Some(x)


def to_nullable[T](x: Option[T]) -> T | None:
    """Convert an Option to a nullable value: Nothing -> None."""
    return x.to_nullable()
