"""Result type: Ok[T] | Err[E] for operations that may fail.

A Result is always exactly one of its two variants. Both are immutable;
every combinator returns a new container (or the same one, untouched).

Example:
    ```python
    from boxed import result as r
    from boxed.result import Err, Ok

    def parse(raw: str) -> r.Result[int, str]:
        return Ok(int(raw)) if raw.isdigit() else Err(f'not a number: {raw}')

    r.flat_map(parse('20'), lambda n: Ok(n + 1))
    # Ok(value=21)
    r.fallback(parse('x'), lambda e: Ok(0))
    # Ok(value=0)
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeIs

import msgspec

from boxed._internal import accepts
from boxed.errors import UnwrapError

if TYPE_CHECKING:
    from boxed.option import Option

__all__ = [
    'Err',
    'Ok',
    'Partition',
    'Result',
    'collect',
    'collect_error',
    'collect_ok',
    'fallback',
    'flat_map',
    'foreach',
    'is_error',
    'is_ok',
    'map',
    'map_error',
    'normalize',
    'partition',
    'unwrap',
    'unwrap_to_option',
]

_MISSING: Any = object()


class Ok[T](msgspec.Struct, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42).unwrap()
        42
        >>> Ok(21).map(lambda x: x * 2)
        Ok(value=42)
    """

    value: T

    def is_ok(self) -> bool:
        """Return True; this is the success variant."""
        return True

    def is_error(self) -> bool:
        """Return False; this is the success variant."""
        return False

    def unwrap(self, fallback: Any = _MISSING) -> T:  # noqa: ARG002
        """Return the contained value, ignoring any fallback."""
        return self.value

    def unwrap_to_option(self) -> Option[T]:
        """Convert to Option, returning Some(value)."""
        from boxed.option import Some

        return Some(self.value)

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply f to the contained value and wrap the outcome in Ok."""
        return Ok(f(self.value))

    def map_error(self, _f: Callable[[Any], Any]) -> Ok[T]:
        """Return self unchanged; there is no error to map."""
        return self

    def flat_map[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a Result-returning function to the value.

        The Result returned by f is passed back as is, never re-wrapped.
        """
        return f(self.value)

    def foreach(self, f: Callable[[T], Any]) -> Ok[T]:
        """Call f with the value for its side effect and return self."""
        f(self.value)
        return self

    def fallback(self, _alt: Any) -> Ok[T]:
        """Return self unchanged; the alternative is ignored."""
        return self


class Err[E](msgspec.Struct, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    The error is an opaque, application-supplied value: a string, an atom-like
    constant, an exception object or anything else.

    Examples:
        >>> Err('boom').is_error()
        True
        >>> Err('boom').unwrap(0)
        0
    """

    error: E

    def is_ok(self) -> bool:
        """Return False; this is the error variant."""
        return False

    def is_error(self) -> bool:
        """Return True; this is the error variant."""
        return True

    def unwrap(self, fallback: Any = _MISSING) -> Any:
        """Recover a value from the error.

        Args:
            fallback: A one-argument function called with the error, or a
                value returned as is. Omit it to abort instead.

        Returns:
            The fallback's result or the fallback value itself.

        Raises:
            UnwrapError: If no fallback was given. An exception payload is
                chained as the cause.
        """
        if fallback is _MISSING:
            cause = self.error if isinstance(self.error, BaseException) else None
            raise UnwrapError(self.error) from cause
        if accepts(fallback, 1):
            return fallback(self.error)
        return fallback

    def unwrap_to_option(self) -> Option[Any]:
        """Convert to Option, discarding the error."""
        from boxed.option import Nothing

        return Nothing

    def map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged; f is not called."""
        return self

    def map_error[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply f to the contained error and wrap the outcome in Err."""
        return Err(f(self.error))

    def flat_map(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self unchanged; f is not called."""
        return self

    def foreach(self, _f: Callable[[Any], Any]) -> Err[E]:
        """Return self without calling f."""
        return self

    def fallback(self, alt: Any) -> Any:
        """Recover from the error.

        Args:
            alt: A one-argument function (or class, such as Ok) taking the
                error and returning a Result, or a precomputed Result
                returned directly.
        """
        if accepts(alt, 1):
            return alt(self.error)
        return alt


type Result[T, E = Any] = Ok[T] | Err[E]


class Partition[T, E](msgspec.Struct, frozen=True):
    """Successes and failures of a sequence of Results, each in input order."""

    ok: list[T]
    error: list[E]


def is_ok(r: Result[Any, Any]) -> TypeIs[Ok[Any]]:
    """Check if a Result is Ok."""
    return isinstance(r, Ok)


def is_error(r: Result[Any, Any]) -> TypeIs[Err[Any]]:
    """Check if a Result is Err."""
    return isinstance(r, Err)


def normalize[T, E](x: Result[T, E] | T) -> Result[T, E]:
    """Lift a bare value into Ok, leaving Results untouched.

    Lets a function return either a plain value or an explicit Result.

    Examples:
        >>> normalize(5)
        Ok(value=5)
        >>> normalize(Err('uh oh'))
        Err(error='uh oh')
    """
    if isinstance(x, Ok | Err):
        return x
    return Ok(x)


def unwrap[T, E](r: Result[T, E], fallback: Any = _MISSING) -> T:
    """Return the value of Ok, or recover from Err.

    Args:
        r: The Result to unwrap.
        fallback: For Err, a one-argument function called with the error or a
            value returned as is. Without it, unwrapping Err is fatal.

    Returns:
        T: The contained value, or whatever the fallback produced.

    Raises:
        UnwrapError: If r is Err and no fallback was given.
    """
    return r.unwrap(fallback)


def unwrap_to_option[T](r: Result[T, Any]) -> Option[T]:
    """Convert a Result to an Option: Ok(v) -> Some(v), Err(_) -> Nothing."""
    return r.unwrap_to_option()


def map[T, U, E](r: Result[T, E], f: Callable[[T], U]) -> Result[U, E]:  # noqa: A001
    """Transform the value of Ok; Err passes through and f is not called."""
    return r.map(f)


def map_error[T, E, F](r: Result[T, E], f: Callable[[E], F]) -> Result[T, F]:
    """Transform the error of Err; Ok passes through and f is not called."""
    return r.map_error(f)


def flat_map[T, U, E](r: Result[T, E], f: Callable[[T], Result[U, E]]) -> Result[U, E]:
    """Chain a computation that may fail.

    Args:
        r: The Result to chain from.
        f: Function that takes the value and returns a new Result.

    Returns:
        Result[U, E]: f(value) if r is Ok, otherwise r unchanged.
    """
    return r.flat_map(f)


def foreach[T, E](r: Result[T, E], f: Callable[[T], Any]) -> Result[T, E]:
    """Run f on the value of Ok for its side effect; always return r."""
    return r.foreach(f)


def fallback[T, E](r: Result[T, E], alt: Callable[[E], Result[T, Any]] | Result[T, Any]) -> Result[T, Any]:
    """Recover from Err with a function of the error or a precomputed Result.

    Args:
        r: The Result to recover.
        alt: A one-argument function taking the error and returning a Result,
            or a Result used as is.

    Returns:
        Result: r if it is Ok, otherwise the recovery outcome.
    """
    return r.fallback(alt)


def collect_ok[T](results: Iterable[Result[T, Any]]) -> list[T]:
    """Keep the values of the Ok results, in order."""
    return [r.value for r in results if isinstance(r, Ok)]


def collect_error[E](results: Iterable[Result[Any, E]]) -> list[E]:
    """Keep the errors of the Err results, in order."""
    return [r.error for r in results if isinstance(r, Err)]


def partition[T, E](results: Iterable[Result[T, E]]) -> Partition[T, E]:
    """Split Results into unwrapped successes and failures in a single pass.

    Both buckets are always present, even when empty.

    Examples:
        >>> partition([Ok(1), Err('oops'), Ok(2)])
        Partition(ok=[1, 2], error=['oops'])
        >>> partition([Ok(1)])
        Partition(ok=[1], error=[])
    """
    oks: list[T] = []
    errors: list[E] = []
    for r in results:
        if isinstance(r, Ok):
            oks.append(r.value)
        else:
            errors.append(r.error)
    return Partition(ok=oks, error=errors)


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered; later Results are not
    inspected.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for r in results:
        if isinstance(r, Err):
            return r
        values.append(r.value)
    return Ok(values)
