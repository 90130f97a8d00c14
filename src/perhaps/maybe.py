"""Maybe type: Some[T] | Nothing for values that may be absent."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

import msgspec

from perhaps._utils import is_function, is_null
from perhaps.errors import EmptyCallableError, EmptyValueError, UnwrapEmptyError

if TYPE_CHECKING:
    from perhaps.callback import SomeCallback

__all__ = [
    'Maybe',
    'Nothing',
    'NothingType',
    'Some',
    'from_function',
    'from_value',
    'nothing',
    'some',
]


class Some[T](msgspec.Struct, frozen=True, gc=False):
    """Some variant of Maybe containing a value of type T.

    Some represents the presence of a value. The value is never None:
    construct through ``from_value`` when it may be missing.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
        >>> Some(3).filter(lambda x: x % 2 == 0)
        NothingType()
    """

    value: T

    def __post_init__(self) -> None:
        if is_null(self.value):
            raise EmptyValueError

    def is_some(self) -> TypeIs[Some[T]]:
        """Return True since this is Some.

        This method provides type narrowing - after checking is_some(),
        the type checker knows the value is Some[T].
        """
        return True

    def is_none(self) -> TypeIs[NothingType]:
        """Return False since this is Some."""
        return False

    def unwrap(self) -> T:
        """Return the contained value."""
        return self.value

    def unwrap_or(self, default: T) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the default."""
        return self.value

    def unwrap_or_else(self, f: Callable[[], T]) -> T:  # noqa: ARG002
        """Return the contained value, ignoring the fallback function."""
        return self.value

    def expect(self, _msg: str) -> T:
        """Return the contained value, ignoring the message."""
        return self.value

    def or_else(self, _f: Callable[[], Maybe[T]]) -> Some[T]:
        """Return a copy of self; the alternative is never invoked."""
        return Some(self.value)

    def map[U](self, f: Callable[[T], U | None]) -> Maybe[U]:
        """Apply a function to the contained value.

        A None result collapses to Nothing rather than raising.

        Args:
            f: Function to apply to the value. Its exceptions propagate.

        Returns:
            from_value(f(value)).
        """
        return from_value(f(self.value))

    def and_then[U](self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        """Apply a function that returns a Maybe to the contained value.

        Also known as flatmap or bind.

        Args:
            f: Function that takes T and returns Maybe[U].

        Returns:
            The Maybe returned by f.
        """
        return f(self.value)

    flat_map = and_then

    def tap(self, f: Callable[[T], Any] | None) -> Maybe[T]:
        """Run f on the value for its side effect.

        Args:
            f: Side-effect function. Anything that is not callable yields
                Nothing instead of an error.

        Returns:
            A Maybe equal to self if f was run, Nothing otherwise.
        """
        if not is_function(f):
            return Nothing
        f(self.value)
        return from_value(self.value)

    def filter(self, predicate: Callable[[T], bool]) -> Maybe[T]:
        """Return Some if the predicate is satisfied, else Nothing.

        Args:
            predicate: Function that returns True to keep the value.
        """
        if predicate(self.value):
            return Some(self.value)
        return Nothing


class NothingType(msgspec.Struct, frozen=True, gc=False):
    """Nothing variant of Maybe representing absence of a value.

    Every combinator on Nothing returns Nothing without running the supplied
    function; only ``or_else`` and the ``unwrap_or*`` family recover.

    This is a singleton - use the `Nothing` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.is_none()
        True
        >>> Nothing.map(lambda x: x * 2).unwrap_or(0)
        0
    """

    def is_some(self) -> TypeIs[Some[object]]:
        """Return False since this is Nothing."""
        return False

    def is_none(self) -> TypeIs[NothingType]:
        """Return True since this is Nothing.

        This method provides type narrowing - after checking is_none(),
        the type checker knows the value is Nothing.
        """
        return True

    def unwrap(self) -> NoReturn:
        """Raise since Nothing has no value to unwrap.

        Raises:
            UnwrapEmptyError: Always.
        """
        raise UnwrapEmptyError

    def unwrap_or[T](self, default: T) -> T:
        """Return the default value since this is Nothing."""
        return default

    def unwrap_or_else[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Nothing."""
        return f()

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapEmptyError: Always, with the custom message.
        """
        raise UnwrapEmptyError(msg)

    def or_else[T](self, f: Callable[[], Maybe[T]]) -> Maybe[T]:
        """Invoke the alternative since this is Nothing.

        Args:
            f: Function that returns a new Maybe.

        Returns:
            The Maybe returned by f.
        """
        return f()

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        """Return Nothing since there's no value to map."""
        return self

    def and_then[T, U](self, _f: Callable[[T], Maybe[U]]) -> NothingType:
        """Return Nothing since there's no value to bind."""
        return self

    flat_map = and_then

    def tap[T](self, _f: Callable[[T], Any] | None) -> NothingType:
        """Return Nothing since there's no value to inspect."""
        return self

    def filter[T](self, _predicate: Callable[[T], bool]) -> NothingType:
        """Return Nothing since there's no value to filter."""
        return self


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Maybe[T] = Some[T] | NothingType


def nothing() -> NothingType:
    """Return the absent Maybe."""
    return Nothing


def some[T](value: T) -> Some[T]:
    """Wrap a value known to be present.

    Raises:
        EmptyValueError: If value is None.
    """
    return Some(value)


def from_value[T](value: T | None) -> Maybe[T]:
    """Wrap value, mapping None to Nothing.

    This is the constructor every combinator uses for results that may be
    missing, so a present Maybe never holds None.

    Examples:
        >>> from_value(0)
        Some(value=0)
        >>> from_value(None)
        NothingType()
    """
    if is_null(value):
        return Nothing
    return Some(value)


def from_function[T](fn: Callable[..., T | None]) -> SomeCallback[T]:
    """Wrap a function in a callback container.

    Raises:
        EmptyCallableError: If fn is not callable.
    """
    from perhaps.callback import SomeCallback

    if not is_function(fn):
        raise EmptyCallableError(type(fn).__name__)
    return SomeCallback(fn)
