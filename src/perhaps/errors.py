"""Error types: dual struct+exception for misuse of the containers."""

from __future__ import annotations

from enum import Enum

import msgspec

__all__ = [
    'EmptyCallable',
    'EmptyCallableError',
    'EmptyValue',
    'EmptyValueError',
    'ErrorKind',
    'PerhapsError',
    'UnwrapEmpty',
    'UnwrapEmptyError',
]


class ErrorKind(Enum):
    """Kinds of misuse, valued by their default message."""

    EMPTY_VALUE = 'Provided value must not be empty'
    EMPTY_CALLBACK = 'Provided value must be a function'
    GET_EMPTY_VALUE = 'You try to access an empty value'


class PerhapsError(Exception):
    """Base class for container misuse errors."""

    kind: ErrorKind

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.kind.value)


# --- Construction Errors ---


class EmptyValue(msgspec.Struct, frozen=True, gc=False):
    """None passed to the present-value factory - struct variant."""

    def to_exception(self) -> EmptyValueError:
        """Convert to exception for raise-based code."""
        return EmptyValueError()


class EmptyValueError(PerhapsError, ValueError):
    """None passed to the present-value factory - exception variant.

    Use ``from_value`` instead of ``Some`` when the value may be missing.
    """

    kind = ErrorKind.EMPTY_VALUE

    def to_struct(self) -> EmptyValue:
        """Convert to struct for value-based code."""
        return EmptyValue()


class EmptyCallable(msgspec.Struct, frozen=True, gc=False):
    """Non-callable passed to the callable factory - struct variant."""

    type_name: str | None = None

    def to_exception(self) -> EmptyCallableError:
        """Convert to exception for raise-based code."""
        return EmptyCallableError(self.type_name)


class EmptyCallableError(PerhapsError, TypeError):
    """Non-callable passed to the callable factory - exception variant."""

    kind = ErrorKind.EMPTY_CALLBACK

    def __init__(self, type_name: str | None = None) -> None:
        self.type_name = type_name
        msg = self.kind.value
        if type_name:
            msg = f'{msg}, got {type_name}'
        super().__init__(msg)

    def to_struct(self) -> EmptyCallable:
        """Convert to struct for value-based code."""
        return EmptyCallable(self.type_name)


# --- Access Errors ---


class UnwrapEmpty(msgspec.Struct, frozen=True, gc=False):
    """Unwrap called on an absent value - struct variant."""

    message: str | None = None

    def to_exception(self) -> UnwrapEmptyError:
        """Convert to exception for raise-based code."""
        return UnwrapEmptyError(self.message)


class UnwrapEmptyError(PerhapsError, ValueError):
    """Unwrap called on an absent value - exception variant."""

    kind = ErrorKind.GET_EMPTY_VALUE

    def __init__(self, message: str | None = None) -> None:
        self.message = message
        super().__init__(message)

    def to_struct(self) -> UnwrapEmpty:
        """Convert to struct for value-based code."""
        return UnwrapEmpty(self.message)
