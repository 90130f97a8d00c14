"""Callback type: SomeCallback[T] | NothingCallback for functions that may be absent.

Invoking a callback always yields a Maybe. ``invoke`` lets failures of the
wrapped function propagate; ``invoke_safe`` turns them into Nothing.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeIs

import msgspec

from perhaps import _config
from perhaps._logging import get_logger
from perhaps._utils import is_function
from perhaps.errors import EmptyCallableError
from perhaps.maybe import Maybe, Nothing, NothingType, from_value

__all__ = [
    'Callback',
    'NothingCallback',
    'NothingCallbackType',
    'SomeCallback',
    'nothing_callback',
    'some_callback',
]


def _report_absorbed(fn: Callable[..., Any], exc: Exception) -> None:
    if not _config._should_log_absorbed():
        return
    get_logger(__name__).debug(
        'callback_failed',
        callable=getattr(fn, '__qualname__', repr(fn)),
        error_type=type(exc).__name__,
        error=str(exc),
    )


class SomeCallback[T](msgspec.Struct, frozen=True):
    """Callback variant holding a function that returns T.

    Examples:
        >>> div = SomeCallback(lambda a, b: a / b)
        >>> div.invoke(1, 2)
        Some(value=0.5)
        >>> div.invoke_safe(1, 0)
        NothingType()
    """

    fn: Callable[..., T | None]

    def __post_init__(self) -> None:
        if not is_function(self.fn):
            raise EmptyCallableError(type(self.fn).__name__)

    def is_some(self) -> TypeIs[SomeCallback[T]]:
        """Return True since a function is present."""
        return True

    def is_none(self) -> TypeIs[NothingCallbackType]:
        """Return False since a function is present."""
        return False

    def invoke(self, *args: Any, **kwargs: Any) -> Maybe[T]:
        """Call the wrapped function and wrap its result.

        Exceptions raised by the function propagate unchanged.

        Returns:
            from_value(fn(*args, **kwargs)), so a None result is Nothing.
        """
        return from_value(self.fn(*args, **kwargs))

    __call__ = invoke

    def invoke_safe(self, *args: Any, **kwargs: Any) -> Maybe[T]:
        """Call the wrapped function, turning any Exception into Nothing."""
        try:
            return self.invoke(*args, **kwargs)
        except Exception as exc:  # noqa: BLE001
            _report_absorbed(self.fn, exc)
            return Nothing


class NothingCallbackType(msgspec.Struct, frozen=True, gc=False):
    """Callback variant with no function.

    Invoking it never raises and always yields Nothing.

    This is a singleton - use the `NothingCallback` constant instead of
    instantiating directly.
    """

    def is_some(self) -> TypeIs[SomeCallback[object]]:
        """Return False since no function is present."""
        return False

    def is_none(self) -> TypeIs[NothingCallbackType]:
        """Return True since no function is present."""
        return True

    def invoke(self, *_args: Any, **_kwargs: Any) -> NothingType:
        """Return Nothing without calling anything."""
        return Nothing

    __call__ = invoke

    def invoke_safe(self, *_args: Any, **_kwargs: Any) -> NothingType:
        """Return Nothing without calling anything."""
        return Nothing


NothingCallback: NothingCallbackType = NothingCallbackType()
"""Singleton instance representing an absent function."""


type Callback[T] = SomeCallback[T] | NothingCallbackType


def nothing_callback() -> NothingCallbackType:
    """Return the absent Callback."""
    return NothingCallback


def some_callback[T](fn: Callable[..., T | None]) -> SomeCallback[T]:
    """Wrap a function known to be callable.

    Raises:
        EmptyCallableError: If fn is not callable.
    """
    return SomeCallback(fn)
