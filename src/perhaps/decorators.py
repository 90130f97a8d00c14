"""@maybe and @maybe_safe decorators returning Maybe instead of raw values."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from perhaps.maybe import Maybe, from_function

__all__ = ['maybe', 'maybe_safe']


def maybe[T](func: Callable[..., T | None]) -> Callable[..., Maybe[T]]:
    """Decorator that wraps the return value in a Maybe.

    A None return becomes Nothing. Exceptions propagate.

    Raises:
        EmptyCallableError: If func is not callable.

    Example:
        ```python
        @maybe
        def find(users: dict[int, str], user_id: int) -> str | None:
            return users.get(user_id)

        find({1: 'bob'}, 1)
        # Some(value='bob')
        find({1: 'bob'}, 2)
        # NothingType()
        ```
    """
    from_function(func)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., T | None],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Maybe[T]:
        return from_function(wrapped).invoke(*args, **kwargs)

    return wrapper(func)


def maybe_safe[T](func: Callable[..., T | None]) -> Callable[..., Maybe[T]]:
    """Decorator that wraps the return value in a Maybe, absorbing exceptions.

    A None return or any Exception becomes Nothing.

    Example:
        ```python
        @maybe_safe
        def parse(text: str) -> int:
            return int(text)

        parse('12')
        # Some(value=12)
        parse('twelve')
        # NothingType()
        ```
    """
    from_function(func)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., T | None],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Maybe[T]:
        return from_function(wrapped).invoke_safe(*args, **kwargs)

    return wrapper(func)
