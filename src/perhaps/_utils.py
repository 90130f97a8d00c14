"""Null and callable checks shared by the value and callable containers."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeIs

__all__ = ['is_function', 'is_null']


def is_null(value: object) -> TypeIs[None]:
    """Return True if value is the null equivalent (None)."""
    return value is None


def is_function(value: object) -> TypeIs[Callable[..., object]]:
    """Return True if value can be invoked."""
    return callable(value)
