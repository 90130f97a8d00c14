"""perhaps: Maybe values and optional callables for Python 3.13+.

Flat imports (preferred):
    from perhaps import Maybe, Some, Nothing, from_value, from_function
    from perhaps import maybe, maybe_safe

Submodule imports (for organization):
    from perhaps.maybe import Some, Nothing, Maybe
    from perhaps.callback import SomeCallback, NothingCallback, Callback
    from perhaps.errors import EmptyValueError, EmptyCallableError, UnwrapEmptyError
"""

# Configuration
from perhaps._config import PerhapsConfig, get_config, init

# Callback types
from perhaps.callback import (
    Callback,
    NothingCallback,
    NothingCallbackType,
    SomeCallback,
    nothing_callback,
    some_callback,
)

# Decorators
from perhaps.decorators import maybe, maybe_safe

# Errors
from perhaps.errors import (
    EmptyCallableError,
    EmptyValueError,
    ErrorKind,
    PerhapsError,
    UnwrapEmptyError,
)

# Maybe types
from perhaps.maybe import (
    Maybe,
    Nothing,
    NothingType,
    Some,
    from_function,
    from_value,
    nothing,
    some,
)

__all__ = [
    # Callback types
    'Callback',
    # Errors
    'EmptyCallableError',
    'EmptyValueError',
    'ErrorKind',
    # Maybe types
    'Maybe',
    'Nothing',
    'NothingCallback',
    'NothingCallbackType',
    'NothingType',
    'PerhapsConfig',
    'PerhapsError',
    'Some',
    'SomeCallback',
    'UnwrapEmptyError',
    'from_function',
    'from_value',
    # Configuration
    'get_config',
    'init',
    # Decorators
    'maybe',
    'maybe_safe',
    'nothing',
    'nothing_callback',
    'some',
    'some_callback',
]
