"""boxed: Result and Option containers with short-circuiting combinators.

Flat imports (preferred):
    from boxed import Ok, Err, Result, Some, Nothing, Option
    from boxed import map, flat_map, foreach, fallback, or_else
    from boxed import retry, try_result, safe, retrying

Per-container modules, for call sites that know what they hold:
    from boxed import result, option
    result.map(Ok(1), f)
    option.filter(Some(1), pred)

The top-level map, flat_map and foreach accept either container.
"""

from boxed import option, result

# Configuration and logging
from boxed._config import Settings, get_config, init
from boxed._logging import configure_logging, get_logger

# Exception capture
from boxed.capture import Capture, try_result

# Uniform combinators
from boxed.combinators import flat_map, foreach, map  # noqa: A004

# Decorators
from boxed.decorators import retrying, safe

# Errors
from boxed.errors import AbsentValueError, ContractError, EmptyOptionError, UnwrapError

# Option
from boxed.option import (
    Nothing,
    NothingType,
    Option,
    Some,
    from_nullable,
    get,
    is_none,
    is_some,
    ok_or_else,
    or_else,
    to_nullable,
)

# Result
from boxed.result import (
    Err,
    Ok,
    Partition,
    Result,
    collect,
    collect_error,
    collect_ok,
    fallback,
    is_error,
    is_ok,
    map_error,
    normalize,
    partition,
    unwrap,
    unwrap_to_option,
)

# Retry
from boxed.retry import retry

__all__ = [
    # Errors
    'AbsentValueError',
    # Capture
    'Capture',
    'ContractError',
    'EmptyOptionError',
    # Result types
    'Err',
    # Option types
    'Nothing',
    'NothingType',
    'Ok',
    'Option',
    'Partition',
    'Result',
    # Configuration
    'Settings',
    'Some',
    'UnwrapError',
    'collect',
    'collect_error',
    'collect_ok',
    'configure_logging',
    'fallback',
    # Combinators
    'flat_map',
    'foreach',
    'from_nullable',
    'get',
    'get_config',
    'get_logger',
    'init',
    'is_error',
    'is_none',
    'is_ok',
    'is_some',
    'map',
    'map_error',
    'normalize',
    'ok_or_else',
    'option',
    'or_else',
    'partition',
    'result',
    # Retry
    'retry',
    # Decorators
    'retrying',
    'safe',
    'to_nullable',
    'try_result',
    'unwrap',
    'unwrap_to_option',
]
