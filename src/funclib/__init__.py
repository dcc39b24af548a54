"""funclib: immutable algebraic value wrappers and a memoizer for Python 3.13+.

Flat imports (preferred):
    from funclib import Option, Some, Nothing, option
    from funclib import Either, Left, Right
    from funclib import Validation, Valid, Invalid, invalid, Error
    from funclib import ValueOrException, Success, Exceptional, capture
    from funclib import Union, memoize

Submodule imports (for organization):
    from funclib.option import Some, Nothing
    from funclib.validation import Valid, Invalid, sequence
    from funclib.memo import Memoizer
"""

from funclib._config import FunclibConfig, get_config, init
from funclib._logging import configure_logging, get_logger
from funclib.either import Either, Left, Right
from funclib.error import Error, Unit, UnitType
from funclib.exceptions import (
    AmbiguousUnionError,
    ErrorRaised,
    FunclibError,
    InvalidConstructionError,
    UnionTypeError,
)
from funclib.fn import arity, compose, negate, partial_apply, pipe, tap, to_unit_func
from funclib.memo import CacheInfo, Memoizer, memoize, memoize_async
from funclib.option import Nothing, NothingType, Option, Some, is_option, option
from funclib.seq import cons, first_or, flat_map, head
from funclib.union import Union
from funclib.validation import Invalid, Valid, Validation, invalid, sequence, valid
from funclib.value_or_exception import (
    Exceptional,
    Success,
    ValueOrException,
    capture,
    capture_async,
    value_or_exception,
)

__all__ = [
    # Exceptions
    'AmbiguousUnionError',
    # Memoizer
    'CacheInfo',
    # Either
    'Either',
    # Error / Unit
    'Error',
    'ErrorRaised',
    # ValueOrException
    'Exceptional',
    # Configuration
    'FunclibConfig',
    'FunclibError',
    # Validation
    'Invalid',
    'InvalidConstructionError',
    'Left',
    'Memoizer',
    # Option
    'Nothing',
    'NothingType',
    'Option',
    'Right',
    'Some',
    'Success',
    # Union
    'Union',
    'UnionTypeError',
    'Unit',
    'UnitType',
    'Valid',
    'Validation',
    'ValueOrException',
    # Function helpers
    'arity',
    'capture',
    'capture_async',
    'compose',
    'configure_logging',
    # Sequence helpers
    'cons',
    'first_or',
    'flat_map',
    'get_config',
    'get_logger',
    'head',
    'init',
    'invalid',
    'is_option',
    'memoize',
    'memoize_async',
    'negate',
    'option',
    'partial_apply',
    'pipe',
    'sequence',
    'tap',
    'to_unit_func',
    'valid',
    'value_or_exception',
]
