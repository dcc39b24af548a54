"""Union type: exactly one of N declared alternatives.

Subscripting ``Union`` with 2 to 8 types builds a specialised class (cached,
so ``Union[int, str] is Union[int, str]``):

    >>> Shape = Union[int, float, str]
    >>> u = Shape.of(3.5)
    >>> u.is_t2
    True
    >>> u.match(lambda i: 'int', lambda f: 'float', lambda s: 'str')
    'float'

``of`` picks the alternative from the value's type. A value that is an
instance of several alternatives goes to the one whose type is exactly
``type(value)``; if there is no such unique alternative the construction is
rejected with ``AmbiguousUnionError``. The positional ``from_tN`` factories
never guess.
"""

from __future__ import annotations

import functools
import types
import typing
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, get_args, get_origin

from funclib.exceptions import AmbiguousUnionError, InvalidConstructionError, UnionTypeError

__all__ = ['MAX_ARITY', 'MIN_ARITY', 'Union']

MIN_ARITY = 2
MAX_ARITY = 8


@dataclass(slots=True, frozen=True)
class Union:
    """A value tagged with the position of its alternative.

    Attributes:
        index: Zero-based position of the active alternative.
        value: The payload, an instance of ``alternatives[index]``.
    """

    index: int
    value: Any
    alternatives: ClassVar[tuple[Any, ...]] = ()

    def __post_init__(self) -> None:
        alternatives = type(self).alternatives
        if not alternatives:
            msg = 'Union must be specialised before use, e.g. Union[int, str]'
            raise UnionTypeError(msg)
        if not 0 <= self.index < len(alternatives):
            msg = f'{type(self).__name__} has no alternative T{self.index + 1}'
            raise UnionTypeError(msg)
        expected = alternatives[self.index]
        if not _accepts(expected, self.value):
            msg = (
                f'T{self.index + 1} of {type(self).__name__} expects {_type_name(expected)}, '
                f'got {type(self.value).__name__}'
            )
            raise InvalidConstructionError(msg)

    def __class_getitem__(cls, params: Any) -> type[Union]:
        if cls.alternatives:
            msg = f'{cls.__name__} is already specialised'
            raise UnionTypeError(msg)
        if not isinstance(params, tuple):
            params = (params,)
        return _specialise(cls, tuple(type(None) if p is None else p for p in params))

    @classmethod
    def of(cls, value: Any) -> Union:
        """Build a union from a value, choosing the alternative by type.

        Raises:
            UnionTypeError: If the value fits no alternative.
            AmbiguousUnionError: If it fits several and none is its exact type.
        """
        alternatives = cls.alternatives
        candidates = [i for i, alt in enumerate(alternatives) if _accepts(alt, value)]
        if len(candidates) > 1:
            exact = [i for i in candidates if (get_origin(alternatives[i]) or alternatives[i]) is type(value)]
            if len(exact) != 1:
                raise AmbiguousUnionError(value, tuple(alternatives[i] for i in candidates))
            candidates = exact
        if not candidates:
            msg = f'{type(value).__name__} value {value!r} matches no alternative of {cls.__name__}'
            raise UnionTypeError(msg)
        return cls(candidates[0], value)

    @classmethod
    def from_t1(cls, value: Any) -> Union:
        return cls(0, value)

    @classmethod
    def from_t2(cls, value: Any) -> Union:
        return cls(1, value)

    @classmethod
    def from_t3(cls, value: Any) -> Union:
        return cls(2, value)

    @classmethod
    def from_t4(cls, value: Any) -> Union:
        return cls(3, value)

    @classmethod
    def from_t5(cls, value: Any) -> Union:
        return cls(4, value)

    @classmethod
    def from_t6(cls, value: Any) -> Union:
        return cls(5, value)

    @classmethod
    def from_t7(cls, value: Any) -> Union:
        return cls(6, value)

    @classmethod
    def from_t8(cls, value: Any) -> Union:
        return cls(7, value)

    @property
    def is_t1(self) -> bool:
        return self.index == 0

    @property
    def is_t2(self) -> bool:
        return self.index == 1

    @property
    def is_t3(self) -> bool:
        return self.index == 2

    @property
    def is_t4(self) -> bool:
        return self.index == 3

    @property
    def is_t5(self) -> bool:
        return self.index == 4

    @property
    def is_t6(self) -> bool:
        return self.index == 5

    @property
    def is_t7(self) -> bool:
        return self.index == 6

    @property
    def is_t8(self) -> bool:
        return self.index == 7

    def match[R](self, *handlers: Callable[[Any], R]) -> R:
        """Call the handler for the active alternative, and only that one.

        Args:
            *handlers: One handler per alternative, in declaration order.

        Raises:
            UnionTypeError: If the number of handlers differs from the arity.
        """
        if len(handlers) != len(self.alternatives):
            msg = f'{type(self).__name__}.match() needs {len(self.alternatives)} handlers, got {len(handlers)}'
            raise UnionTypeError(msg)
        return handlers[self.index](self.value)


@functools.cache
def _specialise(base: type[Union], alternatives: tuple[Any, ...]) -> type[Union]:
    if not MIN_ARITY <= len(alternatives) <= MAX_ARITY:
        msg = f'Union takes {MIN_ARITY} to {MAX_ARITY} alternatives, got {len(alternatives)}'
        raise UnionTypeError(msg)
    name = f'{base.__name__}[{", ".join(_type_name(alt) for alt in alternatives)}]'
    return type(
        name,
        (base,),
        {
            '__slots__': (),
            '__module__': base.__module__,
            '__qualname__': name,
            'alternatives': alternatives,
        },
    )


def _accepts(alternative: Any, value: Any) -> bool:
    """Return True if ``value`` can be the payload of ``alternative``.

    Runtime classes and parametrised generics (by origin) are checked with
    isinstance; typing constructs that cannot be checked accept anything.
    """
    if alternative is Any or alternative is object:
        return True
    origin = get_origin(alternative) or alternative
    if origin is typing.Union or origin is types.UnionType:
        return any(_accepts(arg, value) for arg in get_args(alternative))
    if isinstance(origin, type):
        return isinstance(value, origin)
    return True


def _type_name(tp: Any) -> str:
    if isinstance(tp, type) and get_origin(tp) is None:
        return tp.__name__
    return repr(tp).removeprefix('typing.')
