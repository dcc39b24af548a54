"""Function-level helpers: piping, composition and curried application.

The sum types use ``partial_apply`` so that a multi-argument function can be
lifted into a wrapper and fed one wrapped argument at a time:

    >>> from funclib import Some
    >>> Some(lambda a, b: a * b).apply(Some(6)).apply(Some(7))
    Some(value=42)
"""

from __future__ import annotations

import functools
import inspect
from collections.abc import Callable
from typing import Any, TypeVar, overload

from funclib.error import Unit, UnitType

__all__ = [
    'arity',
    'compose',
    'negate',
    'partial_apply',
    'pipe',
    'tap',
    'to_unit_func',
]

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


def arity(f: Callable[..., Any]) -> int:
    """Return the number of required positional parameters of ``f``.

    Callables whose signature cannot be inspected (some builtins) count as
    unary.
    """
    try:
        sig = inspect.signature(f)
    except (TypeError, ValueError):
        return 1
    return sum(1 for p in sig.parameters.values() if p.kind in _POSITIONAL and p.default is p.empty)


def partial_apply(f: Callable[..., Any], arg: Any) -> Any:
    """Apply ``arg`` to ``f``, currying when ``f`` needs more arguments.

    A function with more than one required positional parameter gets ``arg``
    bound as its first argument and the partial is returned. Otherwise ``f``
    is called.

    Examples:
        >>> add = lambda a, b: a + b
        >>> partial_apply(partial_apply(add, 1), 2)
        3
    """
    if arity(f) > 1:
        return functools.partial(f, arg)
    return f(arg)


def tap[T](action: Callable[[T], Any]) -> Callable[[T], T]:
    """Turn an action into a function that runs it and returns its input."""

    def tapped(value: T) -> T:
        action(value)
        return value

    return tapped


def to_unit_func[T](action: Callable[[T], Any]) -> Callable[[T], UnitType]:
    """Turn an action into a function that returns ``Unit``."""

    def unit_func(value: T) -> UnitType:
        action(value)
        return Unit

    return unit_func


def compose[T1, T2, T3](g: Callable[[T2], T3], f: Callable[[T1], T2]) -> Callable[[T1], T3]:
    """Return ``x -> g(f(x))``."""

    def composed(value: T1) -> T3:
        return g(f(value))

    return composed


def negate[T](predicate: Callable[[T], bool]) -> Callable[[T], bool]:
    """Return the logical negation of a predicate."""

    def negated(value: T) -> bool:
        return not predicate(value)

    return negated


@overload
def pipe[T](value: T, /) -> T: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], /) -> T1: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> T2: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /) -> T3: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> T4: ...
@overload
def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any: ...


def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any:
    """Pass a value through a sequence of functions, left to right.

    Examples:
        >>> pipe(3, lambda x: x + 1, str)
        '4'
    """
    for fn in fns:
        value = fn(value)
    return value
