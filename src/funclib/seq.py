"""Helpers bridging plain iterables and Option."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from funclib.option import Nothing, Option, Some

__all__ = ['cons', 'first_or', 'flat_map', 'head']


def head[T](iterable: Iterable[T] | None) -> Option[T]:
    """Return the first item as Some, or Nothing for an empty (or None) iterable.

    Only the first item is consumed. A leading None item gives Nothing, since
    Some never wraps None.

    Examples:
        >>> head([3, 4])
        Some(value=3)
        >>> head([])
        Nothing
    """
    if iterable is None:
        return Nothing
    for item in iterable:
        return Nothing if item is None else Some(item)
    return Nothing


def first_or[T](iterable: Iterable[T] | None, default: T) -> T:
    """Return the first item, or ``default`` when there is none."""
    return head(iterable).get_value_or_else(default)


def cons[T](item: T, iterable: Iterable[T]) -> tuple[T, ...]:
    """Return an immutable sequence of ``item`` followed by ``iterable``."""
    return (item, *iterable)


def flat_map[T, U](iterable: Iterable[T], f: Callable[[T], Iterable[U] | Option[U]]) -> Iterator[U]:
    """Map each item to an iterable or an Option and flatten the results.

    Options are iterable, contributing their value when Some and nothing
    when Nothing.

    Examples:
        >>> list(flat_map([1, 2, 3], lambda x: Some(x * 10) if x != 2 else Nothing))
        [10, 30]
        >>> list(flat_map(['ab', 'c'], list))
        ['a', 'b', 'c']
    """
    for item in iterable:
        yield from f(item)
