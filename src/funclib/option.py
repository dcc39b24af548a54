"""Option type: Some[T] | Nothing for values that may be absent."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import TYPE_CHECKING, Any, TypeIs

import msgspec

from funclib.error import UnitType
from funclib.exceptions import InvalidConstructionError
from funclib.fn import partial_apply, to_unit_func

if TYPE_CHECKING:
    from funclib.error import Error
    from funclib.validation import Validation

__all__ = ['Nothing', 'NothingType', 'Option', 'Some', 'is_option', 'option']


class _Option(msgspec.Struct, frozen=True, gc=False):
    """Combinators shared by Some and Nothing.

    Each variant implements ``match``; every other operation goes through it,
    so a function meant for the absent branch never runs on a present value
    and vice versa.
    """

    def match[R](self, none_fn: Callable[[], R], some_fn: Callable[[Any], R]) -> R:
        raise NotImplementedError

    def is_some(self) -> bool:
        return self.match(lambda: False, lambda _: True)

    def is_none(self) -> bool:
        return self.match(lambda: True, lambda _: False)

    def map[T, U](self, f: Callable[[T], U]) -> Option[U]:
        """Apply ``f`` to the contained value, if any.

        Args:
            f: Function to apply to the Some value. Not called for Nothing.

        Returns:
            Some(f(value)), or Nothing unchanged.
        """
        return self.match(lambda: Nothing, lambda value: Some(f(value)))

    def bind[T, U](self, f: Callable[[T], Option[U]]) -> Option[U]:
        """Apply a function that returns an Option to the contained value.

        Also known as flatmap or and_then. The Option returned by ``f`` is
        returned as is, so there is no double wrapping.
        """
        return self.match(lambda: Nothing, f)

    def apply(self, arg: Option[Any]) -> Option[Any]:
        """Apply the wrapped function to a wrapped argument.

        ``Some(f).apply(Some(x))`` is ``Some(f(x))``; when ``f`` takes more
        than one argument the result wraps ``f`` with ``x`` bound, ready for
        the next ``apply``. Nothing on either side gives Nothing.
        """
        return self.match(
            lambda: Nothing,
            lambda f: arg.match(lambda: Nothing, lambda value: Some(partial_apply(f, value))),
        )

    def for_each[T](self, action: Callable[[T], Any]) -> Option[UnitType]:
        """Run ``action`` on the contained value, if any, returning Some(Unit) or Nothing."""
        return self.map(to_unit_func(action))

    def do[T](self, action: Callable[[T], Any]) -> Option[T]:
        """Run ``action`` on the contained value, if any, and return self."""
        self.for_each(action)
        return self  # type: ignore[return-value]

    def filter[T](self, predicate: Callable[[T], bool]) -> Option[T]:
        """Return self if the value satisfies ``predicate``, else Nothing."""
        return self.match(lambda: Nothing, lambda value: self if predicate(value) else Nothing)  # type: ignore[return-value]

    def traverse[T, U](self, f: Callable[[T], Iterable[U]]) -> list[Option[U]]:
        """Turn an Option of a value into a list of Options of ``f``'s results.

        Some(x) gives one Some per item of ``f(x)``; Nothing gives ``[Nothing]``.

        Examples:
            >>> Some('ab').traverse(list)
            [Some(value='a'), Some(value='b')]
            >>> Nothing.traverse(list)
            [Nothing]
        """
        return self.match(lambda: [Nothing], lambda value: [Some(item) for item in f(value)])

    def get_value_or_else[T](self, default: T) -> T:
        """Return the contained value or ``default``."""
        return self.match(lambda: default, lambda value: value)

    def get_value_or_else_with[T](self, factory: Callable[[], T]) -> T:
        """Return the contained value or compute one with ``factory``.

        ``factory`` is only called for Nothing.
        """
        return self.match(factory, lambda value: value)

    def or_else[T](self, other: Option[T]) -> Option[T]:
        """Return self if Some, else ``other``."""
        return self.match(lambda: other, lambda _: self)  # type: ignore[return-value]

    def or_else_with[T](self, factory: Callable[[], Option[T]]) -> Option[T]:
        """Return self if Some, else the Option produced by ``factory``."""
        return self.match(factory, lambda _: self)  # type: ignore[return-value]

    def to_validation[T](self, error_factory: Callable[[], Error]) -> Validation[T]:
        """Convert to a Validation, producing an error when absent."""
        from funclib.validation import Invalid, Valid

        return self.match(lambda: Invalid((error_factory(),)), Valid)

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the contained value: once for Some, never for Nothing."""
        return iter(self.match(lambda: (), lambda value: (value,)))


class Some[T](_Option, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    A Some never wraps ``None``: use ``option(value)`` to turn a possibly
    ``None`` value into an Option.

    Examples:
        >>> Some(21).map(lambda x: x * 2)
        Some(value=42)
        >>> Some(21).match(lambda: 'none', str)
        '21'
    """

    value: T

    def __post_init__(self) -> None:
        if self.value is None:
            msg = 'Some cannot wrap None; use Nothing or option(value) instead'
            raise InvalidConstructionError(msg)

    def match[R](self, none_fn: Callable[[], R], some_fn: Callable[[T], R]) -> R:  # noqa: ARG002
        """Call ``some_fn`` with the value. ``none_fn`` is never called."""
        return some_fn(self.value)


class NothingType(_Option, frozen=True, gc=False):
    """Nothing variant of Option representing absence of a value.

    This is a singleton - use the ``Nothing`` constant instead of
    instantiating directly.

    Examples:
        >>> Nothing.map(lambda x: x * 2)
        Nothing
        >>> Nothing.get_value_or_else(0)
        0
    """

    def match[R](self, none_fn: Callable[[], R], some_fn: Callable[[Any], R]) -> R:  # noqa: ARG002
        """Call ``none_fn``. ``some_fn`` is never called."""
        return none_fn()

    def __repr__(self) -> str:
        return 'Nothing'


Nothing: NothingType = NothingType()
"""Singleton instance representing the absence of a value."""


type Option[T] = Some[T] | NothingType


def option[T](value: T | None) -> Option[T]:
    """Wrap a possibly-None value: None becomes Nothing, anything else Some.

    Examples:
        >>> option(3)
        Some(value=3)
        >>> option(None)
        Nothing
    """
    if value is None:
        return Nothing
    return Some(value)


def is_option(value: object) -> TypeIs[Option[Any]]:
    """Return True if ``value`` is a Some or Nothing."""
    return isinstance(value, _Option)
