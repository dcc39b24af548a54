"""Either type: Left[L] | Right[R], a two-branch tagged union.

Right is the branch that combinators act on; Left passes through them
unchanged. By convention Left carries the reason a computation stopped.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, overload

import msgspec

from funclib.error import UnitType
from funclib.fn import partial_apply, to_unit_func

__all__ = ['Either', 'Left', 'Right']


class _Either(msgspec.Struct, frozen=True, gc=False):
    """Combinators shared by Left and Right, all defined through ``match``."""

    def match[R](self, left_fn: Callable[[Any], R], right_fn: Callable[[Any], R]) -> R:
        raise NotImplementedError

    def is_left(self) -> bool:
        return self.match(lambda _: True, lambda _: False)

    def is_right(self) -> bool:
        return self.match(lambda _: False, lambda _: True)

    @overload
    def map[R, U](self, f: Callable[[R], U], /) -> Either[Any, U]: ...

    @overload
    def map[L, R, K, U](self, left_fn: Callable[[L], K], right_fn: Callable[[R], U], /) -> Either[K, U]: ...

    def map(
        self,
        fn: Callable[[Any], Any],
        right_fn: Callable[[Any], Any] | None = None,
        /,
    ) -> Either[Any, Any]:
        """Map the Right branch, or both branches.

        ``either.map(f)`` applies ``f`` to a Right value and returns a Left
        unchanged. ``either.map(left_fn, right_fn)`` applies whichever
        function matches the active branch. Only one function is ever called.

        Examples:
            >>> Right(2).map(lambda x: x + 1)
            Right(value=3)
            >>> Left('boom').map(str.upper, lambda x: x + 1)
            Left(value='BOOM')
        """
        if right_fn is None:
            return self.match(lambda _: self, lambda value: Right(fn(value)))  # type: ignore[return-value]
        return self.match(lambda value: Left(fn(value)), lambda value: Right(right_fn(value)))

    def bind[L, R, U](self, f: Callable[[R], Either[L, U]]) -> Either[L, U]:
        """Chain a computation on the Right value.

        The Either returned by ``f`` is returned as is. A Left short-circuits
        and ``f`` is not called.
        """
        return self.match(lambda _: self, f)  # type: ignore[return-value]

    def apply(self, arg: Either[Any, Any]) -> Either[Any, Any]:
        """Apply a Right-wrapped function to a Right-wrapped argument.

        The function side is checked first, so when both sides are Left the
        function side's Left is returned.
        """
        return self.match(
            lambda _: self,
            lambda f: arg.match(lambda _: arg, lambda value: Right(partial_apply(f, value))),
        )

    def for_each[R](self, action: Callable[[R], Any]) -> Either[Any, UnitType]:
        """Run ``action`` on a Right value, returning Right(Unit) or the Left."""
        return self.map(to_unit_func(action))

    def get_value_or_else[R](self, default: R) -> R:
        """Return the Right value or ``default``."""
        return self.match(lambda _: default, lambda value: value)


class Left[L](_Either, frozen=True, gc=False):
    """Left branch of an Either.

    Examples:
        >>> Left('no user').match(lambda reason: f'failed: {reason}', str)
        'failed: no user'
    """

    value: L

    def match[R](self, left_fn: Callable[[L], R], right_fn: Callable[[Any], R]) -> R:  # noqa: ARG002
        """Call ``left_fn`` with the value. ``right_fn`` is never called."""
        return left_fn(self.value)


class Right[R](_Either, frozen=True, gc=False):
    """Right branch of an Either.

    Examples:
        >>> Right(5).bind(lambda x: Right(x * 2) if x > 0 else Left('negative'))
        Right(value=10)
    """

    value: R

    def match[U](self, left_fn: Callable[[Any], U], right_fn: Callable[[R], U]) -> U:  # noqa: ARG002
        """Call ``right_fn`` with the value. ``left_fn`` is never called."""
        return right_fn(self.value)


type Either[L, R] = Left[L] | Right[R]
