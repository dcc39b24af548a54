"""Validation type: Valid[T] | Invalid, a value or the errors that rejected it.

Validation has two ways to compose, and they deliberately disagree on failure:

- ``bind`` is sequential. The first Invalid wins and later steps never run.
- ``apply`` combines independent checks. When both sides are Invalid their
  errors are concatenated, so a caller sees every problem at once.

Example:
    ```python
    from funclib import Error, Valid, invalid

    def check_name(name: str) -> Validation[str]:
        return Valid(name) if name else invalid('name is required')

    def check_age(age: int) -> Validation[int]:
        return Valid(age) if age >= 0 else invalid('age must be positive')

    person = Valid(Person).apply(check_name('')).apply(check_age(-1))
    # Invalid([name is required, age must be positive])
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from typing import Any

import msgspec

from funclib.error import Error, UnitType
from funclib.exceptions import InvalidConstructionError
from funclib.fn import partial_apply, to_unit_func

__all__ = ['Invalid', 'Valid', 'Validation', 'invalid', 'sequence', 'valid']


class _Validation(msgspec.Struct, frozen=True, gc=False):
    """Combinators shared by Valid and Invalid, all defined through ``match``."""

    def match[R](
        self,
        invalid_fn: Callable[[tuple[Error, ...]], R],
        valid_fn: Callable[[Any], R],
    ) -> R:
        raise NotImplementedError

    def is_valid(self) -> bool:
        return self.match(lambda _: False, lambda _: True)

    def is_invalid(self) -> bool:
        return self.match(lambda _: True, lambda _: False)

    def map[T, U](self, f: Callable[[T], U]) -> Validation[U]:
        """Apply ``f`` to a Valid value; an Invalid is returned unchanged."""
        return self.match(lambda _: self, lambda value: Valid(f(value)))  # type: ignore[return-value]

    def bind[T, U](self, f: Callable[[T], Validation[U]]) -> Validation[U]:
        """Chain a validation step that depends on the Valid value.

        Short-circuits: an Invalid keeps its errors and ``f`` is never called.
        """
        return self.match(lambda _: self, f)  # type: ignore[return-value]

    def apply(self, arg: Validation[Any]) -> Validation[Any]:
        """Apply a Valid-wrapped function to an independently validated argument.

        | self            | arg            | result                   |
        |-----------------|----------------|--------------------------|
        | Valid(f)        | Valid(x)       | Valid(f(x))              |
        | Valid(f)        | Invalid(e2)    | Invalid(e2)              |
        | Invalid(e1)     | Valid(x)       | Invalid(e1)              |
        | Invalid(e1)     | Invalid(e2)    | Invalid(e1 + e2)         |

        The wrapped function runs only when both sides are Valid. Functions
        of several arguments are curried, so one ``apply`` per argument builds
        up the call.
        """
        return self.match(
            lambda errors: arg.match(lambda arg_errors: Invalid(errors + arg_errors), lambda _: self),
            lambda f: arg.match(lambda _: arg, lambda value: Valid(partial_apply(f, value))),
        )

    def for_each[T](self, action: Callable[[T], Any]) -> Validation[UnitType]:
        """Run ``action`` on a Valid value, returning Valid(Unit) or the Invalid."""
        return self.map(to_unit_func(action))

    def do[T](self, action: Callable[[T], Any]) -> Validation[T]:
        """Run ``action`` on a Valid value and return self."""
        self.for_each(action)
        return self  # type: ignore[return-value]

    def get_value_or_else[T](self, default: T) -> T:
        """Return the Valid value or ``default``."""
        return self.match(lambda _: default, lambda value: value)

    def get_value_or_else_with[T](self, factory: Callable[[], T]) -> T:
        """Return the Valid value or compute one with ``factory``."""
        return self.match(lambda _: factory(), lambda value: value)

    def __iter__(self) -> Iterator[Any]:
        return iter(self.match(lambda _: (), lambda value: (value,)))


class Valid[T](_Validation, frozen=True, gc=False):
    """Valid variant of Validation carrying a value and no errors.

    Examples:
        >>> Valid(4).map(lambda x: x * 2)
        Valid(value=8)
        >>> Valid(4).errors
        ()
    """

    value: T

    @property
    def errors(self) -> tuple[Error, ...]:
        """Always empty for Valid."""
        return ()

    def match[R](
        self,
        invalid_fn: Callable[[tuple[Error, ...]], R],  # noqa: ARG002
        valid_fn: Callable[[T], R],
    ) -> R:
        """Call ``valid_fn`` with the value. ``invalid_fn`` is never called."""
        return valid_fn(self.value)

    def __str__(self) -> str:
        return f'Valid({self.value})'


class Invalid(_Validation, frozen=True, gc=False):
    """Invalid variant of Validation carrying one or more errors, in order.

    Invalid has no value type: the same Invalid stands in for a failed
    Validation of any T. Use ``invalid()`` to build one from messages.

    Examples:
        >>> str(Invalid((Error('too short'), Error('no digits'))))
        'Invalid([too short, no digits])'
    """

    errors: tuple[Error, ...]

    def __post_init__(self) -> None:
        errors = tuple(self.errors)
        if not errors:
            msg = 'Invalid requires at least one Error'
            raise InvalidConstructionError(msg)
        for error in errors:
            if not isinstance(error, Error):
                msg = f'Invalid errors must be Error instances, got {type(error).__name__}'
                raise InvalidConstructionError(msg)
        msgspec.structs.force_setattr(self, 'errors', errors)

    def match[R](
        self,
        invalid_fn: Callable[[tuple[Error, ...]], R],
        valid_fn: Callable[[Any], R],  # noqa: ARG002
    ) -> R:
        """Call ``invalid_fn`` with every error. ``valid_fn`` is never called."""
        return invalid_fn(self.errors)

    def __str__(self) -> str:
        return f'Invalid([{", ".join(str(error) for error in self.errors)}])'


type Validation[T] = Valid[T] | Invalid


def valid[T](value: T) -> Valid[T]:
    """Create a Valid validation."""
    return Valid(value)


def invalid(*errors: Error | str | Iterable[Error | str]) -> Invalid:
    """Create an Invalid from errors, messages, or a single iterable of them.

    Plain strings are converted to ``Error``.

    Examples:
        >>> invalid('a', Error('b')).errors
        (Error(message='a'), Error(message='b'))
        >>> invalid(['a', 'b']) == invalid('a', 'b')
        True

    Raises:
        InvalidConstructionError: If no errors are given.
    """
    items: Iterable[Error | str]
    if len(errors) == 1 and not isinstance(errors[0], Error | str):
        items = errors[0]
    else:
        items = errors  # type: ignore[assignment]
    return Invalid(tuple(error if isinstance(error, Error) else Error(error) for error in items))


def sequence[T](validations: Iterable[Validation[T]]) -> Validation[list[T]]:
    """Collect Validations into one, accumulating every error.

    Unlike a chain of ``bind`` calls this does not stop at the first Invalid:
    the result is Valid(list of values) only if every item is Valid,
    otherwise an Invalid holding all errors in input order.

    Examples:
        >>> sequence([Valid(1), Valid(2)])
        Valid(value=[1, 2])
        >>> str(sequence([Valid(1), invalid('x'), invalid('y')]))
        'Invalid([x, y])'
    """
    values: list[T] = []
    errors: list[Error] = []
    for validation in validations:
        validation.match(errors.extend, values.append)
    if errors:
        return Invalid(tuple(errors))
    return Valid(values)
