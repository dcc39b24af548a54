"""ValueOrException type: Success[T] | Exceptional, a value or the fault that replaced it.

The fault is caught by calling code (or by ``@capture``) and carried as opaque
data. Combinators never inspect it, copy it or raise it: they hand the same
exception object along until the caller decides what to do with it.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, ParamSpec, TypeVar, overload

import msgspec
import wrapt

from funclib.error import UnitType
from funclib.exceptions import InvalidConstructionError
from funclib.fn import partial_apply, to_unit_func

__all__ = [
    'Exceptional',
    'Success',
    'ValueOrException',
    'capture',
    'capture_async',
    'value_or_exception',
]

P = ParamSpec('P')
T = TypeVar('T')


# Faults hold tracebacks whose frames can reference these instances, so the
# structs stay tracked by the garbage collector.
class _ValueOrException(msgspec.Struct, frozen=True):
    """Combinators shared by Success and Exceptional, all defined through ``match``."""

    def match[R](
        self,
        exception_fn: Callable[[BaseException], R],
        success_fn: Callable[[Any], R],
    ) -> R:
        raise NotImplementedError

    def is_success(self) -> bool:
        return self.match(lambda _: False, lambda _: True)

    def is_exception(self) -> bool:
        return self.match(lambda _: True, lambda _: False)

    def map[T, U](self, f: Callable[[T], U]) -> ValueOrException[U]:
        """Apply ``f`` to a Success value.

        An Exceptional is returned as is, carrying the identical fault object.
        Exceptions raised by ``f`` itself are not caught.
        """
        return self.match(lambda _: self, lambda value: Success(f(value)))  # type: ignore[return-value]

    def bind[T, U](self, f: Callable[[T], ValueOrException[U]]) -> ValueOrException[U]:
        """Chain a computation returning a ValueOrException; short-circuits on Exceptional."""
        return self.match(lambda _: self, f)  # type: ignore[return-value]

    def apply(self, arg: ValueOrException[Any]) -> ValueOrException[Any]:
        """Apply a Success-wrapped function to a Success-wrapped argument.

        The function side is checked before the argument side. When both are
        Exceptional only the function side's fault is reported: the function
        failed first, and the argument's fault could not have mattered.
        """
        return self.match(
            lambda _: self,
            lambda f: arg.match(lambda _: arg, lambda value: Success(partial_apply(f, value))),
        )

    def for_each[T](self, action: Callable[[T], Any]) -> ValueOrException[UnitType]:
        """Run ``action`` on a Success value, returning Success(Unit) or the Exceptional."""
        return self.map(to_unit_func(action))

    def get_value_or_else[T](self, default: T) -> T:
        """Return the Success value or ``default``."""
        return self.match(lambda _: default, lambda value: value)

    def get_value_or_else_with[T](self, factory: Callable[[BaseException], T]) -> T:
        """Return the Success value or compute one from the fault."""
        return self.match(factory, lambda value: value)

    def unwrap(self) -> Any:
        """Return the Success value, or raise the captured fault.

        This is the one place the fault crosses back into raise-based code,
        and only because the caller asked for it.
        """
        return self.match(_reraise, lambda value: value)


class Success[T](_ValueOrException, frozen=True):
    """Success variant of ValueOrException containing a value of type T.

    Examples:
        >>> Success(10).map(lambda x: x // 2)
        Success(value=5)
    """

    value: T

    def match[R](
        self,
        exception_fn: Callable[[BaseException], R],  # noqa: ARG002
        success_fn: Callable[[T], R],
    ) -> R:
        """Call ``success_fn`` with the value. ``exception_fn`` is never called."""
        return success_fn(self.value)

    def __str__(self) -> str:
        return f'Success({self.value})'


class Exceptional(_ValueOrException, frozen=True):
    """Exception variant of ValueOrException carrying a captured fault.

    Examples:
        >>> fault = ZeroDivisionError('division by zero')
        >>> Exceptional(fault).map(lambda x: x + 1).fault is fault
        True
    """

    fault: BaseException

    def __post_init__(self) -> None:
        if not isinstance(self.fault, BaseException):
            msg = f'Exceptional requires an exception instance, got {type(self.fault).__name__}'
            raise InvalidConstructionError(msg)

    def match[R](
        self,
        exception_fn: Callable[[BaseException], R],
        success_fn: Callable[[Any], R],  # noqa: ARG002
    ) -> R:
        """Call ``exception_fn`` with the fault. ``success_fn`` is never called."""
        return exception_fn(self.fault)

    def __str__(self) -> str:
        return f'Exception({self.fault})'


type ValueOrException[T] = Success[T] | Exceptional


def value_or_exception[T](value: T | BaseException) -> ValueOrException[T]:
    """Wrap a value: exception instances become Exceptional, anything else Success."""
    if isinstance(value, BaseException):
        return Exceptional(value)
    return Success(value)


def _reraise(fault: BaseException) -> Any:
    raise fault


@overload
def capture[**P, T](
    func: Callable[P, T],
) -> Callable[P, ValueOrException[T]]: ...


@overload
def capture(
    *,
    exceptions: tuple[type[BaseException], ...],
) -> Callable[[Callable[P, T]], Callable[P, ValueOrException[T]]]: ...


def capture[**P, T](
    func: Callable[P, T] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Decorator that runs a function and captures what it raises.

    The wrapped function returns Success(result), or Exceptional(exc) when
    one of ``exceptions`` is raised. Other exceptions propagate.

    Can be used with or without arguments:
        @capture
        def parse(text): ...

        @capture(exceptions=(ValueError,))
        def parse_int(text): ...

    Args:
        func: The function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to capture. Defaults to (Exception,).

    Example:
        ```python
        @capture
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Success(value=5.0)
        divide(10, 0)
        # Exceptional(fault=ZeroDivisionError('division by zero'))
        ```
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, T],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> ValueOrException[T]:
        try:
            result = wrapped(*args, **kwargs)
        except catch as e:
            return Exceptional(e)
        return Success(result)

    if func is not None:
        return wrapper(func)
    return wrapper


@overload
def capture_async[**P, T](
    func: Callable[P, Awaitable[T]],
) -> Callable[P, Awaitable[ValueOrException[T]]]: ...


@overload
def capture_async(
    *,
    exceptions: tuple[type[BaseException], ...],
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, Awaitable[ValueOrException[T]]]]: ...


def capture_async[**P, T](
    func: Callable[P, Awaitable[T]] | None = None,
    *,
    exceptions: tuple[type[BaseException], ...] | None = None,
) -> Any:
    """Async counterpart of ``capture``.

    Args:
        func: The async function to wrap (when used without parentheses).
        exceptions: Tuple of exception types to capture. Defaults to (Exception,).
    """
    catch = exceptions if exceptions is not None else (Exception,)

    @wrapt.decorator
    async def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> ValueOrException[T]:
        try:
            result = await wrapped(*args, **kwargs)
        except catch as e:
            return Exceptional(e)
        return Success(result)

    if func is not None:
        return wrapper(func)
    return wrapper
