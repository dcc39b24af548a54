"""Exceptions raised by funclib on construction misuse.

Domain failures are never raised: they travel inside ``Validation`` as
``Error`` values, or inside ``ValueOrException`` as captured faults. The
exceptions here signal programming errors, such as building a ``Some`` from
``None``, and are raised immediately.
"""

from __future__ import annotations

__all__ = [
    'AmbiguousUnionError',
    'ErrorRaised',
    'FunclibError',
    'InvalidConstructionError',
    'UnionTypeError',
]


class FunclibError(Exception):
    """Base class for all funclib exceptions."""


class InvalidConstructionError(FunclibError, ValueError):
    """A wrapper was constructed with a missing or malformed payload."""


class UnionTypeError(FunclibError, TypeError):
    """A value does not fit any alternative of a Union, or a Union was misused."""


class AmbiguousUnionError(UnionTypeError):
    """A value fits more than one Union alternative and none is an exact match."""

    def __init__(self, value: object, candidates: tuple[object, ...]) -> None:
        self.value = value
        self.candidates = candidates
        names = ', '.join(_type_name(c) for c in candidates)
        super().__init__(
            f'{type(value).__name__} value {value!r} matches several alternatives ({names}); '
            'use an explicit from_tN factory'
        )


class ErrorRaised(FunclibError):
    """Raisable form of an ``Error`` value - exception variant."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


def _type_name(tp: object) -> str:
    return getattr(tp, '__name__', repr(tp))
