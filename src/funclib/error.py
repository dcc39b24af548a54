"""Error and Unit: the leaf value types shared by every wrapper."""

from __future__ import annotations

import msgspec

from funclib.exceptions import ErrorRaised, InvalidConstructionError

__all__ = ['Error', 'Unit', 'UnitType']


class Error(msgspec.Struct, frozen=True, gc=False):
    """An immutable, string-message failure descriptor.

    Errors are the payload of ``Invalid`` validations. They are values, not
    exceptions: use ``to_exception()`` when raise-based code needs one.

    Examples:
        >>> err = Error('name is required')
        >>> str(err)
        'name is required'
        >>> err == Error('name is required')
        True
    """

    message: str

    def __post_init__(self) -> None:
        if not isinstance(self.message, str):
            msg = f'Error message must be a str, got {type(self.message).__name__}'
            raise InvalidConstructionError(msg)

    def __str__(self) -> str:
        return self.message

    def to_exception(self) -> ErrorRaised:
        """Convert to exception for raise-based code."""
        return ErrorRaised(self.message)


class UnitType(msgspec.Struct, frozen=True, gc=False):
    """The type with exactly one value, returned where an action has no result.

    Use the ``Unit`` constant instead of instantiating directly.
    """

    def __repr__(self) -> str:
        return 'Unit'


Unit: UnitType = UnitType()
"""Singleton value returned by action-style combinators such as ``for_each``."""
