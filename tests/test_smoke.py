"""Smoke tests to verify package structure and imports work."""


def test_import_types():
    """Test that core types can be imported."""
    from funclib import Either, Error, Nothing, Option, Some, Union, Unit, Validation, ValueOrException

    assert Some is not None
    assert Nothing is not None
    assert Option is not None
    assert Either is not None
    assert Validation is not None
    assert ValueOrException is not None
    assert Union is not None
    assert Error is not None
    assert Unit is not None


def test_import_factories():
    """Test that factory functions can be imported."""
    from funclib import invalid, option, sequence, valid, value_or_exception

    assert callable(option)
    assert callable(valid)
    assert callable(invalid)
    assert callable(sequence)
    assert callable(value_or_exception)


def test_import_decorators():
    """Test that decorators can be imported."""
    from funclib import capture, capture_async, memoize, memoize_async

    assert callable(capture)
    assert callable(capture_async)
    assert callable(memoize)
    assert callable(memoize_async)


def test_submodule_imports():
    """Test that submodule imports work."""
    from funclib.either import Left, Right  # noqa: F401
    from funclib.error import Error, Unit  # noqa: F401
    from funclib.exceptions import FunclibError, InvalidConstructionError  # noqa: F401
    from funclib.fn import compose, partial_apply, pipe  # noqa: F401
    from funclib.memo import Memoizer, memoize  # noqa: F401
    from funclib.option import Nothing, Some, option  # noqa: F401
    from funclib.seq import first_or, head  # noqa: F401
    from funclib.union import Union  # noqa: F401
    from funclib.validation import Invalid, Valid, sequence  # noqa: F401
    from funclib.value_or_exception import Exceptional, Success, capture  # noqa: F401

    assert True  # If we get here, all imports worked


def test_all_exports_resolve():
    """Every name in __all__ is an attribute of the package."""
    import funclib

    for name in funclib.__all__:
        assert hasattr(funclib, name), name
