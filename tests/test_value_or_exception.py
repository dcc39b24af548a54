"""Tests for ValueOrException type and the capture decorators."""

import asyncio

import pytest
from funclib import (
    Exceptional,
    InvalidConstructionError,
    Success,
    Unit,
    capture,
    capture_async,
    value_or_exception,
)
from hypothesis import given

from tests.strategies import exceptions, int_functions, integers


class TestValueOrExceptionCreation:
    """Tests for Success, Exceptional and value_or_exception()."""

    def test_success(self):
        """Success carries a value."""
        assert Success(3).value == 3
        assert Success(3).is_success()
        assert not Success(3).is_exception()

    def test_exceptional(self, sample_fault):
        """Exceptional carries the fault itself."""
        result = Exceptional(sample_fault)
        assert result.fault is sample_fault
        assert result.is_exception()

    def test_exceptional_requires_exception(self):
        """An Exceptional without a fault fails fast."""
        with pytest.raises(InvalidConstructionError):
            Exceptional(None)  # type: ignore[arg-type]

    def test_value_or_exception(self, sample_fault):
        """Exception instances become Exceptional, anything else Success."""
        assert value_or_exception(1) == Success(1)
        assert value_or_exception(sample_fault).fault is sample_fault

    def test_str(self):
        """Both variants render compactly."""
        assert str(Success(5)) == 'Success(5)'
        assert str(Exceptional(ValueError('bad input'))) == 'Exception(bad input)'


class TestValueOrExceptionCombinators:
    """Tests for match, map, bind and apply."""

    def test_match(self, sample_fault):
        """match() dispatches on the variant."""
        assert Success(2).match(lambda e: 'failed', lambda v: v * 2) == 4
        assert Exceptional(sample_fault).match(lambda e: str(e), lambda v: v) == 'test error'

    def test_map_success(self):
        """map() transforms a Success value."""
        assert Success(10).map(lambda x: x // 2) == Success(5)

    def test_map_does_not_curry(self):
        """map() calls f with the value, so a two-argument f raises."""
        with pytest.raises(TypeError):
            Success(1).map(lambda a, b: a + b)

    def test_map_keeps_identical_fault(self, sample_fault):
        """map() passes the same fault object along without calling f."""
        result = Exceptional(sample_fault).map(lambda x: pytest.fail('called'))
        assert result.fault is sample_fault

    def test_map_does_not_catch(self):
        """Exceptions raised by the mapped function propagate."""
        with pytest.raises(ZeroDivisionError):
            Success(1).map(lambda x: x / 0)

    def test_bind(self, sample_fault):
        """bind() chains on Success and short-circuits on Exceptional."""
        assert Success(1).bind(lambda x: Success(x + 1)) == Success(2)
        failed = Exceptional(sample_fault)
        assert failed.bind(lambda x: pytest.fail('called')) is failed

    def test_apply(self):
        """Success(f).apply(Success(x)) is Success(f(x)), curried."""
        assert Success(lambda a, b: a - b).apply(Success(5)).apply(Success(3)) == Success(2)

    def test_apply_function_side_first(self):
        """When both sides are Exceptional the function side's fault is kept."""
        fn_fault = RuntimeError('fn')
        arg_fault = RuntimeError('arg')
        result = Exceptional(fn_fault).apply(Exceptional(arg_fault))
        assert result.fault is fn_fault

    def test_apply_argument_fault(self):
        """An Exceptional argument is returned with its fault."""
        fault = RuntimeError('arg')
        assert Success(lambda x: x).apply(Exceptional(fault)).fault is fault

    @given(integers, int_functions, int_functions)
    def test_functor_composition(self, value, f, g):
        """s.map(f).map(g) == s.map(g . f)."""
        assert Success(value).map(f).map(g) == Success(value).map(lambda x: g(f(x)))

    @given(exceptions)
    def test_fault_identity_through_chain(self, fault):
        """A fault survives a chain of combinators unchanged."""
        result = Exceptional(fault).map(str).bind(Success).apply(Success(1))
        assert result.fault is fault


class TestValueOrExceptionExtraction:
    """Tests for for_each, defaults and unwrap."""

    def test_for_each(self, sample_fault):
        """for_each() runs only on Success."""
        seen: list[int] = []
        assert Success(1).for_each(seen.append) == Success(Unit)
        Exceptional(sample_fault).for_each(seen.append)
        assert seen == [1]

    def test_get_value_or_else(self, sample_fault):
        """Defaults replace only a fault."""
        assert Success(1).get_value_or_else(0) == 1
        assert Exceptional(sample_fault).get_value_or_else(0) == 0

    def test_get_value_or_else_with_receives_fault(self, sample_fault):
        """The factory is given the fault."""
        assert Exceptional(sample_fault).get_value_or_else_with(str) == 'test error'

    def test_unwrap(self, sample_fault):
        """unwrap() returns the value or raises the captured fault."""
        assert Success(1).unwrap() == 1
        with pytest.raises(ValueError, match='test error') as info:
            Exceptional(sample_fault).unwrap()
        assert info.value is sample_fault


class TestCapture:
    """Tests for the @capture decorator."""

    def test_capture_success(self):
        """A normal return is wrapped in Success."""

        @capture
        def divide(a, b):
            return a / b

        assert divide(10, 2) == Success(5.0)

    def test_capture_exception(self):
        """A raised exception is wrapped in Exceptional."""

        @capture
        def divide(a, b):
            return a / b

        result = divide(10, 0)
        assert result.is_exception()
        assert isinstance(result.fault, ZeroDivisionError)

    def test_capture_specific_exceptions(self):
        """Only the listed exception types are captured."""

        @capture(exceptions=(ValueError,))
        def parse(text):
            if text == 'boom':
                raise KeyError(text)
            return int(text)

        assert parse('4') == Success(4)
        assert parse('x').is_exception()
        with pytest.raises(KeyError):
            parse('boom')

    def test_capture_preserves_metadata(self):
        """The wrapper keeps the wrapped function's name and docstring."""

        @capture
        def documented():
            """Docstring."""
            return 1

        assert documented.__name__ == 'documented'
        assert documented.__doc__ == 'Docstring.'

    def test_capture_method(self):
        """capture works on methods."""

        class Parser:
            @capture
            def parse(self, text):
                return int(text)

        assert Parser().parse('3') == Success(3)
        assert Parser().parse('x').is_exception()


class TestCaptureAsync:
    """Tests for the @capture_async decorator."""

    async def test_capture_async_success(self):
        """An awaited return is wrapped in Success."""

        @capture_async
        async def fetch(value):
            await asyncio.sleep(0)
            return value

        assert await fetch(3) == Success(3)

    async def test_capture_async_exception(self):
        """An awaited raise is wrapped in Exceptional."""

        @capture_async
        async def fetch():
            await asyncio.sleep(0)
            raise ConnectionError('offline')

        result = await fetch()
        assert isinstance(result.fault, ConnectionError)

    async def test_capture_async_specific_exceptions(self):
        """Unlisted exception types propagate."""

        @capture_async(exceptions=(ValueError,))
        async def fetch():
            raise KeyError('missing')

        with pytest.raises(KeyError):
            await fetch()
