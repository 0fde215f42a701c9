"""Tests for the @safe and @safe_async decorators."""

import pytest

from fp_toolkit import AsyncResult, Err, Ok, safe, safe_async


@safe
def parse_port(text: str) -> int:
    port = int(text)
    if not 0 < port < 65536:
        raise OverflowError(f'port out of range: {port}')
    return port


class TestSafe:
    """Tests for @safe."""

    def test_success_is_ok(self):
        assert parse_port('8080') == Ok(8080)

    def test_raise_is_err_holding_the_exception(self):
        outcome = parse_port('http')
        assert isinstance(outcome, Err)
        assert isinstance(outcome.error, ValueError)

    def test_exceptions_narrow_what_is_caught(self):
        @safe(exceptions=(ValueError,))
        def strict(text: str) -> int:
            if text == '0':
                raise TypeError('zero')
            return int(text)

        assert strict('5') == Ok(5)
        assert isinstance(strict('x').error, ValueError)
        with pytest.raises(TypeError):
            strict('0')

    def test_on_raise_maps_the_error(self):
        @safe(on_raise=lambda exc: type(exc).__name__)
        def port(text: str) -> int:
            return parse_port(text).unwrap()

        assert port('70000') == Err('UnwrapError')

    def test_keeps_metadata(self):
        assert parse_port.__name__ == 'parse_port'

    def test_wraps_unbound_method(self):
        class Parser:
            def parse(self, text: str) -> int:
                return int(text)

        assert safe(Parser.parse)(Parser(), '3') == Ok(3)


class TestSafeAsync:
    """Tests for @safe_async."""

    @pytest.mark.asyncio
    async def test_returns_lazy_async_result(self, call_log):
        @safe_async
        async def fetch(key: str) -> str:
            call_log.append(key)
            return key.upper()

        pending = fetch('abc')
        assert isinstance(pending, AsyncResult)
        assert call_log == []
        assert await pending == Ok('ABC')
        assert await pending == Ok('ABC')
        assert call_log == ['abc', 'abc']

    @pytest.mark.asyncio
    async def test_raise_is_err(self):
        @safe_async
        async def fetch() -> str:
            raise ConnectionError('offline')

        outcome = await fetch()
        assert isinstance(outcome.error, ConnectionError)

    @pytest.mark.asyncio
    async def test_on_raise_maps_the_error(self):
        @safe_async(on_raise=str)
        async def fetch() -> str:
            raise ConnectionError('offline')

        assert await fetch() == Err('offline')

    @pytest.mark.asyncio
    async def test_uncaught_types_propagate(self):
        @safe_async(exceptions=(KeyError,))
        async def fetch() -> str:
            raise ValueError('not a key error')

        with pytest.raises(ValueError):
            await fetch()
