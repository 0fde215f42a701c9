"""Tests for AsyncResult collection combinators."""

import pytest

from fp_toolkit import Async, AsyncResult, Err, Ok, async_
from fp_toolkit.async_ import itertools


def recorded(outcome, log, milliseconds=0):
    """An AsyncResult that logs its outcome when it runs."""

    async def _producer():
        log.append(outcome)
        return outcome

    return AsyncResult(Async(_producer).delay(milliseconds))


class TestNonShortCircuiting:
    """sequential and parallel run every entry and keep every Result."""

    @pytest.mark.asyncio
    async def test_sequential_collects_everything(self, call_log):
        entries = [recorded(Ok(0), call_log), recorded(Err('1 failed'), call_log), recorded(Ok(2), call_log)]
        assert await itertools.sequential(entries) == [Ok(0), Err('1 failed'), Ok(2)]
        assert call_log == [Ok(0), Err('1 failed'), Ok(2)]

    @pytest.mark.asyncio
    async def test_parallel_collects_everything(self, call_log):
        entries = [
            recorded(Err('slow failure'), call_log, 30),
            recorded(Ok(1), call_log, 0),
            recorded(Err('fast failure'), call_log, 10),
        ]
        assert await itertools.parallel(entries) == [Err('slow failure'), Ok(1), Err('fast failure')]
        assert len(call_log) == 3

    @pytest.mark.asyncio
    async def test_async_combinators_accept_async_results(self):
        """Async.sequential works directly on AsyncResults."""
        assert await async_.sequential([AsyncResult.ok(1), AsyncResult.err('e')]) == [Ok(1), Err('e')]


class TestCollect:
    """collect_* variants short-circuit into a single Result."""

    @pytest.mark.asyncio
    async def test_collect_sequential_all_ok(self):
        assert await itertools.collect_sequential([AsyncResult.ok(1), AsyncResult.ok(2)]) == Ok([1, 2])

    @pytest.mark.asyncio
    async def test_collect_sequential_stops_at_first_err(self, call_log):
        entries = [recorded(Ok(0), call_log), recorded(Err('stop'), call_log), recorded(Ok(2), call_log)]
        assert await itertools.collect_sequential(entries) == Err('stop')
        assert call_log == [Ok(0), Err('stop')]

    @pytest.mark.asyncio
    async def test_collect_parallel_first_err_by_position(self, call_log):
        entries = [
            recorded(Ok(0), call_log),
            recorded(Err('second'), call_log, 30),
            recorded(Err('third'), call_log, 0),
        ]
        assert await async_.collect_parallel(entries) == Err('second')
        assert len(call_log) == 3

    @pytest.mark.asyncio
    async def test_collect_parallel_all_ok(self):
        entries = [AsyncResult.ok(n) for n in range(4)]
        assert await itertools.collect_parallel(entries, limit=2) == Ok([0, 1, 2, 3])

    @pytest.mark.asyncio
    async def test_collect_empty(self):
        assert await itertools.collect_sequential([]) == Ok([])
        assert await itertools.collect_parallel([]) == Ok([])


class TestPartition:
    """Tests for partition."""

    @pytest.mark.asyncio
    async def test_partition(self):
        entries = [AsyncResult.ok(1), AsyncResult.err('a'), AsyncResult.ok(2), AsyncResult.err('b')]
        assert await async_.partition(entries) == ([1, 2], ['a', 'b'])

    def test_partition_is_lazy(self, call_log):
        itertools.partition([recorded(Ok(1), call_log)])
        assert call_log == []
