"""Async type: a lazy, restartable asynchronous computation.

An awaitable such as a Task is "hot": whatever it represents is already under
way. ``Async`` wraps a zero-argument *producer* of an awaitable instead, so
that nothing runs until the computation is started, and every start runs it
again. That is what makes it possible to decide late whether a batch of work
runs in series or in parallel, and to skip work that turns out not to be
needed.

``Async`` models computations that are not expected to fail. An exception
raised by a producer propagates out of ``start`` untouched. Fallible work
belongs in ``AsyncResult``.

Example:
    ```python
    from fp_toolkit import async_
    from fp_toolkit.compose import pipe

    names = await pipe(
        [fetch_name(1), fetch_name(2)],   # list[Async[str]]
        async_.sequential,                # Async[list[str]]
        async_.map(lambda ns: [n.lower() for n in ns]),
        async_.start,
    )
    ```
"""

from __future__ import annotations

import math
from collections.abc import Awaitable, Callable, Generator, Iterable
from typing import Any

import aiologic
import anyio
import wrapt

from fp_toolkit._config import get_config
from fp_toolkit._logging import get_logger

__all__ = [
    'Async',
    'asyncify',
    'bind',
    'delay',
    'flatten',
    'map',
    'parallel',
    'sequential',
    'start',
    'tee',
]

logger = get_logger(__name__)

type Producer[T] = Callable[[], Awaitable[T]]


class Async[T]:
    """A deferred computation that yields a value of type T when started.

    Constructing an ``Async`` performs no work. ``start()``, calling the
    instance, or awaiting it invokes the producer, and does so afresh every
    time: results are never memoized.

    Attributes:
        _producer: Zero-argument callable returning an awaitable of T.

    Example:
        ```python
        async def main():
            doubled = Async.of(21).map(lambda n: n * 2)
            assert await doubled == 42
            assert await doubled.start() == 42  # runs again
        ```
    """

    __slots__ = ('_producer',)

    def __init__(self, producer: Producer[T]) -> None:
        """Create an Async from a zero-argument producer.

        Args:
            producer: Callable returning an awaitable of T. Usually an
                ``async def`` function taking no arguments.
        """
        self._producer = producer

    def start(self) -> Awaitable[T]:
        """Invoke the producer, returning the awaitable it creates."""
        return self._producer()

    def __call__(self) -> Awaitable[T]:
        return self._producer()

    def __await__(self) -> Generator[Any, Any, T]:
        return self._producer().__await__()

    @classmethod
    def of(cls, value: T) -> Async[T]:
        """Create an Async that yields ``value`` with no deferred work.

        Primarily useful for tests, or for lifting a plain value into a
        pipeline.
        """

        async def _of() -> T:
            return value

        return cls(_of)

    @classmethod
    def unit(cls) -> Async[tuple[()]]:
        """Create an Async of an empty tuple, for starting a pipeline.

        Example:
            ```python
            Async.unit().delay(5000).tee(print)  # prints () after 5 seconds
            ```
        """
        return cls.of(())  # type: ignore[arg-type]

    @classmethod
    def of_awaitable(cls, awaitable: Awaitable[T]) -> Async[T]:
        """Wrap an existing awaitable.

        This does not make the awaitable lazy. A Task or Future is already
        running; the Async only holds the reference. A bare coroutine object
        can be awaited once, so the resulting Async can be started once.
        To make a coroutine function lazy, use ``asyncify``.
        """
        return cls(lambda: awaitable)

    @classmethod
    def never(cls) -> Async[Any]:
        """Create an Async that never completes once started. Meant for tests."""

        async def _never() -> Any:
            await anyio.sleep_forever()

        return cls(_never)

    def map[U](self, f: Callable[[T], U]) -> Async[U]:
        """Project the eventual value with a sync function."""

        async def _mapped() -> U:
            return f(await self._producer())

        return Async(_mapped)

    def bind[U](self, f: Callable[[T], Async[U]]) -> Async[U]:
        """Project the eventual value into a new Async, then start and await it.

        Example:
            ```python
            await Async.of('a').bind(lambda s: Async.of(f'{s}+b'))  # 'a+b'
            ```
        """

        async def _bound() -> U:
            return await f(await self._producer())()

        return Async(_bound)

    def flatten[U](self: Async[Async[U]]) -> Async[U]:
        """Collapse an Async of an Async into a single Async."""
        return self.bind(lambda inner: inner)

    def tee(self, f: Callable[[T], object]) -> Async[T]:
        """Call ``f`` with the eventual value for its side effect; pass it through.

        ``f`` must not mutate its argument.
        """

        async def _teed() -> T:
            value = await self._producer()
            f(value)
            return value

        return Async(_teed)

    def delay(self, milliseconds: float) -> Async[T]:
        """Wait before starting the wrapped producer.

        Args:
            milliseconds: Normalized to ``max(0, floor(milliseconds))``.
                Negative, fractional and NaN values are never rejected (NaN
                waits 0); positive infinity waits forever.
        """
        wait = _normalize_delay(milliseconds)

        async def _delayed() -> T:
            logger.debug('async_delay', milliseconds=wait)
            if wait == math.inf:
                await anyio.sleep_forever()
            await anyio.sleep(wait / 1000)
            return await self._producer()

        return Async(_delayed)

    def __repr__(self) -> str:
        return f'Async({self._producer!r})'


def _normalize_delay(milliseconds: float) -> float:
    if math.isnan(milliseconds):
        return 0
    if math.isinf(milliseconds):
        return math.inf if milliseconds > 0 else 0
    return max(0, math.floor(milliseconds))


def start[T](computation: Producer[T]) -> Awaitable[T]:
    """Start a computation. Equivalent to calling it; reads better in a pipe."""
    return computation()


def sequential[T](computations: Iterable[Producer[T]]) -> Async[list[T]]:
    """Combine computations into one that runs them in series.

    Each computation is started only after the previous one has finished.
    The resulting list follows input order.

    Args:
        computations: Async values or any zero-argument awaitable producers.
            Materialized into a list immediately.
    """
    items = list(computations)

    async def _sequential() -> list[T]:
        logger.debug('sequential_start', count=len(items))
        results: list[T] = []
        for item in items:
            results.append(await item())
        return results

    return Async(_sequential)


def parallel[T](
    computations: Iterable[Producer[T]],
    *,
    limit: int | None = None,
) -> Async[list[T]]:
    """Combine computations into one that runs them concurrently.

    All computations are started inside one anyio task group. Completion
    order is unspecified, but the resulting list follows input order.

    If any computation raises, the task group cancels the others and the
    combined computation raises that exception. Several concurrent failures
    surface as an ExceptionGroup.

    Args:
        computations: Async values or any zero-argument awaitable producers.
            Materialized into a list immediately.
        limit: Maximum number running at once, enforced with an
            aiologic.CapacityLimiter. Defaults to the configured
            ``parallel_limit``; None means unlimited.

    Example:
        ```python
        slow = Async.of('slow').delay(50)
        fast = Async.of('fast').delay(10)
        await parallel([slow, fast])  # ['slow', 'fast']
        ```
    """
    items = list(computations)

    async def _parallel() -> list[T]:
        capacity = limit if limit is not None else get_config().parallel_limit
        limiter = aiologic.CapacityLimiter(capacity) if capacity is not None else None
        results: list[Any] = [None] * len(items)

        async def run_one(i: int, item: Producer[T]) -> None:
            if limiter is None:
                results[i] = await item()
                return
            async with limiter:
                results[i] = await item()

        logger.debug('parallel_start', count=len(items), limit=capacity)
        try:
            async with anyio.create_task_group() as tg:
                for i, item in enumerate(items):
                    tg.start_soon(run_one, i, item)
        except ExceptionGroup as group:
            if len(group.exceptions) == 1:
                raise group.exceptions[0] from None
            raise
        return results

    return Async(_parallel)


def asyncify[**P, T](func: Callable[P, Awaitable[T]]) -> Callable[P, Async[T]]:
    """Turn a function returning an awaitable into one returning an Async.

    Calling the decorated function only captures its arguments; the original
    function runs each time the returned Async is started.

    Example:
        ```python
        @asyncify
        async def fetch(url: str) -> bytes: ...

        page = fetch('https://example.com')  # nothing requested yet
        body = await page
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[P, Awaitable[T]],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Async[T]:
        return Async(lambda: wrapped(*args, **kwargs))

    return wrapper(func)


# --- Curried forms for pipe ---


def map[T, U](f: Callable[[T], U]) -> Callable[[Async[T]], Async[U]]:  # noqa: A001
    return lambda computation: computation.map(f)


def bind[T, U](f: Callable[[T], Async[U]]) -> Callable[[Async[T]], Async[U]]:
    return lambda computation: computation.bind(f)


def flatten[T](computation: Async[Async[T]]) -> Async[T]:
    return computation.flatten()


def tee[T](f: Callable[[T], object]) -> Callable[[Async[T]], Async[T]]:
    return lambda computation: computation.tee(f)


def delay[T](milliseconds: float) -> Callable[[Async[T]], Async[T]]:
    """Curried ``Async.delay``."""
    return lambda computation: computation.delay(milliseconds)
