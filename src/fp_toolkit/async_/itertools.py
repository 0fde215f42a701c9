"""Collection combinators for AsyncResult.

``sequential`` and ``parallel`` run every entry and collect every Result,
failures included: an Err in one entry never stops another from running.
The ``collect_*`` variants are the short-circuiting ones and return a single
Result of list.

Example:
    ```python
    checks = [AsyncResult(lambda n=n: check(n)) for n in range(3)]

    await sequential(checks)          # [Ok(0), Err('1 failed'), Ok(2)]
    await collect_sequential(checks)  # Err('1 failed'), third check never started
    ```
"""

from __future__ import annotations

from collections.abc import Iterable

from fp_toolkit import result
from fp_toolkit.async_ import core
from fp_toolkit.async_.core import Async
from fp_toolkit.async_.result import AsyncResult
from fp_toolkit.result import Err, Ok, Result

__all__ = [
    'collect_parallel',
    'collect_sequential',
    'parallel',
    'partition',
    'sequential',
]


def sequential[T, E](computations: Iterable[AsyncResult[T, E]]) -> Async[list[Result[T, E]]]:
    """Run each AsyncResult in series and collect every Result in input order.

    Does not stop at an Err.
    """
    return core.sequential(computations)


def parallel[T, E](
    computations: Iterable[AsyncResult[T, E]],
    *,
    limit: int | None = None,
) -> Async[list[Result[T, E]]]:
    """Run all AsyncResults concurrently and collect every Result in input order.

    Does not stop at an Err. Exceptions raised by a producer still fail the
    whole computation, as with ``Async.parallel``.
    """
    return core.parallel(computations, limit=limit)


def collect_sequential[T, E](computations: Iterable[AsyncResult[T, E]]) -> AsyncResult[list[T], E]:
    """Run AsyncResults in series, stopping at the first Err.

    Entries after the first Err are never started.

    Returns:
        AsyncResult of Ok(list[T]) if every entry succeeded, else the first Err.
    """
    items = list(computations)

    async def _collect() -> Result[list[T], E]:
        values: list[T] = []
        for item in items:
            outcome = await item.start()
            if isinstance(outcome, Err):
                return outcome
            values.append(outcome.value)
        return Ok(values)

    return AsyncResult(_collect)


def collect_parallel[T, E](
    computations: Iterable[AsyncResult[T, E]],
    *,
    limit: int | None = None,
) -> AsyncResult[list[T], E]:
    """Run AsyncResults concurrently, then keep the values or the first Err by position.

    Every entry runs to completion; only the combined Result short-circuits.
    """
    return AsyncResult(parallel(computations, limit=limit).map(result.collect))


def partition[T, E](
    computations: Iterable[AsyncResult[T, E]],
    *,
    limit: int | None = None,
) -> Async[tuple[list[T], list[E]]]:
    """Run AsyncResults concurrently and split the outcomes into (oks, errs)."""

    def _split(outcomes: list[Result[T, E]]) -> tuple[list[T], list[E]]:
        oks: list[T] = []
        errs: list[E] = []
        for outcome in outcomes:
            if isinstance(outcome, Ok):
                oks.append(outcome.value)
            else:
                errs.append(outcome.error)
        return oks, errs

    return parallel(computations, limit=limit).map(_split)
