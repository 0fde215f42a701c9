"""Lazy asynchronous computations: Async, AsyncResult and their combinators.

- Async: a restartable producer of an awaitable value
- AsyncResult: an Async whose value is a Result, with short-circuiting combinators
- sequential / parallel: fan a list of computations in and out

Examples:
    >>> from fp_toolkit.async_ import Async, AsyncResult, parallel
    >>>
    >>> async def main():
    ...     values = await parallel([Async.of(1), Async.of(2)])
    ...     checked = await AsyncResult.ok(3).map(lambda n: n + 1)
"""

from fp_toolkit.async_.core import (
    Async,
    asyncify,
    bind,
    delay,
    flatten,
    map,  # noqa: A004
    parallel,
    sequential,
    start,
    tee,
)
from fp_toolkit.async_.itertools import (
    collect_parallel,
    collect_sequential,
    partition,
)
from fp_toolkit.async_.result import AsyncResult

__all__ = [
    'Async',
    'AsyncResult',
    'asyncify',
    'bind',
    'collect_parallel',
    'collect_sequential',
    'delay',
    'flatten',
    'map',
    'parallel',
    'partition',
    'sequential',
    'start',
    'tee',
]
