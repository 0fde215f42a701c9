"""pipe() and flow(): left-to-right function composition."""

from __future__ import annotations

from collections.abc import Callable
from functools import reduce
from typing import Any, TypeVar, overload

__all__ = ['flow', 'pipe']

T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')
T5 = TypeVar('T5')
T6 = TypeVar('T6')


# Overloads for type inference (up to 6 functions)
@overload
def pipe(value: T, /) -> T: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], /) -> T1: ...
@overload
def pipe(value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], /) -> T2: ...
@overload
def pipe(
    value: T, fn1: Callable[[T], T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /
) -> T3: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> T4: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    /,
) -> T5: ...
@overload
def pipe(
    value: T,
    fn1: Callable[[T], T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    fn5: Callable[[T4], T5],
    fn6: Callable[[T5], T6],
    /,
) -> T6: ...
@overload
def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any: ...


def pipe(value: Any, /, *fns: Callable[[Any], Any]) -> Any:
    """Thread a value through functions, left to right.

    Unlike a Result pipeline, pipe itself neither wraps nor short-circuits:
    ``pipe(x, f, g)`` is exactly ``g(f(x))``. The curried combinators of
    ``result``, ``option`` and ``async_`` are written to slot into it.

    Example:
        ```python
        pipe(Ok(2), result.map(lambda n: n + 3), result.default_value(0))
        # 5
        ```
    """
    return reduce(lambda acc, fn: fn(acc), fns, value)


@overload
def flow(fn1: Callable[..., T1], /) -> Callable[..., T1]: ...
@overload
def flow(fn1: Callable[..., T1], fn2: Callable[[T1], T2], /) -> Callable[..., T2]: ...
@overload
def flow(
    fn1: Callable[..., T1], fn2: Callable[[T1], T2], fn3: Callable[[T2], T3], /
) -> Callable[..., T3]: ...
@overload
def flow(
    fn1: Callable[..., T1],
    fn2: Callable[[T1], T2],
    fn3: Callable[[T2], T3],
    fn4: Callable[[T3], T4],
    /,
) -> Callable[..., T4]: ...
@overload
def flow(fn1: Callable[..., Any], /, *fns: Callable[[Any], Any]) -> Callable[..., Any]: ...


def flow(fn1: Callable[..., Any], /, *fns: Callable[[Any], Any]) -> Callable[..., Any]:
    """Compose functions left to right into a new function.

    The first function may take any arguments; each later one receives the
    previous one's return value.

    Example:
        ```python
        parse = flow(str.strip, int, result.ok)
        parse(' 42 ')  # Ok(value=42)
        ```
    """

    def _flowed(*args: Any, **kwargs: Any) -> Any:
        return pipe(fn1(*args, **kwargs), *fns)

    return _flowed
