"""Decorators that turn raising functions into Result-returning ones."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import wrapt

from fp_toolkit.async_.result import AsyncResult
from fp_toolkit.result import Result, try_catch

__all__ = ['safe', 'safe_async']

type ExceptionTypes = tuple[type[Exception], ...]


def _decorator(
    adapt: Callable[[Callable[[], Any]], Any],
    func: Callable[..., Any] | None,
) -> Any:
    @wrapt.decorator
    def wrapper(wrapped: Callable[..., Any], instance: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Any:
        return adapt(lambda: wrapped(*args, **kwargs))

    return wrapper if func is None else wrapper(func)


@overload
def safe[**P, T](func: Callable[P, T]) -> Callable[P, Result[T, Exception]]: ...


@overload
def safe[**P, T](
    func: None = None,
    *,
    exceptions: ExceptionTypes = ...,
    on_raise: Callable[[Exception], Any] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, Result[T, Any]]]: ...


def safe(
    func: Callable[..., Any] | None = None,
    *,
    exceptions: ExceptionTypes = (Exception,),
    on_raise: Callable[[Exception], Any] | None = None,
) -> Any:
    """Make every call return ``Ok(value)``, or ``Err`` when it raises.

    Calls are routed through ``result.try_catch``, so only ``exceptions``
    become ``Err``; anything else propagates. ``on_raise`` maps the caught
    exception to the error value.

    Example:
        ```python
        @safe
        def divide(a: int, b: int) -> float:
            return a / b

        divide(10, 2)  # Ok(value=5.0)
        divide(10, 0)  # Err(error=ZeroDivisionError('division by zero'))

        @safe(exceptions=(KeyError,), on_raise=lambda exc: f'missing {exc}')
        def lookup(key: str) -> int: ...
        ```
    """
    return _decorator(lambda call: try_catch(call, on_raise, exceptions=exceptions), func)


@overload
def safe_async[**P, T](func: Callable[P, Awaitable[T]]) -> Callable[P, AsyncResult[T, Exception]]: ...


@overload
def safe_async[**P, T](
    func: None = None,
    *,
    exceptions: ExceptionTypes = ...,
    on_raise: Callable[[Exception], Any] | None = None,
) -> Callable[[Callable[P, Awaitable[T]]], Callable[P, AsyncResult[T, Any]]]: ...


def safe_async(
    func: Callable[..., Awaitable[Any]] | None = None,
    *,
    exceptions: ExceptionTypes = (Exception,),
    on_raise: Callable[[Exception], Any] | None = None,
) -> Any:
    """Async counterpart of ``safe`` returning a lazy AsyncResult.

    Calling the decorated function only captures its arguments. The function
    runs, and its exceptions are converted, each time the AsyncResult starts.
    """
    return _decorator(lambda call: AsyncResult.try_catch(call, on_raise, exceptions=exceptions), func)
