"""AsyncResult type: a lazy asynchronous computation that yields a Result.

AsyncResult is ``Async[Result[T, E]]`` with Result's combinators lifted over
it. It adds no state of its own: every method builds a new Async on top of
the wrapped one, so nothing runs until the AsyncResult is started, and each
start runs the whole chain again.

Example:
    ```python
    async def fetch_user(id: int) -> Result[User, ApiError]: ...

    profile = (
        AsyncResult(lambda: fetch_user(1))
        .bind(lambda user: AsyncResult(lambda: fetch_profile(user)))
        .map(render)
    )
    result = await profile  # nothing was fetched before this line
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import TYPE_CHECKING, Any

from fp_toolkit import result
from fp_toolkit._logging import get_logger
from fp_toolkit._tagged import Handler
from fp_toolkit.async_.core import Async, Producer, parallel
from fp_toolkit.result import Err, Ok, Result

if TYPE_CHECKING:
    from fp_toolkit.option import Option

__all__ = [
    'AsyncResult',
    'bind',
    'default_value',
    'default_with',
    'map',
    'map2',
    'map3',
    'map_both',
    'map_err',
    'match',
    'start',
    'tee',
    'tee_err',
]

logger = get_logger(__name__)


class AsyncResult[T, E]:
    """A deferred computation that yields ``Result[T, E]`` when started.

    Short-circuiting follows Result: once the upstream computation yields an
    Err, no success-path function further down the chain is invoked, so no
    work they would start is started.

    Exceptions raised by the wrapped producer, or by functions passed to
    ``map``/``bind`` and friends, are not converted to Err. Only
    ``try_catch`` does that.
    """

    __slots__ = ('_async',)

    def __init__(self, producer: Producer[Result[T, E]]) -> None:
        """Create an AsyncResult from a zero-argument producer of a Result.

        Args:
            producer: An Async of a Result, or any callable taking no
                arguments and returning an awaitable of a Result.
        """
        self._async: Async[Result[T, E]] = producer if isinstance(producer, Async) else Async(producer)

    def start(self) -> Awaitable[Result[T, E]]:
        """Start the computation, returning an awaitable of its Result."""
        return self._async.start()

    def __call__(self) -> Awaitable[Result[T, E]]:
        return self._async.start()

    def __await__(self) -> Generator[Any, Any, Result[T, E]]:
        return self._async.__await__()

    def to_async(self) -> Async[Result[T, E]]:
        """Return the underlying Async of Result."""
        return self._async

    # --- Constructors ---

    @classmethod
    def ok(cls, value: T) -> AsyncResult[T, E]:
        """Create an AsyncResult that yields Ok(value)."""
        return cls(Async.of(Ok(value)))

    @classmethod
    def err(cls, error: E) -> AsyncResult[T, E]:
        """Create an AsyncResult that yields Err(error)."""
        return cls(Async.of(Err(error)))

    @classmethod
    def of_result(cls, value: Result[T, E]) -> AsyncResult[T, E]:
        """Lift an already computed Result."""
        return cls(Async.of(value))

    @classmethod
    def of_async(cls, computation: Async[T]) -> AsyncResult[T, E]:
        """Lift an Async, treating its eventual value as a success."""
        return cls(computation.map(Ok))

    @classmethod
    def of_option(cls, on_none: Callable[[], E]) -> Callable[[Option[T]], AsyncResult[T, E]]:
        """Curried Option conversion; ``on_none`` runs only when started."""

        def _convert(opt: Option[T]) -> AsyncResult[T, E]:
            async def _of_option() -> Result[T, E]:
                return result.of_option(on_none)(opt)

            return cls(_of_option)

        return _convert

    @classmethod
    def try_catch(
        cls,
        producer: Producer[T],
        on_raise: Callable[[Exception], E] | None = None,
        *,
        exceptions: tuple[type[Exception], ...] = (Exception,),
    ) -> AsyncResult[T, E]:
        """Wrap async work that may raise.

        Each start awaits ``producer()``. A return value becomes Ok; an
        exception in ``exceptions`` becomes Err, transformed by ``on_raise``
        when given. Cancellation and other BaseExceptions propagate.

        Example:
            ```python
            page = AsyncResult.try_catch(lambda: client.get(url), HttpError.create)
            ```
        """

        async def _attempt() -> Result[T, E]:
            try:
                return Ok(await producer())
            except exceptions as exc:
                logger.debug('try_catch_caught', exc_type=type(exc).__name__)
                if on_raise is not None:
                    return Err(on_raise(exc))
                return Err(exc)  # type: ignore[arg-type]

        return cls(_attempt)

    # --- Combinators ---

    def match[R](self, *, ok: Handler[T, R], err: Handler[E, R]) -> Async[R]:
        """Deferred exhaustive match; yields whichever handler's result applies."""
        return self._async.map(result.match(ok=ok, err=err))

    def map[U](self, f: Callable[[T], U]) -> AsyncResult[U, E]:
        """Project the Ok value; an Err passes through unchanged."""
        return AsyncResult(self._async.map(result.map(f)))

    def map_err[F](self, f: Callable[[E], F]) -> AsyncResult[T, F]:
        """Project the Err value; an Ok passes through unchanged."""
        return AsyncResult(self._async.map(result.map_err(f)))

    def map_both[U, F](self, f: Callable[[T], U], g: Callable[[E], F]) -> AsyncResult[U, F]:
        return AsyncResult(self._async.map(result.map_both(f, g)))

    def bind[U](self, f: Callable[[T], AsyncResult[U, E]]) -> AsyncResult[U, E]:
        """Chain another fallible async step.

        ``f`` is called only when the upstream Result is Ok; on Err, the Err
        is yielded as-is and ``f`` never runs.
        """
        step: Callable[[Result[T, E]], Async[Result[U, E]]] = result.match(
            ok=lambda value: f(value).to_async(),
            err=lambda error: Async.of(Err(error)),
        )
        return AsyncResult(self._async.bind(step))

    def bind_result[U](self, f: Callable[[T], Result[U, E]]) -> AsyncResult[U, E]:
        """Chain a synchronous fallible step."""
        return AsyncResult(self._async.map(result.bind(f)))

    def tee(self, f: Callable[[T], object]) -> AsyncResult[T, E]:
        """Call ``f`` with the Ok value for its side effect once started."""
        return AsyncResult(self._async.map(result.tee(f)))

    def tee_err(self, f: Callable[[E], object]) -> AsyncResult[T, E]:
        """Call ``f`` with the Err value for its side effect once started."""
        return AsyncResult(self._async.map(result.tee_err(f)))

    def default_value(self, default: T) -> Async[T]:
        return self._async.map(result.default_value(default))

    def default_with(self, f: Callable[[], T]) -> Async[T]:
        return self._async.map(result.default_with(f))

    def __repr__(self) -> str:
        return f'AsyncResult({self._async!r})'


# --- Curried forms for pipe ---


def start[T, E](computation: AsyncResult[T, E]) -> Awaitable[Result[T, E]]:
    return computation.start()


def match[T, E, R](*, ok: Handler[T, R], err: Handler[E, R]) -> Callable[[AsyncResult[T, E]], Async[R]]:
    return lambda computation: computation.match(ok=ok, err=err)


def map[T, E, U](f: Callable[[T], U]) -> Callable[[AsyncResult[T, E]], AsyncResult[U, E]]:  # noqa: A001
    return lambda computation: computation.map(f)


def map_err[T, E, F](f: Callable[[E], F]) -> Callable[[AsyncResult[T, E]], AsyncResult[T, F]]:
    return lambda computation: computation.map_err(f)


def map_both[T, E, U, F](
    f: Callable[[T], U], g: Callable[[E], F]
) -> Callable[[AsyncResult[T, E]], AsyncResult[U, F]]:
    return lambda computation: computation.map_both(f, g)


def bind[T, E, U](
    f: Callable[[T], AsyncResult[U, E]],
) -> Callable[[AsyncResult[T, E]], AsyncResult[U, E]]:
    return lambda computation: computation.bind(f)


def tee[T, E](f: Callable[[T], object]) -> Callable[[AsyncResult[T, E]], AsyncResult[T, E]]:
    return lambda computation: computation.tee(f)


def tee_err[T, E](f: Callable[[E], object]) -> Callable[[AsyncResult[T, E]], AsyncResult[T, E]]:
    return lambda computation: computation.tee_err(f)


def default_value[T, E](default: T) -> Callable[[AsyncResult[T, E]], Async[T]]:
    return lambda computation: computation.default_value(default)


def default_with[T, E](f: Callable[[], T]) -> Callable[[AsyncResult[T, E]], Async[T]]:
    return lambda computation: computation.default_with(f)


def map2[A, B, C, E](
    f: Callable[[A, B], C],
) -> Callable[[tuple[AsyncResult[A, E], AsyncResult[B, E]]], AsyncResult[C, E]]:
    """Combine a pair of AsyncResults.

    Both run concurrently once started. All Ok: ``Ok(f(a, b))``; otherwise
    the first Err by position, whichever finished first.
    """

    def _map2(pair: tuple[AsyncResult[A, E], AsyncResult[B, E]]) -> AsyncResult[C, E]:
        both = parallel(pair).map(lambda results: result.map2(f)((results[0], results[1])))
        return AsyncResult(both)

    return _map2


def map3[A, B, C, D, E](
    f: Callable[[A, B, C], D],
) -> Callable[[tuple[AsyncResult[A, E], AsyncResult[B, E], AsyncResult[C, E]]], AsyncResult[D, E]]:
    """Combine a triple of AsyncResults; see ``map2``."""

    def _map3(
        triple: tuple[AsyncResult[A, E], AsyncResult[B, E], AsyncResult[C, E]],
    ) -> AsyncResult[D, E]:
        all_three = parallel(triple).map(
            lambda results: result.map3(f)((results[0], results[1], results[2]))
        )
        return AsyncResult(all_three)

    return _map3
