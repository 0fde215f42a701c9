"""Result type: Ok[T] | Err[E] for explicit, typed failure.

Result is not meant to replace exceptions, but to give failures that are
part of a function's contract a value to travel in. Every combinator exists
twice: as a method on ``Ok``/``Err`` and as a curried module function meant
for ``pipe``.

Example:
    ```python
    from fp_toolkit import result
    from fp_toolkit.compose import pipe

    pipe(
        result.try_catch(read_file),
        result.map_err(FileError.create),
        result.bind(lambda text: result.try_catch(lambda: transmit(text))),
        result.map(lambda response: response.status),
        result.default_value('failed'),
    )
    # 'pending' if everything worked, 'failed' if anything fell down
    ```
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, NoReturn, TypeIs

from fp_toolkit._logging import get_logger
from fp_toolkit._tagged import Handler, Tagged, resolve, unreachable
from fp_toolkit.errors import UnwrapError

if TYPE_CHECKING:
    from fp_toolkit.option import Option

__all__ = [
    'Err',
    'Ok',
    'Result',
    'bind',
    'collect',
    'default_value',
    'default_with',
    'err',
    'is_err',
    'is_ok',
    'map',
    'map2',
    'map3',
    'map_both',
    'map_err',
    'match',
    'of',
    'of_option',
    'ok',
    'tee',
    'tee_err',
    'try_catch',
]

logger = get_logger(__name__)


class Ok[T](Tagged, frozen=True, gc=False):
    """Success variant of Result containing a value of type T.

    Examples:
        >>> Ok(42).map(lambda x: x * 2)
        Ok(value=84)
        >>> Ok(42).match(ok=str, err='failed')
        '42'
    """

    value: T

    def is_ok(self) -> TypeIs[Ok[T]]:
        """Return True since this is Ok.

        This method provides type narrowing - after checking is_ok(),
        the type checker knows the result is Ok[T].
        """
        return True

    def is_err(self) -> TypeIs[Err[object]]:
        """Return False since this is Ok."""
        return False

    def match[R](self, *, ok: Handler[T, R], err: Handler[Any, R]) -> R:
        """Resolve the ``ok`` handler against the contained value."""
        return resolve(ok, self.value)

    def map[U](self, f: Callable[[T], U]) -> Ok[U]:
        """Apply a function to the contained value.

        Args:
            f: Function to apply to the Ok value.

        Returns:
            Ok containing the result of applying f to the value.
        """
        return Ok(f(self.value))

    def map_err[F](self, _f: Callable[[Any], F]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def map_both[U, F](self, f: Callable[[T], U], _g: Callable[[Any], F]) -> Ok[U]:
        """Apply ``f`` to the contained value; ``_g`` is never called."""
        return Ok(f(self.value))

    def bind[U, E](self, f: Callable[[T], Ok[U] | Err[E]]) -> Ok[U] | Err[E]:
        """Apply a function that returns a Result to the contained value.

        Also known as flatmap or and_then.

        Args:
            f: Function that takes T and returns Result[U, E].

        Returns:
            The Result returned by f.
        """
        return f(self.value)

    def default_value(self, _default: T) -> T:
        """Return the contained Ok value, ignoring the default."""
        return self.value

    def default_with(self, _f: Callable[[], T]) -> T:
        """Return the contained Ok value, ignoring the fallback function."""
        return self.value

    def tee(self, f: Callable[[T], object]) -> Ok[T]:
        """Call ``f`` with the contained value for its side effect and return self.

        ``f`` must not mutate its argument.
        """
        f(self.value)
        return self

    def tee_err(self, _f: Callable[[Any], object]) -> Ok[T]:
        """Return self unchanged since this is Ok."""
        return self

    def unwrap(self) -> T:
        """Return the contained Ok value."""
        return self.value

    def unwrap_err(self) -> NoReturn:
        """Raise since Ok holds no error.

        Raises:
            UnwrapError: Always.
        """
        raise UnwrapError(f'called unwrap_err() on Ok({self.value!r})', self.value)

    def expect(self, _msg: str) -> T:
        """Return the contained Ok value, ignoring the message."""
        return self.value


class Err[E](Tagged, frozen=True, gc=False):
    """Error variant of Result containing an error of type E.

    Examples:
        >>> Err('cheese melted').map_err(len)
        Err(error=13)
        >>> Err('boom').default_value(0)
        0
    """

    error: E

    def is_ok(self) -> TypeIs[Ok[object]]:
        """Return False since this is Err."""
        return False

    def is_err(self) -> TypeIs[Err[E]]:
        """Return True since this is Err.

        This method provides type narrowing - after checking is_err(),
        the type checker knows the result is Err[E].
        """
        return True

    def match[R](self, *, ok: Handler[Any, R], err: Handler[E, R]) -> R:
        """Resolve the ``err`` handler against the contained error."""
        return resolve(err, self.error)

    def map[T, U](self, _f: Callable[[T], U]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def map_err[F](self, f: Callable[[E], F]) -> Err[F]:
        """Apply a function to the contained error.

        Args:
            f: Function to apply to the error value.

        Returns:
            Err containing the transformed error.
        """
        return Err(f(self.error))

    def map_both[T, U, F](self, _f: Callable[[T], U], g: Callable[[E], F]) -> Err[F]:
        """Apply ``g`` to the contained error; ``_f`` is never called."""
        return Err(g(self.error))

    def bind[T, U](self, _f: Callable[[T], Ok[U] | Err[E]]) -> Err[E]:
        """Return self unchanged; ``_f`` is never called."""
        return self

    def default_value[T](self, default: T) -> T:
        """Return the default value since this is Err."""
        return default

    def default_with[T](self, f: Callable[[], T]) -> T:
        """Compute and return a default value since this is Err."""
        return f()

    def tee[T](self, _f: Callable[[T], object]) -> Err[E]:
        """Return self unchanged since this is Err."""
        return self

    def tee_err(self, f: Callable[[E], object]) -> Err[E]:
        """Call ``f`` with the contained error for its side effect and return self.

        ``f`` must not mutate its argument.
        """
        f(self.error)
        return self

    def unwrap(self) -> NoReturn:
        """Raise since Err holds no value.

        Raises:
            UnwrapError: Always. Chained from the error when it is an exception.
        """
        cause = self.error if isinstance(self.error, BaseException) else None
        raise UnwrapError(f'called unwrap() on Err({self.error!r})', self.error) from cause

    def unwrap_err(self) -> E:
        """Return the contained error."""
        return self.error

    def expect(self, msg: str) -> NoReturn:
        """Raise with a custom message.

        Raises:
            UnwrapError: Always, with the custom message.
        """
        raise UnwrapError(f'{msg}: {self.error!r}', self.error)


type Result[T, E = Exception] = Ok[T] | Err[E]


# --- Constructors and predicates ---


def ok[T](value: T) -> Ok[T]:
    """Construct an Ok."""
    return Ok(value)


of = ok


def err[E](error: E) -> Err[E]:
    """Construct an Err."""
    return Err(error)


def is_ok[T, E](result: Result[T, E]) -> TypeIs[Ok[T]]:
    return isinstance(result, Ok)


def is_err[T, E](result: Result[T, E]) -> TypeIs[Err[E]]:
    return isinstance(result, Err)


# --- Curried combinators ---


def match[T, E, R](*, ok: Handler[T, R], err: Handler[E, R]) -> Callable[[Result[T, E]], R]:
    """Curried exhaustive match over a Result.

    Each handler is either a plain replacement value or a function of the
    variant's payload.

    Example:
        ```python
        pipe(Err('failure'), match(ok=len, err=lambda s: f'{s}!'))
        # 'failure!'
        ```

    Raises:
        ExhaustiveMatchError: If the matched value is neither Ok nor Err.
    """

    def _match(result: Result[T, E]) -> R:
        match result:
            case Ok(value):
                return resolve(ok, value)
            case Err(error):
                return resolve(err, error)
            case _:
                unreachable(result)

    return _match


def map[T, E, U](f: Callable[[T], U]) -> Callable[[Result[T, E]], Result[U, E]]:  # noqa: A001
    """Project the Ok value; Err passes through unchanged."""
    return match(ok=lambda a: Ok(f(a)), err=Err)


def map_err[T, E, F](f: Callable[[E], F]) -> Callable[[Result[T, E]], Result[T, F]]:
    """Project the Err value; Ok passes through unchanged."""
    return match(ok=Ok, err=lambda e: Err(f(e)))


def map_both[T, E, U, F](
    f: Callable[[T], U], g: Callable[[E], F]
) -> Callable[[Result[T, E]], Result[U, F]]:
    """Project both branches. Equivalent to ``map(f)`` followed by ``map_err(g)``."""
    return match(ok=lambda a: Ok(f(a)), err=lambda e: Err(g(e)))


def bind[T, E, U](f: Callable[[T], Result[U, E]]) -> Callable[[Result[T, E]], Result[U, E]]:
    """Project the Ok value with a Result-returning function and flatten.

    ``f`` is never invoked for an Err.
    """
    return match(ok=f, err=Err)


def default_value[T, E](default: T) -> Callable[[Result[T, E]], T]:
    """Return the Ok value, or ``default`` for an Err."""
    return match(ok=lambda a: a, err=lambda _: default)


def default_with[T, E](f: Callable[[], T]) -> Callable[[Result[T, E]], T]:
    """Return the Ok value, or compute a default for an Err."""
    return match(ok=lambda a: a, err=lambda _: f())


def tee[T, E](f: Callable[[T], object]) -> Callable[[Result[T, E]], Result[T, E]]:
    """Call ``f`` with the Ok value for its side effect; the Result is unchanged.

    Useful for trace logging. ``f`` must not mutate its argument.
    """

    def _tee(a: T) -> Result[T, E]:
        f(a)
        return Ok(a)

    return match(ok=_tee, err=Err)


def tee_err[T, E](f: Callable[[E], object]) -> Callable[[Result[T, E]], Result[T, E]]:
    """Call ``f`` with the Err value for its side effect; the Result is unchanged."""

    def _tee(e: E) -> Result[T, E]:
        f(e)
        return Err(e)

    return match(ok=Ok, err=_tee)


def map2[A, B, C, E](
    f: Callable[[A, B], C],
) -> Callable[[tuple[Result[A, E], Result[B, E]]], Result[C, E]]:
    """Combine a pair of Results sharing an error type.

    Both Ok: ``Ok(f(a, b))``. Otherwise the first Err in positional order;
    later Errs are ignored.
    """

    def _map2(results: tuple[Result[A, E], Result[B, E]]) -> Result[C, E]:
        first, second = results
        if isinstance(first, Err):
            return first
        if isinstance(second, Err):
            return second
        return Ok(f(first.value, second.value))

    return _map2


def map3[A, B, C, D, E](
    f: Callable[[A, B, C], D],
) -> Callable[[tuple[Result[A, E], Result[B, E], Result[C, E]]], Result[D, E]]:
    """Combine a triple of Results sharing an error type.

    All Ok: ``Ok(f(a, b, c))``. Otherwise the first Err in positional order.
    """

    def _map3(results: tuple[Result[A, E], Result[B, E], Result[C, E]]) -> Result[D, E]:
        first, second, third = results
        for result in results:
            if isinstance(result, Err):
                return result
        return Ok(f(first.value, second.value, third.value))  # type: ignore[union-attr]

    return _map3


def try_catch[T, E](
    f: Callable[[], T],
    on_raise: Callable[[Exception], E] | None = None,
    *,
    exceptions: tuple[type[Exception], ...] = (Exception,),
) -> Result[T, E]:
    """Invoke ``f`` eagerly, turning a raised exception into an Err.

    Args:
        f: Zero-argument function that may raise.
        on_raise: Optional transform from the raised exception to the error
            value. Without it, the exception itself becomes the error.
        exceptions: Exception types to catch. Anything else propagates.

    Returns:
        Ok(f()) if f returns, otherwise Err of the (transformed) exception.

    Example:
        ```python
        try_catch(lambda: int('nope'))
        # Err(error=ValueError("invalid literal for int() with base 10: 'nope'"))
        try_catch(lambda: int('nope'), lambda exc: 'not a number')
        # Err(error='not a number')
        ```
    """
    try:
        return Ok(f())
    except exceptions as exc:
        logger.debug('try_catch_caught', exc_type=type(exc).__name__)
        if on_raise is not None:
            return Err(on_raise(exc))
        return Err(exc)  # type: ignore[arg-type]


def of_option[T, E](on_none: Callable[[], E]) -> Callable[[Option[T]], Result[T, E]]:
    """Convert an Option: ``Some(a) -> Ok(a)``, ``Nothing -> Err(on_none())``."""
    from fp_toolkit import option

    return option.match(some=Ok, none=lambda: Err(on_none()))


def collect[T, E](results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Collect an iterable of Results into a Result of list.

    Short-circuits on the first Err encountered; the rest of the iterable is
    not consumed.

    Examples:
        >>> collect([Ok(1), Ok(2), Ok(3)])
        Ok(value=[1, 2, 3])
        >>> collect([Ok(1), Err('fail'), Ok(3)])
        Err(error='fail')
    """
    values: list[T] = []
    for result in results:
        if isinstance(result, Err):
            return result
        values.append(result.value)
    return Ok(values)