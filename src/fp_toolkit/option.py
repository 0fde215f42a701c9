"""Option type: Some[T] | Nothing for values that may be absent.

Only the two-case matcher is relied upon by ``Result`` and ``AsyncResult``;
the rest is the usual small set of combinators.

Example:
    ```python
    from fp_toolkit import option
    from fp_toolkit.compose import pipe

    pipe(
        option.of_nullable(config.get('port')),
        option.map(int),
        option.default_value(8080),
    )
    ```
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeIs

from fp_toolkit._tagged import Handler, Tagged, force, resolve, unreachable

__all__ = [
    'Nothing',
    'NothingType',
    'Option',
    'Some',
    'bind',
    'default_value',
    'default_with',
    'map',
    'match',
    'of_nullable',
]


class Some[T](Tagged, frozen=True, gc=False):
    """Some variant of Option containing a value of type T.

    Examples:
        >>> Some(42).map(lambda x: x * 2)
        Some(value=84)
    """

    value: T

    def is_some(self) -> TypeIs[Some[T]]:
        return True

    def is_none(self) -> TypeIs[NothingType]:
        return False

    def match[R](self, *, some: Handler[T, R], none: R | Callable[[], R]) -> R:
        """Apply the ``some`` handler to the contained value."""
        return resolve(some, self.value)

    def map[U](self, f: Callable[[T], U]) -> Some[U]:
        return Some(f(self.value))

    def bind[U](self, f: Callable[[T], Some[U] | NothingType]) -> Some[U] | NothingType:
        return f(self.value)

    def default_value(self, _default: T) -> T:
        return self.value

    def default_with(self, _f: Callable[[], T]) -> T:
        return self.value


class NothingType(Tagged, frozen=True, gc=False, tag='Nothing'):
    """Nothing variant of Option, representing the absence of a value.

    Use the ``Nothing`` singleton rather than instantiating this class.
    """

    def is_some(self) -> TypeIs[Some[object]]:
        return False

    def is_none(self) -> TypeIs[NothingType]:
        return True

    def match[T, R](self, *, some: Handler[T, R], none: R | Callable[[], R]) -> R:
        """Return the ``none`` handler's value."""
        return force(none)

    def map[T, U](self, _f: Callable[[T], U]) -> NothingType:
        return self

    def bind[T, U](self, _f: Callable[[T], Some[U] | NothingType]) -> NothingType:
        return self

    def default_value[T](self, default: T) -> T:
        return default

    def default_with[T](self, f: Callable[[], T]) -> T:
        return f()

    def __repr__(self) -> str:
        return 'Nothing'


Nothing = NothingType()

type Option[T] = Some[T] | NothingType


def of_nullable[T](value: T | None) -> Option[T]:
    """Wrap a value in Some, mapping None to Nothing."""
    if value is None:
        return Nothing
    return Some(value)


def match[T, R](*, some: Handler[T, R], none: R | Callable[[], R]) -> Callable[[Option[T]], R]:
    """Curried exhaustive match over an Option.

    Raises:
        ExhaustiveMatchError: If the matched value is not an Option.
    """

    def _match(opt: Option[T]) -> R:
        match opt:
            case Some(value):
                return resolve(some, value)
            case NothingType():
                return force(none)
            case _:
                unreachable(opt)

    return _match


def map[T, U](f: Callable[[T], U]) -> Callable[[Option[T]], Option[U]]:  # noqa: A001
    return match(some=lambda a: Some(f(a)), none=lambda: Nothing)


def bind[T, U](f: Callable[[T], Option[U]]) -> Callable[[Option[T]], Option[U]]:
    return match(some=f, none=lambda: Nothing)


def default_value[T](default: T) -> Callable[[Option[T]], T]:
    return match(some=lambda a: a, none=lambda: default)


def default_with[T](f: Callable[[], T]) -> Callable[[Option[T]], T]:
    return match(some=lambda a: a, none=f)
