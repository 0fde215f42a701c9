"""Closed tagged unions and the helpers their matchers share.

Every variant subclasses ``Tagged``. The discriminant is a msgspec tag (the
class name, stored under ``tag``), so variants serialize as tagged objects::

    >>> msgspec.json.encode(Ok(1))
    b'{"tag":"Ok","value":1}'
"""

from __future__ import annotations

from collections.abc import Callable
from typing import NoReturn

import msgspec

from fp_toolkit.errors import ExhaustiveMatchError

__all__ = ['Handler', 'Tagged', 'force', 'resolve', 'tag_of', 'unreachable']


type Handler[P, R] = R | Callable[[P], R]


class Tagged(msgspec.Struct, frozen=True, gc=False, tag=True, tag_field='tag'):
    """Base for one variant of a closed tagged union."""


def tag_of(value: Tagged) -> str:
    """Return the discriminant of a tagged value.

    Raises:
        ExhaustiveMatchError: If value is not a tagged variant.
    """
    if not isinstance(value, Tagged):
        unreachable(value)
    return type(value).__struct_config__.tag  # type: ignore[return-value]


def resolve[P, R](handler: Handler[P, R], payload: P) -> R:
    """Invoke handler with payload if it is callable, else return it as-is.

    A handler whose intended replacement value is itself callable must be
    wrapped, e.g. ``lambda _: fn``.
    """
    if callable(handler):
        return handler(payload)
    return handler


def force[R](handler: R | Callable[[], R]) -> R:
    """Call a zero-argument handler, or return a plain replacement value."""
    if callable(handler):
        return handler()
    return handler


def unreachable(value: object) -> NoReturn:
    """Reject a value that fell through every arm of a matcher."""
    raise ExhaustiveMatchError(value)
