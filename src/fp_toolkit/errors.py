"""Exceptions raised by fp-toolkit itself.

Represented failures travel as ``Err`` values and are never raised. The
types below cover the two ways a caller can step outside that model: asking
a union for a variant it does not hold, and handing a matcher a value that is
not one of the union's variants.
"""

from __future__ import annotations

__all__ = [
    'ExhaustiveMatchError',
    'FpToolkitError',
    'UnwrapError',
]


class FpToolkitError(Exception):
    """Base class for errors raised by fp-toolkit."""


class ExhaustiveMatchError(FpToolkitError, TypeError):
    """A matcher received a value outside its closed set of variants."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f'unreachable variant: {value!r}')


class UnwrapError(FpToolkitError, RuntimeError):
    """A value was extracted from the wrong variant of a union."""

    def __init__(self, message: str, value: object = None) -> None:
        self.value = value
        super().__init__(message)
