"""Decorators that adapt raising functions into Result-returning ones."""

from fp_toolkit.decorators.safe import safe, safe_async

__all__ = ['safe', 'safe_async']
