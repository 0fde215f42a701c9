"""Composition utilities: pipe() and flow()."""

from fp_toolkit.compose.pipe import flow, pipe

__all__ = [
    'flow',
    'pipe',
]
