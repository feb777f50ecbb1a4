"""
Future / Promise
================

Read-only Future handles settled exactly once by their paired Promise,
with observer registration and chained/transformed combinators.
"""

from .future import Future, Promise

__all__ = (
    "Future",
    "Promise",
)
