"""
Running operations.

Start an operation and capture its outcome in a Future.
"""

from __future__ import annotations

from .._helpers import once
from .._types import AsyncOperation
from ..future import Future, Promise


def to_future[T](operation: AsyncOperation[T, Exception]) -> Future[T]:
    """
    Start operation and return a Future of its outcome.

    **When to use:** hand an operation chain to code that works with futures,
    or observe the same outcome from several places.

    Example:
        from asyncchain import lift as L

        future = L.down.to_future(sequence(fetch, parse))
        future.observe(render)
        future.observe(audit)
    """
    promise: Promise[T] = Promise()
    operation(once(promise.settle))
    return promise.future


__all__ = ("to_future",)
