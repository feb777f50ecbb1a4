"""Map combinators

Apply a synchronous transform to the success value of an operation."""

from __future__ import annotations

from kungfu import Error, Ok, Result

from .._helpers import once
from .._types import AsyncOperation, Callback, Transform

def fmap[T, U, E](
    first: AsyncOperation[T, E],
    transform: Transform[T, U],
) -> AsyncOperation[U, E]:
    """
    Functor fmap for operations.

    Ok(t) becomes Ok(transform(t)); Error(e) passes through and
    transform is never evaluated.
    """

    def operation(callback: Callback[U, E]) -> None:
        done = once(callback)

        def on_first(outcome: Result[T, E]) -> None:
            match outcome:
                case Ok(value):
                    done(Ok(transform(value)))
                case Error(err):
                    done(Error(err))

        first(once(on_first))

    return operation

def fmap_catching[T, U, E](
    first: AsyncOperation[T, E],
    transform: Transform[T, U],
) -> AsyncOperation[U, E | Exception]:
    """
    Like fmap, but an exception raised by transform becomes Error(exc).

    **When to use:** decode/parse steps that report failure by raising.
    """

    def operation(callback: Callback[U, E | Exception]) -> None:
        done = once(callback)

        def on_first(outcome: Result[T, E]) -> None:
            match outcome:
                case Ok(value):
                    try:
                        mapped = transform(value)
                    except Exception as exc:
                        done(Error(exc))
                        return
                    done(Ok(mapped))
                case Error(err):
                    done(Error(err))

        first(once(on_first))

    return operation

__all__ = ("fmap", "fmap_catching")
