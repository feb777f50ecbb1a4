"""
Lifting values and legacy callbacks into operations.

Functions that turn plain values, errors, futures and (result, error)
completion-handler functions into AsyncOperation.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Never

from kungfu import Error, Ok

from .._errors import MissingResultError
from .._types import AsyncOperation, Callback, CompletionHandler, Step
from ..future import Future


def pure[T](value: T) -> AsyncOperation[T, Never]:
    """
    Operation that completes immediately with Ok(value).

    Example:
        from asyncchain import lift as L

        op = L.up.pure(4)
        op(print)  # Ok(4)
    """
    def operation(callback: Callback[T, Never]) -> None:
        callback(Ok(value))

    return operation


def fail[E](error: E) -> AsyncOperation[Never, E]:
    """Operation that completes immediately with Error(error). Dual of pure()."""
    def operation(callback: Callback[Never, E]) -> None:
        callback(Error(error))

    return operation


def from_future[T](future: Future[T]) -> AsyncOperation[T, Exception]:
    """View a Future as an operation. Invoking it observes the future."""
    return future.to_operation()


def _handler_for[T](callback: Callback[T, Exception]) -> CompletionHandler[T]:
    def handler(result: T | None, error: Exception | None) -> None:
        if result is not None:
            callback(Ok(result))
        else:
            callback(Error(error if error is not None else MissingResultError()))

    return handler


def from_handler[T](
    fn: Callable[[CompletionHandler[T]], None],
) -> AsyncOperation[T, Exception]:
    """
    Adapt a completion-handler function into an operation.

    fn receives a handler(result, error). A non-None result becomes Ok(result);
    otherwise the error (or MissingResultError when both are None) becomes Error.

    Example:
        def legacy_fetch(completion):
            completion(4, None)

        op = L.up.from_handler(legacy_fetch)
    """
    def operation(callback: Callback[T, Exception]) -> None:
        fn(_handler_for(callback))

    return operation


def from_handler_step[T, U](
    fn: Callable[[T, CompletionHandler[U]], None],
) -> Step[T, U, Exception]:
    """Adapt a completion-handler function taking an argument into a Step."""
    def step(value: T, callback: Callback[U, Exception]) -> None:
        fn(value, _handler_for(callback))

    return step


__all__ = (
    "pure",
    "fail",
    "from_future",
    "from_handler",
    "from_handler_step",
)
