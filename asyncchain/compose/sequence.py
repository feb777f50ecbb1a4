"""Sequence combinators

Chain an operation into a step that consumes its success value.
Errors short-circuit: downstream steps never start."""

from __future__ import annotations

from functools import reduce
from typing import Any

from kungfu import Error, Ok, Result

from .._helpers import once
from .._types import AsyncOperation, Callback, Step

def sequence[T, U, E](
    first: AsyncOperation[T, E],
    step: Step[T, U, E],
) -> AsyncOperation[U, E]:
    """
    Compose operation -> step.

    - On Ok(t): runs step(t, ...) and passes its outcome through unchanged
    - On Error(e): completes with Error(e), step is never invoked
    """

    def operation(callback: Callback[U, E]) -> None:
        done = once(callback)

        def on_first(outcome: Result[T, E]) -> None:
            match outcome:
                case Ok(value):
                    step(value, done)
                case Error(err):
                    done(Error(err))

        first(once(on_first))

    return operation

def sequence_all(
    first: AsyncOperation[Any, Any],
    *steps: Step[Any, Any, Any],
) -> AsyncOperation[Any, Any]:
    """Left fold of sequence over steps: first -> steps[0] -> steps[1] -> ..."""
    return reduce(sequence, steps, first)

__all__ = ("sequence", "sequence_all")
