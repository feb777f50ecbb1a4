"""
Core type definitions for asyncchain.

Aliases shared by the operation combinators and the Future/Promise pair.
"""

from __future__ import annotations

from collections.abc import Callable

from kungfu import Result

# ============================================================================
# Outcomes and callbacks
# ============================================================================

# Outcome = terminal state of one async operation: Ok(value) | Error(error)
type Outcome[T, E] = Result[T, E]

# Callback = receiver of exactly one Outcome
type Callback[T, E] = Callable[[Result[T, E]], None]

# ============================================================================
# Operations
# ============================================================================

# AsyncOperation = unit of work that reports its Outcome to a callback, at most once
type AsyncOperation[T, E] = Callable[[Callback[T, E]], None]

# Step = operation parameterised by the value produced upstream
type Step[T, U, E] = Callable[[T, Callback[U, E]], None]

# Transform = total pure function applied to a success value
type Transform[T, U] = Callable[[T], U]

# CompletionHandler = legacy (result, error) callback style
type CompletionHandler[T] = Callable[[T | None, Exception | None], None]

__all__ = (
    "Outcome",
    "Callback",
    "AsyncOperation",
    "Step",
    "Transform",
    "CompletionHandler",
)
