"""
AST for fluent operation chaining.

Chain builds an immutable expression tree that is lowered into a single
AsyncOperation. Each node delegates to the plain combinator functions,
so `chain(a).then(b).map(f)` behaves exactly like `fmap(sequence(a, b), f)`.

    (
        chain(fetch_count)
        .then(describe)
        .map(str.upper)
        .run(print)
    )
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ._types import AsyncOperation, Callback, Step, Transform
from .future import Future


# ============================================================================
# Nodes
# ============================================================================


class Expr[T, E]:
    """
    AST node that can be lowered into an executable AsyncOperation.
    """

    def lower(self) -> AsyncOperation[T, E]:
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class Base[T, E](Expr[T, E]):
    value: AsyncOperation[T, E]

    def lower(self) -> AsyncOperation[T, E]:
        return self.value


@dataclass(frozen=True, slots=True)
class Then[T, U, E](Expr[U, E]):
    inner: Expr[T, E]
    step: Step[T, U, E]

    def lower(self) -> AsyncOperation[U, E]:
        from .compose.sequence import sequence
        return sequence(self.inner.lower(), self.step)


@dataclass(frozen=True, slots=True)
class Map[T, U, E](Expr[U, E]):
    inner: Expr[T, E]
    transform: Transform[T, U]

    def lower(self) -> AsyncOperation[U, E]:
        from .compose.fmap import fmap
        return fmap(self.inner.lower(), self.transform)


@dataclass(frozen=True, slots=True)
class MapCatching[T, U, E](Expr[U, E | Exception]):
    inner: Expr[T, E]
    transform: Transform[T, U]

    def lower(self) -> AsyncOperation[U, E | Exception]:
        from .compose.fmap import fmap_catching
        return fmap_catching(self.inner.lower(), self.transform)


# ============================================================================
# Fluent builder
# ============================================================================


@dataclass(frozen=True, slots=True)
class Chain[T, E]:
    """
    Fluent builder for chaining operations.
    """

    expr: Expr[T, E]

    def then[U](self, step: Step[T, U, E]) -> Chain[U, E]:
        return Chain(Then(self.expr, step=step))

    def map[U](self, transform: Transform[T, U]) -> Chain[U, E]:
        return Chain(Map(self.expr, transform=transform))

    def map_catching[U](self, transform: Transform[T, U]) -> Chain[U, E | Exception]:
        return Chain(MapCatching(self.expr, transform=transform))

    def compile(self) -> AsyncOperation[T, E]:
        return self.expr.lower()

    def run(self, callback: Callback[T, E]) -> None:
        """Lower and start the chain, reporting to callback."""
        self.compile()(callback)

    def to_future(self: Chain[T, Exception]) -> Future[T]:
        from .lift.down import to_future
        return to_future(self.compile())


def chain[T, E](operation: AsyncOperation[T, E]) -> Chain[T, E]:
    """Build a Chain from an operation for fluent chaining."""
    return Chain(Base(operation))


def chain_handler[T](
    fn: Callable[..., None],
) -> Chain[T, Exception]:
    """Build a Chain from a completion-handler function (see lift.up.from_handler)."""
    from .lift.up import from_handler
    return Chain(Base(from_handler(fn)))


__all__ = (
    "Chain",
    "Expr",
    "chain",
    "chain_handler",
)
