"""Future / Promise

A Future is a read-only handle to an outcome that may not exist yet.
A Promise is the single write capability that settles one Future.

Producers keep the Promise and hand out `promise.future`; consumers can
only observe. Settlement is write-once and every observer receives the
outcome exactly once, in registration order."""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable, Sequence
from typing import Any

from kungfu import Error, Ok, Result

from .._errors import PromiseSettledError
from .._types import AsyncOperation, Callback

logger = logging.getLogger(__name__)

# Per-thread queue of settlements awaiting delivery; None when idle.
_delivery = threading.local()

class Future[T]:
    """
    Pending or settled asynchronous result.

    Observers registered before settlement are stored and called at settlement;
    observers registered afterwards are called immediately with the cached outcome.
    """

    __slots__ = ("_outcome", "_observers", "_lock")

    def __init__(self) -> None:
        self._outcome: Result[T, Exception] | None = None
        self._observers: list[Callback[T, Exception]] = []
        self._lock = threading.Lock()

    @staticmethod
    def resolved[V](value: V) -> Future[V]:
        """Future already settled with a value."""
        future: Future[V] = Future()
        future._settle(Ok(value))
        return future

    @staticmethod
    def rejected(error: Exception) -> Future[Any]:
        """Future already settled with an error."""
        future: Future[Any] = Future()
        future._settle(Error(error))
        return future

    # State

    @property
    def is_settled(self) -> bool:
        return self._outcome is not None

    @property
    def outcome(self) -> Result[T, Exception] | None:
        """Cached outcome, or None while pending."""
        return self._outcome

    # Observation

    def observe(self, callback: Callback[T, Exception], /) -> Future[T]:
        """
        Register callback for the outcome.

        If already settled, callback runs synchronously before observe returns.
        Returns self so observers can be stacked.
        """
        with self._lock:
            outcome = self._outcome
            if outcome is None:
                self._observers.append(callback)
                return self
        self._deliver(callback, outcome)
        return self

    # Chaining

    def chained[U](self, closure: Callable[[T], Future[U]], /) -> Future[U]:
        """
        Continue with another async step once this future succeeds.

        - On Error: the result is rejected with the same error, closure never runs
        - Closure raises, or returns something without observe: the result is
          rejected with the raised exception
        - Otherwise: the result mirrors the future returned by closure
        """
        promise: Promise[U] = Promise()

        def on_outcome(outcome: Result[T, Exception]) -> None:
            match outcome:
                case Ok(value):
                    try:
                        closure(value).observe(promise.settle)
                    except Exception as exc:
                        if promise.future.is_settled:
                            raise
                        promise.reject(exc)
                case Error(err):
                    promise.reject(err)

        self.observe(on_outcome)
        return promise.future

    def transformed[U](self, closure: Callable[[T], U], /) -> Future[U]:
        """Map the success value. A raising closure rejects the result."""
        return self.chained(lambda value: Future.resolved(closure(value)))

    # Bridges

    def to_operation(self) -> AsyncOperation[T, Exception]:
        """View this future as an operation: invoking it observes the outcome."""

        def operation(callback: Callback[T, Exception]) -> None:
            self.observe(callback)

        return operation

    # Settlement (Promise only)

    def _settle(self, outcome: Result[T, Exception]) -> None:
        with self._lock:
            if self._outcome is not None:
                raise PromiseSettledError()
            self._outcome = outcome
            observers, self._observers = self._observers, []
        logger.debug("Future %#x settled with %r (%d observers)", id(self), outcome, len(observers))
        _dispatch(observers, outcome)

    @staticmethod
    def _deliver(observer: Callback[T, Exception], outcome: Result[T, Exception]) -> None:
        # Observer failures must not starve the observers after it.
        try:
            observer(outcome)
        except Exception:
            logger.exception("Observer %r raised while handling %r", observer, outcome)

    def __repr__(self) -> str:
        state = "pending" if self._outcome is None else repr(self._outcome)
        return f"<Future {state}>"

def _dispatch[T](observers: Sequence[Callback[T, Exception]], outcome: Result[T, Exception]) -> None:
    """
    Deliver a settlement to its observers.

    A settlement triggered while this thread is already delivering is queued
    and delivered by the outer loop once the current observer returns, so
    long chains settle iteratively instead of recursing per link.
    """
    queue = getattr(_delivery, "queue", None)
    if queue is not None:
        queue.append((observers, outcome))
        return

    queue = _delivery.queue = deque([(observers, outcome)])
    try:
        while queue:
            batch, result = queue.popleft()
            for observer in batch:
                Future._deliver(observer, result)
    finally:
        _delivery.queue = None

class Promise[T]:
    """
    Write capability for one Future.

    resolve/reject settle the paired future exactly once;
    any further attempt raises PromiseSettledError.
    """

    __slots__ = ("_future",)

    def __init__(self) -> None:
        self._future: Future[T] = Future()

    @property
    def future(self) -> Future[T]:
        """Read-only view handed to consumers."""
        return self._future

    def resolve(self, value: T, /) -> None:
        self._future._settle(Ok(value))

    def reject(self, error: Exception, /) -> None:
        self._future._settle(Error(error))

    def settle(self, outcome: Result[T, Exception], /) -> None:
        """Settle with a ready-made outcome. Usable directly as a Callback."""
        self._future._settle(outcome)

    def __repr__(self) -> str:
        return f"<Promise of {self._future!r}>"

__all__ = ("Future", "Promise")
