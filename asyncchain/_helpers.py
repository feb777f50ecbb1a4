"""Internal helpers for asyncchain.

Common functions used across the combinator modules.
Not part of the public API but usable when writing custom operations."""

from __future__ import annotations

import logging
import threading

from kungfu import Result

from ._types import Callback

logger = logging.getLogger(__name__)

def once[T, E](callback: Callback[T, E]) -> Callback[T, E]:
    """
    Guard a callback so it fires at most once.

    Extra completions are logged and dropped.
    """
    fired = False
    lock = threading.Lock()

    def guarded(outcome: Result[T, E]) -> None:
        nonlocal fired
        with lock:
            if fired:
                logger.warning("Dropping extra completion %r: operation already completed", outcome)
                return
            fired = True
        callback(outcome)

    return guarded

__all__ = (
    "once",
)
