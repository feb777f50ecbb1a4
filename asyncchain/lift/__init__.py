"""
Lift helpers with semantic namespaces.

    from asyncchain import lift as L

    L.up.*    - lift values, futures and completion handlers into operations
    L.down.*  - run operations into futures

Examples:
    op = L.up.pure(4)
    legacy = L.up.from_handler(legacy_fetch)
    future = L.down.to_future(op)
"""

from __future__ import annotations

from . import down, up

from .down import to_future
from .up import fail, from_future, from_handler, from_handler_step, pure

__all__ = (
    # Namespaces (L.up.*, L.down.*)
    "up",
    "down",
    # Up
    "pure",
    "fail",
    "from_future",
    "from_handler",
    "from_handler_step",
    # Down
    "to_future",
)
