"""In-memory key-value Database.

Values are serialized to JSON with pydantic before being stored, so a value
that cannot be persisted is reported instead of silently kept."""

from __future__ import annotations

import logging
import threading
from typing import Any

from pydantic import TypeAdapter

from .._errors import PersistenceError
from ..future import Future, Promise

logger = logging.getLogger(__name__)


class MemoryDatabase:
    """
    Dict-backed Database.

    save() resolves with the same value once stored, or rejects with
    PersistenceError when the value cannot be serialized.
    """

    def __init__(self) -> None:
        self._records: dict[str, bytes] = {}
        self._adapters: dict[type, TypeAdapter[Any]] = {}
        self._lock = threading.Lock()

    def save[V](self, key: str, value: V) -> Future[V]:
        promise: Promise[V] = Promise()
        try:
            data = self._adapter_for(type(value)).dump_json(value)
        except Exception as exc:
            logger.debug("Could not serialize %r: %s", key, exc)
            promise.reject(PersistenceError(key, str(exc)))
            return promise.future

        with self._lock:
            self._records[key] = data
        logger.debug("Saved %r (%d bytes)", key, len(data))
        promise.resolve(value)
        return promise.future

    def load(self, key: str) -> bytes | None:
        """Raw JSON stored under key, or None."""
        with self._lock:
            return self._records.get(key)

    def keys(self) -> list[str]:
        with self._lock:
            return list(self._records)

    def _adapter_for(self, model: type) -> TypeAdapter[Any]:
        adapter = self._adapters.get(model)
        if adapter is None:
            adapter = self._adapters[model] = TypeAdapter(model)
        return adapter

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)


__all__ = ("MemoryDatabase",)
