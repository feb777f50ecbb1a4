"""Collaborator shapes consumed by the pipeline helpers.

Any object matching these protocols can be plugged into decoded/saved/load."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..future import Future


class Fetcher(Protocol):
    def fetch(self, url: str) -> Future[bytes]: ...


class Decoder[T](Protocol):
    def decode(self, raw: bytes) -> T: ...


class Database(Protocol):
    def save[V](self, key: str, value: V) -> Future[V]: ...


@runtime_checkable
class Savable(Protocol):
    @property
    def primary_key(self) -> str: ...


__all__ = ("Database", "Decoder", "Fetcher", "Savable")
