"""Pipeline helpers

Fetch -> decode -> save, expressed with Future.chained / Future.transformed.

    user = load(fetcher, "https://api.example.com/user/1", User, database=db)
    user.observe(render)
"""

from __future__ import annotations

from collections.abc import Callable

from ..future import Future
from .decoding import JsonDecoder
from .traits import Database, Decoder, Fetcher, Savable


def _as_decoder[T](target: Decoder[T] | type[T]) -> Decoder[T]:
    # Types and generic aliases (list[User]) get a JsonDecoder.
    if isinstance(target, type) or not callable(getattr(target, "decode", None)):
        return JsonDecoder(target)  # type: ignore[arg-type]
    return target


def _primary_key(value: object) -> str:
    if not isinstance(value, Savable):
        raise TypeError(f"{type(value).__name__} has no primary_key; pass key= to saved()")
    return value.primary_key


def decoded[T](raw: Future[bytes], target: Decoder[T] | type[T]) -> Future[T]:
    """
    Decode the bytes of raw into T.

    target is either a Decoder or a type, which gets a JsonDecoder.
    A decode failure rejects the result with DecodeError.
    """
    return raw.transformed(_as_decoder(target).decode)


def saved[V](
    future: Future[V],
    database: Database,
    *,
    key: Callable[[V], str] | None = None,
) -> Future[V]:
    """
    Persist the value of future in database, then yield the same value.

    The key defaults to value.primary_key. A failed write rejects the result.
    """
    key_of = key or _primary_key
    return future.chained(lambda value: database.save(key_of(value), value))


def load[T](
    fetcher: Fetcher,
    url: str,
    target: Decoder[T] | type[T],
    *,
    database: Database | None = None,
    key: Callable[[T], str] | None = None,
) -> Future[T]:
    """Fetch url, decode it into target and optionally save the result."""
    result = decoded(fetcher.fetch(url), target)
    if database is not None:
        result = saved(result, database, key=key)
    return result


__all__ = ("decoded", "load", "saved")
