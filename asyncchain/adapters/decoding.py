"""JSON decoding via pydantic."""

from __future__ import annotations

import logging

from pydantic import TypeAdapter, ValidationError

from .._errors import DecodeError

logger = logging.getLogger(__name__)


class JsonDecoder[T]:
    """Decode JSON bytes into T. Malformed payloads raise DecodeError."""

    __slots__ = ("_adapter",)

    def __init__(self, model: type[T]) -> None:
        self._adapter: TypeAdapter[T] = TypeAdapter(model)

    def decode(self, raw: bytes) -> T:
        try:
            return self._adapter.validate_json(raw)
        except ValidationError as exc:
            logger.debug("Rejecting payload: %s", exc)
            raise DecodeError(str(exc)) from exc


__all__ = ("JsonDecoder",)
