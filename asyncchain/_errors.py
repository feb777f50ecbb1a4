from __future__ import annotations

class ChainError(Exception):
    """Base class for asyncchain errors."""

class PromiseSettledError(ChainError):
    """resolve/reject called on a promise that already has an outcome."""

    def __init__(self) -> None:
        super().__init__("Promise is already settled")

class MissingResultError(ChainError):
    """Completion handler reported neither a result nor an error."""

    def __init__(self) -> None:
        super().__init__("Completion handler returned no result and no error")

class TransportError(ChainError):
    """Network fetch failed before a usable body was obtained."""

class NoResponseError(TransportError):
    """No response object was received."""

    message: str

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"No response: {message}")

class BadStatusError(TransportError):
    """Response status code is outside the accepted range."""

    status_code: int

    def __init__(self, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(f"Bad status code: {status_code}")

class TransportFailure(TransportError):
    """Underlying transport reported an error."""

    message: str

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Transport failure: {message}")

class NoDataError(TransportError):
    """Response carried no body."""

    def __init__(self) -> None:
        super().__init__("No data returned")

class DecodeError(ChainError):
    """Payload could not be decoded into the requested type."""

    message: str

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(f"Decode failed: {message}")

class PersistenceError(ChainError):
    """Value could not be stored."""

    key: str
    message: str

    def __init__(self, key: str, message: str) -> None:
        self.key = key
        self.message = message
        super().__init__(f"Could not save {key!r}: {message}")

__all__ = (
    "BadStatusError",
    "ChainError",
    "DecodeError",
    "MissingResultError",
    "NoDataError",
    "NoResponseError",
    "PersistenceError",
    "PromiseSettledError",
    "TransportError",
    "TransportFailure",
)
