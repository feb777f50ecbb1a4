"""
asyncchain: composing callback-based asynchronous operations.

Two ways to sequence single-shot async work:
- Operation combinators: `sequence`/`fmap` over functions that report an
  Outcome (kungfu Result) to a callback, plus the fluent `chain()` builder
- Future/Promise: read-only Future handles with observe/chained/transformed,
  settled exactly once by their Promise

Adapters plug HTTP fetching, JSON decoding and persistence into Future pipelines.
"""

# Core types
from ._types import AsyncOperation, Callback, CompletionHandler, Outcome, Step, Transform

# Future / Promise
from .future import Future, Promise

# Operation combinators
from .compose import fmap, fmap_catching, sequence, sequence_all

# AST builder (Chain API)
from .ast import Chain, Expr, chain, chain_handler

# Lift helpers
from . import lift
from .lift import fail, from_future, from_handler, from_handler_step, pure, to_future

# Adapters
from . import adapters
from .adapters import (
    FetchPolicy,
    HttpFetcher,
    JsonDecoder,
    MemoryDatabase,
    decoded,
    load,
    saved,
)

# Errors
from ._errors import (
    BadStatusError,
    ChainError,
    DecodeError,
    MissingResultError,
    NoDataError,
    NoResponseError,
    PersistenceError,
    PromiseSettledError,
    TransportError,
    TransportFailure,
)

__all__ = (
    # Types
    "AsyncOperation",
    "Callback",
    "CompletionHandler",
    "Outcome",
    "Step",
    "Transform",
    # Future / Promise
    "Future",
    "Promise",
    # Combinators
    "fmap",
    "fmap_catching",
    "sequence",
    "sequence_all",
    # AST
    "Chain",
    "Expr",
    "chain",
    "chain_handler",
    # Lift module (namespace import - preferred)
    "lift",
    # Lift functions (direct import)
    "fail",
    "from_future",
    "from_handler",
    "from_handler_step",
    "pure",
    "to_future",
    # Adapters
    "adapters",
    "FetchPolicy",
    "HttpFetcher",
    "JsonDecoder",
    "MemoryDatabase",
    "decoded",
    "load",
    "saved",
    # Errors
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
