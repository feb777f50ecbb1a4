"""
Adapters
========

Collaborators for Future pipelines: HTTP fetching (httpx),
JSON decoding (pydantic) and key-value persistence.
"""

from .decoding import JsonDecoder
from .http import FetchPolicy, HttpFetcher
from .pipeline import decoded, load, saved
from .storage import MemoryDatabase
from .traits import Database, Decoder, Fetcher, Savable

__all__ = (
    # Protocols
    "Database",
    "Decoder",
    "Fetcher",
    "Savable",
    # Implementations
    "FetchPolicy",
    "HttpFetcher",
    "JsonDecoder",
    "MemoryDatabase",
    # Pipeline
    "decoded",
    "load",
    "saved",
)
