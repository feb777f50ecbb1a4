"""
HTTP fetcher
============

Fetcher backed by an httpx.Client. The request outcome is mapped onto the
TransportError taxonomy and delivered through a Future.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from concurrent.futures import Future as ExecutorFuture
from dataclasses import dataclass

import httpx
from kungfu import Error, Ok, Result

from .._errors import BadStatusError, NoDataError, NoResponseError, TransportFailure
from ..future import Future, Promise

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class FetchPolicy:
    """
    Which responses count as a successful fetch.
    """

    accepted_status: range = range(200, 400)
    allow_empty: bool = False

    def __post_init__(self) -> None:
        if len(self.accepted_status) == 0:
            raise ValueError("FetchPolicy.accepted_status must not be empty")

    @classmethod
    def lenient(cls, allow_empty: bool = False) -> FetchPolicy:
        """Accept every status from 0 through 400 inclusive."""
        return cls(accepted_status=range(0, 401), allow_empty=allow_empty)

    def accepts(self, status_code: int) -> bool:
        return status_code in self.accepted_status


class HttpFetcher:
    """
    Fetch raw response bodies as Futures.

    Without an executor the request runs inline and the returned future is
    already settled. With an executor the request runs there and the future
    settles from the worker.
    """

    def __init__(
        self,
        client: httpx.Client,
        policy: FetchPolicy | None = None,
        executor: Executor | None = None,
    ) -> None:
        self.client = client
        self.policy = policy or FetchPolicy()
        self.executor = executor

    def fetch(self, url: str) -> Future[bytes]:
        promise: Promise[bytes] = Promise()
        if self.executor is None:
            try:
                outcome = self._request(url)
            except Exception as exc:
                promise.reject(exc)
            else:
                promise.settle(outcome)
            return promise.future

        def on_done(job: ExecutorFuture[Result[bytes, Exception]]) -> None:
            exc = job.exception()
            if exc is not None:
                promise.reject(exc)
            else:
                promise.settle(job.result())

        self.executor.submit(self._request, url).add_done_callback(on_done)
        return promise.future

    def _request(self, url: str) -> Result[bytes, Exception]:
        logger.debug("GET %s", url)
        try:
            response = self.client.get(url)
        except httpx.TransportError as exc:
            return Error(NoResponseError(str(exc)))
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            return Error(TransportFailure(str(exc)))

        if not self.policy.accepts(response.status_code):
            return Error(BadStatusError(response.status_code))
        if not response.content and not self.policy.allow_empty:
            return Error(NoDataError())
        logger.debug("GET %s -> %d (%d bytes)", url, response.status_code, len(response.content))
        return Ok(response.content)


__all__ = ("FetchPolicy", "HttpFetcher")
