"""
Pytest Configuration and Fixtures
"""

from unittest.mock import Mock

import httpx
import pytest

from support import Deferred, Recorder


@pytest.fixture
def recorder() -> Recorder:
    return Recorder()


@pytest.fixture
def deferred() -> Deferred:
    return Deferred()


@pytest.fixture
def mock() -> Mock:
    return Mock()


@pytest.fixture
def make_client():
    """Returns a factory building an httpx.Client around a request handler."""
    clients = []

    def factory(handler) -> httpx.Client:
        client = httpx.Client(transport=httpx.MockTransport(handler))
        clients.append(client)
        return client

    yield factory
    for client in clients:
        client.close()
