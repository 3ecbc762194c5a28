"""Shared test fixtures and configuration for rapi tests."""

import httpx
import pytest
import pytest_asyncio

from rapi.executor import RequestExecutor, AsyncRequestExecutor

from fakes import FakeServer, unreachable


@pytest.fixture
def fake_server():
    """Create an empty fake server."""
    return FakeServer()


@pytest.fixture
def client(fake_server):
    """Create a synchronous client wired to the fake server."""
    with httpx.Client(transport=httpx.MockTransport(fake_server), base_url="http://testserver") as c:
        yield c


@pytest_asyncio.fixture
async def async_client(fake_server):
    """Create an asynchronous client wired to the fake server."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(fake_server), base_url="http://testserver") as c:
        yield c


@pytest.fixture
def unreachable_client():
    """Create a client whose transport cannot reach any host."""
    with httpx.Client(transport=httpx.MockTransport(unreachable)) as c:
        yield c


@pytest_asyncio.fixture
async def async_unreachable_client():
    """Create an async client whose transport cannot reach any host."""
    async with httpx.AsyncClient(transport=httpx.MockTransport(unreachable)) as c:
        yield c


@pytest.fixture
def executor():
    """Create a synchronous executor."""
    return RequestExecutor()


@pytest.fixture
def async_executor():
    """Create an asynchronous executor."""
    return AsyncRequestExecutor()
