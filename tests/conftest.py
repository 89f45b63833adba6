"""Shared fixtures: a mocked Miro API and a client bound to it."""

from collections.abc import AsyncIterator, Iterator

import pytest
import pytest_asyncio
import respx

from miro_boards.client import MiroClient
from miro_boards.config import MIRO_API_BASE, ClientConfig


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(token="test-token", base_url=MIRO_API_BASE)


@pytest.fixture
def miro_api() -> Iterator[respx.MockRouter]:
    """Mock every request to the Miro API root."""
    with respx.mock(base_url=MIRO_API_BASE, assert_all_called=False) as router:
        yield router


@pytest_asyncio.fixture
async def client(
    client_config: ClientConfig, miro_api: respx.MockRouter
) -> AsyncIterator[MiroClient]:
    async with MiroClient(client_config) as miro:
        yield miro
