"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable, Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
import pytest_asyncio
import strawberry
from httpx import ASGITransport, AsyncClient

from pokedex.store import PokemonStore, SeedData, load_seed_data


@pytest.fixture(scope="session")
def seed() -> SeedData:
    """The bundled seed document, loaded once."""
    return load_seed_data()


@pytest.fixture
def store(seed: SeedData) -> PokemonStore:
    """An isolated store built from the bundled seed."""
    return PokemonStore.from_seed(seed)


@pytest.fixture
def mock_info(store: PokemonStore) -> Any:
    """Create a mock GraphQL info object whose context carries the test store."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"request": MagicMock(), "store": store}
    return info


@pytest_asyncio.fixture
async def client(store: PokemonStore) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to an app that serves the test store."""
    from pokedex.api.app import create_app

    app = create_app(store=store)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


async def _execute_graphql(
    client: AsyncClient, query: str, variables: dict[str, Any] | None = None
) -> dict[str, Any]:
    payload: dict[str, Any] = {"query": query}
    if variables is not None:
        payload["variables"] = variables
    response = await client.post("/graphql", json=payload)
    assert response.status_code == 200, response.text
    return response.json()


@pytest.fixture
def execute_graphql() -> Callable[..., Awaitable[dict[str, Any]]]:
    """POST a GraphQL document through a client and return the decoded envelope."""
    return _execute_graphql
