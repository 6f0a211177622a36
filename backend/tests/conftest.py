"""Integration test fixtures.

This conftest provides the HTTP client over the full app. Unit tests in
tests/unit/ have their own conftest and never load the app.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, AsyncIterator, Generator, cast

import pytest
import pytest_asyncio
from dotenv import load_dotenv
from httpx import ASGITransport, AsyncClient

# Load .env first (default environment variables)
env_path = Path(__file__).parent.parent / ".env"
if env_path.exists():
    load_dotenv(env_path)


@pytest.fixture
def recipe_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Seeded in-memory stores and default servings bounds for each test.

    The repository singletons are reset before and after, so every test
    starts from the demo recipes and no users.
    """
    from infrastructure.persistence.recipe_repository_factory import (
        reset_recipe_repository,
    )
    from infrastructure.user.user_repository_factory import reset_user_repository

    monkeypatch.setenv("REPOSITORY_BACKEND", "inmemory")
    monkeypatch.setenv("SEED_DEMO_RECIPES", "1")
    monkeypatch.setenv("SERVINGS_MIN", "1")
    monkeypatch.setenv("SERVINGS_MAX", "100")
    # Minimum bcrypt cost
    monkeypatch.setenv("BCRYPT_ROUNDS", "4")
    reset_recipe_repository()
    reset_user_repository()
    try:
        yield
    finally:
        reset_recipe_repository()
        reset_user_repository()


@pytest_asyncio.fixture
async def client(recipe_env: None) -> AsyncIterator[AsyncClient]:
    """Async HTTP client for GraphQL/REST tests.

    Uses httpx.AsyncClient with an explicit ASGITransport and a dummy
    base_url so relative requests resolve.
    """
    from app import app

    # FastAPI is ASGI compatible
    transport = ASGITransport(app=cast(Any, app))
    async with AsyncClient(
        transport=transport,
        base_url="http://testserver",
    ) as ac:
        yield ac
