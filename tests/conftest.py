"""
Shared fixtures: an app wired to an in-memory SQLite database and an
httpx client speaking to it over ASGI.
"""

import os

# Must be set before ``main`` is imported, since it builds the default app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test-secret")

from unittest.mock import AsyncMock, MagicMock

import httpx
import pytest
import pytest_asyncio

from api.dependencies import get_pokeapi_client
from config.settings import Settings
from database.session import create_tables
from main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(
        database_url="sqlite+aiosqlite:///:memory:",
        jwt_secret="test-secret",
        jwt_expiry_seconds=3600,
        bcrypt_rounds=4,
        db_create_tables=False,
    )


@pytest.fixture
def pokeapi():
    """Stand-in for ``PokeAPIClient``; tests set ``fetch_pokemon`` behaviour."""
    client = MagicMock()
    client.fetch_pokemon = AsyncMock(return_value={"name": "pikachu", "id": 25})
    return client


@pytest_asyncio.fixture
async def app(settings, pokeapi):
    application = create_app(settings)
    await create_tables(application.state.engine)
    application.dependency_overrides[get_pokeapi_client] = lambda: pokeapi
    yield application
    await application.state.pokeapi.aclose()
    await application.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app):
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c


@pytest_asyncio.fixture
async def db(app):
    async with app.state.session_factory() as session:
        yield session


@pytest.fixture
def register_and_login(client):
    """Register an account and return a bearer token for it."""

    async def _register_and_login(email="a@x.com", password="pw") -> str:
        await client.post("/register", json={"email": email, "password": password})
        resp = await client.post("/login", json={"email": email, "password": password})
        return resp.json()["token"]

    return _register_and_login
