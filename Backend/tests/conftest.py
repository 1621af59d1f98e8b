# tests/conftest.py
"""
Shared pytest fixtures for the DevPort API tests.

Environment is set before the app is imported so settings pick up a
throwaway upload directory and a rate limit the suite never reaches.
"""
import os
import tempfile

os.environ["STORAGE_BACKEND"] = "memory"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="devport_uploads_")
os.environ["RATE_LIMIT"] = "10000/minute"

import pytest
from faker import Faker
from httpx import AsyncClient, ASGITransport

from devport.main import app
from devport.storage import get_playground_storage, get_portfolio_storage, reset_memory_storage


fake = Faker()


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest.fixture(scope="function", autouse=True)
def fresh_storage():
    """Every test starts from empty in-memory storage (demo user included)."""
    reset_memory_storage()
    yield
    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
async def async_client():
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.fixture(scope="function")
def client(async_client):
    return async_client


@pytest.fixture
def playground_storage():
    return get_playground_storage()


@pytest.fixture
def portfolio_storage():
    return get_portfolio_storage()


def identity_headers(user_id=None):
    """Headers the upstream identity provider forwards for one user."""
    return {
        "X-User-Id": user_id or fake.uuid4(),
        "X-User-Email": fake.email(),
        "X-User-First-Name": fake.first_name(),
        "X-User-Last-Name": fake.last_name(),
    }


@pytest.fixture
def make_headers():
    return identity_headers


@pytest.fixture
def owner_headers():
    return identity_headers("owner-1")


@pytest.fixture
def stranger_headers():
    return identity_headers("stranger-2")


@pytest.fixture
async def project(client):
    """A blank project (README only)."""
    response = await client.post("/api/projects", json={"name": fake.catch_phrase()})
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def portfolio(client, owner_headers):
    """A minimal-template portfolio owned by `owner_headers`."""
    response = await client.post(
        "/api/portfolios",
        json={"title": fake.company(), "domain": "owner.example.com"},
        headers=owner_headers,
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
async def home_page(client, owner_headers, portfolio):
    response = await client.get(f"/api/portfolios/{portfolio['id']}/pages", headers=owner_headers)
    assert response.status_code == 200
    return response.json()[0]
