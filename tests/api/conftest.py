"""Fixtures for API tests: an HTTP client bound to the test database and cache."""
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

from core.cache import MemoryCache
from db.session import DbConnection


@pytest.fixture
async def client(db: DbConnection, cache: MemoryCache) -> AsyncGenerator[AsyncClient]:
    """Create a test client with connection and cache overrides."""
    # Clear the settings cache so it picks up environment overrides
    from core.config import get_settings

    get_settings.cache_clear()

    from api.dependencies import get_cache, get_db
    from api.main import app

    app.dependency_overrides[get_db] = lambda: db
    app.dependency_overrides[get_cache] = lambda: cache

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def author_headers() -> dict[str, str]:
    """Identity headers matching the ``author`` user."""
    return {
        "X-Object-Id": "oid-author",
        "X-Given-Name": "Ada",
        "X-Surname": "Author",
        "X-Name": "Ada Author",
        "X-Email": "ada@example.com",
    }


@pytest.fixture
def voter_headers() -> dict[str, str]:
    """Identity headers matching the ``voter`` user."""
    return {
        "X-Object-Id": "oid-voter",
        "X-Given-Name": "Vic",
        "X-Surname": "Voter",
        "X-Name": "Vic Voter",
        "X-Email": "vic@example.com",
    }


@pytest.fixture
def admin_headers() -> dict[str, str]:
    """Identity headers for an admin (a user distinct from author and voter)."""
    return {
        "X-Object-Id": "oid-admin",
        "X-Name": "Ann Admin",
        "X-Job-Title": "Admin",
    }
