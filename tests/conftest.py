"""Pytest fixtures for testing."""
import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest
from sqlalchemy.ext.asyncio import create_async_engine

from core.cache import MemoryCache
from db.session import DbConnection
from schemas.category import CategoryDocument
from schemas.status import StatusDocument
from schemas.suggestion import AuthorSummary, SuggestionDocument
from schemas.user import UserDocument
from services.category_service import CategoryService
from services.status_service import StatusService
from services.suggestion_service import SuggestionService
from services.user_service import UserService


class FakeClock:
    """Manually advanced monotonic clock for cache expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def database_url(tmp_path: Path) -> str:
    """
    Database URL for the test.

    Uses TEST_DATABASE_URL when set (e.g. a PostgreSQL instance), otherwise a
    fresh SQLite file per test.
    """
    return os.environ.get("TEST_DATABASE_URL") or f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest.fixture
async def db(database_url: str) -> AsyncGenerator[DbConnection]:
    """Create a connection with empty tables, dropped again after the test."""
    connection = DbConnection(create_async_engine(database_url, echo=False))
    await connection.drop_tables()
    await connection.create_tables()

    yield connection

    await connection.drop_tables()
    await connection.dispose()


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def cache(clock: FakeClock) -> MemoryCache:
    """Per-test cache instance driven by the fake clock."""
    return MemoryCache(clock=clock)


@pytest.fixture
def category_service(db: DbConnection, cache: MemoryCache) -> CategoryService:
    return CategoryService(db, cache)


@pytest.fixture
def status_service(db: DbConnection, cache: MemoryCache) -> StatusService:
    return StatusService(db, cache)


@pytest.fixture
def user_service(db: DbConnection) -> UserService:
    return UserService(db)


@pytest.fixture
def suggestion_service(db: DbConnection, cache: MemoryCache) -> SuggestionService:
    return SuggestionService(db, cache)


@pytest.fixture
async def author(user_service: UserService) -> UserDocument:
    """A stored user who authors suggestions."""
    return await user_service.create(UserDocument(
        object_identifier="oid-author",
        first_name="Ada",
        last_name="Author",
        display_name="Ada Author",
        email_address="ada@example.com",
    ))


@pytest.fixture
async def voter(user_service: UserService) -> UserDocument:
    """A stored user who votes on other people's suggestions."""
    return await user_service.create(UserDocument(
        object_identifier="oid-voter",
        first_name="Vic",
        last_name="Voter",
        display_name="Vic Voter",
        email_address="vic@example.com",
    ))


@pytest.fixture
async def category(category_service: CategoryService) -> CategoryDocument:
    return await category_service.create(
        CategoryDocument(category_name="Courses", category_description="Full paid courses."),
    )


@pytest.fixture
async def status_completed(status_service: StatusService) -> StatusDocument:
    return await status_service.create(
        StatusDocument(status_name="Completed", status_description="Done."),
    )


@pytest.fixture
async def suggestion(
    suggestion_service: SuggestionService,
    author: UserDocument,
    category: CategoryDocument,
) -> SuggestionDocument:
    """A stored, unapproved suggestion authored by ``author``."""
    return await suggestion_service.create(SuggestionDocument(
        suggestion="Add dark mode",
        description="Please add a dark theme.",
        author=AuthorSummary.from_user(author),
        category=category,
    ))
