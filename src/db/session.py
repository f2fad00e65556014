"""Async SQLAlchemy connection provider."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from sqlalchemy import text
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from core.config import Settings
from db.collections import Collection
from models import Base, Category, Status, Suggestion, User
from schemas.category import CategoryDocument
from schemas.status import StatusDocument
from schemas.suggestion import SuggestionDocument
from schemas.user import UserDocument

logger = logging.getLogger(__name__)


class DbConnection:
    """
    Owns the database engine and the four collections.

    Stores receive one shared instance. ``session()`` serves plain reads;
    ``transaction()`` wraps a unit of work that commits on success and rolls
    back on any error, spanning every collection touched through its session.
    """

    def __init__(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self.session_factory = async_sessionmaker(
            engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        self.categories: Collection[Category, CategoryDocument] = Collection(
            Category, CategoryDocument,
        )
        self.statuses: Collection[Status, StatusDocument] = Collection(Status, StatusDocument)
        self.users: Collection[User, UserDocument] = Collection(User, UserDocument)
        self.suggestions: Collection[Suggestion, SuggestionDocument] = Collection(
            Suggestion, SuggestionDocument,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "DbConnection":
        """Create a connection (and its pool) from application settings."""
        engine_kwargs: dict = {"echo": False, "pool_pre_ping": True}
        if not settings.is_sqlite:
            engine_kwargs["pool_size"] = settings.db_pool_size
            engine_kwargs["max_overflow"] = settings.db_max_overflow
        return cls(create_async_engine(settings.database_url, **engine_kwargs))

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession]:
        """Yield a session for reads. Nothing is committed."""
        async with self.session_factory() as session:
            yield session

    @asynccontextmanager
    async def transaction(self) -> AsyncGenerator[AsyncSession]:
        """
        Yield a session whose work commits atomically.

        Any exception inside the block rolls back every change made through
        the session and is re-raised unchanged. A caller abandoning the block
        (cancellation) leaves an uncommitted transaction that is rolled back
        when the session closes.
        """
        async with self.session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                logger.warning("transaction_aborted", exc_info=True)
                raise

    async def ping(self) -> None:
        """Run a trivial query; raises if the database is unreachable."""
        async with self.session() as session:
            await session.execute(text("SELECT 1"))

    async def create_tables(self) -> None:
        """Create all tables (for development/testing only)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def drop_tables(self) -> None:
        """Drop all tables (for testing only)."""
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def dispose(self) -> None:
        """Close the connection pool."""
        await self.engine.dispose()
