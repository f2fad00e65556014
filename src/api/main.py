"""FastAPI application entry point."""
import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from api.routers import admin, categories, health, suggestions, users
from core.cache import Cache, MemoryCache, RedisCache
from core.config import Settings, get_settings
from core.redis import RedisClient
from db.session import DbConnection

logger = logging.getLogger(__name__)


def build_cache(app_settings: Settings, redis_client: RedisClient | None) -> Cache:
    """Return the configured cache backend."""
    if app_settings.cache_backend == "redis" and redis_client is not None:
        return RedisCache(redis_client)
    return MemoryCache()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application lifespan - startup and shutdown."""
    app_settings = get_settings()

    # Startup: one connection and one cache shared by every request
    app.state.db = DbConnection.from_settings(app_settings)

    redis_client = None
    if app_settings.cache_backend == "redis":
        redis_client = RedisClient(
            url=app_settings.redis_url,
            enabled=app_settings.redis_enabled,
            pool_size=app_settings.redis_pool_size,
        )
        await redis_client.connect()
    app.state.cache = build_cache(app_settings, redis_client)
    logger.info("cache_backend=%s", type(app.state.cache).__name__)

    yield

    # Shutdown
    if redis_client is not None:
        await redis_client.close()
    await app.state.db.dispose()


app_settings = get_settings()

app = FastAPI(
    title="Suggestion Tracker API",
    description="Submit, vote on, and triage feature suggestions.",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(SQLAlchemyError)
async def storage_exception_handler(_request: Request, exc: SQLAlchemyError) -> JSONResponse:
    """Surface storage failures (including aborted transactions) as retryable."""
    logger.error("storage_failure: %s", exc, exc_info=exc)
    return JSONResponse(
        status_code=503,
        content={"detail": "The change could not be saved. Please try again."},
    )


app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(categories.router)
app.include_router(suggestions.router)
app.include_router(users.router)
app.include_router(admin.router)
