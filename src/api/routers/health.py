"""Health check endpoint."""
import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from api.dependencies import get_cache, get_db
from core.cache import Cache
from db.session import DbConnection

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

_PROBE_KEY = "health:probe"


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    database: str
    cache: str


@router.get("/health", response_model=HealthResponse)
async def health_check(
    db: DbConnection = Depends(get_db),
    cache: Cache = Depends(get_cache),
) -> HealthResponse:
    """
    Probe the database and the cache.

    The cache is optional for correctness (a failing cache degrades to misses),
    so only a database failure marks the service degraded.
    """
    db_status = "healthy"
    try:
        await db.ping()
    except Exception:
        logger.exception("health_check_failed component=database")
        db_status = "unhealthy"

    cache_status = "healthy" if await cache.set(_PROBE_KEY, "ok", 1) else "unavailable"

    return HealthResponse(
        status="healthy" if db_status == "healthy" else "degraded",
        database=db_status,
        cache=cache_status,
    )
