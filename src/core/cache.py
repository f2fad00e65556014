"""
Time-to-live caches shared by the data stores.

Two interchangeable backends satisfy the ``Cache`` protocol:

- ``MemoryCache``: process-local dict with lazy expiry (single worker, tests).
- ``RedisCache``: shared across workers via ``RedisClient``; entries expire in Redis.

Values are strings. Stores serialize documents to JSON before caching, so every
hit hands back fresh objects and a caller mutating a returned list can never
corrupt the cached copy.

A cache backend failing is never fatal: reads degrade to a miss and writes
report False.
"""
import logging
import math
import threading
import time
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

if TYPE_CHECKING:
    from core.redis import RedisClient

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Cache names for whole-collection reads
CATEGORY_CACHE_NAME = "CategoryData"
STATUS_CACHE_NAME = "StatusData"
SUGGESTION_CACHE_NAME = "SuggestionData"

# TTL constants (in seconds)
TTL_ONE_DAY = 86400
TTL_ONE_MINUTE = 60

# Bump when cached document shapes change so old Redis entries are ignored
CACHE_SCHEMA_VERSION = 1


class Cache(Protocol):
    """Key/value store with per-entry time-to-live."""

    async def get(self, key: str) -> str | None:
        """Return the cached value, or None on miss/expiry."""
        ...

    async def set(self, key: str, value: str, ttl: float) -> bool:
        """Store ``value`` for ``ttl`` seconds. Returns False if not stored."""
        ...

    async def delete(self, key: str) -> bool:
        """Remove ``key``. Returns False if the backend was unavailable."""
        ...


class MemoryCache:
    """
    In-process TTL cache.

    Expired entries are evicted when read and swept on every write, so keys
    that are never read again (per-author lists) do not accumulate. An entry
    set with TTL ``T`` is visible strictly before ``T`` elapses and absent at
    or after ``T``.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, tuple[str, float]] = {}
        self._lock = threading.Lock()

    async def get(self, key: str) -> str | None:
        """Return the cached value, or None on miss/expiry."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            value, expires_at = entry
            if self._clock() >= expires_at:
                del self._entries[key]
                return None
            return value

    async def set(self, key: str, value: str, ttl: float) -> bool:
        """Store ``value`` for ``ttl`` seconds, sweeping out expired entries."""
        with self._lock:
            now = self._clock()
            expired = [k for k, (_, expires_at) in self._entries.items() if now >= expires_at]
            for expired_key in expired:
                del self._entries[expired_key]
            self._entries[key] = (value, now + ttl)
        return True

    async def delete(self, key: str) -> bool:
        """Remove ``key`` if present."""
        with self._lock:
            self._entries.pop(key, None)
        return True

    def clear(self) -> None:
        """Drop every entry."""
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class RedisCache:
    """TTL cache backed by Redis, namespaced by schema version."""

    def __init__(self, redis_client: "RedisClient", namespace: str = "suggestions") -> None:
        self._redis = redis_client
        self._prefix = f"{namespace}:v{CACHE_SCHEMA_VERSION}:"

    def _key(self, key: str) -> str:
        return f"{self._prefix}{key}"

    async def get(self, key: str) -> str | None:
        """Return the cached value, or None on miss or Redis failure."""
        data = await self._redis.get(self._key(key))
        if data is None:
            return None
        return data.decode("utf-8") if isinstance(data, bytes) else data

    async def set(self, key: str, value: str, ttl: float) -> bool:
        """Store ``value`` for ``ttl`` seconds (rounded up to whole seconds)."""
        return await self._redis.setex(self._key(key), max(1, math.ceil(ttl)), value)

    async def delete(self, key: str) -> bool:
        """Remove ``key``."""
        return await self._redis.delete(self._key(key))


async def read_through(
    cache: Cache,
    key: str,
    ttl: float,
    adapter: TypeAdapter[T],
    loader: Callable[[], Awaitable[T]],
) -> T:
    """
    Return the cached value for ``key``, populating it from ``loader`` on a miss.

    Args:
        cache: Cache backend.
        key: Cache key.
        ttl: Time-to-live in seconds for a freshly loaded value.
        adapter: Pydantic adapter used to (de)serialize the value as JSON.
        loader: Coroutine factory fetching the value from storage.

    Returns:
        The cached or freshly loaded value.
    """
    data = await cache.get(key)
    if data is not None:
        try:
            value = adapter.validate_json(data)
        except ValidationError:
            logger.warning("cache_decode_failed key=%s", key, exc_info=True)
        else:
            logger.debug("cache_hit key=%s", key)
            return value

    logger.debug("cache_miss key=%s", key)
    value = await loader()
    await cache.set(key, adapter.dump_json(value).decode("utf-8"), ttl)
    return value


async def invalidate(cache: Cache, key: str) -> None:
    """Delete ``key`` from the cache; a failed delete is logged, never raised."""
    if not await cache.delete(key):
        logger.warning("cache_invalidate_failed key=%s", key)
    else:
        logger.debug("cache_invalidate key=%s", key)
