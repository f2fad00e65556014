"""Pooled async Redis client used as the shared cache transport."""
import logging

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)


class RedisClient:
    """
    Thin async wrapper over a pooled ``redis.asyncio.Redis``.

    A disabled, unreachable or failing Redis never raises to callers: reads
    return None and writes return False, which the cache layer treats as a miss.
    """

    def __init__(self, url: str, enabled: bool = True, pool_size: int = 20) -> None:
        self._url = url
        self._enabled = enabled
        self._pool_size = pool_size
        self._pool: ConnectionPool | None = None
        self._client: Redis | None = None

    async def connect(self) -> None:
        """Open the pool and ping once; stay disconnected on failure."""
        if not self._enabled:
            logger.info("redis_disabled")
            return
        try:
            self._pool = ConnectionPool.from_url(self._url, max_connections=self._pool_size)
            self._client = Redis(connection_pool=self._pool)
            await self._client.ping()
            logger.info("redis_connected pool_size=%d", self._pool_size)
        except RedisError as e:
            logger.warning("redis_connect_failed error=%s", e)
            self._client = None
            self._pool = None

    async def close(self) -> None:
        """Close the pool if open."""
        if self._client:
            await self._client.aclose()
            self._client = None
            self._pool = None
            logger.info("redis_closed")

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    async def ping(self) -> bool:
        if not self._client:
            return False
        try:
            return await self._client.ping()
        except RedisError:
            return False

    async def get(self, key: str) -> bytes | None:
        """Return the raw value, or None on miss or failure."""
        if not self._client:
            return None
        try:
            return await self._client.get(key)
        except RedisError as e:
            logger.warning("redis_get_failed key=%s error=%s", key, e)
            return None

    async def setex(self, key: str, seconds: int, value: str | bytes) -> bool:
        """Store ``value`` for ``seconds``. Returns False if not stored."""
        if not self._client:
            return False
        try:
            await self._client.setex(key, seconds, value)
            return True
        except RedisError as e:
            logger.warning("redis_setex_failed key=%s error=%s", key, e)
            return False

    async def delete(self, *keys: str) -> bool:
        """Delete ``keys``. Returns False if Redis was unavailable."""
        if not self._client:
            return False
        try:
            await self._client.delete(*keys)
            return True
        except RedisError as e:
            logger.warning("redis_delete_failed keys=%s error=%s", keys, e)
            return False
