"""
Base service for small, read-mostly lookup collections (categories, statuses).

The whole collection is cached for a day under a fixed key. Creating an entry
does NOT invalidate that cache: new categories/statuses become visible once the
cached list expires. These lists change rarely, so the staleness is accepted.
"""
import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import TypeAdapter

from core.cache import TTL_ONE_DAY, Cache, read_through
from db.collections import Collection
from db.session import DbConnection
from schemas.base import DocumentModel

logger = logging.getLogger(__name__)

DocumentT = TypeVar("DocumentT", bound=DocumentModel)


class BaseLookupService(ABC, Generic[DocumentT]):
    """
    Cached whole-collection reads plus append-only creation.

    Subclasses must define:
    - cache_name: fixed cache key for the whole collection
    - document: the pydantic document type

    Subclasses must implement:
    - _collection(): the collection handle on the connection
    """

    cache_name: str
    document: type[DocumentT]
    cache_ttl: float = TTL_ONE_DAY

    def __init__(self, db: DbConnection, cache: Cache) -> None:
        self._db = db
        self._cache = cache
        self._adapter = TypeAdapter(list[self.document])

    @abstractmethod
    def _collection(self) -> Collection:
        """Return the collection handle this service reads and writes."""
        ...

    async def get_all(self) -> list[DocumentT]:
        """Return every entry, served from cache for up to a day."""

        async def load() -> list[DocumentT]:
            async with self._db.session() as session:
                return await self._collection().find(session)

        return await read_through(self._cache, self.cache_name, self.cache_ttl, self._adapter, load)

    async def create(self, entity: DocumentT) -> DocumentT:
        """Insert ``entity`` and return it with its new id. The cache is left as is."""
        async with self._db.transaction() as session:
            created = await self._collection().insert(session, entity)
        logger.info("%s_created id=%s", self._collection().name, created.id)
        return created
