"""Service layer for status operations."""
from core.cache import STATUS_CACHE_NAME
from db.collections import Collection
from schemas.status import StatusDocument
from services.base_lookup_service import BaseLookupService


class StatusService(BaseLookupService[StatusDocument]):
    """Statuses: cached for a day, append-only."""

    cache_name = STATUS_CACHE_NAME
    document = StatusDocument

    def _collection(self) -> Collection:
        return self._db.statuses
