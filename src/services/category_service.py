"""Service layer for category operations."""
from core.cache import CATEGORY_CACHE_NAME
from db.collections import Collection
from schemas.category import CategoryDocument
from services.base_lookup_service import BaseLookupService


class CategoryService(BaseLookupService[CategoryDocument]):
    """Categories: cached for a day, append-only."""

    cache_name = CATEGORY_CACHE_NAME
    document = CategoryDocument

    def _collection(self) -> Collection:
        return self._db.categories
