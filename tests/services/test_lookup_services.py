"""Tests for the cached category and status services."""
from unittest.mock import patch

from core.cache import CATEGORY_CACHE_NAME, STATUS_CACHE_NAME, TTL_ONE_DAY, MemoryCache
from db.session import DbConnection
from schemas.category import CategoryDocument
from schemas.status import StatusDocument
from services.category_service import CategoryService
from services.status_service import StatusService


async def test__category_create__assigns_id(category_service: CategoryService) -> None:
    created = await category_service.create(CategoryDocument(category_name="Other"))

    assert created.id is not None
    assert created.category_name == "Other"


async def test__category_get_all__cached_for_a_day(
    category_service: CategoryService,
    db: DbConnection,
    cache: MemoryCache,
    clock,
    category: CategoryDocument,
) -> None:
    with patch.object(db.categories, "find", wraps=db.categories.find) as find_spy:
        first = await category_service.get_all()
        clock.advance(TTL_ONE_DAY - 1)
        second = await category_service.get_all()
        assert find_spy.call_count == 1

        clock.advance(1)
        await category_service.get_all()
        assert find_spy.call_count == 2

    assert first == second == [category]
    assert await cache.get(CATEGORY_CACHE_NAME) is not None


async def test__category_create__does_not_invalidate_cache(
    category_service: CategoryService,
    clock,
    category: CategoryDocument,
) -> None:
    """New categories show up only once the cached list expires."""
    await category_service.get_all()

    added = await category_service.create(CategoryDocument(category_name="Dev Questions"))

    assert [c.id for c in await category_service.get_all()] == [category.id]
    clock.advance(TTL_ONE_DAY)
    assert {c.id for c in await category_service.get_all()} == {category.id, added.id}


async def test__status_get_all__uses_own_cache_key(
    status_service: StatusService,
    category_service: CategoryService,
    cache: MemoryCache,
    category: CategoryDocument,
    status_completed: StatusDocument,
) -> None:
    statuses = await status_service.get_all()
    categories = await category_service.get_all()

    assert statuses == [status_completed]
    assert categories == [category]
    assert await cache.get(STATUS_CACHE_NAME) is not None
    assert await cache.get(CATEGORY_CACHE_NAME) is not None


async def test__status_create__does_not_invalidate_cache(
    status_service: StatusService,
    clock,
) -> None:
    assert await status_service.get_all() == []

    await status_service.create(StatusDocument(status_name="Watching"))

    assert await status_service.get_all() == []
    clock.advance(TTL_ONE_DAY)
    assert [s.status_name for s in await status_service.get_all()] == ["Watching"]
