"""Category and status lookup endpoints."""
from fastapi import APIRouter, Depends

from api.dependencies import get_category_service, get_status_service
from schemas.category import CategoryDocument
from schemas.status import StatusDocument
from services.category_service import CategoryService
from services.status_service import StatusService

router = APIRouter(tags=["lookups"])


@router.get("/categories", response_model=list[CategoryDocument])
async def list_categories(
    categories: CategoryService = Depends(get_category_service),
) -> list[CategoryDocument]:
    """Get all categories. Served from a cache refreshed daily."""
    return await categories.get_all()


@router.get("/statuses", response_model=list[StatusDocument])
async def list_statuses(
    statuses: StatusService = Depends(get_status_service),
) -> list[StatusDocument]:
    """Get all statuses. Served from a cache refreshed daily."""
    return await statuses.get_all()
