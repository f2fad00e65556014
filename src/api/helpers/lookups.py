"""Resolve category/status ids from request bodies against the cached lists."""
from uuid import UUID

from fastapi import HTTPException, status

from schemas.category import CategoryDocument
from schemas.status import StatusDocument
from schemas.suggestion import SuggestionDocument
from services.category_service import CategoryService
from services.status_service import StatusService
from services.suggestion_service import SuggestionService


async def resolve_category(categories: CategoryService, category_id: UUID) -> CategoryDocument:
    """
    Return the category with ``category_id``.

    Raises:
        HTTPException: 400 if no such category.
    """
    for category in await categories.get_all():
        if category.id == category_id:
            return category
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Unknown category: {category_id}",
    )


async def resolve_status(statuses: StatusService, status_id: UUID) -> StatusDocument:
    """
    Return the status with ``status_id``.

    Raises:
        HTTPException: 400 if no such status.
    """
    for suggestion_status in await statuses.get_all():
        if suggestion_status.id == status_id:
            return suggestion_status
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=f"Unknown status: {status_id}",
    )


async def get_suggestion_or_404(
    suggestions: SuggestionService, suggestion_id: UUID,
) -> SuggestionDocument:
    """
    Return the suggestion with ``suggestion_id``.

    Raises:
        HTTPException: 404 if it does not exist.
    """
    suggestion = await suggestions.get_by_id(suggestion_id)
    if suggestion is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Suggestion not found",
        )
    return suggestion
