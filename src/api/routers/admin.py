"""Admin triage endpoints: approval, status/category changes, lookup creation."""
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from api.dependencies import (
    get_category_service,
    get_status_service,
    get_suggestion_service,
    require_admin,
)
from api.helpers.lookups import get_suggestion_or_404, resolve_category, resolve_status
from schemas.category import CategoryDocument
from schemas.status import StatusDocument
from schemas.suggestion import SuggestionAdminUpdate, SuggestionDocument
from services.category_service import CategoryService
from services.exceptions import InvalidSuggestionStateError, SuggestionNotFoundError
from services.status_service import StatusService
from services.suggestion_service import SuggestionService

router = APIRouter(prefix="/admin", tags=["admin"], dependencies=[Depends(require_admin)])


@router.get("/suggestions/pending", response_model=list[SuggestionDocument])
async def list_pending_suggestions(
    suggestions: SuggestionService = Depends(get_suggestion_service),
) -> list[SuggestionDocument]:
    """Get active suggestions that are neither approved nor rejected."""
    return await suggestions.get_pending_approval()


@router.patch("/suggestions/{suggestion_id}", response_model=SuggestionDocument)
async def update_suggestion(
    suggestion_id: UUID,
    data: SuggestionAdminUpdate,
    suggestions: SuggestionService = Depends(get_suggestion_service),
    categories: CategoryService = Depends(get_category_service),
    statuses: StatusService = Depends(get_status_service),
) -> SuggestionDocument:
    """
    Triage a suggestion.

    Only provided fields change. Returns 409 if the result would be both
    approved and rejected.
    """
    suggestion = await get_suggestion_or_404(suggestions, suggestion_id)

    changes = data.model_dump(
        exclude_unset=True,
        include={"suggestion", "description", "approved_for_release", "rejected", "archived", "owner_notes"},
    )
    for field, value in changes.items():
        # Only the free-text fields may be cleared
        if value is None and field not in ("description", "owner_notes"):
            continue
        setattr(suggestion, field, value)
    if data.category_id is not None:
        suggestion.category = await resolve_category(categories, data.category_id)
    if data.clear_status:
        suggestion.suggestion_status = None
    elif data.status_id is not None:
        suggestion.suggestion_status = await resolve_status(statuses, data.status_id)

    try:
        await suggestions.update(suggestion)
    except InvalidSuggestionStateError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        ) from e
    except SuggestionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Suggestion not found",
        ) from e
    return suggestion


@router.post("/categories", response_model=CategoryDocument, status_code=status.HTTP_201_CREATED)
async def create_category(
    data: CategoryDocument,
    categories: CategoryService = Depends(get_category_service),
) -> CategoryDocument:
    """Create a category. It appears in cached listings once the daily cache expires."""
    return await categories.create(data.model_copy(update={"id": None}))


@router.post("/statuses", response_model=StatusDocument, status_code=status.HTTP_201_CREATED)
async def create_status(
    data: StatusDocument,
    statuses: StatusService = Depends(get_status_service),
) -> StatusDocument:
    """Create a status. It appears in cached listings once the daily cache expires."""
    return await statuses.create(data.model_copy(update={"id": None}))
