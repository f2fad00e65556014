"""Suggestion endpoints for signed-in users."""
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status

from api.dependencies import (
    get_category_service,
    get_current_user,
    get_identity_claims,
    get_suggestion_service,
)
from api.helpers.lookups import get_suggestion_or_404, resolve_category
from core.config import Settings, get_settings
from core.identity import IdentityClaims
from schemas.suggestion import AuthorSummary, SuggestionCreate, SuggestionDocument
from schemas.user import UserDocument
from services.category_service import CategoryService
from services.exceptions import SuggestionNotFoundError, UserNotFoundError
from services.suggestion_filters import ALL, SuggestionSort, filter_suggestions
from services.suggestion_service import SuggestionService

router = APIRouter(prefix="/suggestions", tags=["suggestions"])


@router.get("/", response_model=list[SuggestionDocument])
async def list_suggestions(
    category: str = Query(default=ALL),
    suggestion_status: str = Query(default=ALL, alias="status"),
    search: str = Query(default="", max_length=200),
    sort: SuggestionSort = Query(default=SuggestionSort.NEW),
    suggestions: SuggestionService = Depends(get_suggestion_service),
) -> list[SuggestionDocument]:
    """
    Get approved, non-archived suggestions.

    Filter by category and status name ("All" disables a filter), search title
    and description, and order by newest (`new`) or most votes (`popular`).
    """
    approved = await suggestions.get_all_approved()
    return filter_suggestions(
        approved, category=category, status=suggestion_status, search=search, sort=sort,
    )


@router.get("/{suggestion_id}", response_model=SuggestionDocument)
async def get_suggestion(
    suggestion_id: UUID,
    suggestions: SuggestionService = Depends(get_suggestion_service),
) -> SuggestionDocument:
    """Get a single suggestion by id."""
    return await get_suggestion_or_404(suggestions, suggestion_id)


@router.post("/", response_model=SuggestionDocument, status_code=status.HTTP_201_CREATED)
async def create_suggestion(
    data: SuggestionCreate,
    current_user: UserDocument = Depends(get_current_user),
    suggestions: SuggestionService = Depends(get_suggestion_service),
    categories: CategoryService = Depends(get_category_service),
) -> SuggestionDocument:
    """
    Submit a new suggestion authored by the current user.

    New suggestions await admin approval before they appear in the public list.
    """
    category = await resolve_category(categories, data.category_id)
    suggestion = SuggestionDocument(
        suggestion=data.suggestion,
        description=data.description,
        author=AuthorSummary.from_user(current_user),
        category=category,
    )
    try:
        return await suggestions.create(suggestion)
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Author not found",
        ) from e


@router.post("/{suggestion_id}/vote", response_model=SuggestionDocument)
async def toggle_vote(
    suggestion_id: UUID,
    current_user: UserDocument = Depends(get_current_user),
    suggestions: SuggestionService = Depends(get_suggestion_service),
) -> SuggestionDocument:
    """
    Vote for a suggestion, or withdraw the vote if already cast.

    Returns 400 when voting on your own suggestion.
    """
    suggestion = await get_suggestion_or_404(suggestions, suggestion_id)
    if suggestion.author.id == current_user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="You cannot vote on your own suggestion",
        )
    try:
        return await suggestions.toggle_vote(suggestion_id, current_user.id)
    except SuggestionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Suggestion not found",
        ) from e
    except UserNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        ) from e


@router.post("/{suggestion_id}/archive", status_code=status.HTTP_204_NO_CONTENT)
async def archive_suggestion(
    suggestion_id: UUID,
    current_user: UserDocument = Depends(get_current_user),
    claims: IdentityClaims = Depends(get_identity_claims),
    settings: Settings = Depends(get_settings),
    suggestions: SuggestionService = Depends(get_suggestion_service),
) -> None:
    """
    Archive a suggestion, hiding it from every default listing.

    Only the author or an admin may archive.
    """
    suggestion = await get_suggestion_or_404(suggestions, suggestion_id)
    is_admin = claims.job_title == settings.admin_job_title
    if suggestion.author.id != current_user.id and not is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Only the author or an admin can archive this suggestion",
        )
    suggestion.archived = True
    try:
        await suggestions.update(suggestion)
    except SuggestionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Suggestion not found",
        ) from e
