"""Endpoints for the signed-in user."""
from fastapi import APIRouter, Depends

from api.dependencies import get_current_user, get_suggestion_service
from schemas.suggestion import SuggestionDocument
from schemas.user import UserDocument
from services.suggestion_service import SuggestionService

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me", response_model=UserDocument)
async def get_current_user_info(
    current_user: UserDocument = Depends(get_current_user),
) -> UserDocument:
    """
    Get the current user's record.

    Creates the record on first sign-in and refreshes profile fields when the
    identity provider's claims changed.
    """
    return current_user


@router.get("/me/suggestions", response_model=list[SuggestionDocument])
async def list_my_suggestions(
    current_user: UserDocument = Depends(get_current_user),
    suggestions: SuggestionService = Depends(get_suggestion_service),
) -> list[SuggestionDocument]:
    """Get every suggestion the current user authored, archived ones included."""
    return await suggestions.get_by_author(current_user.id)
