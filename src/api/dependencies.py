"""FastAPI dependencies for injection."""
from fastapi import Depends, Header, HTTPException, Request, status

from core.cache import Cache
from core.config import Settings, get_settings
from core.identity import IdentityClaims, reconcile_user
from db.session import DbConnection
from schemas.user import UserDocument
from services.category_service import CategoryService
from services.status_service import StatusService
from services.suggestion_service import SuggestionService
from services.user_service import UserService


def get_db(request: Request) -> DbConnection:
    """Return the connection created at application startup."""
    return request.app.state.db


def get_cache(request: Request) -> Cache:
    """Return the cache created at application startup."""
    return request.app.state.cache


def get_category_service(
    db: DbConnection = Depends(get_db),
    cache: Cache = Depends(get_cache),
) -> CategoryService:
    return CategoryService(db, cache)


def get_status_service(
    db: DbConnection = Depends(get_db),
    cache: Cache = Depends(get_cache),
) -> StatusService:
    return StatusService(db, cache)


def get_user_service(db: DbConnection = Depends(get_db)) -> UserService:
    return UserService(db)


def get_suggestion_service(
    db: DbConnection = Depends(get_db),
    cache: Cache = Depends(get_cache),
) -> SuggestionService:
    return SuggestionService(db, cache)


def get_identity_claims(
    x_object_id: str | None = Header(default=None),
    x_given_name: str | None = Header(default=None),
    x_surname: str | None = Header(default=None),
    x_name: str | None = Header(default=None),
    x_email: str | None = Header(default=None),
    x_job_title: str | None = Header(default=None),
) -> IdentityClaims:
    """
    Read the signed-in person's claims from proxy headers.

    Raises:
        HTTPException: 401 if no identity was forwarded.
    """
    if not x_object_id or not x_object_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not signed in",
        )
    return IdentityClaims(
        object_identifier=x_object_id.strip(),
        first_name=x_given_name,
        last_name=x_surname,
        display_name=x_name,
        email_address=x_email,
        job_title=x_job_title,
    )


async def get_current_user(
    claims: IdentityClaims = Depends(get_identity_claims),
    users: UserService = Depends(get_user_service),
) -> UserDocument:
    """Return the stored user for the request, creating/refreshing it from claims."""
    return await reconcile_user(users, claims)


def require_admin(
    claims: IdentityClaims = Depends(get_identity_claims),
    settings: Settings = Depends(get_settings),
) -> IdentityClaims:
    """
    Allow only admins through.

    Raises:
        HTTPException: 403 if the job title claim is not the admin title.
    """
    if claims.job_title != settings.admin_job_title:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin access required",
        )
    return claims
